"""
Interactive profile chooser.
"""

from typing import List

import questionary

from ..errors import SelectionCancelledError
from ..utils.console import MARKER, console, get_logger
from ..utils.settings import DEFAULT_PROFILE, Settings
from .profile_manager import load_profiles

logger = get_logger(__name__)

PROMPT_MESSAGE = "Choose a profile"


def default_profile_index(profiles: List[str], current_profile: str) -> int:
    """
    Find the entry the chooser should start on.

    Args:
        profiles: Profile names, ending with ``default``
        current_profile: The currently active profile

    Returns:
        int: Index of the active profile, or of ``default`` if the active
        profile isn't configured
    """
    if current_profile in profiles:
        return profiles.index(current_profile)

    logger.warning(
        "Active profile '%s' not found in AWS config, starting on '%s'",
        current_profile, DEFAULT_PROFILE,
    )
    return profiles.index(DEFAULT_PROFILE)


def prompt_profile_choice(settings: Settings) -> str:
    """
    Ask the user to pick a profile.

    Args:
        settings: Settings for this invocation; ``settings.current_profile``
            decides the pre-selected entry

    Returns:
        str: The chosen profile name

    Raises:
        SelectionCancelledError: If the user interrupts the prompt
    """
    profiles = load_profiles(settings)
    index = default_profile_index(profiles, settings.current_profile)

    console.print(f"{MARKER} AWS Profile Handler")
    try:
        selection = questionary.select(
            PROMPT_MESSAGE,
            choices=profiles,
            default=profiles[index],
        ).unsafe_ask()
    except (KeyboardInterrupt, EOFError) as e:
        raise SelectionCancelledError() from e

    if selection is None:
        raise SelectionCancelledError()

    logger.debug("Selected profile %s", selection)
    return selection
