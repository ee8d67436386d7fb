"""
AWS Profile Manager

Reads the profiles configured in the AWS CLI config file and checks
requested profile names against them.

Only ``[profile <name>]`` section headers are considered; every other line
of the config file is ignored. The implicit ``default`` profile is always
offered, whether or not the file declares it.
"""

import re
from pathlib import Path
from typing import List, Union

from ..errors import ConfigUnreadableError, NoProfilesFoundError, ProfileNotFoundError
from ..utils.console import console, get_logger
from ..utils.settings import AWS_CONFIG_RELATIVE_PATH, DEFAULT_PROFILE, Settings

__all__ = [
    'read_aws_profiles',
    'load_profiles',
    'parse_profile_names',
    'verify_profile',
]

logger = get_logger(__name__)

PROFILE_HEADER_PATTERN = re.compile(r"\[profile .*\]")
HEADER_DECORATION_PATTERN = re.compile(r"(\[profile )|(\])")

SETUP_GUIDE_URL = "https://docs.aws.amazon.com/cli/latest/userguide/cli-chap-getting-started.html"


def _get_aws_config_path(home: Union[str, Path]) -> Path:
    """Get the path to the AWS config file."""
    return Path(home) / AWS_CONFIG_RELATIVE_PATH


def parse_profile_names(data: str) -> List[str]:
    """
    Extract profile names from AWS config file content.

    Args:
        data: Raw text of the AWS config file

    Returns:
        List[str]: Profile names in file order, duplicates removed
    """
    names = []
    for match in PROFILE_HEADER_PATTERN.finditer(data):
        name = HEADER_DECORATION_PATTERN.sub("", match.group(0))
        # default is appended by the caller, always last
        if name == DEFAULT_PROFILE or name in names:
            logger.debug("Skipping repeated profile header: %s", match.group(0))
            continue
        names.append(name)
    return names


def _print_setup_guide() -> None:
    console.print("No profiles found.")
    console.print("Refer to this guide for help on setting up a new AWS profile:")
    console.print(SETUP_GUIDE_URL)


def read_aws_profiles(home: Union[str, Path]) -> List[str]:
    """
    List the AWS profiles declared in ``<home>/.aws/config``.

    Args:
        home: The user's home directory

    Returns:
        List[str]: Profile names in file order, followed by ``default``

    Raises:
        ConfigUnreadableError: If the config file can't be read
        NoProfilesFoundError: If no ``[profile <name>]`` headers were found;
            the error carries the fallback list ``["default"]``
    """
    config_path = _get_aws_config_path(home)
    try:
        data = config_path.read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigUnreadableError(config_path, getattr(e, "strerror", None) or str(e)) from e

    profiles = parse_profile_names(data)
    logger.debug("Found %d profile(s) in %s", len(profiles), config_path)

    if not profiles:
        _print_setup_guide()
        raise NoProfilesFoundError([DEFAULT_PROFILE])

    profiles.append(DEFAULT_PROFILE)
    return profiles


def load_profiles(settings: Settings) -> List[str]:
    """
    List the available profiles, falling back to ``default`` alone when the
    config declares none.

    Args:
        settings: Settings for this invocation

    Returns:
        List[str]: Profile names ending with ``default``
    """
    try:
        return read_aws_profiles(settings.home)
    except NoProfilesFoundError as e:
        logger.warning("No named profiles configured, offering '%s' only", DEFAULT_PROFILE)
        return list(e.profiles)


def verify_profile(profiles: List[str], profile_name: str) -> None:
    """
    Check that a profile can be used.

    Args:
        profiles: Available profile names
        profile_name: Requested profile name

    Raises:
        ProfileNotFoundError: If the profile isn't ``default`` and isn't listed
    """
    if profile_name == DEFAULT_PROFILE:
        return

    if profile_name in profiles:
        return

    raise ProfileNotFoundError(profile_name)
