#!/usr/bin/env python3
"""
raph - AWS Profile Handler and Executor

Usage:
    raph                      Choose a profile interactively
    raph <profile>            Switch to <profile>
    raph <profile> <cmd...>   Run an aws command under <profile> without
                              switching the current shell

The exit status tells the shell hook what happened: 1 means a profile was
selected and ``~/.raph`` should be re-read, anything else means the shell
environment stays as it is.
"""

import argparse
import sys
from typing import List, Mapping, Optional

from . import __version__
from .aws_profiles import (
    execute_command_with_profile,
    load_profiles,
    prompt_profile_choice,
    read_state,
    verify_profile,
    write_state,
)
from .errors import (
    ConfigUnreadableError,
    HomeNotSetError,
    PersistFailureError,
    ProfileNotFoundError,
    RaphError,
)
from .utils.console import (
    MARKER,
    clear_prompt_lines,
    get_logger,
    print_error,
    print_info,
    print_profile,
    setup_logging,
)
from .utils.settings import Settings

logger = get_logger(__name__)

EXIT_COMMAND_EXECUTED = 0
EXIT_PROFILE_SWITCHED = 1
EXIT_FATAL = 3
EXIT_PROFILE_NOT_FOUND = 5
EXIT_PERSIST_FAILED = 6


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="raph",
        description=f"{MARKER} AWS Profile Handler and Executor",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("profile", nargs="?", help="Specifies the AWS profile to use")
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="An 'aws' command to execute with the specified AWS profile, "
             "without affecting the current shell's environment",
    )
    return parser


def _persist(settings: Settings, profile_name: str) -> None:
    try:
        previous = read_state(settings.home)
    except OSError as e:
        logger.debug("Could not read previous selection: %s", e)
    else:
        logger.debug("Replacing persisted profile %r with %r", previous, profile_name)
    write_state(settings.home, profile_name)


def handle_select(settings: Settings) -> int:
    """Handle a bare invocation: prompt for a profile and persist it."""
    try:
        profile_name = prompt_profile_choice(settings)
    except ConfigUnreadableError:
        raise
    except RaphError as e:
        print_error(str(e))
        return EXIT_PROFILE_NOT_FOUND

    try:
        _persist(settings, profile_name)
    except PersistFailureError as e:
        print_error(str(e))
        return EXIT_PERSIST_FAILED

    clear_prompt_lines()
    print_profile(profile_name)
    return EXIT_PROFILE_SWITCHED


def _check_profile(settings: Settings, profile_name: str) -> bool:
    profiles = load_profiles(settings)
    try:
        verify_profile(profiles, profile_name)
    except ProfileNotFoundError as e:
        print_error(str(e))
        return False
    return True


def handle_switch(settings: Settings, profile_name: str) -> int:
    """Handle ``raph <profile>``: persist the named profile."""
    if not _check_profile(settings, profile_name):
        return EXIT_PROFILE_NOT_FOUND

    try:
        _persist(settings, profile_name)
    except PersistFailureError as e:
        print_error(str(e))
        return EXIT_PERSIST_FAILED

    print_info(f"Profile switched to {profile_name}")
    return EXIT_PROFILE_SWITCHED


def handle_execute(
    settings: Settings,
    profile_name: str,
    command_args: List[str],
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """Handle ``raph <profile> <cmd...>``: run the command, don't switch."""
    if not _check_profile(settings, profile_name):
        return EXIT_PROFILE_NOT_FOUND

    execute_command_with_profile(profile_name, command_args, environ=environ)
    # No shell switch is needed after a one-shot command
    return EXIT_COMMAND_EXECUTED


def run(argv: Optional[List[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Parse arguments, dispatch, and return the process exit status.

    Args:
        argv: Command line arguments without the program name
        environ: Environment to read settings from (defaults to ``os.environ``)

    Returns:
        int: Exit status for the shell hook
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env(environ)
    except HomeNotSetError as e:
        print_error(str(e))
        return EXIT_FATAL

    setup_logging(settings.log_level)

    try:
        if args.profile is None:
            return handle_select(settings)
        if args.command:
            return handle_execute(settings, args.profile, args.command, environ=environ)
        return handle_switch(settings, args.profile)
    except ConfigUnreadableError as e:
        logger.debug("Aborting", exc_info=True)
        print_error(str(e))
        return EXIT_FATAL


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
