"""
Run a single AWS CLI command under a given profile.

The child gets its own copy of the environment with ``AWS_PROFILE``
overridden, so the parent shell is left untouched.
"""

import os
import signal
import subprocess
import sys
from typing import List, Mapping, Optional

from ..utils.console import console, get_logger

logger = get_logger(__name__)

AWS_EXECUTABLE = "aws"


def build_command(command_args: List[str]) -> List[str]:
    """
    Prefix a command with ``aws`` unless it already starts with it.

    Args:
        command_args: Command tokens as given on the command line

    Returns:
        List[str]: The full argv to run
    """
    if not command_args:
        raise ValueError("command args should not be empty")

    if command_args[0] != AWS_EXECUTABLE:
        return [AWS_EXECUTABLE] + list(command_args)
    return list(command_args)


def describe_returncode(returncode: int) -> str:
    """Describe a child's return code the way a shell user would read it."""
    if returncode < 0:
        signum = -returncode
        try:
            name = signal.Signals(signum).name
        except ValueError:
            return f"signal: {signum}"
        return f"signal: {signum} ({name})"
    return f"exit status: {returncode}"


def execute_command_with_profile(
    profile_name: str,
    command_args: List[str],
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[int]:
    """
    Run a command with ``AWS_PROFILE`` set, inheriting stdio.

    Args:
        profile_name: Profile to expose to the child
        command_args: Command tokens; ``aws`` is prepended if missing
        environ: Base environment for the child (defaults to ``os.environ``)

    Returns:
        Optional[int]: The child's return code, or None if it couldn't start
    """
    cmd = build_command(command_args)

    env = dict(os.environ if environ is None else environ)
    env["AWS_PROFILE"] = profile_name

    logger.debug("Running %s with AWS_PROFILE=%s", cmd, profile_name)
    try:
        process = subprocess.Popen(cmd, env=env)
    except OSError as e:
        print(f"Failed to execute command: {e}", file=sys.stderr)
        return None

    while True:
        try:
            returncode = process.wait()
            break
        except KeyboardInterrupt:
            # The child shares our terminal and received the interrupt too
            continue

    console.print(f"Command exited with status: {describe_returncode(returncode)}")
    return returncode
