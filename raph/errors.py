"""
Exceptions raised by the raph modules.

Library code raises these; ``raph.cli`` is the only place that turns them
into messages and exit codes.
"""

from typing import List, Optional


class RaphError(Exception):
    """Base class for all raph errors."""


class ConfigUnreadableError(RaphError):
    """The AWS config file could not be read."""

    def __init__(self, path, reason: Optional[str] = None):
        self.path = path
        message = f"AWS config could not be read: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class NoProfilesFoundError(RaphError):
    """The AWS config file contains no ``[profile <name>]`` sections."""

    def __init__(self, profiles: List[str]):
        # Carries the fallback list so callers can still offer "default"
        self.profiles = profiles
        super().__init__("No profiles found.")


class ProfileNotFoundError(RaphError):
    """A requested profile is not present in the AWS config."""

    def __init__(self, profile: str):
        self.profile = profile
        super().__init__(f"Profile '{profile}' not found")


class SelectionCancelledError(RaphError):
    """The user cancelled the interactive profile prompt."""

    def __init__(self, message: str = "Profile selection cancelled"):
        super().__init__(message)


class PersistFailureError(RaphError):
    """The selected profile could not be written to the state file."""

    def __init__(self, path, error: OSError):
        self.path = path
        self.error = error
        reason = error.strerror or str(error)
        super().__init__(f"Could not write {path}: {reason}")


class HomeNotSetError(RaphError):
    """``HOME`` is missing from the environment."""

    def __init__(self):
        super().__init__("HOME not set")
