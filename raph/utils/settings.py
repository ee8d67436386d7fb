"""
Runtime settings for raph.

Everything raph needs from the process environment is read once here and
passed around explicitly, so the profile modules never touch ``os.environ``.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from ..errors import HomeNotSetError

DEFAULT_PROFILE = "default"
DEFAULT_LOG_LEVEL = "WARNING"

AWS_CONFIG_RELATIVE_PATH = Path(".aws") / "config"
STATE_FILE_NAME = ".raph"


@dataclass(frozen=True)
class Settings:
    """Explicit configuration for one raph invocation."""
    home: Path
    aws_profile: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from an environment mapping.

        Args:
            environ: Environment to read from (defaults to ``os.environ``)

        Returns:
            Settings: The resolved settings

        Raises:
            HomeNotSetError: If ``HOME`` is missing or empty
        """
        if environ is None:
            environ = os.environ

        home = environ.get("HOME")
        if not home:
            raise HomeNotSetError()

        return cls(
            home=Path(home),
            aws_profile=environ.get("AWS_PROFILE"),
            log_level=environ.get("RAPH_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )

    @property
    def current_profile(self) -> str:
        """The active profile, with an empty or unset ``AWS_PROFILE`` meaning default."""
        return self.aws_profile or DEFAULT_PROFILE
