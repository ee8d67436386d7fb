"""
Persisted profile selection.

The selected profile is written to ``~/.raph`` for the shell hook to pick
up. The ``default`` profile is stored as an empty file.
"""

import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from ..errors import PersistFailureError
from ..utils.console import get_logger
from ..utils.settings import DEFAULT_PROFILE, STATE_FILE_NAME

logger = get_logger(__name__)


def _get_state_path(home: Union[str, Path]) -> Path:
    """Get the path to the state file."""
    return Path(home) / STATE_FILE_NAME


def _serialize_profile(profile_name: str) -> str:
    return "" if profile_name == DEFAULT_PROFILE else profile_name


def write_state(home: Union[str, Path], profile_name: str) -> Path:
    """
    Persist the selected profile, replacing any previous selection.

    Args:
        home: The user's home directory
        profile_name: Profile to persist

    Returns:
        Path: The state file that was written

    Raises:
        PersistFailureError: If the file can't be written
    """
    path = _get_state_path(home)
    content = _serialize_profile(profile_name)

    tmp_name = None
    try:
        # Write next to the target so the replace stays on one filesystem
        fd, tmp_name = tempfile.mkstemp(prefix=f"{STATE_FILE_NAME}.", dir=str(path.parent))
        with os.fdopen(fd, "w") as f:
            f.write(content)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise PersistFailureError(path, e) from e

    logger.debug("Wrote profile %r to %s", content, path)
    return path


def read_state(home: Union[str, Path]) -> Optional[str]:
    """
    Read the persisted selection.

    Returns:
        Optional[str]: The raw file content ("" means default), or None if
        nothing has been persisted yet
    """
    path = _get_state_path(home)
    if not path.exists():
        return None
    return path.read_text()
