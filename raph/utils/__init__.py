"""
Utility functions shared by the raph modules.
"""

from .settings import Settings, DEFAULT_PROFILE
from .console import (
    print_info,
    print_error,
    print_profile,
    clear_prompt_lines,
    setup_logging,
    get_logger,
)

__all__ = [
    'Settings',
    'DEFAULT_PROFILE',
    'print_info',
    'print_error',
    'print_profile',
    'clear_prompt_lines',
    'setup_logging',
    'get_logger',
]
