"""
AWS profile handling: reading the configured profiles, choosing one,
persisting the choice and running commands under it.
"""

from .profile_manager import (
    read_aws_profiles,
    load_profiles,
    parse_profile_names,
    verify_profile,
)
from .state import write_state, read_state
from .selector import prompt_profile_choice, default_profile_index
from .executor import build_command, execute_command_with_profile

__all__ = [
    'read_aws_profiles',
    'load_profiles',
    'parse_profile_names',
    'verify_profile',
    'write_state',
    'read_state',
    'prompt_profile_choice',
    'default_profile_index',
    'build_command',
    'execute_command_with_profile',
]
