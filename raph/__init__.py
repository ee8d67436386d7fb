"""
raph - AWS profile handler and executor.

Switch the AWS profile used by your shell, or run a single ``aws`` command
under another profile without touching the current shell.
"""

__version__ = "0.2.0"
