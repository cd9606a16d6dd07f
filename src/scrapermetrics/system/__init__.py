"""
System interaction: building and running measured commands.
"""

from .commands import TIME_COMMAND, check_time_installed, command, run_command

__all__ = [
    "TIME_COMMAND",
    "check_time_installed",
    "command",
    "run_command",
]
