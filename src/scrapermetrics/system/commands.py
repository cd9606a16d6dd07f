"""
Command construction and execution for measured runs.

Scrapers are measured by running them under GNU time in verbose mode, with
the report written to a separate file so that it does not mix with the
scraper's own stderr.
"""

import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

TIME_COMMAND = "/usr/bin/time"


def command(target_command: str, output_path: str) -> str:
    """Wrap a command so that GNU time measures it.

    Neither argument is quoted or escaped; the caller must pass shell-safe
    strings.

    Args:
        target_command: Command line of the process to measure.
        output_path: File GNU time writes its verbose report to.

    Returns:
        The wrapped command line.

    Examples:
        >>> command("ls", "time.output")
        '/usr/bin/time -v -o time.output ls'
    """
    return f"{TIME_COMMAND} -v -o {output_path} {target_command}"


def check_time_installed() -> bool:
    """Check whether GNU time is available at TIME_COMMAND.

    Returns:
        True if the path is an executable file, False otherwise.

    Note:
        The shell builtin `time` does not support `-v`/`-o`; the standalone
        binary (Debian/Ubuntu package `time`) is required.
    """
    return os.path.isfile(TIME_COMMAND) and os.access(TIME_COMMAND, os.X_OK)


def run_command(command_line: str, cwd: Optional[Path] = None) -> Tuple[int, str, str]:
    """Run a shell command line and capture its output.

    Args:
        command_line: The command string to execute through the shell.
        cwd: Working directory, or None for the current one.

    Returns:
        Tuple of (return_code, stdout_string, stderr_string).
        return_code is -1 when the command could not be started.
    """
    logger.debug(f"Executing command: '{command_line}' in '{cwd or Path.cwd()}'")
    try:
        process = subprocess.run(
            command_line,
            cwd=cwd,
            shell=True,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
        return process.returncode, process.stdout, process.stderr
    except OSError as e:
        program = shlex.split(command_line)[0] if command_line.strip() else command_line
        logger.error(f"Could not start '{program}': {type(e).__name__}: {e}")
        return -1, "", f"Error: could not start '{program}': {e}"
