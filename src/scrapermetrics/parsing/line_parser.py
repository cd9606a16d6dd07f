"""
Line parser for GNU time verbose output.

`/usr/bin/time -v` writes one "<Label>: <value>" pair per line, most of them
indented with a tab. Only the labels in LINE_PATTERNS are kept; every other
line (the quoted command, CPU percentage, exit status, ...) is ignored.

Example report excerpt:
    Command being timed: "ruby ./scraper.rb"
    User time (seconds): 1.34
    System time (seconds): 0.12
    Percent of CPU this job got: 97%
    Elapsed (wall clock) time (h:mm:ss or m:ss): 0:01.50
    Maximum resident set size (kbytes): 3808
"""

import logging
import re
import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Pattern, Tuple

logger = logging.getLogger(__name__)


def parse_duration(text: str) -> float:
    """Convert an `m:ss.ss` or `h:mm:ss.ss` duration to seconds.

    Args:
        text: Duration as printed by GNU time.

    Returns:
        The duration in seconds.

    Raises:
        ValueError: If the text is not two or three colon-separated numbers.

    Examples:
        >>> parse_duration("1:30.5")
        90.5
        >>> parse_duration("1:02:02.5")
        3722.5
    """
    parts = text.split(":")
    if len(parts) not in (2, 3):
        raise ValueError(f"Unrecognised duration: '{text}'")

    hours = int(parts[0]) if len(parts) == 3 else 0
    minutes = int(parts[-2])
    seconds = float(parts[-1])
    return hours * 3600 + minutes * 60 + seconds


@dataclass(frozen=True)
class LinePattern:
    """A recognised report label and how to convert its value."""

    label: str
    field: str
    convert: Callable[[str], Any]
    regex: Pattern = dataclasses.field(init=False, repr=False, compare=False)

    def __post_init__(self):
        regex = re.compile(r"^" + re.escape(self.label) + r":\s*(.*?)\s*$")
        object.__setattr__(self, "regex", regex)

    def match(self, line: str) -> Optional[str]:
        """Return the raw value text if the line carries this label."""
        found = self.regex.match(line)
        return found.group(1) if found else None


# Evaluated in order; the first matching label wins.
LINE_PATTERNS: List[LinePattern] = [
    LinePattern("Elapsed (wall clock) time (h:mm:ss or m:ss)", "wall_time", parse_duration),
    LinePattern("User time (seconds)", "utime", float),
    LinePattern("System time (seconds)", "stime", float),
    LinePattern("Maximum resident set size (kbytes)", "maxrss", int),
    LinePattern("Minor (reclaiming a frame) page faults", "minflt", int),
    LinePattern("Major (requiring I/O) page faults", "majflt", int),
    LinePattern("File system inputs", "inblock", int),
    LinePattern("File system outputs", "oublock", int),
    LinePattern("Voluntary context switches", "nvcsw", int),
    LinePattern("Involuntary context switches", "nivcsw", int),
    LinePattern("Page size (bytes)", "page_size", int),
]


def parse_line(line: str) -> Optional[Tuple[str, Any]]:
    """Parse one line of GNU time verbose output.

    Args:
        line: A single report line, with or without leading indentation.

    Returns:
        A `(field, value)` tuple for a recognised label, otherwise None.
        A recognised label whose value cannot be converted also yields None.

    Examples:
        >>> parse_line("    Maximum resident set size (kbytes): 3808")
        ('maxrss', 3808)
        >>> parse_line('Command being timed: "ls"') is None
        True
    """
    stripped = line.lstrip()
    for pattern in LINE_PATTERNS:
        raw_value = pattern.match(stripped)
        if raw_value is None:
            continue
        try:
            return pattern.field, pattern.convert(raw_value)
        except ValueError as e:
            logger.warning(
                f"Skipping malformed value for '{pattern.label}': '{raw_value}'. Error: {e}"
            )
            return None
    return None
