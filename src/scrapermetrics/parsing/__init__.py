"""
Parsing of GNU time verbose reports into MetricRecord values.
"""

from .assembler import MAXRSS_OVERREPORT_FACTOR, collect_fields, correct_maxrss, parse_text
from .line_parser import LINE_PATTERNS, LinePattern, parse_duration, parse_line

__all__ = [
    "MAXRSS_OVERREPORT_FACTOR",
    "collect_fields",
    "correct_maxrss",
    "parse_text",
    "LINE_PATTERNS",
    "LinePattern",
    "parse_duration",
    "parse_line",
]
