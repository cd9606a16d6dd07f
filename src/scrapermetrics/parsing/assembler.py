"""
Assembles a MetricRecord from a complete GNU time report.

Assembly is pure: nothing is written anywhere. Committing the result is
the job of `scrapermetrics.recorder`.
"""

import logging
from typing import Any, Dict

from ..models.metric import MetricRecord
from .line_parser import parse_line

logger = logging.getLogger(__name__)

# GNU time 1.7 (as shipped on the Ubuntu hosts running scrapers) reports the
# maximum resident set size four times too large.
# See https://groups.google.com/forum/#!topic/gnu.utils.help/u1MOsHL4bhg
MAXRSS_OVERREPORT_FACTOR = 4


def collect_fields(text: str) -> Dict[str, Any]:
    """Parse every line of a report, keeping the recognised fields.

    If a label occurs more than once, the last value is kept.
    """
    collected: Dict[str, Any] = {}
    for line in text.splitlines():
        parsed = parse_line(line)
        if parsed is None:
            continue
        field, value = parsed
        collected[field] = value
    logger.debug(f"Collected {len(collected)} fields from report: {sorted(collected)}")
    return collected


def correct_maxrss(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Undo the GNU time 1.7 resident set size over-report.

    Returns a new mapping; `maxrss`, when present, is divided by
    MAXRSS_OVERREPORT_FACTOR with truncating integer division.
    """
    corrected = dict(fields)
    if corrected.get("maxrss") is not None:
        corrected["maxrss"] = corrected["maxrss"] // MAXRSS_OVERREPORT_FACTOR
    return corrected


def parse_text(text: str) -> MetricRecord:
    """Turn a full report into an uncommitted MetricRecord.

    Any string is accepted; text without recognised lines gives a record
    with every field absent.
    """
    return MetricRecord(**correct_maxrss(collect_fields(text)))
