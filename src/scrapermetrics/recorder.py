"""
Turning GNU time reports into committed metric records.

`read_from_string` parses a report and commits the result to a store;
`read_from_file` does the same for the report file written by
`/usr/bin/time -o`, treating a missing file as "no measurement".
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .models.metric import MetricRecord
from .parsing import parse_text
from .storage import MetricStore, get_default_store
from .validation import handle_file_error

logger = logging.getLogger(__name__)


def commit(record: MetricRecord, store: Optional[MetricStore] = None) -> MetricRecord:
    """Commit a parsed record, returning the copy that carries its id."""
    target = store if store is not None else get_default_store()
    committed = target.save(record)
    logger.info(f"Committed metric record {committed.id}")
    return committed


def read_from_string(text: str, store: Optional[MetricStore] = None) -> MetricRecord:
    """Parse a full GNU time report and commit the resulting record.

    Args:
        text: Report text; unrecognised lines are ignored.
        store: Store to commit to. Defaults to the configured store.

    Returns:
        The committed record, with a non-null `id`.
    """
    return commit(parse_text(text), store)


def read_from_file(
    path: Union[str, Path], store: Optional[MetricStore] = None
) -> Optional[MetricRecord]:
    """Read a GNU time report file and commit the resulting record.

    Args:
        path: Report file written by `/usr/bin/time -o`.
        store: Store to commit to. Defaults to the configured store.

    Returns:
        The committed record, or None when no file exists at `path`
        (for instance when the measured process was killed before GNU time
        could write its report).

    Raises:
        OSError: If the file exists but cannot be read.
    """
    report_path = Path(path)
    try:
        text = report_path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        logger.info(f"No time report at {report_path}; nothing to record")
        return None
    except OSError as e:
        handle_file_error(e, f"reading time report {report_path}", logger=logger)
        raise

    return read_from_string(text, store)
