"""
JSON metric store for small, human-readable record sets.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..models.metric import MetricRecord
from .base import MetricStore

logger = logging.getLogger(__name__)


class JsonMetricStore(MetricStore):
    """Stores records as a JSON array of objects in a single file."""

    def __init__(self, path: Path):
        self.path = Path(path)
        logger.debug(f"Initialized JsonMetricStore at {self.path}")

    def _load(self) -> List[Dict[str, Any]]:
        if not self.path.exists():
            return []
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except Exception as e:
            logger.error(f"Failed to load metrics from {self.path}: {e}")
            raise

    def save(self, record: MetricRecord) -> MetricRecord:
        rows = self._load()
        next_id = max((row["id"] for row in rows), default=0) + 1
        committed = record.with_id(next_id)
        rows.append(committed.to_dict())

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(rows, f, indent=2)
        except Exception as e:
            logger.error(f"Failed to save metric record to {self.path}: {e}")
            raise

        logger.debug(f"Committed metric record {next_id} to {self.path}")
        return committed

    def get(self, record_id: int) -> Optional[MetricRecord]:
        for row in self._load():
            if row["id"] == record_id:
                return MetricRecord.from_dict(row)
        return None

    def all(self) -> List[MetricRecord]:
        return [MetricRecord.from_dict(row) for row in self._load()]
