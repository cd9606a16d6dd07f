"""
Resource usage record for a single scraper run.

A MetricRecord holds the fields reported by GNU time's verbose output for
one process invocation. Every measurement field is optional: None means the
report did not contain that line. The record is immutable; committing it to
a store yields a copy carrying the store-assigned identifier.
"""

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class MetricRecord:
    """
    One measured process invocation.

    Attributes:
        wall_time: Elapsed wall clock time in seconds.
        utime: User CPU time in seconds.
        stime: System CPU time in seconds.
        maxrss: Peak resident set size in kilobytes, already corrected for
            the GNU time 1.7 over-report.
        minflt: Minor (reclaiming a frame) page faults.
        majflt: Major (requiring I/O) page faults.
        inblock: File system inputs.
        oublock: File system outputs.
        nvcsw: Voluntary context switches.
        nivcsw: Involuntary context switches.
        page_size: System page size in bytes.
        id: Identifier assigned by the store, None until committed.
    """

    wall_time: Optional[float] = None
    utime: Optional[float] = None
    stime: Optional[float] = None
    maxrss: Optional[int] = None
    minflt: Optional[int] = None
    majflt: Optional[int] = None
    inblock: Optional[int] = None
    oublock: Optional[int] = None
    nvcsw: Optional[int] = None
    nivcsw: Optional[int] = None
    page_size: Optional[int] = None
    id: Optional[int] = None

    @property
    def cpu_time(self) -> Optional[float]:
        """Total CPU time (user + system), or None if either is missing."""
        if self.utime is None or self.stime is None:
            return None
        return self.utime + self.stime

    def with_id(self, record_id: int) -> "MetricRecord":
        return replace(self, id=record_id)

    def values(self) -> Dict[str, Any]:
        """Measurement fields only, without the storage identifier."""
        data = asdict(self)
        data.pop("id")
        return data

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MetricRecord":
        """Build a record from a mapping, ignoring keys that are not fields."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})


# Measurement field names in report order, excluding the identifier.
METRIC_FIELDS = tuple(f.name for f in fields(MetricRecord) if f.name != "id")
