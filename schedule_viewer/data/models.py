"""Schedule data structures"""
import math
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterator, List, Optional, Union


# Resource field name -> entry attribute
RECORD_FIELDS = {
    "period": "period",
    "className": "class_name",
    "teacher": "teacher",
    "roomNumber": "room_number",
    "subjectArea": "subject_area",
}


class LoadFailure(Exception):
    """A schedule could not be retrieved or parsed.

    Covers both transport/status failures and malformed data; the two are
    handled identically by the loader.
    """

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


def _clean(value: Any) -> Any:
    """Normalize a value coming out of a DataFrame row.

    NaN (missing field) becomes None and integral floats go back to int, so
    a period of 3 does not come back as 3.0 after pandas upcasts the column.
    """
    if value is None:
        return None
    if isinstance(value, float):
        if math.isnan(value):
            return None
        if value.is_integer():
            return int(value)
    return value


@dataclass(frozen=True)
class ScheduleEntry:
    """One scheduled class period."""

    period: Optional[int]
    class_name: Optional[str]
    teacher: Optional[str]
    room_number: Optional[Union[str, int]]
    subject_area: Optional[str]
    # Attributes whose key was absent from the record, as opposed to null
    missing_fields: FrozenSet[str] = frozenset()

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "ScheduleEntry":
        """Build an entry from a resource record.

        Unknown keys are ignored. Missing keys and null values both become
        None; missing_fields remembers which were absent. There is no
        validation layer.
        """
        values = {attr: _clean(record.get(key)) for key, attr in RECORD_FIELDS.items()}
        missing = frozenset(attr for key, attr in RECORD_FIELDS.items() if key not in record)
        return cls(**values, missing_fields=missing)


@dataclass
class Schedule:
    """An ordered schedule loaded in full from one resource."""

    resource: str
    label: Optional[str] = None
    entries: List[ScheduleEntry] = field(default_factory=list)

    def __iter__(self) -> Iterator[ScheduleEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def periods(self) -> List[Optional[int]]:
        return [entry.period for entry in self.entries]


LoadResult = Union[Schedule, LoadFailure]
