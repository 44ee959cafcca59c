"""Configuration constants for the Class Schedule Viewer"""
import os
from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class Config:
    """Centralized configuration for the viewer"""

    # Resource location (Streamlit static serving of static/json)
    SCHEDULE_BASE_URL: str = field(
        default_factory=lambda: os.getenv("SCHEDULE_BASE_URL", "http://localhost:8501/app/static/json")
    )
    REQUEST_TIMEOUT: Optional[float] = None

    # Loading
    MAX_WORKERS: int = 2
    DISCARD_STALE_LOADS: bool = True

    # Visualization
    COLS_PER_ROW: int = 3
    STAGGER_STEP_SECONDS: float = 0.1
    MISSING_VALUE_TEXT: str = "undefined"

    # Logging
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))


class ScheduleCatalog:
    """Static mapping of selector keys to schedule resources and their labels.

    Validated once on construction so the key mapping and the label mapping
    cannot drift apart.
    """

    def __init__(self, files: Dict[str, str], names: Dict[str, str], default_resource: str):
        for key, resource in files.items():
            if resource not in names:
                raise ValueError(f"Key {key!r} maps to {resource!r}, which has no display label")
        if default_resource not in names:
            raise ValueError(f"Default resource {default_resource!r} has no display label")

        self._files = dict(files)
        self._names = dict(names)
        self.default_resource = default_resource

    @property
    def keys(self):
        return list(self._files)

    @property
    def resources(self):
        """Resource names in display order."""
        return list(self._names)

    def resource_for_key(self, key: str) -> Optional[str]:
        return self._files.get(key)

    def label(self, resource: str) -> Optional[str]:
        return self._names.get(resource)

    def __contains__(self, resource: str) -> bool:
        return resource in self._names


DEFAULT_CATALOG = ScheduleCatalog(
    files={
        "1": "SridarSchedule.json",
        "2": "AadarshSchedule.json",
        "3": "ChangSchedule.json",
        "4": "HankSchedule.json",
    },
    names={
        "SridarSchedule.json": "Sridar",
        "AadarshSchedule.json": "Aadarsh",
        "ChangSchedule.json": "Chang",
        "HankSchedule.json": "Hank",
    },
    default_resource="SridarSchedule.json",
)


# Global config instance
config = Config()
