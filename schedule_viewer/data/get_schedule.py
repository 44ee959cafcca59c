"""
get_schedule.py
---------------
Fetch one student's class schedule from the static JSON resources.

Outputs:
    list of raw records with period, className, teacher,
    roomNumber, subjectArea

Notes:
    - One GET per call: no retry, no timeout unless configured
    - Any non-success status is reported with its status code
    - The body must be a JSON array of objects
"""

import sys
from typing import Any, Dict, List, Optional

import requests

from schedule_viewer.config import config
from schedule_viewer.data.models import LoadFailure


def schedule_url(resource: str, base_url: Optional[str] = None) -> str:
    base = base_url if base_url is not None else config.SCHEDULE_BASE_URL
    return f"{base.rstrip('/')}/{resource}"


def get_schedule(
    resource: str,
    base_url: Optional[str] = None,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> List[Dict[str, Any]]:
    """Retrieve and parse a schedule resource.

    Args:
        resource: Resource name, e.g. "SridarSchedule.json"
        base_url: Base URL the resource lives under (defaults to config)
        session: Optional requests session to reuse
        timeout: Request timeout in seconds (None waits indefinitely)

    Returns:
        List of raw schedule records in resource order

    Raises:
        LoadFailure: On transport errors, non-success status or malformed data
    """
    url = schedule_url(resource, base_url)
    http = session if session is not None else requests

    try:
        resp = http.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise LoadFailure(f"Failed to load schedule: {e}") from e

    if not resp.ok:
        raise LoadFailure(f"Failed to load schedule: {resp.status_code}")

    try:
        data = resp.json()
    except ValueError as e:
        raise LoadFailure(f"Invalid schedule data: {e}") from e

    if not isinstance(data, list):
        raise LoadFailure(f"Invalid schedule data: expected a list, got {type(data).__name__}")

    for i, record in enumerate(data):
        if not isinstance(record, dict):
            raise LoadFailure(f"Invalid schedule data: entry {i} is {type(record).__name__}, not an object")

    return data


if __name__ == "__main__":
    name = sys.argv[1] if len(sys.argv) > 1 else "SridarSchedule.json"
    for row in get_schedule(name):
        print(row)
