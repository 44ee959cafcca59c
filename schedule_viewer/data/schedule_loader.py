"""Schedule loading: fetch, order and publish to a render target"""
import logging
import threading
import weakref
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Dict, List, Optional

import pandas as pd
import requests

from schedule_viewer.config import DEFAULT_CATALOG, ScheduleCatalog, config
from schedule_viewer.data.get_schedule import get_schedule
from schedule_viewer.data.models import LoadFailure, LoadResult, Schedule, ScheduleEntry

log = logging.getLogger(__name__)


def _period_key(record: Dict[str, Any]) -> Any:
    """Sort key for a record: numbers and numeric strings, anything else is unordered."""
    period = record.get("period")
    if isinstance(period, bool) or not isinstance(period, (int, float, str)):
        return None
    return period


def sort_entries(records: List[Dict[str, Any]]) -> List[ScheduleEntry]:
    """Order raw records ascending by period.

    The sort is stable, so entries sharing a period keep their resource
    order. Missing or non-numeric periods go last.

    Args:
        records: Raw records in resource order

    Returns:
        List of ScheduleEntry in display order
    """
    if not records:
        return []

    periods = pd.Series([_period_key(record) for record in records], dtype="object")
    order = pd.to_numeric(periods, errors="coerce").sort_values(kind="stable", na_position="last")
    return [ScheduleEntry.from_record(records[i]) for i in order.index]


def _release(executor: ThreadPoolExecutor, session: requests.Session, wait: bool):
    executor.shutdown(wait=wait)
    session.close()


def load_schedule(
    resource: str,
    label: Optional[str] = None,
    base_url: Optional[str] = None,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> Schedule:
    """Load and return an ordered schedule.

    Raises:
        LoadFailure: If the resource cannot be fetched or parsed
    """
    records = get_schedule(resource, base_url=base_url, session=session, timeout=timeout)
    return Schedule(resource=resource, label=label, entries=sort_entries(records))


class ScheduleLoader:
    """Loads schedules off the caller's thread and publishes them to a render target.

    Every call to ``load`` takes a new request token. When stale results are
    discarded (the default), only the most recently requested load writes to
    the target; otherwise whichever load finishes last wins.

    The worker pool and HTTP session are released by shutdown(), or when the
    loader is garbage collected (an abandoned Streamlit session).
    """

    def __init__(
        self,
        target=None,
        catalog: ScheduleCatalog = DEFAULT_CATALOG,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        executor: Optional[ThreadPoolExecutor] = None,
        discard_stale: Optional[bool] = None,
        timeout: Optional[float] = None,
    ):
        self.target = target
        self.catalog = catalog
        self.base_url = base_url
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.discard_stale = config.DISCARD_STALE_LOADS if discard_stale is None else discard_stale
        self._session = session if session is not None else requests.Session()
        self._executor = executor or ThreadPoolExecutor(
            max_workers=config.MAX_WORKERS, thread_name_prefix="schedule-loader"
        )
        self._lock = threading.Lock()
        self._latest_token = 0
        self._finalizer = weakref.finalize(self, _release, self._executor, self._session, False)

    @property
    def latest_token(self) -> int:
        return self._latest_token

    def label_for(self, resource: str) -> Optional[str]:
        return self.catalog.label(resource)

    def fetch(self, resource: str) -> Schedule:
        """Run the fetch/parse/sort pipeline synchronously."""
        return load_schedule(
            resource,
            label=self.label_for(resource),
            base_url=self.base_url,
            session=self._session,
            timeout=self.timeout,
        )

    def load(self, resource: str, target=None) -> "Future[LoadResult]":
        """Start loading a schedule.

        Signals the loading state right away, then fetches on a worker
        thread. The returned future resolves to the Schedule or to the
        LoadFailure; it never raises LoadFailure.

        Args:
            resource: Resource name from the catalog
            target: Render target for this load (defaults to self.target)
        """
        target = target if target is not None else self.target
        if target is None:
            raise ValueError("ScheduleLoader.load needs a render target")

        with self._lock:
            self._latest_token += 1
            token = self._latest_token

        log.info("Loading schedule %s (request %d)", resource, token)
        target.show_loading()
        return self._executor.submit(self._run, token, resource, target)

    def _run(self, token: int, resource: str, target) -> LoadResult:
        try:
            result = self.fetch(resource)
        except LoadFailure as e:
            log.error("Error loading schedule %s: %s", resource, e.detail)
            result = e
        else:
            log.info("Loaded %d entries from %s (request %d)", len(result), resource, token)

        self._publish(token, result, target)
        return result

    def _publish(self, token: int, result: LoadResult, target) -> bool:
        with self._lock:
            if self.discard_stale and token != self._latest_token:
                log.debug("Discarding result of request %d; request %d is newer", token, self._latest_token)
                return False
            target.render(result)
        return True

    def shutdown(self, wait: bool = True):
        if self._finalizer.detach() is not None:
            _release(self._executor, self._session, wait)
