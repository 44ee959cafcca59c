import pytest

from schedule_viewer.data.schedule_loader import ScheduleLoader
from tests.helpers import BASE_URL, RecordingTarget, make_session


@pytest.fixture
def sample_records():
    """Schedule records out of period order, with a shared period."""
    return [
        {"period": 3, "className": "AP Chemistry", "teacher": "Ms. Patel", "roomNumber": 214, "subjectArea": "Science"},
        {"period": 1, "className": "AP Calculus BC", "teacher": "Mr. Alvarez", "roomNumber": 118, "subjectArea": "Math"},
        {"period": 2, "className": "English 11", "teacher": "Mrs. Green", "roomNumber": "B12", "subjectArea": "English"},
        {"period": 1, "className": "Homeroom", "teacher": "Mr. Alvarez", "roomNumber": 118, "subjectArea": "Other",
         "notes": "ignored"},
    ]


@pytest.fixture
def target():
    return RecordingTarget()


@pytest.fixture
def loader_factory():
    """Build loaders against a fake session; shuts them all down afterwards."""
    loaders = []

    def factory(routes, **kwargs):
        loader = ScheduleLoader(session=make_session(routes), base_url=BASE_URL, **kwargs)
        loaders.append(loader)
        return loader

    yield factory

    for loader in loaders:
        loader.shutdown()
