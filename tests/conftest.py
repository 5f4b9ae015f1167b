import pytest

from sample_records import PointDC, PointNT, PointPM, sample_root


@pytest.fixture
def root():
    return sample_root()


@pytest.fixture(params=[PointDC, PointNT, PointPM],
                ids=["dataclass", "namedtuple", "pydantic"])
def point_type(request):
    return request.param


@pytest.fixture
def point(point_type):
    return point_type(x=1, y=2, label="origin")
