import pytest

import central_intersect.config as config_module
from central_intersect import (
    Coordinate,
    DimensionMismatchError,
    IntersectorConfig,
    average,
    get_intersector_config,
    set_intersector_config,
)


@pytest.fixture
def restore_config():
    original = get_intersector_config()
    yield
    set_intersector_config(original)


def test_config_is_copied_on_read(restore_config):
    cfg = get_intersector_config()
    cfg.check_dimensions = False

    assert get_intersector_config().check_dimensions is True


def test_set_config_changes_default(restore_config):
    set_intersector_config(IntersectorConfig(check_dimensions=False))

    centroid = average([Coordinate.of(0, 0), Coordinate.of(2, 2, 2)])

    assert centroid == Coordinate.of(1, 1)


def test_explicit_config_overrides_default(monkeypatch):
    monkeypatch.setattr(config_module, "_INTERSECTOR_CONFIG", IntersectorConfig(check_dimensions=False))

    with pytest.raises(DimensionMismatchError):
        average(
            [Coordinate.of(0, 0), Coordinate.of(2, 2, 2)],
            config=IntersectorConfig(check_dimensions=True),
        )
