import json

import pytest

from astratrader.serialization import (
    deserialize_instant,
    deserialize_optional_instant,
    serialize_instant,
    serialize_optional_instant,
)


def test_serialize_splits_seconds_and_nanos():
    assert serialize_instant(10.0, 12.5) == [2, 500_000_000]


def test_round_trip_preserves_age():
    saved = serialize_instant(100.0, 103.25)
    restored = deserialize_instant(json.loads(json.dumps(saved)), 500.0)
    assert restored == pytest.approx(500.0 - 3.25)


def test_future_instant_saturates_to_zero():
    assert serialize_instant(20.0, 10.0) == [0, 0]


def test_nanos_always_below_one_second():
    secs, nanos = serialize_instant(0.0, 7.999999)
    assert 0 <= nanos < 1_000_000_000
    assert secs + nanos / 1e9 == pytest.approx(7.999999)


@pytest.mark.parametrize("bad", [[1], [1, 2, 3], "1,2", [-1, 0], [0, -5], [1.5, 0], [True, 0], [0, 2**32]])
def test_invalid_values_rejected(bad):
    with pytest.raises(ValueError):
        deserialize_instant(bad, 0.0)


def test_optional_none_passes_through():
    assert serialize_optional_instant(None, 1.0) is None
    assert deserialize_optional_instant(None, 1.0) is None


def test_optional_round_trip():
    saved = serialize_optional_instant(4.0, 6.0)
    assert deserialize_optional_instant(saved, 10.0) == pytest.approx(8.0)