# test/test_segment.py
import pytest

from shotprofile.core import InvalidSegment, Segment


def test_segment_unpacks_and_normalizes_to_float():
    seg = Segment(0, 90, 10, 90)
    x1, y1, x2, y2 = seg
    assert (x1, y1, x2, y2) == (0.0, 90.0, 10.0, 90.0)
    assert all(isinstance(v, float) for v in seg)
    assert seg.start == (0.0, 90.0)
    assert seg.end == (10.0, 90.0)


def test_segment_shape_predicates():
    jump = Segment(10, 5, 10, 9)
    hold = Segment(10, 9, 14, 9)
    ramp = Segment(10, 5, 14, 9)

    assert jump.is_instant and not jump.is_hold and not jump.is_ramp
    assert hold.is_hold and not hold.is_instant
    assert ramp.is_ramp and ramp.duration == 4.0


def test_segment_rejects_backwards_time():
    with pytest.raises(InvalidSegment):
        Segment(5, 0, 4, 0)


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), "1", None, True])
def test_segment_rejects_bad_coordinates(bad):
    with pytest.raises(InvalidSegment):
        Segment(0, bad, 1, 0)


def test_segment_is_frozen_and_hashable():
    seg = Segment(0, 0, 1, 1)
    with pytest.raises(AttributeError):
        seg.x1 = 3  # type: ignore[misc]
    assert {seg, Segment(0, 0, 1, 1)} == {seg}
