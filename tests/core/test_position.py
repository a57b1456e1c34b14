import pytest

from core import Position, Range


class TestPosition:

    def test_defaults(self):
        assert Position() == Position(0, 0)

    def test_negative_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            Position(-1, 0)
        with pytest.raises(ValueError, match="non-negative"):
            Position(0, -3)

    def test_ordering_is_line_then_column(self):
        assert Position(0, 9) < Position(1, 0)
        assert Position(2, 1) < Position(2, 4)
        assert Position(3, 3) <= Position(3, 3)


class TestRange:

    def test_start_after_end_rejected(self):
        with pytest.raises(ValueError, match="after end"):
            Range(Position(1, 0), Position(0, 5))

    def test_on_line(self):
        rng = Range.on_line(4, 2, 7)
        assert rng.start == Position(4, 2)
        assert rng.end == Position(4, 7)
        assert not rng.is_empty

    def test_point_is_empty(self):
        rng = Range.point(3, 1)
        assert rng.is_empty
        assert rng.start == rng.end == Position(3, 1)
