import numpy as np
import pytest
from mitolib.core.interval import Window, sub_seq
from mitolib.utils import BoundsError, ValidationError


class TestSubSeq:
    def test_forward(self):
        assert sub_seq('ACGTAC', 2, 4) == 'CGT'

    def test_single(self):
        assert sub_seq('ACGTAC', 6, 6) == 'C'

    def test_across_origin(self):
        assert sub_seq('ACGTAC', 5, 2) == 'ACAC'

    def test_concatenation(self):
        s = 'ACGTACGGTA'
        for a, b, c in [(1, 3, 10), (2, 5, 7), (4, 4, 9)]:
            assert sub_seq(s, a, b) + sub_seq(s, b + 1, c) == sub_seq(s, a, c)


class TestWindowInit:
    def test_lengths(self):
        assert len(Window(1, 16569, 16569)) == 16569
        assert len(Window(100, 200, 16569)) == 101
        assert len(Window(16560, 10, 16569, wrapping=True)) == 20

    def test_flags(self):
        w = Window(16560, 10, 16569, wrapping=True)
        assert w.wraps
        assert not w.is_full
        assert Window(1, 50, 50).is_full

    def test_backwards_non_wrapping(self):
        with pytest.raises(BoundsError, match='non-wrapping'):
            Window(10, 5, 50)

    def test_beyond_reference(self):
        with pytest.raises(BoundsError):
            Window(1, 51, 50)

    def test_invalid_index(self):
        with pytest.raises(ValidationError):
            Window(0, 10, 50)
        with pytest.raises(ValidationError):
            Window('1', 10, 50)

    def test_numpy_index(self):
        assert Window(np.int64(2), np.int32(5), 10).start == 2


class TestWindowNormalize:
    def test_defaults(self):
        w = Window(100, 200, 16569)
        assert w.normalize() == (100, 200)
        assert w.normalize(150) == (150, 150)
        assert w.normalize(150, 160) == (150, 160)

    def test_end_without_start(self):
        with pytest.raises(ValidationError, match='without a start'):
            Window(100, 200, 16569).normalize(None, 150)


class TestWindowValidate:
    def test_inside(self):
        assert Window(100, 200, 16569).validate(120, 150) == (120, 150)

    def test_outside(self):
        w = Window(100, 200, 16569)
        with pytest.raises(BoundsError):
            w.validate(99, 120)
        with pytest.raises(BoundsError):
            w.validate(150, 201)

    def test_backwards_non_wrapping(self):
        with pytest.raises(BoundsError, match='greater than'):
            Window(100, 200, 16569).validate(150, 120)

    def test_backwards_wrapping_full(self):
        assert Window(1, 16569, 16569, wrapping=True).validate(16567, 6) == (16567, 6)

    def test_non_positive(self):
        with pytest.raises(ValidationError):
            Window(1, 100, 100).validate(0, 5)

    def test_wrapped_window(self):
        w = Window(16560, 10, 16569, wrapping=True)
        assert w.validate(16565, 3) == (16565, 3)
        assert w.validate(2, 8) == (2, 8)
        assert w.validate(16561, 16568) == (16561, 16568)

    def test_wrapped_window_gap(self):
        w = Window(16560, 10, 16569, wrapping=True)
        with pytest.raises(BoundsError, match='falls between'):
            w.validate(11, 12)

    def test_wrapped_window_order(self):
        w = Window(16560, 10, 16569, wrapping=True)
        with pytest.raises(BoundsError, match='comes after'):
            w.validate(5, 16565)

    def test_wrapped_window_beyond_reference(self):
        with pytest.raises(BoundsError, match='exceeds'):
            Window(16560, 10, 16569, wrapping=True).validate(16570, 3)

    def test_contains(self):
        w = Window(16560, 10, 16569, wrapping=True)
        assert w.contains(16569)
        assert w.contains(1)
        assert not w.contains(11)
        assert w.offset(1) == 10
