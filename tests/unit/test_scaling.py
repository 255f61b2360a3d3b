"""Tests for scale alignment."""

import pytest
from structlog.testing import capture_logs

from bigdecimal import BigDecimal, InvalidOperation, NumericOverflow, align
from bigdecimal.scaling import clamp_scale, common_scale, upscale


class TestUpscale:
    """Tests for upscale and BigDecimal.upscale."""

    def test_upscale_raw(self):
        """Raising the scale multiplies the magnitude."""
        assert upscale(15, 1, 4) == 15000

    def test_upscale_same_scale(self):
        """Upscaling to the current scale is a no-op."""
        assert upscale(15, 1, 1) == 15

    def test_upscale_value(self):
        """BigDecimal.upscale keeps the numeric value."""
        value = BigDecimal(15, 1).upscale(3)
        assert value.magnitude == 1500
        assert value.scale == 3
        assert value == BigDecimal(15, 1)

    def test_smaller_scale_raises(self):
        """Rescaling to a smaller scale is an invalid operation."""
        with pytest.raises(InvalidOperation):
            upscale(15, 2, 1)
        with pytest.raises(InvalidOperation):
            BigDecimal(1500, 3).upscale(1)

    def test_scale_beyond_limit_raises(self):
        """Upscaling past 65535 overflows."""
        with pytest.raises(NumericOverflow):
            BigDecimal(1).upscale(65536)


class TestAlign:
    """Tests for align and common_scale."""

    def test_align_values(self):
        """Both values end up at the larger scale."""
        left, right, scale = align(BigDecimal(5), BigDecimal(-125, 2))
        assert scale == 2
        assert (left.magnitude, left.scale) == (500, 2)
        assert (right.magnitude, right.scale) == (-125, 2)

    def test_common_scale(self):
        """The common scale is the larger one."""
        assert common_scale(BigDecimal(1, 3), BigDecimal(1, 7)) == 7


class TestClampScale:
    """Tests for clamp_scale."""

    def test_within_limit_unchanged(self):
        """Scales within the limit pass through."""
        assert clamp_scale(123456, 10, 50) == (123456, 10)

    def test_beyond_limit_truncates(self):
        """Scales beyond the limit drop low digits toward zero."""
        assert clamp_scale(123456, 53, 50) == (123, 50)
        assert clamp_scale(-123456, 53, 50) == (-123, 50)

    def test_truncation_is_logged(self):
        """Truncation emits a precision_truncated debug event."""
        with capture_logs() as logs:
            clamp_scale(123456, 53, 50)
        assert logs == [
            {
                "event": "precision_truncated",
                "log_level": "debug",
                "scale": 53,
                "limit": 50,
                "dropped_digits": 3,
            }
        ]
