"""
Unit Tests for Dimensions and CropRect Models

Tests validation of pixel extents and crop rectangles.
"""

import math

import pytest

from catalog_toolkit.core.models.dimensions import (
    CropRect,
    Dimensions,
    InvalidDimensionsError,
)


class TestDimensions:
    """Tests for Dimensions dataclass."""

    # ─────────────────────────────────────────────────────────────────────────
    # Constructor Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_init_when_valid_then_creates_dimensions(self):
        """Positive integers should be accepted as-is."""
        d = Dimensions(1600, 900)
        assert d.width == 1600
        assert d.height == 900

    def test_init_when_zero_width_then_raises_error(self):
        """Zero width is a contract violation."""
        with pytest.raises(InvalidDimensionsError, match="width must be positive"):
            Dimensions(0, 900)

    def test_init_when_negative_height_then_raises_error(self):
        """Negative height is a contract violation."""
        with pytest.raises(InvalidDimensionsError, match="height must be positive"):
            Dimensions(100, -5)

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_init_when_non_finite_then_raises_error(self, value):
        """inf and nan are rejected."""
        with pytest.raises(InvalidDimensionsError, match="must be finite"):
            Dimensions(value, 100)

    def test_init_when_fractional_then_raises_error(self):
        """Fractional pixels are rejected."""
        with pytest.raises(InvalidDimensionsError, match="whole number"):
            Dimensions(100.5, 100)

    def test_init_when_integral_float_then_normalises_to_int(self):
        """400.0 becomes 400."""
        d = Dimensions(400.0, 300.0)
        assert d.width == 400
        assert isinstance(d.width, int)

    @pytest.mark.parametrize("value", [True, "400", None])
    def test_init_when_not_a_number_then_raises_error(self, value):
        """Booleans, strings and None are not pixel counts."""
        with pytest.raises(InvalidDimensionsError, match="must be a number"):
            Dimensions(value, 100)

    def test_error_is_value_error(self):
        """Callers catching ValueError also see invalid dimensions."""
        assert issubclass(InvalidDimensionsError, ValueError)

    # ─────────────────────────────────────────────────────────────────────────
    # Behaviour
    # ─────────────────────────────────────────────────────────────────────────

    def test_ratio_is_width_over_height(self):
        assert Dimensions(1600, 900).ratio == pytest.approx(16 / 9)

    def test_is_frozen(self):
        d = Dimensions(10, 10)
        with pytest.raises(AttributeError):
            d.width = 20

    def test_equal_values_are_equal_and_hashable(self):
        assert Dimensions(10, 20) == Dimensions(10.0, 20)
        assert len({Dimensions(10, 20), Dimensions(10, 20)}) == 1

    def test_coerce_when_tuple_then_builds_dimensions(self):
        assert Dimensions.coerce((300, 600)) == Dimensions(300, 600)

    def test_coerce_when_dimensions_then_returns_same_instance(self):
        d = Dimensions(1, 2)
        assert Dimensions.coerce(d) is d

    def test_coerce_when_wrong_shape_then_raises_error(self):
        with pytest.raises(InvalidDimensionsError, match="expected Dimensions"):
            Dimensions.coerce((1, 2, 3))

    def test_from_dict_when_missing_key_then_raises_error(self):
        with pytest.raises(InvalidDimensionsError, match="height"):
            Dimensions.from_dict({"width": 10})

    def test_to_dict_from_dict_preserves_values(self):
        d = Dimensions(640, 480)
        assert Dimensions.from_dict(d.to_dict()) == d

    def test_repr_is_compact(self):
        assert repr(Dimensions(400, 225)) == "Dimensions(400x225)"


class TestCropRect:
    """Tests for CropRect dataclass."""

    def test_init_when_valid_then_creates_rect(self):
        rect = CropRect(origin_x=350, origin_y=0, width=900, height=900)
        assert rect.right == 1250
        assert rect.bottom == 900

    def test_init_when_negative_origin_then_raises_error(self):
        with pytest.raises(InvalidDimensionsError, match="origin_x must be >= 0"):
            CropRect(origin_x=-1, origin_y=0, width=10, height=10)

    def test_init_when_zero_width_then_raises_error(self):
        with pytest.raises(InvalidDimensionsError, match="width must be positive"):
            CropRect(origin_x=0, origin_y=0, width=0, height=10)

    def test_as_box_returns_pil_order(self):
        """PIL wants (left, upper, right, lower)."""
        rect = CropRect(origin_x=10, origin_y=20, width=30, height=40)
        assert rect.as_box() == (10, 20, 40, 60)

    def test_fits_within_when_inside_then_true(self):
        rect = CropRect(origin_x=350, origin_y=0, width=900, height=900)
        assert rect.fits_within(Dimensions(1600, 900))

    def test_fits_within_when_overflowing_then_false(self):
        rect = CropRect(origin_x=701, origin_y=0, width=900, height=900)
        assert not rect.fits_within(Dimensions(1600, 900))

    def test_size_returns_dimensions(self):
        rect = CropRect(origin_x=5, origin_y=5, width=30, height=40)
        assert rect.size == Dimensions(30, 40)
