"""Tests for input validators.

Tests cover:
- validate_number / validate_channel
- validate_rgb / validate_triple
- validate_dimension
- validate_color_array
"""

import pickle

import numpy as np
import pytest

from recolor.errors import InvalidInputError, InvalidInputKind
from recolor.validators import (
    validate_channel,
    validate_color_array,
    validate_dimension,
    validate_number,
    validate_rgb,
    validate_triple,
)


class TestInvalidInputError:
    """Test InvalidInputError."""

    def test_is_value_error(self):
        """Test callers can catch ValueError."""
        with pytest.raises(ValueError):
            validate_channel(-1, "r")

    def test_pickle_keeps_kind(self):
        """Test the error survives pickling."""
        error = InvalidInputError(InvalidInputKind.NON_FINITE, "x=nan is not finite")
        restored = pickle.loads(pickle.dumps(error))
        assert restored.kind is InvalidInputKind.NON_FINITE
        assert str(restored) == "x=nan is not finite"


class TestValidateNumber:
    """Test validate_number."""

    @pytest.mark.parametrize("value", [0, -3.5, 1e300, np.float32(0.5), np.int64(7)])
    def test_valid_value(self, value):
        """Test finite reals pass and become floats."""
        result = validate_number(value, "x")
        assert isinstance(result, float)
        assert result == float(value)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), -np.inf])
    def test_non_finite_raises(self, value):
        """Test nan and inf are rejected."""
        with pytest.raises(InvalidInputError, match="is not finite") as exc:
            validate_number(value, "x")
        assert exc.value.kind is InvalidInputKind.NON_FINITE

    @pytest.mark.parametrize("value", ["1", None, True, [1]])
    def test_non_number_raises(self, value):
        """Test non-numbers and bools are rejected."""
        with pytest.raises(InvalidInputError, match="x must be a number") as exc:
            validate_number(value, "x")
        assert exc.value.kind is InvalidInputKind.NOT_A_COLOR


class TestValidateChannel:
    """Test validate_channel."""

    def test_boundary_values(self):
        """Test both ends of the range are accepted."""
        assert validate_channel(0, "r") == 0
        assert validate_channel(255, "r") == 255

    def test_integral_float_and_numpy(self):
        """Test integral floats and numpy scalars normalize to int."""
        assert validate_channel(200.0, "r") == 200
        assert type(validate_channel(np.uint8(17), "r")) is int

    def test_above_range_raises(self):
        """Test values above 255 are rejected."""
        with pytest.raises(InvalidInputError, match=r"g=256 is outside valid range \[0, 255\]"):
            validate_channel(256, "g")

    def test_below_range_raises(self):
        """Test negative values are rejected."""
        with pytest.raises(InvalidInputError, match="b=-1 is outside valid range") as exc:
            validate_channel(-1, "b")
        assert exc.value.kind is InvalidInputKind.RGB_OUT_OF_RANGE

    def test_fractional_raises(self):
        """Test fractional channels are rejected."""
        with pytest.raises(InvalidInputError, match="not an integer channel value"):
            validate_channel(12.5, "r")


class TestValidateRgb:
    """Test validate_rgb and validate_triple."""

    def test_normalizes(self):
        """Test lists, tuples and arrays become int tuples."""
        assert validate_rgb([1, 2, 3]) == (1, 2, 3)
        assert validate_rgb(np.array([4, 5, 6], dtype=np.uint8)) == (4, 5, 6)

    def test_element_named_in_error(self):
        """Test the offending component is named."""
        with pytest.raises(InvalidInputError, match=r"target\[1\]=999"):
            validate_rgb((0, 999, 0), "target")

    @pytest.mark.parametrize("value", ["abc", b"abc", 5, {1, 2, 3}])
    def test_not_a_sequence_raises(self, value):
        """Test scalars, strings and sets are rejected."""
        with pytest.raises(InvalidInputError) as exc:
            validate_rgb(value)
        assert exc.value.kind is InvalidInputKind.NOT_A_COLOR

    @pytest.mark.parametrize("value", [(), (1, 2), (1, 2, 3, 4)])
    def test_wrong_length_raises(self, value):
        """Test sequences of the wrong length are rejected."""
        with pytest.raises(InvalidInputError, match="must have 3 components"):
            validate_rgb(value)

    def test_triple_allows_any_finite(self):
        """Test deltas may be negative and fractional."""
        assert validate_triple((-0.5, 2.0, 100), "delta") == (-0.5, 2.0, 100.0)

    def test_triple_rejects_nan(self):
        """Test deltas must be finite."""
        with pytest.raises(InvalidInputError, match=r"delta\[0\]=nan") as exc:
            validate_triple((float("nan"), 0, 0), "delta")
        assert exc.value.kind is InvalidInputKind.NON_FINITE


class TestValidateDimension:
    """Test validate_dimension."""

    def test_valid_values(self):
        """Test zero and positive ints pass."""
        assert validate_dimension(0, "width") == 0
        assert validate_dimension(np.int32(640), "width") == 640

    @pytest.mark.parametrize("value", [-1, 2.0, "4", True, None])
    def test_invalid_raises(self, value):
        """Test negatives, floats, strings and bools are rejected."""
        with pytest.raises(InvalidInputError, match="width must be a non-negative integer") as exc:
            validate_dimension(value, "width")
        assert exc.value.kind is InvalidInputKind.INVALID_DIMENSIONS


class TestValidateColorArray:
    """Test validate_color_array."""

    def test_returns_contiguous_float64(self):
        """Test conversion to a contiguous float64 array."""
        arr = np.arange(12, dtype=np.uint8).reshape(4, 3)
        result = validate_color_array(arr, "rgb", channels=True)
        assert result.dtype == np.float64
        assert result.flags["C_CONTIGUOUS"]
        np.testing.assert_array_equal(result, arr)

    def test_empty_array(self):
        """Test an empty [0, 3] array is accepted."""
        assert validate_color_array(np.empty((0, 3)), "rgb", channels=True).shape == (0, 3)

    @pytest.mark.parametrize("shape", [(3,), (4, 4), (2, 3, 1)])
    def test_wrong_shape_raises(self, shape):
        """Test only [N, 3] is accepted."""
        with pytest.raises(InvalidInputError, match=r"must have shape \[N, 3\]"):
            validate_color_array(np.zeros(shape), "rgb")

    def test_non_numeric_raises(self):
        """Test non-numeric input is rejected."""
        with pytest.raises(InvalidInputError, match="not a numeric array") as exc:
            validate_color_array([["a", "b", "c"]], "rgb")
        assert exc.value.kind is InvalidInputKind.NOT_A_COLOR

    def test_non_finite_raises(self):
        """Test nan anywhere is rejected."""
        arr = np.zeros((5, 3))
        arr[3, 1] = np.nan
        with pytest.raises(InvalidInputError, match="non-finite") as exc:
            validate_color_array(arr, "lab")
        assert exc.value.kind is InvalidInputKind.NON_FINITE

    def test_channel_range_raises(self):
        """Test channel arrays must stay within [0, 255]."""
        with pytest.raises(InvalidInputError, match="outside valid range"):
            validate_color_array([[0, 0, 256]], "rgb", channels=True)

    def test_channel_fraction_raises(self):
        """Test channel arrays must be integral."""
        with pytest.raises(InvalidInputError, match="non-integer"):
            validate_color_array([[0, 0.5, 1]], "rgb", channels=True)

    def test_unbounded_without_channels(self):
        """Test Lab/HSL arrays accept any finite values."""
        result = validate_color_array([[-500.0, 1e6, 0.25]], "lab")
        assert result[0, 1] == 1e6
