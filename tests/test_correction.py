"""Tests for correction delta computation and per-pixel correction."""

import numpy as np
import pytest

from recolor.color.correction import apply_correction, compute_delta
from recolor.color.kernels import round_clamp_channel, round_even_clamp_channel
from recolor.color.hsl import rgb_to_hsl
from recolor.color.lab import rgb_to_lab
from recolor.config import ColorSpace, CorrectionValues
from recolor.errors import InvalidInputError, InvalidInputKind

SELECTED = (30, 99, 151)
TARGET = (168, 6, 64)


@pytest.fixture
def random_pixels():
    """Random 8-bit colors as tuples of ints."""
    rng = np.random.default_rng(42)
    return [tuple(int(c) for c in row) for row in rng.integers(0, 256, size=(300, 3))]


def _close(a, b, tol=1):
    return all(abs(x - y) <= tol for x, y in zip(a, b))


class TestComputeDelta:
    """Test compute_delta."""

    @pytest.mark.parametrize("space", list(ColorSpace))
    def test_zero_when_equal(self, space):
        """Test identical colors give a zero delta."""
        assert compute_delta(SELECTED, SELECTED, space) == (0.0, 0.0, 0.0)

    def test_hsl_difference(self):
        """Test the HSL delta is target - selected component-wise."""
        start = rgb_to_hsl(*SELECTED)
        end = rgb_to_hsl(*TARGET)
        expected = tuple(e - s for s, e in zip(start, end))
        assert compute_delta(SELECTED, TARGET, ColorSpace.HSL) == pytest.approx(expected)

    def test_lab_difference(self):
        """Test the Lab delta is target - selected component-wise."""
        start = rgb_to_lab(*SELECTED)
        end = rgb_to_lab(*TARGET)
        expected = tuple(e - s for s, e in zip(start, end))
        assert compute_delta(SELECTED, TARGET, ColorSpace.CIELAB) == pytest.approx(expected)

    def test_antisymmetric(self):
        """Test swapping the colors negates the delta."""
        forward = compute_delta(SELECTED, TARGET, "cielab")
        backward = compute_delta(TARGET, SELECTED, "cielab")
        assert forward == pytest.approx(tuple(-d for d in backward))

    def test_not_clamped(self):
        """Test the delta can exceed the component range."""
        dl, da, db = compute_delta((0, 0, 0), (255, 255, 255), ColorSpace.CIELAB)
        assert dl == pytest.approx(100.0, abs=0.01)

    def test_string_space(self):
        """Test string selectors match enum members."""
        assert compute_delta(SELECTED, TARGET, "HSL") == compute_delta(
            SELECTED, TARGET, ColorSpace.HSL
        )

    def test_default_space_is_hsl(self):
        """Test the default color space."""
        assert compute_delta(SELECTED, TARGET) == compute_delta(SELECTED, TARGET, "hsl")

    def test_matches_correction_values(self):
        """Test CorrectionValues.delta() delegates to compute_delta."""
        values = CorrectionValues(SELECTED, TARGET, ColorSpace.CIELAB)
        assert values.delta() == compute_delta(SELECTED, TARGET, ColorSpace.CIELAB)

    def test_unknown_space_raises(self):
        """Test unknown selectors are rejected."""
        with pytest.raises(InvalidInputError) as exc:
            compute_delta(SELECTED, TARGET, "cmyk")
        assert exc.value.kind is InvalidInputKind.UNKNOWN_COLOR_SPACE

    def test_bad_color_raises(self):
        """Test malformed colors are rejected."""
        with pytest.raises(InvalidInputError) as exc:
            compute_delta((1, 2), TARGET)
        assert exc.value.kind is InvalidInputKind.NOT_A_COLOR


class TestApplyCorrection:
    """Test apply_correction."""

    @pytest.mark.parametrize("space", list(ColorSpace))
    def test_selected_maps_to_target(self, space):
        """Test correcting the selected color gives the target color."""
        delta = compute_delta(SELECTED, TARGET, space)
        assert _close(apply_correction(SELECTED, delta, space), TARGET)

    def test_lab_selected_maps_exactly(self):
        """Test the Lab path reproduces the target exactly."""
        delta = compute_delta(SELECTED, TARGET, ColorSpace.CIELAB)
        assert apply_correction(SELECTED, delta, ColorSpace.CIELAB) == TARGET

    def test_zero_delta_identity_hsl(self, random_pixels):
        """Test a zero HSL delta leaves colors unchanged."""
        for pixel in random_pixels:
            assert _close(apply_correction(pixel, (0.0, 0.0, 0.0), ColorSpace.HSL), pixel)

    def test_zero_delta_identity_lab(self, random_pixels):
        """Test a zero Lab delta leaves colors unchanged."""
        for pixel in random_pixels:
            assert apply_correction(pixel, (0.0, 0.0, 0.0), ColorSpace.CIELAB) == pixel

    def test_returns_ints_in_range(self, random_pixels):
        """Test output channels are ints in [0, 255] in both spaces."""
        for space in ColorSpace:
            delta = compute_delta(SELECTED, TARGET, space)
            for pixel in random_pixels:
                out = apply_correction(pixel, delta, space)
                assert all(isinstance(c, int) and 0 <= c <= 255 for c in out)

    def test_hsl_lightness_overflow_clamps(self):
        """Test pushing lightness above 1 clamps to white."""
        assert apply_correction((200, 200, 200), (0.0, 0.0, 0.5), "hsl") == (255, 255, 255)

    def test_hsl_lightness_underflow_clamps(self):
        """Test pushing lightness below 0 clamps to black."""
        assert apply_correction((50, 60, 70), (0.0, 0.0, -1.0), "hsl") == (0, 0, 0)

    def test_hsl_saturation_overflow_clamps(self):
        """Test oversaturation still yields channels in range."""
        r, g, b = apply_correction((200, 50, 50), (0.0, 2.0, 0.0), "hsl")
        assert (r, g, b) == (255, 0, 0)

    def test_hsl_hue_wraps(self):
        """Test a full-turn hue delta is a no-op."""
        assert _close(apply_correction((200, 50, 50), (1.0, 0.0, 0.0), "hsl"), (200, 50, 50))

    def test_lab_lightness_overflow_clamps(self):
        """Test pushing L* above 100 clamps to white."""
        assert apply_correction((128, 128, 128), (100.0, 0.0, 0.0), "cielab") == (255, 255, 255)

    def test_lab_lightness_underflow_clamps(self):
        """Test pushing L* below 0 clamps to black."""
        assert apply_correction((128, 128, 128), (-100.0, 0.0, 0.0), "cielab") == (0, 0, 0)

    def test_non_finite_delta_raises(self):
        """Test NaN in the delta is rejected."""
        with pytest.raises(InvalidInputError) as exc:
            apply_correction(SELECTED, (0.0, float("nan"), 0.0), "hsl")
        assert exc.value.kind is InvalidInputKind.NON_FINITE

    def test_bad_delta_shape_raises(self):
        """Test a delta with the wrong arity is rejected."""
        with pytest.raises(InvalidInputError) as exc:
            apply_correction(SELECTED, (0.0, 0.0), "hsl")
        assert exc.value.kind is InvalidInputKind.NOT_A_COLOR

    def test_bad_pixel_raises(self):
        """Test out-of-range pixels are rejected."""
        with pytest.raises(InvalidInputError, match=r"pixel\[2\]=300"):
            apply_correction((0, 0, 300), (0.0, 0.0, 0.0), "hsl")


class TestChannelRounding:
    """Test the rounding used when writing corrected channels."""

    @pytest.mark.parametrize(
        "value, expected",
        [(0.5, 1), (1.5, 2), (2.5, 3), (127.5, 128), (127.4999, 127), (-3.0, 0), (300.0, 255)],
    )
    def test_lab_rounds_half_up(self, value, expected):
        """Test the Lab path rounds ties upwards."""
        assert round_clamp_channel(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [(0.5, 0), (1.5, 2), (2.5, 2), (127.5, 128), (128.5, 128), (254.5, 254), (2.51, 3)],
    )
    def test_hsl_rounds_half_to_even(self, value, expected):
        """Test the HSL path rounds ties to the even neighbor."""
        assert round_even_clamp_channel(value) == expected

    @pytest.mark.parametrize("rounder", [round_clamp_channel, round_even_clamp_channel])
    def test_nan_and_bounds(self, rounder):
        """Test NaN maps to 0 and values saturate at the channel limits."""
        assert rounder(float("nan")) == 0
        assert rounder(-0.4) == 0
        assert rounder(255.0) == 255
        assert rounder(1e300) == 255
