"""Tests for visualization helpers."""

import numpy as np
import pytest

from seamcarve.exceptions import InvalidInput
from seamcarve.visualize import colorize, draw_seam, grey_to_rgb, normalize_greyness, to_uint8


class TestNormalizeGreyness:
    def test_divides_by_maximum(self):
        result = normalize_greyness(np.array([[0.0, 2.0], [1.0, 4.0]]))

        assert np.allclose(result, [[0.0, 0.5], [0.25, 1.0]])

    def test_all_zero_stays_zero(self):
        result = normalize_greyness(np.zeros((3, 3)))

        assert np.array_equal(result, np.zeros((3, 3)))


class TestGreyToRgb:
    def test_repeats_channels(self):
        field = np.random.rand(4, 5)

        rgb = grey_to_rgb(field)

        assert rgb.shape == (4, 5, 3)
        for c in range(3):
            assert np.array_equal(rgb[:, :, c], field)


class TestColorize:
    def test_returns_rgb_in_unit_range(self):
        rgb = colorize(np.random.rand(6, 7) * 10)

        assert rgb.shape == (6, 7, 3)
        assert rgb.min() >= 0
        assert rgb.max() <= 1


class TestDrawSeam:
    def test_paints_seam_red(self):
        img = np.zeros((3, 4, 3))
        seam = np.array([1, 2, 2])

        result = draw_seam(img, seam)

        for r, c in enumerate(seam):
            assert result[r, c].tolist() == [1.0, 0.0, 0.0]
        assert result.sum() == 3

    def test_does_not_modify_input(self):
        img = np.random.rand(4, 4, 3)
        original = img.copy()

        draw_seam(img, np.array([0, 1, 2, 3]))

        assert np.array_equal(img, original)

    def test_greyscale_becomes_rgb(self):
        result = draw_seam(np.zeros((2, 2)), np.array([0, 1]), color=(0.0, 1.0, 0.0))

        assert result.shape == (2, 2, 3)
        assert result[1, 1].tolist() == [0.0, 1.0, 0.0]

    def test_rejects_bad_seam(self):
        with pytest.raises(InvalidInput):
            draw_seam(np.zeros((3, 3, 3)), np.array([0, 1]))


class TestToUint8:
    def test_scales_and_clips(self):
        result = to_uint8(np.array([[-0.5, 0.0, 0.5, 1.0, 2.0]]))

        assert result.dtype == np.uint8
        assert result.tolist() == [[0, 0, 128, 255, 255]]
