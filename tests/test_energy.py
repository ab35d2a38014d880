"""Tests for energy functions."""

import numpy as np
import pytest

from seamcarve.energy import (
    EnergyFunction,
    GradientEnergyFunction,
    brightness,
    compute_energy,
)
from seamcarve.exceptions import InvalidInput


class TestBrightness:
    """Tests for channel averaging."""

    def test_averages_channels(self):
        img = np.zeros((2, 2, 3))
        img[..., 0] = 0.25
        img[..., 1] = 0.5
        img[..., 2] = 0.75

        assert np.allclose(brightness(img), 0.5)

    def test_greyscale_passthrough(self):
        img = np.array([[0.1, 0.2], [0.3, 0.4]], dtype=np.float32)

        result = brightness(img)

        assert result.dtype == np.float64
        assert np.allclose(result, img)

    def test_does_not_modify_input(self):
        img = np.random.rand(4, 4, 3)
        original = img.copy()

        brightness(img)

        assert np.array_equal(img, original)


class TestGradientEnergy:
    """Tests for gradient-based energy function."""

    def test_computes_energy_map(self):
        """Test that gradient energy produces a valid energy map."""
        # Create test image with edges
        img = np.zeros((100, 100, 3), dtype=np.float32)
        img[40:60, :] = 1.0  # Horizontal band

        energy = compute_energy(img)

        assert energy.shape == (100, 100)
        assert energy.min() >= 0

    def test_detects_edges(self):
        """Test that edges have higher energy than flat regions."""
        img = np.zeros((100, 100, 3), dtype=np.float32)
        img[50:, :] = 1.0  # Step edge between rows 49 and 50

        energy = compute_energy(img)

        edge_energy = energy[49, 50]
        flat_energy = energy[10, 10]
        assert edge_energy > flat_energy
        assert energy[50, 50] > flat_energy

    def test_thin_line_energy_lands_beside_it(self):
        """A one-pixel bright row is flat along itself, so its neighbours carry the energy."""
        img = np.zeros((20, 20, 3))
        img[10, :] = 1.0

        energy = compute_energy(img)

        assert energy[10, 5] == 0
        assert energy[9, 5] > 0
        assert energy[11, 5] > 0

    def test_uniform_image_has_zero_energy(self):
        img = np.empty((3, 3, 3))
        img[...] = [0.25, 0.5, 0.75]

        energy = compute_energy(img)

        assert energy.shape == (3, 3)
        assert np.all(energy == 0)

    def test_borders_are_replicated(self):
        """Replicated edge pixels halve the central difference at the border."""
        ramp = np.tile(np.linspace(0.0, 1.0, 9), (5, 1))

        energy = compute_energy(ramp)

        step = 1.0 / 8
        assert np.allclose(energy[:, 1:-1], 2 * step * 4 / 8)
        assert np.allclose(energy[:, 0], step * 4 / 8)
        assert np.allclose(energy[:, -1], step * 4 / 8)

    def test_vertical_step_energy(self):
        """Energy is the euclidean magnitude of both gradient responses."""
        img = np.zeros((4, 4))
        img[:, 2:] = 1.0

        energy = compute_energy(img)

        # Columns 1 and 2 straddle the step: |gx| = (1 + 2 + 1) / 8, gy = 0
        assert np.allclose(energy[:, 1], 0.5)
        assert np.allclose(energy[:, 2], 0.5)
        assert np.allclose(energy[:, 0], 0.0)
        assert np.allclose(energy[:, 3], 0.0)

    def test_energy_not_normalized(self):
        img = np.zeros((10, 10))
        img[:, 5:] = 0.1

        energy = compute_energy(img)

        assert energy.max() == pytest.approx(0.05)

    def test_single_pixel(self):
        energy = compute_energy(np.array([[[0.3, 0.6, 0.9]]]))

        assert energy.shape == (1, 1)
        assert energy[0, 0] == pytest.approx(0.0, abs=1e-12)

    @pytest.mark.parametrize("shape", [(0, 5, 3), (5, 0, 3), (0, 0), (5,), (2, 2, 3, 1)])
    def test_rejects_degenerate_shapes(self, shape):
        with pytest.raises(InvalidInput):
            compute_energy(np.zeros(shape))

    def test_energy_function_interface(self):
        img = np.random.rand(20, 30, 3)
        energy_fn = GradientEnergyFunction()

        assert isinstance(energy_fn, EnergyFunction)
        assert np.array_equal(energy_fn.compute(img), compute_energy(img))

    def test_abstract_base_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            EnergyFunction()
