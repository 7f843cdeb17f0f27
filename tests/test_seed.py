"""
Tests for Gaussian sources and seeding.
"""

import numpy as np
import pytest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from fracnoise.noise.fbm import Motion, Noise
from fracnoise.utils.seed import TorchGenerator, get_generator, get_torch_generator


class TestNumpyGenerator:

    def test_reproducible(self):
        a = get_generator(42).standard_normal(100)
        b = get_generator(42).standard_normal(100)
        assert np.array_equal(a, b)

    def test_different_seeds_differ(self):
        a = get_generator(1).standard_normal(100)
        b = get_generator(2).standard_normal(100)
        assert not np.array_equal(a, b)


class TestTorchGenerator:

    def test_draws_are_float64_numpy(self):
        pytest.importorskip("torch")
        draws = TorchGenerator(seed=3).standard_normal(16)
        assert isinstance(draws, np.ndarray)
        assert draws.shape == (16,)
        assert draws.dtype == np.float64

    def test_matches_seeded_torch_generator(self):
        torch = pytest.importorskip("torch")
        draws = TorchGenerator(seed=5).standard_normal(8)
        expected = torch.randn(8, generator=get_torch_generator(5), dtype=torch.float64)
        assert np.array_equal(draws, expected.numpy())

    def test_wraps_existing_generator(self):
        pytest.importorskip("torch")
        gen = get_torch_generator(7)
        source = TorchGenerator(generator=gen)
        assert source.generator is gen

    def test_drives_samplers_reproducibly(self):
        pytest.importorskip("torch")
        a = Motion(0.3).sample(40, 1.0, TorchGenerator(seed=11))
        b = Motion(0.3).sample(40, 1.0, TorchGenerator(seed=11))
        assert a.shape == (40,)
        assert a[0] == 0.0
        assert np.array_equal(a, b)

        noise = Noise(0.8, 0.5).sample(33, TorchGenerator(seed=11))
        assert noise.shape == (33,)
        assert np.all(np.isfinite(noise))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
