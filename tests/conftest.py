"""
Pytest configuration and fixtures for cliffmv tests.
"""

import pytest
import torch

from cliffmv.ga.multivector import generate, random_multivector


# Coefficients of the 4-D sample multivector, keyed by signature
DEMO_COEFFICIENTS = {
    0b0000: 1.0, 0b0001: 20.0, 0b0010: 31.0, 0b0100: 42.0,
    0b0011: 5.0, 0b0101: 6.0, 0b0110: 7.0, 0b0111: 8.0,
    0b1000: 3.0, 0b1001: 2.0, 0b1010: 3.0, 0b1011: 15.0,
    0b1100: 4.0, 0b1101: 16.0, 0b1110: 17.0, 0b1111: 18.0,
}


@pytest.fixture
def generator():
    """Seeded generator for reproducible random multivectors."""
    return torch.Generator().manual_seed(1234)


@pytest.fixture
def demo_multivector():
    """4-D multivector with every blade populated."""
    mv = generate(4)
    for signature, value in DEMO_COEFFICIENTS.items():
        mv.set_element(signature, value)
    return mv


@pytest.fixture
def well_conditioned():
    """
    Factory for invertible multivectors: scalar 4 plus blades in [-0.2, 0.2).

    With at most 15 non-scalar blades the perturbation stays below the
    scalar part, so the result is always invertible.
    """
    def make(dimension_count, generator):
        mv = random_multivector(dimension_count, generator=generator, low=-0.2, high=0.2)
        mv.set_element(0, 4.0)
        return mv
    return make


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
