import numpy as np

from cpuFunctions import naive_mul, numpy_mul


def test_naive_matches_numpy():
    rng = np.random.default_rng(0)
    A = rng.uniform(-1.0, 1.0, size=(5, 7))
    B = rng.uniform(-1.0, 1.0, size=(7, 2))
    assert np.allclose(naive_mul(A, B), numpy_mul(A, B))


def test_naive_is_float64_and_shaped():
    C = naive_mul(np.ones((2, 3)), np.ones((3, 4)))
    assert C.dtype == np.float64
    assert C.shape == (2, 4)
    assert np.array_equal(C, np.full((2, 4), 3.0))


def test_empty_shared_dimension_gives_zeros():
    C = naive_mul(np.ones((2, 0)), np.ones((0, 3)))
    assert np.array_equal(C, np.zeros((2, 3)))
