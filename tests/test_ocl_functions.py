import numpy as np
import pytest

pytest.importorskip("pyopencl")

import oclFunctions  # noqa: E402
from matlib import BackendException  # noqa: E402


def test_round_down():
    assert oclFunctions.round_down(72, 64) == 64
    assert oclFunctions.round_down(64, 72) == 0
    assert oclFunctions.round_down(64, 64) == 64


def test_round_up():
    assert oclFunctions.round_up(72, 64) == 128
    assert oclFunctions.round_up(64, 72) == 72
    assert oclFunctions.round_up(64, 64) == 64


def test_kernel_matches_numpy():
    try:
        oclFunctions.get_devices()
    except BackendException as e:
        pytest.skip(str(e))
    rng = np.random.default_rng(5)
    A = rng.uniform(-1.0, 1.0, size=(4, 3))
    B = rng.uniform(-1.0, 1.0, size=(3, 4))
    try:
        C = oclFunctions.matrix_multiply(A, B)
    except BackendException as e:
        pytest.skip(str(e))
    assert C.shape == (4, 4)
    assert np.allclose(C, A.dot(B))


class DeviceNotFound(oclFunctions.cl.Error):
    def __str__(self):
        return "DEVICE_NOT_FOUND"


class EmptyPlatform(object):
    name = "Empty"

    def get_devices(self):
        raise DeviceNotFound("DEVICE_NOT_FOUND")


def test_device_listing_error_becomes_backend_exception(monkeypatch):
    monkeypatch.setattr(oclFunctions.cl, "get_platforms", lambda: [EmptyPlatform()])
    with pytest.raises(BackendException):
        oclFunctions.get_devices()


def test_matrix_multiply_translates_opencl_errors(monkeypatch):
    def no_devices():
        raise DeviceNotFound("DEVICE_NOT_FOUND")

    monkeypatch.setattr(oclFunctions, "get_devices", no_devices)
    with pytest.raises(BackendException):
        oclFunctions.matrix_multiply(np.ones((2, 3)), np.ones((3, 2)))


def test_compare_skips_ocl_without_devices(monkeypatch):
    import matlib

    monkeypatch.setattr(oclFunctions.cl, "get_platforms", lambda: [EmptyPlatform()])
    report = matlib.compare_backends(np.ones((2, 3)), np.ones((3, 2)),
                                     names=["numpy", "ocl"])
    assert report["numpy"][0] == "PASSED"
    assert report["ocl"] == ("SKIPPED", 0.0, 0.0)
