# Author: Martin Smith
# Created on: 7/18/12
# Updated on: 10/19/26


import logging
import os
import time

import numpy

from cpuFunctions import naive_mul as naivemm
from cpuFunctions import numpy_mul as numpymm

logger = logging.getLogger(__name__)


class ShapeException(Exception):
    def __init__(self, value):
        self.value = value
    def __str__(self):
        return repr(self.value)


class BackendException(Exception):
    def __init__(self, value):
        self.value = value
    def __str__(self):
        return repr(self.value)


def oclmm(A, B):
    try:
        from oclFunctions import matrix_multiply
    except ImportError as e:
        raise BackendException(
            "ocl backend needs pyopencl (pip install matdemo[opencl]): %s" % e)
    return matrix_multiply(A, B)


mm_functions = {}
mm_functions['naive'] = naivemm
mm_functions['numpy'] = numpymm
mm_functions['ocl'] = oclmm
default_backend = 'numpy'


def get_backend(name=None):
    if name is None:
        name = default_backend
    try:
        return mm_functions[name]
    except KeyError:
        raise BackendException("Unknown backend %r, expected one of %s"
                               % (name, sorted(mm_functions)))


def check_shape(A, B):
    if A.ndim != 2 or B.ndim != 2:
        raise ShapeException("Arrays must be two dimensional!")
    if B.shape[0] != A.shape[1]:
        raise ShapeException("Arrays have incompatible dimensions!")


def matrix_multiply(A, B, backend=None):
    A = numpy.asarray(A, dtype=numpy.float64)
    B = numpy.asarray(B, dtype=numpy.float64)
    check_shape(A, B)
    mmf = get_backend(backend)
    logger.debug("Multiplying %s by %s with %s", A.shape, B.shape,
                 backend or default_backend)
    return mmf(A, B)


def format_matrix(m, precision=6):
    """Render rows of space separated values, right aligned to the widest one.

    Values use %g with `precision` significant digits, the same as a default
    C++ output stream.
    """
    data = numpy.asarray(m, dtype=numpy.float64)
    cells = [["%.*g" % (precision, v) for v in row] for row in data]
    width = max([len(c) for row in cells for c in row] or [0])
    return "\n".join(" ".join(c.rjust(width) for c in row) for row in cells)


class Matrix(object):
    """Read-only float64 matrix with run-time checked dimensions.

    Subclasses made by fixed_shape() pin ROWS and COLS and refuse data of any
    other shape at construction.
    """

    ROWS = None
    COLS = None

    def __init__(self, data):
        if isinstance(data, Matrix):
            data = data.data
        array = numpy.array(data, dtype=numpy.float64)
        if array.ndim != 2:
            raise ShapeException("Matrix data must be two dimensional, got %d dimension(s)"
                                 % array.ndim)
        expected = (self.ROWS, self.COLS)
        if self.ROWS is not None and array.shape != expected:
            raise ShapeException("%s needs shape %s, got %s"
                                 % (type(self).__name__, expected, array.shape))
        array.flags.writeable = False
        self.data = array

    @classmethod
    def from_values(cls, values, rows=None, cols=None):
        rows = cls.ROWS if rows is None else rows
        cols = cls.COLS if cols is None else cols
        if rows is None or cols is None:
            raise ShapeException("rows and cols are required for %s" % cls.__name__)
        values = list(values)
        if len(values) != rows * cols:
            raise ShapeException("Expected %d values for a %dx%d matrix, got %d"
                                 % (rows * cols, rows, cols, len(values)))
        return cls(numpy.reshape(values, (rows, cols)))

    @classmethod
    def random(cls, rows=None, cols=None, rng=None, low=-1.0, high=1.0):
        rows = cls.ROWS if rows is None else rows
        cols = cls.COLS if cols is None else cols
        if rows is None or cols is None:
            raise ShapeException("rows and cols are required for %s" % cls.__name__)
        if not isinstance(rng, numpy.random.Generator):
            rng = numpy.random.default_rng(rng)
        return cls(rng.uniform(low, high, size=(rows, cols)))

    @property
    def rows(self):
        return self.data.shape[0]

    @property
    def cols(self):
        return self.data.shape[1]

    @property
    def shape(self):
        return self.data.shape

    def __getitem__(self, index):
        return self.data[index]

    def __array__(self, dtype=None, copy=None):
        arr = self.data if dtype is None else self.data.astype(dtype)
        return arr.copy() if copy else arr

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return numpy.array_equal(self.data, other.data)

    __hash__ = None

    def multiply(self, other, backend=None):
        return Matrix(matrix_multiply(self.data, numpy.asarray(other), backend))

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __str__(self):
        return format_matrix(self.data)

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self.data.tolist())


def fixed_shape(rows, cols, name=None):
    name = name or "Matrix%dx%d" % (rows, cols)
    return type(name, (Matrix,), {"ROWS": rows, "COLS": cols})


Matrix2d = fixed_shape(2, 2, "Matrix2d")
Matrix3d = fixed_shape(3, 3, "Matrix3d")
Matrix2x3 = fixed_shape(2, 3)
Matrix3x2 = fixed_shape(3, 2)


def compare_backends(A, B, names=None):
    """Run each backend on A and B and check it against numpy's A.dot(B).

    Returns {name: (result, cpu_seconds, wall_seconds)} where result is
    "PASSED", "FAILED" or "SKIPPED" for a backend that cannot run here.
    """
    A = numpy.asarray(A, dtype=numpy.float64)
    B = numpy.asarray(B, dtype=numpy.float64)
    check_shape(A, B)
    goldenC = A.dot(B)
    report = {}
    for name in names or sorted(mm_functions):
        mmf = get_backend(name)
        logger.info("Method: %s", name)
        tstart = time.process_time()
        otstart = os.times()[-1]
        try:
            C = mmf(A, B)
        except BackendException as e:
            logger.warning("Skipping %s: %s", name, e)
            report[name] = ("SKIPPED", 0.0, 0.0)
            continue
        cpu = time.process_time() - tstart
        wall = os.times()[-1] - otstart
        if C.shape == goldenC.shape and numpy.allclose(C, goldenC):
            result = "PASSED"
        else:
            result = "FAILED"
        logger.info("CPU Time: %s Wallclock Time: %s Result: %s", cpu, wall, result)
        report[name] = (result, cpu, wall)
    return report
