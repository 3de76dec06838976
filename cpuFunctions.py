# Author: Martin Smith
# Created on: 7/18/12
# Updated on: 10/19/26

import numpy


def naive_mul(A, B):
    """C[i, j] = sum over k of A[i, k] * B[k, j], one element at a time."""
    rows, shared = A.shape
    cols = B.shape[1]
    C = numpy.zeros((rows, cols), dtype=numpy.float64)
    for rowI in range(rows):
        for colI in range(cols):
            C[rowI, colI] = sum(float(A[rowI, k]) * float(B[k, colI])
                                for k in range(shared))
    return C


def numpy_mul(A, B):
    return A.dot(B)
