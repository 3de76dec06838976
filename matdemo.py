#! /usr/bin/env python3
# Author: Martin Smith
# Created on: 7/18/12
# Updated on: 10/19/26

import argparse
import logging
import sys

import numpy

import matlib
from matlib import Matrix, Matrix2d, Matrix2x3, Matrix3d, Matrix3x2
from matlib import compare_backends

logger = logging.getLogger(__name__)


def show(label, m, end="\n"):
    print(label)
    print(m)
    print(end=end)


def demo(rng=None, backend=None):
    """Build, print and multiply the example matrices.

    Returns the three products keyed "A*B", "C*D" and "A2*B2", plus the
    random operands as "A2" and "B2".
    """
    if not isinstance(rng, numpy.random.Generator):
        rng = numpy.random.default_rng(rng)

    matrixA = Matrix3d.from_values([1, 2, 3,
                                    4, 5, 6,
                                    7, 8, 9])
    matrixB = Matrix3d.from_values([9, 8, 7,
                                    6, 5, 4,
                                    3, 2, 1])
    show("Matrix A:", matrixA)
    show("Matrix B:", matrixB)

    result = Matrix3d(matrixA.multiply(matrixB, backend))
    show("Result (A * B):", result)

    matrixC = Matrix2x3.from_values([1, 2, 3,
                                     4, 5, 6])
    matrixD = Matrix3x2.from_values([1, 2,
                                     3, 4,
                                     5, 6])
    show("Matrix C (2x3):", matrixC)
    show("Matrix D (3x2):", matrixD)

    result2 = Matrix2d(matrixC.multiply(matrixD, backend))
    show("Result (C * D):", result2)

    dynamicA = Matrix.random(4, 3, rng)
    dynamicB = Matrix.random(3, 4, rng)
    show("Random Matrix A (4x3):", dynamicA)
    show("Random Matrix B (3x4):", dynamicB)

    dynamicResult = dynamicA.multiply(dynamicB, backend)
    show("Result (A * B) - 4x4:", dynamicResult, end="")

    return {"A*B": result, "C*D": result2, "A2*B2": dynamicResult,
            "A2": dynamicA, "B2": dynamicB}


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    p = argparse.ArgumentParser(prog="matdemo",
                                description="Build, print and multiply example matrices")
    p.add_argument("--seed", type=int, default=None,
                   help="Seed for the random matrices (default: unseeded)")
    p.add_argument("--backend", choices=sorted(matlib.mm_functions),
                   default=matlib.default_backend, help="Multiply backend")
    p.add_argument("--compare", action="store_true",
                   help="Also time every backend on the random matrices")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    args, ignored = p.parse_known_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    if ignored:
        logger.debug("Ignoring arguments: %s", ignored)

    products = demo(numpy.random.default_rng(args.seed), args.backend)

    if args.compare:
        print()
        report = compare_backends(products["A2"], products["B2"])
        for name, (result, cpu, wall) in report.items():
            print("Method: %s Result: %s CPU Time: %.6f Wallclock Time: %.6f"
                  % (name, result, cpu, wall))
    logger.info("Done, products: %s", sorted(products))
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
