"""
Sparse vector walkthrough
=========================

Builds two length-10 integer vectors, combines them, and reports the
reductions and structure of the result.

Usage:
  pip install -e .
  python examples/sparse_vector_demo.py
"""

import spla


def main():
    v = spla.zeros(10, dtype=int)
    v[1] = -7
    v[3] = 4
    v *= 2

    w = spla.zeros(10, dtype=int)
    w[3] = 2
    w[5] = 1

    v += w
    print(f"v = {v}")
    print(f"w = {w}")
    print(f"dot(v, w) = {spla.dot(v, w)}")
    print(f"norm(v, 1) = {spla.norm(v, 1):.6f}")
    print(f"norm(v, 2) = {spla.norm(v, 2):.6f}")

    # A non-zero default costs nothing: only the three explicit entries move.
    shifted = v + 100
    print(f"sum(v + 100) = {spla.sum(shifted)}, stored = {shifted.sparsity()}")
    spla.describe(shifted, verbose=True)


if __name__ == "__main__":
    main()
