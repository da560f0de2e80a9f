"""Tests for reductions: sum, all, any, dot, norm."""
import math

import numpy as np
import pytest

import spla
from spla import reduction


class CountingOp:
    """Binary operation that records how often it is called."""

    def __init__(self, op):
        self.op = op
        self.calls = 0

    def __call__(self, a, b):
        self.calls += 1
        return self.op(a, b)


# ============================================================
# sum
# ============================================================

def test_vector_sum():
    a = spla.ones(5, dtype=int)
    a[2] = 7
    a[3] = -1
    assert spla.sum(a) == 9


def test_matrix_sum():
    a = spla.ones((5, 5), dtype=int)
    assert spla.sum(a) == 25
    assert a.sum() == 25


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_sum_matches_dense(seed):
    rng = np.random.default_rng(seed)
    t = spla.full((4, 3, 2), int(rng.integers(-3, 4)), dtype=np.int64)
    for _ in range(7):
        index = tuple(int(rng.integers(0, d)) for d in t.shape)
        t[index] = int(rng.integers(-9, 10))
    assert spla.sum(t) == t.todense().sum()


def test_sum_of_large_default_is_not_enumerated():
    t = spla.full((1000, 1000, 1000), 3, dtype=np.int64)
    t[0, 0, 0] = 5
    assert spla.sum(t) == 3 * 10 ** 9 + 2


def test_repeat_is_logarithmic():
    op = CountingOp(np.add)
    assert reduction._repeat(op, np.int64(1), 1000) == 1000
    assert op.calls < 20


def test_reduce_scalar_tensor():
    s = spla.full((), 4, dtype=int)
    assert spla.sum(s) == 4
    s[()] = 6
    assert spla.sum(s) == 6


# ============================================================
# all / any
# ============================================================

def test_vector_all():
    a = spla.ones(3, dtype=int)
    one = a.copy()
    two = spla.full(3, 2)
    assert spla.all(spla.equal(a, one))
    assert not spla.all(spla.equal(a, two))

    a *= 2
    assert not spla.all(spla.equal(a, one))
    assert spla.all(spla.equal(a, two))

    a -= one
    assert spla.all(spla.equal(a, one))
    assert not spla.all(spla.equal(a, two))


def test_vector_eq():
    zero = spla.zeros(5, dtype=int)
    one = spla.ones(5, dtype=int)
    a = spla.zeros(5, dtype=int)

    assert spla.all(spla.equal(zero, a))
    assert not spla.any(spla.equal(zero, one))
    assert not spla.all(spla.equal(a, one))

    a[0] = 1
    assert spla.any(spla.equal(a, one))


def test_all_any_return_bool():
    mask = spla.zeros(4) < spla.ones(4)
    assert spla.all(mask) is True
    assert spla.any(mask) is True
    assert spla.all(spla.zeros(4)) is False


def test_all_short_circuits():
    t = spla.full(3, True)
    for i in range(3):
        t[i] = False

    op = CountingOp(np.logical_and)
    assert not reduction.reduce(t, op, absorbing=False)
    assert op.calls == 0

    op = CountingOp(np.logical_and)
    assert not reduction.reduce(t, op)
    assert op.calls == 2


def test_any_short_circuits_on_default():
    t = spla.full(100, True)
    for i in range(10):
        t[i] = False
    short = CountingOp(np.logical_or)
    assert reduction.reduce(t, short, absorbing=True)
    full = CountingOp(np.logical_or)
    assert reduction.reduce(t, full)
    assert full.calls - short.calls == 10


# ============================================================
# dot / norm
# ============================================================

def test_vector_dot():
    one = spla.ones(5, dtype=int)
    assert spla.dot(one, one) == 5
    assert one.dot(one) == 5


def test_dot_matches_dense():
    a = spla.full(6, 2.0)
    b = spla.full(6, -1.0)
    a[1] = 4.0
    b[1] = 3.0
    b[4] = 0.5
    assert spla.dot(a, b) == pytest.approx(np.dot(a.todense(), b.todense()))


def test_vector_norm():
    one = spla.ones(3)
    two = spla.full(3, 2.0)
    three = spla.full(3, 3.0)

    a = one.copy()
    assert a[0] == pytest.approx(1, abs=1e-6)
    assert spla.norm(a, 2) == pytest.approx(math.sqrt(3), abs=1e-6)

    b = two.copy()
    assert b[0] == pytest.approx(2, abs=1e-6)
    assert spla.norm(b, 2) == pytest.approx(math.sqrt(12), abs=1e-6)

    a = a + b
    assert a[0] == pytest.approx(3, abs=1e-6)
    assert spla.norm(a, 2) == pytest.approx(math.sqrt(27), abs=1e-6)
    assert spla.all(spla.equal(a, three))


def test_norm_default_order():
    v = spla.zeros(4)
    v[0] = 3.0
    v[2] = -4.0
    assert spla.norm(v) == pytest.approx(5.0)
    assert v.norm(1) == pytest.approx(7.0)
    assert isinstance(spla.norm(v), float)


def test_norm_matches_dense():
    v = spla.full((3, 3), -0.5)
    v[1, 1] = 2.0
    dense = v.todense().ravel()
    for ord in (1, 2, 3):
        assert spla.norm(v, ord) == pytest.approx(np.linalg.norm(dense, ord))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
