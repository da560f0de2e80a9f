"""Tests for dense/scipy interop, structure reports and assertion helpers."""
import numpy as np
from scipy import sparse
import pytest

import spla
from spla.testing import assert_tensor_equal, assert_tensor_near


# ============================================================
# Dense arrays
# ============================================================

def test_todense():
    t = spla.full((2, 3), 1, dtype=int)
    t[0, 2] = 5
    dense = spla.to_dense(t)
    assert dense.shape == (2, 3)
    assert dense.dtype == np.int64
    assert np.array_equal(dense, [[1, 1, 5], [1, 1, 1]])


def test_from_dense_with_default():
    dense = np.array([[1, 1, 5], [1, 7, 1]])
    t = spla.from_dense(dense, default_value=1)
    assert t.sparsity() == 2
    assert t[0, 2] == 5
    assert t[1, 1] == 7
    assert np.array_equal(t.todense(), dense)


def test_from_dense_zero_default():
    t = spla.from_dense([0.0, 2.5, 0.0])
    assert t.default_value == 0
    assert t.sparsity() == 1
    assert t[1] == 2.5


def test_from_dense_scalar():
    t = spla.from_dense(np.array(4), default_value=0)
    assert t.shape == ()
    assert t[()] == 4


# ============================================================
# scipy.sparse
# ============================================================

def test_to_scipy():
    t = spla.zeros((3, 4))
    t[0, 1] = 2.0
    t[2, 3] = -1.0
    m = spla.to_scipy(t, format="csr")
    assert sparse.issparse(m)
    assert m.format == "csr"
    assert m.nnz == 2
    assert np.array_equal(m.toarray(), t.todense())


def test_to_scipy_requirements():
    with pytest.raises(ValueError):
        spla.to_scipy(spla.zeros(4))
    with pytest.raises(ValueError):
        spla.to_scipy(spla.ones((2, 2)))


def test_from_scipy():
    m = sparse.coo_matrix(
        (np.array([1, 2, 0]), (np.array([0, 0, 1]), np.array([1, 1, 2]))),
        shape=(2, 3))
    t = spla.from_scipy(m)
    assert t.shape == (2, 3)
    assert t.default_value == 0
    assert t[0, 1] == 3
    assert t.sparsity() == 1


def test_from_scipy_round_trip():
    dense = np.zeros((20, 30))
    dense[np.arange(20), np.arange(20) % 30] = np.arange(1, 21)
    dense[3, 25] = -4.5
    m = sparse.csr_matrix(dense)
    t = spla.from_scipy(m)
    assert t.sparsity() == m.nnz
    assert np.allclose(spla.to_scipy(t).toarray(), m.toarray())


def test_from_scipy_rejects_dense():
    with pytest.raises(TypeError):
        spla.from_scipy(np.eye(3))


# ============================================================
# Structure report
# ============================================================

def test_describe_sparse():
    v = spla.zeros(10, dtype=int)
    v[1] = -14
    v[3] = 10
    v[5] = 1
    report = spla.describe(v)
    assert report["shape"] == (10,)
    assert report["nnz"] == 3
    assert report["size"] == 10
    assert report["density"] == pytest.approx(0.3)
    assert report["default"] == 0
    assert report["strategy"] == "sparse"


def test_describe_dense():
    t = spla.zeros(4)
    for i in range(3):
        t[i] = 1.0
    assert spla.describe(t)["strategy"] == "dense"


def test_describe_huge_without_enumerating():
    t = spla.full((100_000, 100_000), 1.0)
    t[5, 5] = 2.0
    report = spla.describe(t)
    assert report["size"] == 10 ** 10
    assert report["ram_dense_mb"] == 80000.0
    assert report["compression"] > 1e6


def test_describe_verbose(capsys):
    spla.describe(spla.ones((2, 3)), verbose=True)
    out = capsys.readouterr().out
    assert "[spla]" in out
    assert "2 x 3" in out


# ============================================================
# Assertion helpers
# ============================================================

def test_assert_tensor_equal():
    a = spla.zeros(3, dtype=int)
    b = spla.zeros(3, dtype=int)
    assert_tensor_equal(a, b)
    b[0] = 1
    with pytest.raises(AssertionError):
        assert_tensor_equal(a, b)


def test_assert_tensor_near():
    a = spla.full(3, 1.0)
    b = spla.full(3, 1.0 + 1e-9)
    a[2] = 5.0
    b[2] = 5.0 - 1e-9
    assert_tensor_near(a, b)
    assert_tensor_near(spla.exp(spla.zeros(4)), 1.0)
    b[1] = 1.1
    with pytest.raises(AssertionError):
        assert_tensor_near(a, b)


def test_assert_tensor_near_unsigned():
    a = spla.full(3, 4, dtype=np.uint8)
    b = spla.full(3, 4, dtype=np.uint8)
    b[1] = 5
    assert_tensor_near(a, b, atol=2)
    with pytest.raises(AssertionError):
        assert_tensor_near(a, b, atol=1)


def test_assert_tensor_near_bool():
    mask = spla.zeros(3, dtype=bool)
    other = mask.copy()
    assert_tensor_near(mask, other)
    other[0] = True
    with pytest.raises(AssertionError):
        assert_tensor_near(mask, other)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
