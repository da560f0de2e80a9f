"""
Spla Interop: Move tensors to and from numpy and scipy.sparse.

Dense conversion walks the whole shape and is meant for small tensors,
tests and display. scipy.sparse only knows matrices with an implicit zero,
so ``to_scipy`` accepts rank-2 tensors whose default is zero.
"""

import numpy as np
from scipy import sparse

from spla import entry
from spla.tensor import Tensor


def to_dense(tensor):
    """Materialize ``tensor`` as a numpy array."""
    return tensor.todense()


def from_dense(array, default_value=None, dtype=None):
    """
    Build a tensor from a dense array.

    Parameters
    ----------
    array : array-like
        Values at every index. Must have no zero-length dimension.
    default_value : scalar, optional
        Default of the result. Defaults to zero of the entry type.
    dtype : numpy dtype-like, optional
        Entry type. Inferred from ``array`` if omitted.

    Returns
    -------
    Tensor
        Only the indices whose value differs from the default are stored.
    """
    array = np.asarray(array, dtype=dtype)
    dtype = entry.entry_dtype(array.dtype)
    if default_value is None:
        default_value = entry.zero(dtype)
    result = Tensor(array.shape, default_value, dtype=dtype)

    for index in np.argwhere(array != result.default_value):
        key = tuple(int(i) for i in index)
        result.set(key, array[key])
    return result


def to_scipy(tensor, format="coo"):
    """
    Convert a rank-2 tensor with a zero default to a scipy sparse matrix.

    Parameters
    ----------
    tensor : Tensor
        Rank-2 tensor whose default value is zero.
    format : str
        Any scipy sparse format name ("coo", "csr", "csc", ...).

    Returns
    -------
    scipy.sparse matrix
    """
    if tensor.ndim != 2:
        raise ValueError(f"to_scipy expects a rank-2 tensor, got shape "
                         f"{tensor.shape}")
    if not entry.is_zero(tensor.default_value):
        raise ValueError(f"to_scipy expects a zero default, got "
                         f"{tensor.default_value}")

    nnz = tensor.sparsity()
    rows = np.empty(nnz, dtype=np.int64)
    cols = np.empty(nnz, dtype=np.int64)
    vals = np.empty(nnz, dtype=tensor.dtype)
    for i, ((r, c), value) in enumerate(tensor.items()):
        rows[i] = r
        cols[i] = c
        vals[i] = value

    matrix = sparse.coo_matrix((vals, (rows, cols)), shape=tensor.shape,
                               dtype=tensor.dtype)
    return matrix.asformat(format)


def from_scipy(matrix):
    """
    Convert a scipy sparse matrix to a rank-2 tensor with default zero.

    Duplicate coordinates are summed and explicit zeros are not stored.
    """
    if not sparse.issparse(matrix):
        raise TypeError(f"from_scipy expects a scipy sparse matrix, got "
                        f"{type(matrix).__name__}")
    coo = matrix.tocoo(copy=True)
    coo.sum_duplicates()
    result = Tensor(coo.shape, 0, dtype=coo.dtype)
    for r, c, value in zip(coo.row, coo.col, coo.data):
        result.set((int(r), int(c)), value)
    return result
