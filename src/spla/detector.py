"""
Spla Detector: Structure report for a sparse tensor.

Summarizes a tensor with:
  - Shape, entry type, default value
  - Stored entries and density
  - Memory estimates for the sparse and dense representations
  - Recommended representation (sparse/dense)

Usage:
    import spla
    report = spla.describe(t)
    print(report)
"""

DENSE_DENSITY_THRESHOLD = 0.5


def describe(tensor, verbose=False):
    """
    Analyze tensor structure and recommend a representation.

    Only the stored entries are counted; the index space is never walked.

    Parameters
    ----------
    tensor : Tensor
        The tensor to analyze.
    verbose : bool
        Print a one-line summary.

    Returns
    -------
    dict
        Structure report with shape, density, nnz, memory estimates.
    """
    nnz = tensor.sparsity()
    total = tensor.elements_in()
    density = nnz / total
    itemsize = tensor.dtype.itemsize

    # Packed COO estimate: one int64 per index component plus the value.
    ram_sparse = nnz * (tensor.ndim * 8 + itemsize) + itemsize
    ram_dense = total * itemsize

    if density > DENSE_DENSITY_THRESHOLD:
        strategy = "dense"
        reason = f"Dense ({density:.1%}), a plain array is smaller"
    else:
        strategy = "sparse"
        reason = f"Sparse ({density:.4%}), keep explicit entries only"

    report = {
        "shape": tensor.shape,
        "ndim": tensor.ndim,
        "dtype": str(tensor.dtype),
        "default": tensor.default_value.item(),
        "nnz": nnz,
        "size": total,
        "density": round(density, 6),
        "strategy": strategy,
        "reason": reason,
        "ram_sparse_bytes": ram_sparse,
        "ram_dense_mb": round(ram_dense / 1e6, 1),
        "compression": round(ram_dense / max(ram_sparse, 1), 1),
    }

    if verbose:
        shape = " x ".join(f"{d:,}" for d in tensor.shape) or "scalar"
        print(f"  [spla] {shape}, nnz={nnz:,}, density={density:.4%}, "
              f"default={report['default']}, strategy={strategy}")

    return report
