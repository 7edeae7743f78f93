"""
Low-level NumPy+Numba kernels for ordered products and the 2D segment/box test.

The kernels are compiled without ``fastmath`` so that floating-point
accumulation happens in exactly the order written below and NaN/inf keep
their IEEE semantics.
"""
import math
import numpy as np
from numba import njit


@njit(cache=True)
def _dot(a: np.ndarray, b: np.ndarray) -> float:
    """Sum of a[i] * b[i], accumulated left to right."""
    acc = 0.0
    for i in range(a.shape[0]):
        acc += a[i] * b[i]
    return acc


@njit(cache=True)
def _matmul(a: np.ndarray, b: np.ndarray, out: np.ndarray) -> None:
    """
    Conventional product of row-major ``a`` (h_a x w_a) and ``b`` (h_b x w_b).

    Caller guarantees w_a == h_b and out.shape == (h_a, w_b). Outputs are
    written in (row, column) order, each one a left-to-right dot product of
    a row of ``a`` with a column of ``b``.
    """
    rows = a.shape[0]
    inner = a.shape[1]
    cols = b.shape[1]
    for y in range(rows):
        for x in range(cols):
            acc = 0.0
            for k in range(inner):
                acc += a[y, k] * b[k, x]
            out[y, x] = acc


@njit(cache=True)
def _segment_aabb_entry(o: np.ndarray, d: np.ndarray, t_limit: float,
                        bmin: np.ndarray, bmax: np.ndarray) -> float:
    """
    Entry parameter of the segment o + t*d, t in [0, t_limit], into a 2D box.

    Returns 0.0 when the origin lies inside or on the box and inf on miss.
    Axes with d == 0 require the origin to lie inside that slab, which also
    covers the degenerate d == (0, 0) case. A NaN slab bound is a miss.
    """
    inside = True
    for k in range(2):
        if o[k] < bmin[k] or o[k] > bmax[k]:
            inside = False
    if inside:
        return 0.0

    t0 = 0.0
    t1 = t_limit
    for k in range(2):
        if d[k] == 0.0:
            if o[k] < bmin[k] or o[k] > bmax[k]:
                return math.inf
            continue
        tn = (bmin[k] - o[k]) / d[k]
        tf = (bmax[k] - o[k]) / d[k]
        if tn != tn or tf != tf:
            return math.inf
        if tn > tf:
            tn, tf = tf, tn
        if tn > t0:
            t0 = tn
        if tf < t1:
            t1 = tf
        if t0 > t1:
            return math.inf
    return t0
