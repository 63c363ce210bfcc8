import math

import numpy as np


def brhist_classic(x, d_min=3, d_max=250):
    """
    Returns the optimal number of bins in a regular histogram, selected by
    penalized maximum likelihood.

    Loop-based rendition of optbins.brhist: a single working array of counts
    is reset and refilled for every candidate bin count, and the winning
    histogram is binned once more after the search.

    Parameters
    ----------
    x : array_like
        One-dimensional data to fit histogram to. Must be finite.
    d_min : int, optional
        Smallest number of bins to evaluate. Default value = 3.
    d_max : int, optional
        Upper cap on the number of bins to evaluate. Default value = 250.

    Returns
    -------
    optD : int
        Optimal number of bins to represent the data in x
    optW : double
        Width of the optimal bins. Zero when the sample has no spread.
    edges : array_like
        Edges of optimized bins, optD + 1 values from min(x) to max(x).
    counts : array_like
        Number of samples falling in each of the optD bins.
    C : array_like
        Penalized log-likelihood C[i] of the histogram with D[i] bins
    D : array_like
        Bin counts that were evaluated

    See Also
    --------
    optbins.brhist
    """

    x = np.asarray(x, dtype=float)
    if x.ndim != 1:
        raise ValueError("x must be one-dimensional, got shape %s" % (x.shape,))
    if not np.all(np.isfinite(x)):
        raise ValueError("x must contain only finite values")
    if d_min < 1:
        raise ValueError("d_min must be at least 1, got %d" % d_min)
    if d_max < d_min:
        raise ValueError("d_max (%d) must not be smaller than d_min (%d)"
                         % (d_max, d_min))

    n = len(x)
    x_min = float(min(x)) if n else 0.0
    x_max = float(max(x)) if n else 0.0
    span = x_max - x_min
    if math.isinf(span):
        raise ValueError("sample span overflows float64")

    D_MIN = d_min
    D_MAX = max(d_min, min(d_max, int(math.ceil(n / math.log(n))))) if n > 1 else 0

    # binwidth shrinks as d grows; drop candidates where it underflows to zero
    while D_MAX >= D_MIN and span / D_MAX == 0:
        D_MAX -= 1

    if D_MAX < D_MIN:
        edges = np.array([x_min, x_max]) if n else np.zeros(0)
        return 1, 0.0, edges, np.array([n]), np.zeros(0), np.zeros(0, dtype=int)

    D = np.arange(D_MIN, D_MAX + 1)
    C = np.zeros(len(D))
    counts = np.zeros(D_MAX, dtype=int)

    optD = D_MIN
    pll_best = -np.inf
    for i, d in enumerate(range(D_MIN, D_MAX + 1)):
        binwidth = span / d
        counts[0:d] = 0
        for xi in x:
            counts[max(1, min(d, int(math.ceil((xi - x_min) / binwidth)))) - 1] += 1

        C[i] = bincount_pll_classic(d, n, counts, binwidth)
        if C[i] > pll_best:
            optD = d
            pll_best = C[i]

    # bin the winner again rather than keeping a copy during the search
    counts[0:optD] = 0
    binwidth = span / optD
    for xi in x:
        counts[max(1, min(optD, int(math.ceil((xi - x_min) / binwidth)))) - 1] += 1

    edges = np.linspace(x_min, x_max, optD + 1)

    return optD, binwidth, edges, counts[0:optD].copy(), C, D


def choose_bin_count_classic(x, d_min=3, d_max=250):
    """Loop-based counterpart of optbins.choose_bin_count."""
    optD, optW, edges, counts, C, D = brhist_classic(x, d_min, d_max)
    return optD, counts


def bincount_pll_classic(d, n, counts, binwidth):

    ll = 0.0
    for i in range(d):
        if counts[i] > 0:
            ll += counts[i] * (math.log(counts[i] / n) - math.log(binwidth))

    return ll - (d - 1 + math.log(d) ** 2.5)
