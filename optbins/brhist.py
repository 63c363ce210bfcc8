import numpy as np


def brhist(x, d_min=3, d_max=250):
    """
    Returns the optimal number of bins in a regular histogram, selected by
    penalized maximum likelihood.

    Each candidate histogram with d bins of width h is scored with the
    log-likelihood of the sample under the piecewise-constant density it
    defines, sum_i c_i log(c_i / (n h)), minus the Birge-Rozenholc penalty,
    d - 1 + log(d)^2.5. The bin count with the largest penalized
    log-likelihood is returned. Candidates range from 'd_min' to
    ceil(n / log(n)), capped at 'd_max'.

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
        Number of samples falling in each of the optD bins. Bins are closed
        on the right; the first bin also holds min(x).
    C : array_like
        Penalized log-likelihood C[i] of the histogram with D[i] bins
    D : array_like
        Bin counts that were evaluated

    See Also
    --------
    choose_bin_count, bincount_pll

    References
    ----------
    .. [1] L. Birge and Y. Rozenholc, "How many bins should be put in a
           regular histogram?," in ESAIM: Probability and Statistics 10,
           24-45, 2006 http://dx.doi.org/10.1051/ps:2006001
    """

    x = _as_sample(x)
    _check_bounds(d_min, d_max)

    # degenerate samples collapse to a single bin
    D = _candidates(x, d_min, d_max)
    if not D:
        optD, counts = _single_bin(x)
        edges = np.array([np.min(x), np.max(x)]) if x.size else np.zeros(0)
        return optD, 0.0, edges, counts, np.zeros(0), np.zeros(0, dtype=int)

    x_min = np.min(x)
    x_max = np.max(x)
    C, optD, counts = _search(x, x_min, x_max, D)

    optW = (x_max - x_min) / optD
    edges = np.linspace(x_min, x_max, optD + 1)

    return optD, optW, edges, counts, C, np.asarray(D)


def choose_bin_count(x, d_min=3, d_max=250):
    """
    Chooses the bin count of a regular histogram for the sample 'x'.

    Returns a tuple (d, counts), where d is the optimal number of bins and
    counts holds the number of occurrences in each of the d bins. A sample
    with fewer than two values, or whose spread is too small for any
    candidate bin to have a nonzero width, yields (1, [len(x)]).
    """

    x = _as_sample(x)
    _check_bounds(d_min, d_max)

    D = _candidates(x, d_min, d_max)
    if not D:
        return _single_bin(x)

    C, optD, counts = _search(x, np.min(x), np.max(x), D)

    return optD, counts


def bin_range(n, d_min=3, d_max=250):
    """Bin counts to evaluate for a sample of size n (n >= 2)."""
    upper = min(d_max, int(np.ceil(n / np.log(n))))
    return range(d_min, max(d_min, upper) + 1)


def bincounts(x, x_min, binwidth, d):
    """
    Counts the samples of 'x' in each of 'd' bins of width 'binwidth'
    starting at 'x_min'.

    Sample x goes to the 1-based bin ceil((x - x_min) / binwidth), clamped to
    [1, d] so that x_min lands in the first bin and rounding at max(x) never
    spills past the last one.
    """
    idx = np.ceil((x - x_min) / binwidth).astype(int)
    idx = np.clip(idx, 1, d) - 1
    return np.bincount(idx, minlength=d)


def bincount_pll(d, n, counts, binwidth):
    """
    Penalized log-likelihood of a histogram with d regular bins.

    Parameters
    ----------
    d : int
        Number of bins in the histogram.
    n : int
        Number of samples, which should equal sum(counts[:d]).
    counts : array_like
        Number of occurrences in each bin. Only the first d entries are read.
    binwidth : double
        Width of each bin in the histogram.

    Returns
    -------
    pll : double
        Log-likelihood with the Birge-Rozenholc penalty applied.
    """
    c = np.asarray(counts[:d], dtype=float)

    # empty bins add nothing to the likelihood
    c = c[c > 0]

    # log(c / (n * binwidth)) split so that n * binwidth cannot overflow
    ll = np.sum(c * (np.log(c / n) - np.log(binwidth)))

    return float(ll - penalty(d))


def penalty(d):
    """Birge-Rozenholc penalty d - 1 + log(d)^2.5."""
    # log(1) is 0 and 0.0**2.5 is 0.0
    return d - 1 + np.log(d) ** 2.5


def _candidates(x, d_min, d_max):
    """Bin counts whose binwidth is nonzero. Empty for degenerate samples."""
    if x.size <= 1:
        return range(0)

    with np.errstate(over='ignore'):
        span = np.max(x) - np.min(x)
    if not np.isfinite(span):
        raise ValueError("sample span overflows float64")

    # binwidth shrinks as d grows; drop candidates where it underflows to zero
    D = bin_range(x.size, d_min, d_max)
    while D and span / D[-1] == 0:
        D = D[:-1]
    return D


def _search(x, x_min, x_max, D):

    span = x_max - x_min
    n = x.size

    # brute force over every candidate, keeping the first best
    C = np.zeros(len(D))
    pll_best = -np.inf
    optD = D[0]
    opt_counts = None
    for i, d in enumerate(D):
        binwidth = span / d
        counts = bincounts(x, x_min, binwidth, d)
        C[i] = bincount_pll(d, n, counts, binwidth)
        if opt_counts is None or C[i] > pll_best:
            pll_best = C[i]
            optD = d
            opt_counts = counts

    return C, optD, opt_counts


def _single_bin(x):
    return 1, np.array([x.size])


def _as_sample(x):
    x = np.asarray(x, dtype=float)
    if x.ndim != 1:
        raise ValueError("x must be one-dimensional, got shape %s" % (x.shape,))
    if not np.all(np.isfinite(x)):
        raise ValueError("x must contain only finite values")
    return x


def _check_bounds(d_min, d_max):
    if d_min < 1:
        raise ValueError("d_min must be at least 1, got %d" % d_min)
    if d_max < d_min:
        raise ValueError("d_max (%d) must not be smaller than d_min (%d)"
                         % (d_max, d_min))
