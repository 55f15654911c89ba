"""Spike time difference and cross-correlation histogram kernels. All functions take
sorted 1D arrays of spike times, in sec, and have no side effects"""

import numpy as np


def xcorr(spikes0, spikes1, trange):
    """Return all spike time differences spikes1[j] - spikes0[i] that fall within trange,
    edges inclusive. Both spike trains must be sorted. Rather than forming every possible
    pair, for each spike in spikes0 binary search spikes1 for the slice of spikes that lies
    within trange of it, so cost scales with the number of matches"""
    spikes0 = np.asarray(spikes0, dtype=np.float64)
    spikes1 = np.asarray(spikes1, dtype=np.float64)
    t0, t1 = trange
    assert t0 <= t1
    lo = spikes1.searchsorted(spikes0 + t0, side='left') # start inclusive
    hi = spikes1.searchsorted(spikes0 + t1, side='right') # end inclusive
    counts = hi - lo # number of spikes1 within trange of each spike in spikes0
    ndts = counts.sum()
    if ndts == 0:
        return np.empty(0, dtype=np.float64)
    # index into spikes0 for every difference:
    i0 = np.repeat(np.arange(len(spikes0)), counts)
    # index into spikes1 for every difference, counting up from each slice's lo:
    starts = np.cumsum(counts) - counts
    i1 = np.repeat(lo - starts, counts) + np.arange(ndts)
    return spikes1[i1] - spikes0[i0]

def crossx(spikes0, spikes1, binw, nbins):
    """Return the cross-correlation histogram of spikes1 relative to spikes0, as an int64
    array of nbins counts centered on lag 0. Bin k holds lags nearest to (k - nlags)*binw,
    where nlags = nbins // 2. A lag is rounded to the nearest bin center, half away from 0,
    so swapping spikes0 and spikes1 gives exactly the reversed histogram"""
    if binw <= 0:
        raise ValueError('binw must be positive, got %r' % binw)
    if nbins < 1 or nbins % 2 != 1 or int(nbins) != nbins:
        raise ValueError('nbins must be a positive odd integer, got %r' % nbins)
    nbins = int(nbins)
    nlags = nbins // 2
    n = np.zeros(nbins, dtype=np.int64)
    if len(spikes0) == 0 or len(spikes1) == 0:
        return n
    halfwidth = (nlags + 0.5) * binw
    dts = xcorr(spikes0, spikes1, (-halfwidth, halfwidth))
    # signed number of bins away from lag 0:
    offsets = np.sign(dts) * np.floor(np.abs(dts) / binw + 0.5)
    offsets = offsets[np.abs(offsets) <= nlags]
    binis = np.int64(offsets) + nlags
    n += np.bincount(binis, minlength=nbins)
    return n
