import matplotlib
matplotlib.use('Agg') # no display during tests

import numpy as np
import pytest

from spikexcorr import SpikeData


def randspikes(rng, nchans=3, ntrials=5, rate=40, trange=(0, 2)):
    """Return SpikeData with homogeneous Poisson spike trains in every trial"""
    t0, t1 = trange
    time, trial = [], []
    for chani in range(nchans):
        ts, tis = [], []
        for triali in range(ntrials):
            nspikes = rng.poisson(rate * (t1 - t0))
            ts.append(np.sort(rng.uniform(t0, t1, size=nspikes)))
            tis.append(np.tile(triali, nspikes))
        time.append(np.hstack(ts))
        trial.append(np.hstack(tis))
    trialtime = np.tile([t0, t1], (ntrials, 1))
    label = [ 'n%d' % chani for chani in range(nchans) ]
    return SpikeData(label, time, trial, trialtime)


@pytest.fixture
def pair():
    """Two channels in a single 1 s trial, channel 2 firing 0.1 s after channel 1"""
    return SpikeData(['1', '2'], [[0.0, 0.5], [0.1, 0.6]], [[0, 0], [0, 0]], [[0, 1]])

@pytest.fixture
def spike():
    return randspikes(np.random.RandomState(0))
