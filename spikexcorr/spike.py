"""Defines the SpikeData class"""

import numpy as np

from .core import issorted


class SpikeData(object):
    """Spike times of a set of channels (neurons), segmented into trials. For each channel,
    time holds the spike times in sec relative to the trial's time origin, and trial holds
    the 0-based index of the trial each spike belongs to. trialtime is an ntrials x 2 array
    of the [start, end] time of each trial, in sec, in the same time frame as time"""
    def __init__(self, label, time, trial, trialtime):
        self.label = [ str(l) for l in label ]
        nchans = len(self.label)
        assert len(time) == nchans, 'need one spike time array per channel'
        assert len(trial) == nchans, 'need one trial index array per channel'
        self.time = [ np.asarray(t, dtype=np.float64).ravel() for t in time ]
        self.trial = [ np.asarray(tr, dtype=np.int64).ravel() for tr in trial ]
        for t, tr in zip(self.time, self.trial):
            assert len(t) == len(tr), 'spike times and trial indices differ in length'
        trialtime = np.asarray(trialtime, dtype=np.float64)
        if trialtime.size == 0:
            trialtime = trialtime.reshape(0, 2)
        assert trialtime.ndim == 2 and trialtime.shape[1] == 2, 'trialtime must be ntrials x 2'
        assert (trialtime[:, 0] <= trialtime[:, 1]).all(), 'trials must start before they end'
        self.trialtime = trialtime
        ntrials = len(trialtime)
        for tr in self.trial:
            if len(tr):
                assert tr.min() >= 0 and tr.max() < ntrials, 'trial index out of range'

    nchans = property(lambda self: len(self.label))
    ntrials = property(lambda self: len(self.trialtime))
    nspikes = property(lambda self: sum([ len(t) for t in self.time ]))

    def __repr__(self):
        return ('<%s: %d channels, %d trials, %d spikes>'
                % (type(self).__name__, self.nchans, self.ntrials, self.nspikes))

    def cut(self, chani, triali, latency):
        """Return sorted spike times of channel chani in trial triali that fall within
        latency, edge inclusive"""
        t0, t1 = latency
        time = self.time[chani]
        i = (self.trial[chani] == triali) & (time >= t0) & (time <= t1)
        spikes = time[i]
        if not issorted(spikes):
            spikes = np.sort(spikes)
        return spikes

    @classmethod
    def from_continuous(cls, label, spikes, trl):
        """Segment continuous spike trains into trials. spikes holds one array of spike times
        per channel, in sec. Each row of trl is [begin, end, offset] in sec: spikes within
        [begin, end], edge inclusive, are assigned to that trial, with time t - begin + offset.
        The trial spans [offset, offset + end - begin]. Spikes within overlapping trials are
        assigned to each of them"""
        trl = np.asarray(trl, dtype=np.float64)
        if trl.size == 0:
            trl = trl.reshape(0, 3)
        assert trl.ndim == 2 and trl.shape[1] == 3, 'trl must be ntrials x 3'
        time, trial = [], []
        for chanspikes in spikes:
            chanspikes = np.sort(np.asarray(chanspikes, dtype=np.float64).ravel())
            ts, tis = [], []
            for triali, (begin, end, offset) in enumerate(trl):
                lo = chanspikes.searchsorted(begin, side='left') # start inclusive
                hi = chanspikes.searchsorted(end, side='right') # end inclusive
                ts.append(chanspikes[lo:hi] - begin + offset)
                tis.append(np.tile(triali, hi-lo))
            if ts:
                time.append(np.hstack(ts))
                trial.append(np.hstack(tis))
            else:
                time.append(np.empty(0))
                trial.append(np.empty(0, dtype=np.int64))
        trialtime = np.column_stack([trl[:, 2], trl[:, 2] + trl[:, 1] - trl[:, 0]])
        return cls(label, time, trial, trialtime)
