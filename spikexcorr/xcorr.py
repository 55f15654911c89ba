"""Cross-correlation histogram and shift predictor of pairs of channels in a SpikeData,
summed over trials"""

from collections import namedtuple
import numbers

import numpy as np
import matplotlib.pyplot as plt

from . import globals as defaults
from .core import ConfigError, dictattr, warn, intround, isstr
from .channelcmb import channelcmb
from .util import crossx

METHODS = ('xcorr', 'shiftpredictor')
OUTPUTUNITS = ('proportion', 'center', 'raw')
LATENCIES = ('maxperiod', 'minperiod', 'prestim', 'poststim')
OPTIONS = ('trials', 'latency', 'keeptrials', 'method', 'channelcmb', 'vartriallen',
           'biased', 'maxlag', 'binsize', 'outputunit')


def _checkbool(name, val):
    if not isinstance(val, (bool, np.bool_)):
        raise ConfigError('%s must be True or False, got %r' % (name, val))
    return bool(val)

def _checkpositive(name, val):
    if (isinstance(val, (bool, np.bool_)) or not isinstance(val, numbers.Real)
        or not np.isfinite(val) or val <= 0):
        raise ConfigError('%s must be a positive number of sec, got %r' % (name, val))
    return float(val)

def _checkchoice(name, val, choices):
    if not isstr(val) or val not in choices:
        raise ConfigError('%s must be one of %r, got %r' % (name, choices, val))
    return val

def _checktrials(trials):
    if isstr(trials):
        if trials != 'all':
            raise ConfigError('trials must be "all", a boolean mask or trial indices, got %r'
                              % trials)
        return trials
    if isinstance(trials, (set, frozenset)):
        trials = sorted(trials)
    trials = np.asarray(trials).ravel()
    if trials.size == 0:
        return ()
    if trials.dtype.kind == 'b':
        return tuple([ bool(t) for t in trials ])
    if trials.dtype.kind not in 'iu':
        raise ConfigError('trial indices must be integers, got %r' % (trials,))
    if trials.min() < 0:
        raise ConfigError('trial indices must be >= 0, got %r' % (trials,))
    return tuple(sorted(set([ int(t) for t in trials ])))

def _checklatency(latency):
    if isstr(latency):
        return _checkchoice('latency', latency, LATENCIES)
    try:
        latency = np.asarray(latency, dtype=np.float64).ravel()
    except (TypeError, ValueError):
        raise ConfigError('latency must be [start, end] in sec or one of %r, got %r'
                          % (LATENCIES, latency))
    if len(latency) != 2 or not latency[0] < latency[1]:
        raise ConfigError('latency must be an ascending [start, end] pair, got %r'
                          % (latency,))
    return tuple([ float(t) for t in latency ])


class XCorrConfig(namedtuple('XCorrConfig', OPTIONS)):
    """Immutable set of cross-correlation options. Build with create(), which fills in
    defaults from spikexcorr.globals and checks every value. Resolving it against a
    SpikeData returns a new XCorrConfig, self is never modified"""
    __slots__ = ()

    @classmethod
    def create(cls, **kwargs):
        unknown = set(kwargs) - set(OPTIONS)
        if unknown:
            raise ConfigError('unknown option(s) %s, allowed are %s'
                              % (', '.join(sorted(unknown)), ', '.join(OPTIONS)))
        opts = {}
        for name in OPTIONS:
            opts[name] = kwargs.get(name, getattr(defaults, name.upper()))
        opts['trials'] = _checktrials(opts['trials'])
        opts['latency'] = _checklatency(opts['latency'])
        for name in ['keeptrials', 'vartriallen', 'biased']:
            opts[name] = _checkbool(name, opts[name])
        opts['method'] = _checkchoice('method', opts['method'], METHODS)
        opts['outputunit'] = _checkchoice('outputunit', opts['outputunit'], OUTPUTUNITS)
        for name in ['maxlag', 'binsize']:
            opts[name] = _checkpositive(name, opts[name])
        return cls(**opts)


def _addpair(a, ci0, ci1, x):
    """Add correlogram x of channel ci1 relative to ci0 to a, and its lag reversed version
    to the mirrored entry. For an auto pair both land on the same entry, so the summed
    auto correlogram is twice that of the per trial one"""
    a[ci0, ci1] += x
    a[ci1, ci0] += x[::-1]

def _setpair(a, ci0, ci1, x):
    a[ci0, ci1] = x
    a[ci1, ci0] = x[::-1]


class SpikeXCorr(object):
    """Cross-correlation histograms of all requested channel pairs in spike, summed over
    the selected trials. With method='shiftpredictor', correlate each channel's spikes in
    each trial against the other channel's spikes in the preceding trial instead, which
    estimates the correlation expected from rate covariation alone. All options are
    checked, and trials selected, on init, so that calc() can't fail on the options"""
    def __init__(self, spike, **kwargs):
        cfg = XCorrConfig.create(**kwargs)
        self.spike = spike
        pairs = channelcmb(cfg.channelcmb, spike.label)
        self.chansel = sorted(set([ chani for pair in pairs for chani in pair ]))
        self.label = [ spike.label[chani] for chani in self.chansel ]

        trials = self.resolve_trials(cfg.trials)
        begs, ends = spike.trialtime[list(trials)].T
        latency = self.resolve_latency(cfg.latency, begs, ends)
        maxlag = cfg.maxlag
        if maxlag > latency[1] - latency[0]:
            warn('correcting maxlag since it exceeds the latency period')
            maxlag = latency[1] - latency[0]
        self.nlags = intround(maxlag / cfg.binsize)
        self.lags = np.arange(-self.nlags, self.nlags+1) * cfg.binsize
        trials = self.select_trials(trials, begs, ends, latency, maxlag, cfg)
        self.cfg = cfg._replace(trials=trials, latency=latency, maxlag=maxlag,
                                channelcmb=tuple(pairs))

    nbins = property(lambda self: 2*self.nlags + 1)
    ntrials = property(lambda self: len(self.cfg.trials))
    trials = property(lambda self: self.cfg.trials)
    pairs = property(lambda self: self.cfg.channelcmb)

    def resolve_trials(self, trials):
        """Return sorted tuple of 0-based trial indices to consider"""
        ntrials = self.spike.ntrials
        if trials == 'all':
            trials = tuple(range(ntrials))
        elif len(trials) and isinstance(trials[0], bool):
            if len(trials) != ntrials:
                raise ConfigError('boolean trial mask has length %d, but there are %d trials'
                                  % (len(trials), ntrials))
            trials = tuple([ triali for triali, keep in enumerate(trials) if keep ])
        if len(trials) == 0:
            raise ConfigError('no trials were selected in trials')
        if max(trials) >= ntrials:
            raise ConfigError('maximum trial index (%d) in trials exceeds number of trials '
                              '(%d)' % (max(trials), ntrials))
        return trials

    def resolve_latency(self, latency, begs, ends):
        """Return analysis window [start, end] in sec, clipped to the available data"""
        tmin, tmax = begs.min(), ends.max()
        if latency == 'minperiod':
            latency = begs.max(), ends.min()
        elif latency == 'maxperiod':
            latency = tmin, tmax
        elif latency == 'prestim':
            latency = tmin, 0.0
        elif latency == 'poststim':
            latency = 0.0, tmax
        t0, t1 = latency
        if t0 < tmin:
            warn('correcting begin latency of analysis window')
            t0 = tmin
        if t1 > tmax:
            warn('correcting end latency of analysis window')
            t1 = tmax
        if not t0 < t1:
            raise ConfigError('latency window [%g, %g] contains no data' % (t0, t1))
        return float(t0), float(t1)

    def select_trials(self, trials, begs, ends, latency, maxlag, cfg):
        """Return the subset of trials that last at least maxlag and overlap latency by
        more than maxlag. If not vartriallen, keep only trials that fully cover latency.
        Check that the shift predictor can be calculated from what's left"""
        t0, t1 = latency
        fulldur = (ends - begs) >= maxlag
        overlaps = (ends > t0 + maxlag) & (begs < t1 - maxlag)
        haswindow = np.ones(len(trials), dtype=bool)
        if not cfg.vartriallen:
            haswindow = (begs <= t0) & (ends >= t1)
        keep = fulldur & overlaps & haswindow
        selected = tuple([ triali for triali, k in zip(trials, keep) if k ])
        if len(selected) == 0:
            warn('no trials were selected')
        shiftpredictor = cfg.method == 'shiftpredictor'
        if shiftpredictor and len(selected) < 2:
            raise ConfigError('shift predictor can only be calculated with more than 1 '
                              'selected trial')
        if shiftpredictor and cfg.vartriallen and len(selected) != len(trials):
            raise ConfigError('vartriallen=True and the shift predictor method are only '
                              'possible when all trials contain the full window period')
        return selected

    def calc(self):
        """Calculate the summed (and optionally per trial) correlograms, rescale and
        normalize them, and return them in a dictattr"""
        spike, cfg = self.spike, self.cfg
        shiftpredictor = cfg.method == 'shiftpredictor'
        chansel, nbins, ntrials = self.chansel, self.nbins, self.ntrials
        nchans = len(chansel)
        # map from channel index in spike to position in the output arrays:
        cis = dict([ (chani, ci) for ci, chani in enumerate(chansel) ])
        print('%d trials, %d channel pairs, %d lags' % (ntrials, len(self.pairs), nbins))

        s = np.zeros((nchans, nchans, nbins))
        if cfg.keeptrials:
            singletrials = np.zeros((ntrials, nchans, nchans, nbins))
            if shiftpredictor and ntrials > 0:
                singletrials[0] = np.nan # no preceding trial to correlate with
        prevspikes = None
        for ti, triali in enumerate(cfg.trials):
            spikes = dict([ (chani, spike.cut(chani, triali, cfg.latency))
                            for chani in chansel ])
            for chani0, chani1 in self.pairs:
                ci0, ci1 = cis[chani0], cis[chani1]
                if not shiftpredictor:
                    x = crossx(spikes[chani0], spikes[chani1], cfg.binsize, nbins)
                    _addpair(s, ci0, ci1, x)
                    if cfg.keeptrials:
                        _setpair(singletrials[ti], ci0, ci1, x)
                elif ti > 0:
                    # this trial's chani0 against previous trial's chani1, and vice versa:
                    x = (crossx(spikes[chani0], prevspikes[chani1], cfg.binsize, nbins) +
                         crossx(prevspikes[chani0], spikes[chani1], cfg.binsize, nbins))
                    _addpair(s, ci0, ci1, x)
                    if cfg.keeptrials:
                        # sum of both halves, not just the last one written as in FieldTrip:
                        _setpair(singletrials[ti], ci0, ci1, x / 2)
            prevspikes = spikes

        if shiftpredictor:
            # scale to same magnitude as the raw correlogram over the same trials:
            s *= ntrials / (2 * (ntrials - 1))
        if cfg.outputunit != 'raw':
            if cfg.outputunit == 'proportion':
                divisor = np.nansum(s, axis=2)
            else: # 'center'
                divisor = s[:, :, self.nlags].copy()
            # channel pairs without any spikes come out as nan:
            with np.errstate(divide='ignore', invalid='ignore'):
                s = s / divisor[:, :, np.newaxis]
                if cfg.keeptrials:
                    singletrials = singletrials / divisor[np.newaxis, :, :, np.newaxis]

        stat = dictattr()
        stat[cfg.method] = s
        stat.time = self.lags
        stat.dimord = 'chan_chan_time'
        if cfg.keeptrials:
            stat.trial = singletrials
            stat.dimord = 'trial_chan_chan_time'
        stat.label = list(self.label)
        stat.cfg = cfg
        self.stat = stat
        return stat

    def chanpos(self, chan):
        """Return position in self.label of chan, given as a label or a position"""
        if isstr(chan):
            try:
                return self.label.index(chan)
            except ValueError:
                raise ValueError('channel %r not in %r' % (chan, self.label))
        return int(chan)

    def plot(self, chan0, chan1, figsize=(7.5, 6.5)):
        """Plot correlogram of chan1 relative to chan0, given as labels or positions in
        self.label. A peak at positive lag means chan1 tends to fire after chan0"""
        try:
            stat = self.stat
        except AttributeError:
            stat = self.calc()
        ci0, ci1 = self.chanpos(chan0), self.chanpos(chan1)
        cfg = self.cfg
        n = stat[cfg.method][ci0, ci1]
        binw = cfg.binsize * 1000 # ms
        t = self.lags * 1000 # ms
        f = plt.figure(figsize=figsize)
        a = f.add_subplot(111)
        a.bar(t, n, width=binw, color='k', edgecolor='k') # bars centered on lags
        a.set_xlim(t[0] - binw/2, t[-1] + binw/2)
        a.set_xlabel('lag (ms)')
        ylabels = {'raw': 'count', 'proportion': 'proportion of coincidences',
                   'center': 'count relative to zero lag'}
        a.set_ylabel(ylabels[cfg.outputunit])
        title = ('%s: %s relative to %s, binwidth: %.2f ms'
                 % (cfg.method, self.label[ci1], self.label[ci0], binw))
        a.set_title(title)
        f.tight_layout(pad=0.3) # crop figure to contents
        return f


def spike_xcorr(spike, **kwargs):
    """Return cross-correlation statistic of spike. See SpikeXCorr and
    spikexcorr.globals for the options"""
    return SpikeXCorr(spike, **kwargs).calc()
