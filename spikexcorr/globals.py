"""Default cross-correlation options. These can be modified by the user at run time,
before constructing a SpikeXCorr, for example:

>>> import spikexcorr.globals
>>> spikexcorr.globals.MAXLAG = 0.05

Any option passed explicitly to SpikeXCorr overrides the value here."""

"""Trial selection: 'all', a boolean mask, or a sequence of 0-based trial indices"""
TRIALS = 'all'

"""Analysis window in sec: [start, end], or one of 'maxperiod', 'minperiod', 'prestim'
(t <= 0) or 'poststim' (t >= 0)"""
LATENCY = 'maxperiod'

"""Keep the per-trial correlograms in addition to their sum"""
KEEPTRIALS = True

"""'xcorr' for the plain cross-correlogram, 'shiftpredictor' to correlate each trial
against the preceding one"""
METHOD = 'xcorr'

"""Channel pairs: 'all', a pair of labels/indices, or a sequence of such pairs"""
CHANNELCMB = 'all'

"""Accept trials of variable length. If False, only trials that fully cover the latency
window are used. The shift predictor demands that consecutive trials hold the same
amount of data"""
VARTRIALLEN = True

"""Accepted for compatibility, currently has no effect on the output"""
BIASED = False

"""Maximum lag and bin width of the correlogram, in sec"""
MAXLAG = 0.01 # sec
BINSIZE = 0.001 # sec

"""'raw' bin counts, 'proportion' (each correlogram sums to 1), or 'center' (each
correlogram is scaled so that its zero lag bin is 1)"""
OUTPUTUNIT = 'proportion'
