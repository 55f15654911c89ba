r"""Cross-correlation histograms and shift predictors of trial-segmented spike trains

          data flow:

            SpikeData              spike times, trial membership, trial bounds
                |
            SpikeXCorr             options, channel pairs, trial selection
                |
              calc()               per trial, per pair: util.crossx()
                |
             dictattr              xcorr or shiftpredictor, time, label, trial

Typical use:

>>> from spikexcorr import SpikeData, spike_xcorr
>>> stat = spike_xcorr(spike, maxlag=0.05, binsize=0.001, method='shiftpredictor')
"""

__authors__ = ["Martin Spacek"]
__version__ = '0.1'

from .core import ConfigError, dictattr
from .spike import SpikeData
from .channelcmb import channelcmb
from .util import xcorr, crossx
from .xcorr import XCorrConfig, SpikeXCorr, spike_xcorr
