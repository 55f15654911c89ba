"""Resolve requested channel combinations to pairs of channel indices"""

import numpy as np

from .core import ConfigError, isstr, iterable


def _chanis(chan, label):
    """Return list of channel indices matching chan, which is a label, an integer
    index, or 'all'"""
    if isstr(chan):
        if chan == 'all':
            return list(range(len(label)))
        try:
            return [label.index(chan)]
        except ValueError:
            raise ConfigError('channel %r not found in %r' % (chan, label))
    if isinstance(chan, (int, np.integer)) and not isinstance(chan, bool):
        chani = int(chan)
        if not 0 <= chani < len(label):
            raise ConfigError('channel index %d out of range for %d channels'
                              % (chani, len(label)))
        return [chani]
    raise ConfigError('channel must be a label, an index or "all", got %r' % (chan,))

def _ispair(cmb):
    """Is cmb a single (chan0, chan1) pair, as opposed to a sequence of pairs?"""
    if isstr(cmb) or len(cmb) != 2:
        return False
    return all([ isstr(c) or isinstance(c, (int, np.integer)) for c in cmb ])

def channelcmb(cmb, label, includeauto=True):
    """Return a sorted list of unique (i, j) channel index pairs with i <= j, given cmb,
    which is 'all', a single pair, or a sequence of pairs. Each element of a pair is a
    label, an integer index into label, or 'all'. Pairs (x, y) and (y, x) resolve to the
    same combination. If includeauto, pairs of a channel with itself are kept"""
    label = [ str(l) for l in label ]
    if isstr(cmb):
        if cmb != 'all':
            raise ConfigError('channelcmb must be "all" or a sequence of pairs, got %r' % cmb)
        cmbs = [('all', 'all')]
    elif not iterable(cmb):
        raise ConfigError('channelcmb must be "all" or a sequence of pairs, got %r' % (cmb,))
    elif _ispair(cmb):
        cmbs = [cmb]
    else:
        cmbs = list(cmb)
    pairs = set()
    for pair in cmbs:
        if isstr(pair) or len(pair) != 2:
            raise ConfigError('channel combination %r is not a pair' % (pair,))
        chanis0 = _chanis(pair[0], label)
        chanis1 = _chanis(pair[1], label)
        for chani0 in chanis0:
            for chani1 in chanis1:
                if chani0 == chani1 and not includeauto:
                    continue
                pairs.add((min(chani0, chani1), max(chani0, chani1)))
    if len(pairs) == 0:
        raise ConfigError('no channel was selected')
    return sorted(pairs)
