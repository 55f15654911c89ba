"""Core helpers shared by the rest of spikexcorr"""

import warnings

import numpy as np


class ConfigError(ValueError):
    """Invalid or mutually incompatible cross-correlation options"""


class dictattr(dict):
    """Dictionary with attribute access. Copied from dimstim.Core"""
    def __init__(self, *args, **kwargs):
        super(dictattr, self).__init__(*args, **kwargs)
        for k, v in kwargs.items():
            # call our own __setitem__ so we get keys as attribs even on kwarg init:
            self.__setitem__(k, v)

    def __getattr__(self, key):
        try:
            return self[key]
        except KeyError:
            raise AttributeError('%r object has no attribute %r' % ('dictattr', key))

    def __setattr__(self, key, val):
        self[key] = val

    def __setitem__(self, key, val):
        super(dictattr, self).__setitem__(key, val)
        # key isn't a number or a string starting with a number:
        if key.__class__ == str and not key[0].isdigit():
            key = key.replace(' ', '_') # get rid of any spaces
            self.__dict__[key] = val # make the key show up as an attrib upon dir()

    def __delitem__(self, key):
        super(dictattr, self).__delitem__(key)
        self.__dict__.pop(key, None)


def warn(msg):
    warnings.warn(msg, category=RuntimeWarning, stacklevel=2)

def iterable(x):
    """Check if the input is iterable, stolen from numpy.iterable()"""
    try:
        iter(x)
        return True
    except TypeError:
        return False

def intround(n):
    """Round to the nearest integer, return an integer. Works on arrays.
    Saves on parentheses, nothing more"""
    if iterable(n): # it's a sequence, return as an int64 array
        return np.int64(np.round(n))
    else: # it's a scalar, return as normal Python int
        return int(round(n))

def issorted(x):
    """Check if x is sorted"""
    try:
        if x.dtype.kind == 'u':
            # x is unsigned int array, risk of int underflow in np.diff
            x = np.int64(x)
    except AttributeError:
        pass # no dtype, not an array
    return (np.diff(x) >= 0).all() # is difference between consecutive entries >= 0?

def isstr(x):
    return isinstance(x, str)
