"""spikexcorr installation script

to create source distribution and force tar.gz file:
>>> python setup.py sdist --formats=gztar
to install in development mode, with test dependencies:
>>> pip install -e .[test]
"""

import os
import re

from setuptools import setup

# read version without importing the package, which needs numpy:
with open(os.path.join(os.path.dirname(__file__), 'spikexcorr', '__init__.py')) as f:
    __version__ = re.search(r"__version__ = '(.*)'", f.read()).group(1)

setup(name='spikexcorr',
      version=__version__,
      license='BSD',
      description='Cross-correlation histograms and shift predictors of spike trains',
      author='Martin Spacek',
      author_email='mspacek at interchange ubc ca',
      #long_description='',
      packages=['spikexcorr'],
      python_requires='>=3.7',
      install_requires=['numpy', 'matplotlib'],
      extras_require={'test': ['pytest']})
