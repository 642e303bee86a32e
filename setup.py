# -*- coding: utf-8 -*-
#
# Copyright (c) 2016-2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


import sys
import os


if sys.version_info < (3, 6):
    sys.exit('tbdyaml requires Python 3.6+')

from setuptools import setup


# Extract the version from version.py
fname = os.path.join(os.path.dirname(__file__), 'tbdyaml', 'version.py')
with open(fname, 'r', encoding='utf8') as f:
    t = ''.join([line for line in f.readlines() if line.startswith('__version__')])
    if not t:
        raise RuntimeError('Failed to extract version from "version.py"')
    c = compile(t, 'tbdyaml/version.py', 'exec')
    exec(c)
version = __version__

fname = os.path.join(os.path.dirname(__file__), 'README.rst')
with open(fname, encoding='utf8') as f:
    long_description = f.read()


setup(name = 'tbdyaml',
      version = version,
      py_modules = [],
      packages = ['tbdyaml'],
      description = 'Parser for the YAML subset used by text-based dylib (tbd) files',
      long_description = long_description,
      author = 'Geoffrey M. Poore',
      author_email = 'gpoore@gmail.com',
      license = 'BSD',
      keywords = ['yaml', 'tbd', 'parser'],
      python_requires = '>=3.6',
      extras_require = {'test': ['pytest']},
      # https://pypi.python.org/pypi?:action=list_classifiers
      classifiers = [
          'Development Status :: 3 - Alpha',
          'Intended Audience :: Developers',
          'License :: OSI Approved :: BSD License',
          'Operating System :: OS Independent',
          'Programming Language :: Python',
          'Programming Language :: Python :: 3',
          'Topic :: Software Development :: Libraries',
          'Topic :: Text Processing',
      ]
)
