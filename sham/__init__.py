# encoding: utf-8
#
# Copyright (C) 2009 Alec Thomas <alec@swapoff.org>
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""sham /ʃæm/ noun, adjective, verb, shammed, sham⋅ming. –noun 1. something
that is not what it purports to be; a spurious imitation. –adjective 2.
pretended; counterfeit. –verb (used with object) 3. to produce an imitation
of.

Sham - Test doubles for any Python class or object.
"""

__author__ = 'Alec Thomas <alec@swapoff.org>'

__all__ = ['Error', 'ClassNotLoadedError', 'ClassNotDefinedError',
           'WeavingError', 'VerificationFailure', 'double', 'spec', 'methods',
           'clean', 'clean_invocations']

# Try and determine the version of sham according to the installed metadata.
from importlib.metadata import version, PackageNotFoundError
try:
    __version__ = version('sham')
except PackageNotFoundError:
    __version__ = None  # unknown


from sham.core import (Error, ClassNotLoadedError, ClassNotDefinedError,
                       WeavingError, VerificationFailure)
from sham.test import double, spec, methods, clean, clean_invocations
