# encoding: utf-8
#
# Copyright (C) 2009 Alec Thomas <alec@swapoff.org>
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""Exceptions shared across sham."""


__all__ = ['Error', 'ClassNotLoadedError', 'ClassNotDefinedError',
           'WeavingError', 'VerificationFailure']


class Error(Exception):
    """Base sham exception."""


class ClassNotLoadedError(Error):
    """A double was requested for a class that does not exist."""

    def __str__(self):
        return ('Class %s not loaded.\nIf you want to test an undefined '
                'class use the "spec" method.' % (self.args[0],))


class ClassNotDefinedError(Error):
    """Methods were requested for a class that does not exist."""

    def __str__(self):
        return 'Class %s not defined.' % (self.args[0],)


class WeavingError(Error):
    """A class could not have interceptors woven into it."""


class VerificationFailure(Error, AssertionError):
    """Recorded invocations did not satisfy an expectation."""
