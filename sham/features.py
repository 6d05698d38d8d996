# encoding: utf-8
#
# Copyright (C) 2009 Alec Thomas <alec@swapoff.org>
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""A loosely coupled feature broker.

A feature is an arbitrary object referenced by a feature key. The kernel
looks up its collaborators (the class locator and the method introspector)
through a broker, so they can be swapped without the engine knowing.

>>> features = FeatureBroker()
>>> features.provide('class_locator', lambda name: None)
>>> features.require('class_locator')('app.models.User') is None
True

Providing a feature twice is an error; use replace() to swap one out:

>>> features.provide('class_locator', lambda name: int)
Traceback (most recent call last):
...
sham.features.Error: Feature 'class_locator' can not be redeclared.
>>> features.replace('class_locator', lambda name: int)
>>> features.require('class_locator')('int')
<class 'int'>

Inspired by:
    http://aspn.activestate.com/ASPN/Cookbook/Python/Recipe/413268
"""


from sham.core import Error


__all__ = ['Error', 'UnknownFeature', 'deferred', 'FeatureBroker']


class Error(Error):
    """Base feature exception."""


class UnknownFeature(Error):
    """Unkown feature."""

    def __str__(self):
        return 'Unknown feature %r' % (self.args[0],)


class deferred(object):
    """Defer a callable until it is "required".

    >>> features = FeatureBroker()
    >>> def counter():
    ...   counter.count += 1
    ...   return counter.count
    >>> counter.count = 0
    >>> features.provide('counter', deferred(counter))
    >>> features.require('counter')
    1
    >>> features.require('counter')
    2
    """

    def __init__(self, callback, *args, **kwargs):
        self.callback = callback
        self.args = args
        self.kwargs = kwargs

    def __call__(self):
        """Call the deferred object."""
        return self.callback(*self.args, **self.kwargs)


class FeatureBroker(object):
    """Register and locate features."""

    def __init__(self):
        """Construct a new FeatureBroker."""
        self._features = {}

    def __contains__(self, feature):
        return feature in self._features

    def require(self, feature):
        """Require a feature.

        :param feature: A feature can be any hashable object.

        :returns: The required feature.

        :raises UnknownFeature: If the feature could not be found.
        """
        try:
            callback = self._features[feature]
        except KeyError:
            raise UnknownFeature(feature)
        return callback()

    def provide(self, feature, what):
        """Register an object as a feature.

        :param feature: A key uniquely identifying the feature.
        :param what: The object tied to the feature key.
        """
        if feature in self._features:
            raise Error('Feature %r can not be redeclared.' % (feature,))
        self._features[feature] = self._wrap(what)

    def replace(self, feature, what):
        """Register an object as a feature, replacing any existing one."""
        self._features[feature] = self._wrap(what)

    def remove(self, feature):
        """Unregister a feature.

        :raises UnknownFeature: Feature does not exist.
        """
        try:
            del self._features[feature]
        except KeyError:
            raise UnknownFeature(feature)

    # Internal methods
    def _wrap(self, what):
        if isinstance(what, deferred):
            return what
        return lambda: what


if __name__ == '__main__':
    import doctest
    doctest.testmod()
