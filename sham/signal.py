# encoding: utf-8
#
# Copyright (C) 2009 Alec Thomas <alec@swapoff.org>
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""Signal/event handling.

A Signal is an object for relaying events to a set of receivers.
"""


__all__ = ['Signal']


class Signal(object):
    """A Signal tracks a set of receivers and delivers messages to them.

    Create a new Signal:

    >>> on_clean = Signal()

    Register a callback decorating a function with the :class:`Signal`:

    >>> @on_clean.connect
    ... def forget(target):
    ...   return 'forgot %s' % target

    Any number of callbacks can be bound to a :class:`Signal`:

    >>> @on_clean.connect
    ... def unweave(target):
    ...   return 'unwove %s' % target

    Call the signal to deliver an event. The return values for all callbacks
    are collected and returned in a list:

    >>> on_clean('User')
    ['forgot User', 'unwove User']
    """

    def __init__(self):
        self._callbacks = []

    def connect(self, callback):
        self._callbacks.append(callback)
        return callback

    def __call__(self, *args, **kwargs):
        return [callback(*args, **kwargs) for callback in self._callbacks]

    def disconnect(self, callback):
        self._callbacks.remove(callback)

    def __iter__(self):
        return iter(self._callbacks)


if __name__ == '__main__':
    import doctest
    doctest.testmod()
