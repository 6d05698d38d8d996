# encoding: utf-8
#
# Copyright (C) 2009 Alec Thomas <alec@swapoff.org>
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""A record of one observed call."""

import itertools

from sham.util import format_call


__all__ = ['STATIC', 'INSTANCE', 'InvocationRecord']


STATIC = 'static'
INSTANCE = 'instance'


_order = itertools.count(1)


class InvocationRecord(object):
    """A single intercepted call.

    :attr method: Method name.
    :attr args: Positional arguments, as a tuple.
    :attr kwargs: Keyword arguments, as a dict.
    :attr kind: STATIC or INSTANCE.
    :attr context: The instance, or for static calls the class, called on.
    :attr returned: Return value, filled in once the call completes.
    :attr raised: Exception raised by the call, if any.
    :attr order: Process-wide sequence number, increasing in call order.
    """

    __slots__ = ['method', 'args', 'kwargs', 'kind', 'context', 'returned',
                 'raised', 'completed', 'order']

    def __init__(self, method, args=(), kwargs=None, kind=INSTANCE,
                 context=None):
        self.method = method
        self.args = tuple(args)
        self.kwargs = dict(kwargs or {})
        self.kind = kind
        self.context = context
        self.returned = None
        self.raised = None
        self.completed = False
        self.order = next(_order)

    @property
    def is_static(self):
        return self.kind == STATIC

    def complete(self, returned=None, raised=None):
        self.returned = returned
        self.raised = raised
        self.completed = True

    def matches(self, args=None, kwargs=None):
        """Were the given arguments passed to this call?

        None matches anything.
        """
        if args is not None and list(self.args) != list(args):
            return False
        if kwargs is not None and self.kwargs != dict(kwargs):
            return False
        return True

    def __repr__(self):
        return '<InvocationRecord #%d %s>' % (
            self.order, format_call(self.method, self.args, self.kwargs))
