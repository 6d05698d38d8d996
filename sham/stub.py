# encoding: utf-8
#
# Copyright (C) 2009 Alec Thomas <alec@swapoff.org>
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""Replacements for real method bodies.

A stub is either a literal :class:`Value`, returned verbatim:

>>> Value('davert').evaluate(None, (), {})
'davert'

...or a :class:`Behavior`, called like a method of the doubled object:

>>> class User(object):
...   login = 'davert'
>>> Behavior(lambda self, suffix: self.login + suffix).evaluate(
...     User(), ('@example.com',), {})
'davert@example.com'

:func:`to_stub` picks the variant for plain values in a stub map:

>>> to_stub(None)
Value(None)
>>> to_stub(len)  # doctest: +ELLIPSIS
Behavior(<built-in function len>)

Wrap a callable in a :class:`Value` explicitly to return it verbatim:

>>> to_stub(Value(len)).evaluate(None, (), {})
<built-in function len>
"""


__all__ = ['Stub', 'Value', 'Behavior', 'to_stub', 'to_stubs']


class Stub(object):
    """Base stub."""

    def evaluate(self, context, args, kwargs):
        raise NotImplementedError


class Value(Stub):
    """A literal return value."""

    def __init__(self, value):
        self.value = value

    def evaluate(self, context, args, kwargs):
        return self.value

    def __repr__(self):
        return 'Value(%r)' % (self.value,)


class Behavior(Stub):
    """A function called in place of the method.

    The function receives the doubled instance (or the class, for static
    calls) as its first argument, followed by the call's own arguments.
    """

    def __init__(self, function):
        self.function = function

    def evaluate(self, context, args, kwargs):
        return self.function(context, *args, **kwargs)

    def __repr__(self):
        return 'Behavior(%r)' % (self.function,)


def to_stub(value):
    if isinstance(value, Stub):
        return value
    if callable(value):
        return Behavior(value)
    return Value(value)


def to_stubs(stubs):
    """Convert a mapping of method names to stubs."""
    return dict((name, to_stub(value)) for name, value in (stubs or {}).items())


if __name__ == '__main__':
    import doctest
    doctest.testmod()
