# encoding: utf-8
#
# Copyright (C) 2009 Alec Thomas <alec@swapoff.org>
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""Utility functions."""


__all__ = ['to_boolean', 'to_list', 'qualified_name', 'format_call',
           'is_dunder']


def to_boolean(value):
    """Convert a "human" readable value to a bool.

    :param value: String to convert.
    :return: True or False.
    """
    return value in ('yes', 'true', 'on', 'aye', '1', 1, True)


def to_list(value, sep=',', keep_empty=False):
    """Convert a token-separated string to a list."""
    if isinstance(value, str):
        items = [item.strip() for item in value.split(sep)]
    else:
        items = list(value or [])
    if not keep_empty:
        items = [item for item in items if item]
    return items


def qualified_name(cls):
    """Return the dotted import path of a class.

    >>> qualified_name(ValueError)
    'builtins.ValueError'
    """
    return '%s.%s' % (cls.__module__, cls.__qualname__)


def format_call(name, args=(), kwargs=None):
    """Render a call the way it would appear in source.

    >>> format_call('save', (1, 'two'), {'force': True})
    "save(1, 'two', force=True)"
    """
    params = [repr(arg) for arg in args]
    params.extend('%s=%r' % item for item in sorted((kwargs or {}).items()))
    return '%s(%s)' % (name, ', '.join(params))


def is_dunder(name):
    """Is name a "__special__" Python name?"""
    return len(name) > 4 and name.startswith('__') and name.endswith('__')


if __name__ == '__main__':
    import doctest
    doctest.testmod()
