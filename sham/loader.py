# encoding: utf-8
#
# Copyright (C) 2009 Alec Thomas <alec@swapoff.org>
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""Locate classes by name and enumerate their methods.

Classes are named by their dotted import path:

>>> locate = ClassLocator()
>>> locate('collections.OrderedDict')
<class 'collections.OrderedDict'>

Bare names are looked up amongst the builtins:

>>> locate('ValueError')
<class 'ValueError'>

Anything that can not be imported, or is not a class, is not found:

>>> locate('collections.NoSuchThing') is None
True
>>> locate('os.path.join') is None
True
"""

import builtins
import importlib
import inspect

from sham.util import is_dunder


__all__ = ['MISSING', 'ClassLocator', 'MethodIntrospector', 'find_attribute',
           'unwrap', 'is_routine']


MISSING = object()


def unwrap(raw):
    """Return the attribute an interceptor stands in for."""
    if getattr(type(raw), '__sham_woven__', False):
        return raw.original
    return raw


def is_routine(raw):
    return (inspect.isroutine(raw) or
            isinstance(raw, (staticmethod, classmethod)))


def find_attribute(cls, name):
    """Find the raw, unwoven, class attribute "name" along the MRO of cls.

    :returns: Tuple of (defining class, raw attribute), or (None, MISSING).
    """
    for klass in cls.__mro__:
        if name in vars(klass):
            raw = unwrap(vars(klass)[name])
            if raw is MISSING:
                continue
            return klass, raw
    return None, MISSING


class ClassLocator(object):
    """The class-existence query."""

    def __call__(self, name):
        return self.locate(name)

    def exists(self, name):
        return self.locate(name) is not None

    def locate(self, name):
        """Resolve a dotted name to a class, or None.

        :raises ImportError: A module along the name exists but fails to
                             import.
        """
        parts = name.split('.')
        if not all(parts):
            return None
        if len(parts) == 1:
            found = getattr(builtins, name, None)
            return found if inspect.isclass(found) else None
        for i in range(len(parts) - 1, 0, -1):
            module = '.'.join(parts[:i])
            try:
                found = importlib.import_module(module)
            except ModuleNotFoundError as e:
                if e.name and (module == e.name or
                               module.startswith(e.name + '.')):
                    continue
                raise
            for part in parts[i:]:
                found = getattr(found, part, None)
                if found is None:
                    return None
            return found if inspect.isclass(found) else None
        return None


class MethodIntrospector(object):
    """The reflective method-enumeration query."""

    def __call__(self, cls):
        return self.public_methods(cls)

    def public_methods(self, cls):
        """Public method names of cls, excluding constructors and destructors.

        >>> class User(object):
        ...   def __init__(self): pass
        ...   def __del__(self): pass
        ...   def _secret(self): pass
        ...   def save(self): pass
        ...   @staticmethod
        ...   def table_name(): pass
        >>> MethodIntrospector().public_methods(User)
        ['save', 'table_name']
        """
        return self.routines(cls, private=False)

    def routines(self, cls, private=True):
        """Names of all non-dunder routines cls has, own or inherited.

        :param private: Include _single_underscore names.
        """
        names = set()
        for klass in cls.__mro__:
            if klass is object:
                continue
            for name, raw in vars(klass).items():
                if is_dunder(name):
                    continue
                if name.startswith('_') and not private:
                    continue
                if is_routine(unwrap(raw)):
                    names.add(name)
        return sorted(names)


if __name__ == '__main__':
    import doctest
    doctest.testmod()
