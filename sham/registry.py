# encoding: utf-8
#
# Copyright (C) 2009 Alec Thomas <alec@swapoff.org>
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""The registry of doubled classes and objects.

Each doubled class or object has one :class:`Entry`, holding its stubs and
the calls recorded against it:

>>> class User(object):
...   def save(self): pass
>>> from sham.stub import Value
>>> registry = Registry()
>>> entry = registry.register(User, {'save': Value(False)})
>>> registry.register(User, {'delete': Value(True)}) is entry
True
>>> sorted(entry.stubs)
['delete', 'save']

Objects are keyed by identity, not equality:

>>> user = User()
>>> registry.register(user, {}) is registry.register(User(), {})
False

Cleaning a target forgets everything about it:

>>> registry.clean(User)
>>> registry.entry_for(User) is None
True
"""

import inspect

from sham.core import ClassNotLoadedError
from sham.invocation import STATIC
from sham.loader import ClassLocator
from sham.logging import log
from sham.signal import Signal


__all__ = ['Entry', 'Registry', 'is_proxy']


def is_proxy(target):
    return getattr(type(target), '__sham_proxy__', False) is True


class Entry(object):
    """Stub definitions and invocation history of one doubled target."""

    def __init__(self, target):
        self.target = target
        self.stubs = {}
        self.invocations = []

    def __repr__(self):
        return '<Entry %r stubs=%s calls=%d>' % (
            self.target, sorted(self.stubs), len(self.invocations))


class Registry(object):
    """Process-wide map of doubled targets.

    :attr on_clean: :class:`Signal` fired with the cleaned target, or None
                    when every target was cleaned.
    """

    def __init__(self, locate=None):
        """Construct a new Registry.

        :param locate: Class-existence query, called with a dotted name and
                       returning the class or None.
        """
        self._locate = locate or ClassLocator()
        self._classes = {}
        self._objects = {}
        self.on_clean = Signal()

    def resolve_identity(self, target):
        """Return the canonical target for a class, object, name or proxy.

        Names that do not resolve to a class are returned unchanged.
        """
        if is_proxy(target):
            target = object.__getattribute__(target, '_target')
        if isinstance(target, str):
            cls = self._locate(target)
            if cls is not None:
                return cls
        return target

    def register_class(self, cls, stubs):
        """Merge stubs into the entry of a class, creating it if needed.

        :raises ClassNotLoadedError: cls is a name that does not resolve.
        """
        cls = self.resolve_identity(cls)
        if isinstance(cls, str):
            raise ClassNotLoadedError(cls)
        entry = self._classes.get(cls)
        if entry is None:
            entry = self._classes[cls] = Entry(cls)
        entry.stubs.update(stubs)
        log.debug('Registered stubs %s for class %s', sorted(stubs), cls)
        return entry

    def register_object(self, obj, stubs):
        """Merge stubs into the entry of an object, creating it if needed."""
        entry = self._objects.get(id(obj))
        if entry is None:
            entry = self._objects[id(obj)] = Entry(obj)
        entry.stubs.update(stubs)
        log.debug('Registered stubs %s for object %r', sorted(stubs), obj)
        return entry

    def register(self, target, stubs):
        target = self.resolve_identity(target)
        if isinstance(target, str) or inspect.isclass(target):
            return self.register_class(target, stubs)
        return self.register_object(target, stubs)

    def entry_for(self, target):
        """Return the entry for target, or None if it is not doubled."""
        target = self.resolve_identity(target)
        if isinstance(target, str):
            return None
        if inspect.isclass(target):
            return self._classes.get(target)
        return self._objects.get(id(target))

    def entries_for(self, context, kind):
        """Entries applying to a call, most specific first.

        For an instance call that is the instance itself followed by each
        doubled class along its MRO. For a static call context is the class.
        """
        entries = []
        if kind == STATIC:
            cls = context
        else:
            cls = type(context)
            entry = self._objects.get(id(context))
            if entry is not None:
                entries.append(entry)
        for klass in cls.__mro__:
            entry = self._classes.get(klass)
            if entry is not None:
                entries.append(entry)
        return entries

    def find_stub(self, context, kind, method):
        for entry in self.entries_for(context, kind):
            stub = entry.stubs.get(method)
            if stub is not None:
                return stub
        return None

    def invocations(self, target, method=None):
        """Recorded calls against target, in call order."""
        entry = self.entry_for(target)
        if entry is None:
            return []
        if method is None:
            return list(entry.invocations)
        return [i for i in entry.invocations if i.method == method]

    def classes(self):
        return list(self._classes)

    def objects(self):
        return [entry.target for entry in self._objects.values()]

    def needs_class(self, cls):
        """Does any doubled target rely on cls being woven?"""
        if cls in self._classes:
            return True
        return any(type(entry.target) is cls
                   for entry in self._objects.values())

    def clean(self, target=None):
        """Forget stubs and history of target, or of every target."""
        if target is None:
            self._classes.clear()
            self._objects.clear()
            log.debug('Cleaned all doubles')
            self.on_clean(None)
            return
        target = self.resolve_identity(target)
        if isinstance(target, str):
            return
        if inspect.isclass(target):
            found = self._classes.pop(target, None)
        else:
            found = self._objects.pop(id(target), None)
        if found is not None:
            log.debug('Cleaned double of %r', target)
            self.on_clean(target)

    def clean_invocations(self, target=None):
        """Forget recorded calls of target, or of every target.

        Stub definitions are kept.
        """
        if target is None:
            entries = list(self._classes.values()) + list(self._objects.values())
        else:
            entry = self.entry_for(target)
            entries = [entry] if entry is not None else []
        for entry in entries:
            entry.invocations = []
