# encoding: utf-8
#
# Copyright (C) 2009 Alec Thomas <alec@swapoff.org>
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""Weave call interception into existing classes.

>>> class OrbitalLaser(object):
...   def fire(self, at):
...     return 'Fired at %s' % at

Weaving replaces each method of a class with an :class:`Interceptor`, which
hands every call to a dispatcher along with a way to proceed to the real
method:

>>> class Redirect(object):
...   def intercept(self, context, method, args, kwargs, kind, proceed):
...     return proceed('Sun')
...   def find_stub(self, context, kind, method):
...     return None
>>> weaver = Weaver(Redirect())
>>> weaver.weave(OrbitalLaser)
>>> OrbitalLaser().fire('Moon')
'Fired at Sun'

Unweaving restores the class exactly as it was:

>>> weaver.unweave(OrbitalLaser)
>>> OrbitalLaser().fire('Moon')
'Fired at Moon'
>>> 'fire' in OrbitalLaser.__dict__
True
"""

import functools
import types

from sham.core import WeavingError
from sham.invocation import INSTANCE, STATIC
from sham.loader import (MISSING, MethodIntrospector, find_attribute,
                         is_routine)
from sham.logging import log
from sham.util import qualified_name


__all__ = ['Interceptor', 'Weaver']


# Routines bound to the class they are accessed through.
CLASS_ROUTINES = (staticmethod, classmethod, types.ClassMethodDescriptorType)


class Interceptor(object):
    """A descriptor standing in for a method of a woven class.

    :attr original: The raw attribute replaced, as found along the MRO, or
                    MISSING for stub-only names.
    """

    __sham_woven__ = True

    def __init__(self, dispatcher, name, original):
        self.dispatcher = dispatcher
        self.name = name
        self.original = original

    def __get__(self, instance, owner=None):
        if owner is None:
            owner = type(instance)
        original = self.original
        if original is MISSING:
            if instance is None:
                return self._bind_missing(owner, STATIC, owner)
            return self._bind_missing(instance, INSTANCE, owner)
        if isinstance(original, CLASS_ROUTINES):
            return self._bind(owner, STATIC, original.__get__(instance, owner))
        if not hasattr(original, '__get__'):
            # Builtin functions stored on a class never bind.
            return self._bind(owner, STATIC, original)
        if instance is None:
            def unbound(context, *args, **kwargs):
                real = original.__get__(context, type(context))
                return self._bind(context, INSTANCE, real)(*args, **kwargs)
            return functools.update_wrapper(unbound, original)
        return self._bind(instance, INSTANCE, original.__get__(instance, owner))

    def _bind(self, context, kind, real):
        dispatcher, name = self.dispatcher, self.name

        def intercepted(*args, **kwargs):
            return dispatcher.intercept(context, name, args, kwargs, kind, real)
        return functools.update_wrapper(intercepted, real)

    def _bind_missing(self, context, kind, owner):
        # Stub-only names exist only while something stubs them.
        if self.dispatcher.find_stub(context, kind, self.name) is None:
            raise AttributeError('%r object has no attribute %r'
                                 % (owner.__name__, self.name))

        def missing(*args, **kwargs):
            raise AttributeError('%r object has no attribute %r'
                                 % (owner.__name__, self.name))
        missing.__name__ = self.name
        return self._bind(context, kind, missing)

    def __repr__(self):
        return '<Interceptor %s>' % self.name


class Weaver(object):
    """Installs and removes interceptors.

    :param dispatcher: Consulted by interceptors on each call.
    :param introspector: Enumerates the routines to weave.
    :param exclude: Module prefixes that may never be woven.
    :param private: Also weave _single_underscore methods.
    """

    def __init__(self, dispatcher, introspector=None, exclude=('builtins',),
                 private=True):
        self.dispatcher = dispatcher
        self.introspector = introspector or MethodIntrospector()
        self.exclude = list(exclude)
        self.private = private
        self._woven = {}

    def is_woven(self, cls):
        return cls in self._woven

    def woven(self):
        return list(self._woven)

    def weave(self, cls, names=()):
        """Intercept every routine of cls, plus the given names.

        Weaving an already woven class only adds names not yet intercepted.

        :raises WeavingError: cls is excluded or can not be modified.
        """
        self._check(cls)
        saved = self._woven.setdefault(cls, {})
        wanted = set(self.introspector.routines(cls, private=self.private))
        wanted.update(names)
        added = []
        for name in sorted(wanted):
            if name in saved:
                continue
            current = vars(cls).get(name, MISSING)
            if getattr(type(current), '__sham_woven__', False):
                continue
            _, raw = find_attribute(cls, name)
            if raw is not MISSING and not is_routine(raw):
                log.warning('Not weaving %s.%s, it is not a method',
                            qualified_name(cls), name)
                continue
            try:
                setattr(cls, name, Interceptor(self.dispatcher, name, raw))
            except (TypeError, AttributeError) as e:
                self._restore(cls, saved)
                del self._woven[cls]
                raise WeavingError('Can not weave %s: %s'
                                   % (qualified_name(cls), e))
            saved[name] = current
            added.append(name)
        if added:
            log.debug('Wove %s into %s', ', '.join(added), qualified_name(cls))

    def unweave(self, cls):
        """Restore cls to its state before it was woven."""
        saved = self._woven.pop(cls, None)
        if saved is None:
            return
        self._restore(cls, saved)
        log.debug('Unwove %s', qualified_name(cls))

    def unweave_all(self):
        for cls in list(self._woven):
            self.unweave(cls)

    # Internal methods
    def _check(self, cls):
        if getattr(cls, '__sham_unweavable__', False) is True:
            raise WeavingError('Can not weave %s' % qualified_name(cls))
        module = cls.__module__ or ''
        for prefix in self.exclude:
            if module == prefix or module.startswith(prefix + '.'):
                raise WeavingError('Can not weave %s, module %s is excluded'
                                   % (qualified_name(cls), prefix))

    def _restore(self, cls, saved):
        for name, current in saved.items():
            if current is MISSING:
                if getattr(type(vars(cls).get(name)), '__sham_woven__', False):
                    delattr(cls, name)
            else:
                setattr(cls, name, current)


if __name__ == '__main__':
    import doctest
    doctest.testmod()
