# encoding: utf-8
#
# Copyright (C) 2009 Alec Thomas <alec@swapoff.org>
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""Handles through which tests manipulate and verify doubles.

Proxies hold no state of their own beyond the target they wrap. Stubs and
recorded calls live in the kernel's registry, so any number of proxies for
one target observe the same history.

Classes that do not exist yet are represented by an
:class:`AnythingClassProxy`, whose instances are :class:`Anything`:

>>> user = AnythingClassProxy(None, 'app.models.User').construct()
>>> user.set_name('davert')  # doctest: +ELLIPSIS
<Anything ...>
>>> user.posts[0].title.upper()  # doctest: +ELLIPSIS
<Anything ...>
>>> [post for post in user.posts]
[]
>>> str(user)
'~Anything~'
"""

from sham.core import VerificationFailure
from sham.loader import MISSING, find_attribute, is_routine
from sham.util import format_call, qualified_name, is_dunder


__all__ = ['Verifier', 'MethodVerifier', 'ClassProxy', 'InstanceProxy',
           'AnythingClassProxy', 'Anything']


class Verifier(object):
    """Assertions over the calls recorded against a target."""

    __sham_proxy__ = True
    __sham_unweavable__ = True

    def _invocations(self):
        raise NotImplementedError

    def _max_calls(self):
        kernel = self.__dict__.get('_kernel')
        return kernel.max_calls if kernel is not None else 10

    def _calls(self, name, args=None, kwargs=None):
        return [record for record in self._invocations()
                if record.method == name and record.matches(args, kwargs)]

    def _describe(self, name, args=None, kwargs=None):
        described = '%s.%s' % (self.class_name, name)
        if args is not None or kwargs is not None:
            described = '%s.%s' % (self.class_name,
                                   format_call(name, args or (), kwargs))
        return described

    def _fail(self, message, name):
        calls = self._calls(name)
        limit = self._max_calls()
        if calls:
            lines = ['  ' + format_call(r.method, r.args, r.kwargs)
                     for r in calls[:limit]]
            if len(calls) > limit:
                lines.append('  ... and %d more' % (len(calls) - limit))
            message += '\nRecorded calls:\n' + '\n'.join(lines)
        raise VerificationFailure(message)

    def get_calls_for_method(self, name):
        """Argument lists of every recorded call to a method."""
        return [list(record.args) for record in self._calls(name)]

    def verify_invoked(self, name, args=None, kwargs=None):
        """Verify that a method was called at least once.

        :param args: If given, a call with exactly these positional arguments
                     must have been made.
        :param kwargs: As with args, for keyword arguments.
        :raises VerificationFailure:
        """
        if not self._calls(name, args, kwargs):
            self._fail('Expected %s to be invoked but it never occurred.'
                       % self._describe(name, args, kwargs), name)

    def verify_invoked_once(self, name, args=None, kwargs=None):
        self.verify_invoked_multiple_times(name, 1, args, kwargs)

    def verify_invoked_multiple_times(self, name, times, args=None,
                                      kwargs=None):
        """Verify that a method was called exactly "times" times."""
        count = len(self._calls(name, args, kwargs))
        if count != times:
            self._fail('Expected %s to be invoked %d times but it was '
                       'invoked %d times.'
                       % (self._describe(name, args, kwargs), times, count),
                       name)

    def verify_never_invoked(self, name, args=None, kwargs=None):
        if self._calls(name, args, kwargs):
            self._fail('Expected %s not to be invoked but it was.'
                       % self._describe(name, args, kwargs), name)

    def verify_method_invoked(self, name):
        """Verify that a method was called, then inspect its outcomes.

        For example, proxy.verify_method_invoked("get_name").returned("davert").

        :returns: :class:`MethodVerifier`
        """
        self.verify_invoked(name)
        return MethodVerifier(self, name)


class MethodVerifier(object):
    """Assertions about the outcome of calls to one method."""

    def __init__(self, verifier, name):
        self.verifier = verifier
        self.name = name

    def returned(self, value):
        """Verify that some call to the method returned value."""
        records = self.verifier._calls(self.name)
        for record in records:
            if record.completed and record.raised is None \
                    and record.returned == value:
                return self
        returned = [r.returned for r in records if r.completed]
        self.verifier._fail(
            'Expected %s to return %r but it returned %s.'
            % (self.verifier._describe(self.name), value,
               ', '.join(map(repr, returned)) or 'nothing'),
            self.name)

    def raised(self, exception_type):
        """Verify that some call to the method raised exception_type."""
        for record in self.verifier._calls(self.name):
            if isinstance(record.raised, exception_type):
                return self
        self.verifier._fail('Expected %s to raise %s.'
                            % (self.verifier._describe(self.name),
                               exception_type.__name__),
                            self.name)


class ClassProxy(Verifier):
    """A doubled class.

    Calls recorded against the class include static calls and calls made on
    any of its instances, or instances of its subclasses.
    """

    def __init__(self, kernel, cls):
        self._kernel = kernel
        self._target = cls

    def _invocations(self):
        return self._kernel.registry.invocations(self._target)

    @property
    def class_name(self):
        return qualified_name(self._target)

    def get_class(self):
        return self._target

    def is_defined(self):
        return True

    def interfaces(self):
        """Names of the classes this class derives from."""
        return [qualified_name(cls) for cls in self._target.__mro__[1:]
                if cls is not object]

    def parent(self):
        for base in self._target.__bases__:
            if base is not object:
                return qualified_name(base)
        return None

    def has_method(self, name):
        _, raw = find_attribute(self._target, name)
        return is_routine(raw)

    def has_property(self, name):
        _, raw = find_attribute(self._target, name)
        return raw is not MISSING and not is_routine(raw)

    def construct(self, *args, **kwargs):
        """Create an instance through the real constructor."""
        return self._target(*args, **kwargs)

    def make(self):
        """Create an instance without calling its constructor."""
        return self._target.__new__(self._target)

    def __repr__(self):
        return '<ClassProxy %s>' % self.class_name


class InstanceProxy(Verifier):
    """A doubled object.

    Attributes not defined by the proxy are read from, written to and called
    on the wrapped object.
    """

    def __init__(self, kernel, obj):
        self.__dict__.update(_kernel=kernel, _target=obj)

    def _invocations(self):
        return self._kernel.registry.invocations(self._target)

    @property
    def class_name(self):
        return qualified_name(type(self._target))

    def get_object(self):
        return self._target

    def __getattr__(self, key):
        if '_target' not in self.__dict__:
            raise AttributeError(key)
        return getattr(self.__dict__['_target'], key)

    def __setattr__(self, key, value):
        setattr(self._target, key, value)

    def __delattr__(self, key):
        delattr(self._target, key)

    def __repr__(self):
        return '<InstanceProxy %r>' % (self._target,)


class AnythingClassProxy(Verifier):
    """A class that is not defined.

    Nothing can call into a class that does not exist, so its history is
    always empty.
    """

    def __init__(self, kernel, name, stubs=None):
        self._kernel = kernel
        self._target = name
        self.stubs = dict(stubs or {})

    def _invocations(self):
        return []

    @property
    def class_name(self):
        return self._target

    def is_defined(self):
        return False

    def interfaces(self):
        return []

    def parent(self):
        return None

    def has_method(self, name):
        return False

    def has_property(self, name):
        return False

    def construct(self, *args, **kwargs):
        return Anything(self._target, self.stubs)

    def make(self):
        return Anything(self._target, self.stubs)

    def __repr__(self):
        return '<AnythingClassProxy %s>' % self._target


class Anything(object):
    """An object that accepts any use without complaint.

    Attribute reads, calls and item reads produce further Anything objects.
    Writes and deletions are accepted and forgotten. Iteration is empty.
    Stubbed names, when given, evaluate their stub instead.

    Dunder probes made by Python's own protocols (copy, pickle, etc.) raise
    AttributeError as usual.
    """

    __sham_unweavable__ = True

    def __init__(self, class_name=None, stubs=None):
        object.__setattr__(self, '_class_name', class_name)
        object.__setattr__(self, '_stubs', dict(stubs or {}))

    def __getattr__(self, name):
        if is_dunder(name) or name in ('_class_name', '_stubs'):
            raise AttributeError(name)
        stub = self._stubs.get(name)
        if stub is not None:
            return lambda *args, **kwargs: stub.evaluate(self, args, kwargs)
        return Anything()

    def __setattr__(self, name, value):
        pass

    def __delattr__(self, name):
        pass

    def __call__(self, *args, **kwargs):
        return Anything()

    def __getitem__(self, key):
        return Anything()

    def __setitem__(self, key, value):
        pass

    def __delitem__(self, key):
        pass

    def __iter__(self):
        return iter(())

    def __len__(self):
        return 0

    def __contains__(self, item):
        return False

    def __bool__(self):
        return True

    def __int__(self):
        return 0

    def __float__(self):
        return 0.0

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False

    def __str__(self):
        return '~Anything~'

    def __repr__(self):
        if self._class_name:
            return '<Anything %s>' % self._class_name
        return '<Anything at 0x%x>' % id(self)


if __name__ == '__main__':
    import doctest
    doctest.testmod()
