# encoding: utf-8
#
# Copyright (C) 2009 Alec Thomas <alec@swapoff.org>
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""Builders of test doubles.

Import as::

    from sham import test

and call ``test.double(...)`` and friends. The examples below call the
functions directly.

Any class or object can be turned into a test double with :func:`double`,
which redefines methods and records every call for later verification:

>>> class User(object):
...   def __init__(self, name='jon'):
...     self.name = name
...   def get_name(self):
...     return self.name
...   def save(self):
...     raise RuntimeError('no database')

>>> user = double(User(), {'get_name': 'davert'})
>>> user.get_name()
'davert'
>>> user.verify_invoked('get_name')
>>> user.verify_never_invoked('save')

Callables are called like methods, receiving the doubled object first:

>>> user = double(User(), {'get_name': lambda self: self.name.upper()})
>>> user.get_name()
'JON'

Doubling a class affects all of its instances, and those of its subclasses:

>>> users = double(User, {'save': False})
>>> User().save()
False
>>> users.verify_invoked_once('save')

Stubs accumulate, later definitions of a method replacing earlier ones:

>>> _ = double(User, {'get_name': 'admin'})
>>> User().save(), User().get_name()
(False, 'admin')

Classes that do not exist yet can be specified without failing:

>>> ghost = spec('app.models.Ghost').construct()
>>> ghost.haunt().house['attic']  # doctest: +ELLIPSIS
<Anything ...>

Clean between tests:

>>> clean()
>>> User().get_name()
'jon'
"""

from sham.kernel import get_kernel


__all__ = ['double', 'spec', 'methods', 'clean', 'clean_invocations']


def double(target, stubs=None):
    """Register a class or object to track its calls and stub its methods.

    Example::

        # on an object
        user = test.double(User(), {'get_name': 'davert'})
        user.get_name()  # => 'davert'
        user.verify_invoked('get_name')

        # on a class, by name
        ar = test.double('app.models.ActiveRecord', {'save': None})
        User().save()  # passes to ActiveRecord.save(), which does nothing
        ar.verify_invoked('save')

        # create instances of a doubled class
        test.double(User).construct(name='davert')  # via the constructor
        test.double(User).make()  # without calling the constructor

    :param target: Class, dotted class name, object or proxy.
    :param stubs: Mapping of method names to return values or callables.
    :returns: :class:`sham.proxy.ClassProxy` or
              :class:`sham.proxy.InstanceProxy`.
    :raises sham.core.ClassNotLoadedError: The named class does not exist.
    """
    return get_kernel().double(target, stubs)


def spec(target, stubs=None):
    """Create a double for a class that may not be defined yet.

    If the class exists this is the same as :func:`double`. Otherwise an
    :class:`sham.proxy.AnythingClassProxy` is returned, whose instances
    accept any use without raising, so that a test written before its class
    fails at its assertions rather than on first contact with the class::

        user = test.spec('app.models.User').construct()
        user.set_name('davert')
        assert user.get_name() == 'davert'  # fails here
    """
    return get_kernel().spec(target, stubs)


def methods(target, keep=()):
    """Replace every public method of target with a no-op, except keep.

    Example::

        user = User(name='jon')
        test.methods(user, ['get_name'])
        user.set_name('davert')  # not invoked
        user.get_name()  # => 'jon'

    :raises sham.core.ClassNotDefinedError: The named class does not exist.
    """
    return get_kernel().methods(target, keep)


def clean(target=None):
    """Forget doubles, either of one target or all of them.

    Should be called between tests. Woven classes are restored once nothing
    doubles them.
    """
    get_kernel().clean(target)


def clean_invocations(target=None):
    """Forget recorded calls but keep stub definitions."""
    get_kernel().clean_invocations(target)


if __name__ == '__main__':
    import doctest
    doctest.testmod()
