# encoding: utf-8
#
# Copyright (C) 2009 Alec Thomas <alec@swapoff.org>
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""The kernel ties a registry, dispatcher and weaver into one context.

A process normally uses the default kernel returned by :func:`get_kernel`,
which the :mod:`sham.test` functions operate on. Test runners executing tests
in parallel should give each worker its own :class:`Kernel`.

The default kernel can be rebuilt from a configuration file with
:func:`init`::

    # sham.conf
    log.level = debug
    weave.exclude = builtins, decimal
"""

import inspect

from sham.config import (Configuration, Option, BoolOption, IntOption,
                         ListOption)
from sham.core import ClassNotLoadedError, ClassNotDefinedError
from sham.dispatcher import Dispatcher
from sham.features import FeatureBroker
from sham.loader import ClassLocator, MethodIntrospector
from sham.logging import log, on_log_level_change
from sham.proxy import ClassProxy, InstanceProxy, AnythingClassProxy
from sham.registry import Registry
from sham.stub import Value, to_stubs
from sham.weaver import Weaver


__all__ = ['Kernel', 'init', 'get_kernel', 'set_kernel']


_kernel = None


class Kernel(object):
    """One isolated test-double context."""

    log_level = Option('log.level', 'warning',
                       help='log level of the "sham" logger')
    exclude = ListOption('weave.exclude', 'builtins',
                         help='module prefixes that are never woven')
    weave_private = BoolOption('weave.private', 'true',
                               help='weave _single_underscore methods')
    max_calls = IntOption('verify.max_calls', 10,
                          help='recorded calls listed in verification failures')

    def __init__(self, config=None):
        """Construct a new Kernel.

        :param config: A :class:`Configuration`. Defaults to an empty one.
        """
        self._config = config if config is not None else Configuration()
        self.features = FeatureBroker()
        self.features.provide('class_locator', ClassLocator())
        self.features.provide('method_introspector', MethodIntrospector())
        self.registry = Registry(self.locate)
        self.dispatcher = Dispatcher(self.registry)
        self.weaver = Weaver(self.dispatcher, self.introspector,
                             exclude=self.exclude, private=self.weave_private)
        self.registry.on_clean.connect(self._release)

    @property
    def introspector(self):
        return self.features.require('method_introspector')

    def locate(self, name):
        return self.features.require('class_locator')(name)

    def double(self, target, stubs=None):
        """Double a class or object.

        :param target: Class, dotted class name, object or proxy.
        :param stubs: Mapping of method names to values or callables.
        :returns: :class:`ClassProxy` or :class:`InstanceProxy`.
        :raises ClassNotLoadedError: target names a class that does not exist.
        """
        target = self.registry.resolve_identity(target)
        if isinstance(target, str):
            raise ClassNotLoadedError(target)
        stubs = to_stubs(stubs)
        if inspect.isclass(target):
            self.weaver.weave(target, stubs)
            self.registry.register_class(target, stubs)
            return ClassProxy(self, target)
        self.weaver.weave(type(target), stubs)
        self.registry.register_object(target, stubs)
        return InstanceProxy(self, target)

    def spec(self, target, stubs=None):
        """Double a class that may not be defined yet."""
        resolved = self.registry.resolve_identity(target)
        if isinstance(resolved, str):
            log.debug('Class %s is not defined, returning Anything', resolved)
            return AnythingClassProxy(self, resolved, to_stubs(stubs))
        return self.double(resolved, stubs)

    def methods(self, target, keep=()):
        """Double every public method of target, except those in keep."""
        resolved = self.registry.resolve_identity(target)
        if isinstance(resolved, str):
            raise ClassNotDefinedError(resolved)
        cls = resolved if inspect.isclass(resolved) else type(resolved)
        stubs = dict((name, Value(None))
                     for name in self.introspector.public_methods(cls)
                     if name not in keep)
        return self.double(resolved, stubs)

    def clean(self, target=None):
        self.registry.clean(target)

    def clean_invocations(self, target=None):
        self.registry.clean_invocations(target)

    # Internal methods
    def _release(self, target):
        """Unweave classes no doubled target needs any more."""
        if target is None:
            self.weaver.unweave_all()
            return
        cls = target if inspect.isclass(target) else type(target)
        if not self.registry.needs_class(cls):
            self.weaver.unweave(cls)


def get_kernel():
    """Return the default kernel, creating it if necessary."""
    global _kernel
    if _kernel is None:
        _kernel = Kernel()
    return _kernel


def set_kernel(kernel):
    """Replace the default kernel, cleaning the previous one.

    The "sham" logger takes the log level of the new default kernel.
    """
    global _kernel
    if _kernel is not None and _kernel is not kernel:
        _kernel.clean()
    _kernel = kernel
    on_log_level_change(kernel.log_level)
    return kernel


def init(filename=None, options=None):
    """Rebuild the default kernel from a configuration file and overrides.

    :param filename: Configuration file of "key = value" lines.
    :param options: Mapping of option names to values, applied over the file.
    :returns: The new default :class:`Kernel`.
    """
    return set_kernel(Kernel(Configuration(options, filename=filename)))
