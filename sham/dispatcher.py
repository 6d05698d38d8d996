# encoding: utf-8
#
# Copyright (C) 2009 Alec Thomas <alec@swapoff.org>
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""The per-call decision point consulted by woven methods.

>>> from sham.registry import Registry
>>> from sham.stub import Value
>>> class User(object):
...   def get_name(self):
...     return 'jon'
>>> registry = Registry()
>>> dispatcher = Dispatcher(registry)
>>> user = User()

With nothing doubled the real method runs and nothing is recorded:

>>> dispatcher.intercept(user, 'get_name', (), {}, INSTANCE, user.get_name)
'jon'

Once a stub is registered it runs instead, and the call is recorded:

>>> _ = registry.register(user, {'get_name': Value('davert')})
>>> dispatcher.intercept(user, 'get_name', (), {}, INSTANCE, user.get_name)
'davert'
>>> registry.invocations(user)[0].returned
'davert'
"""

from sham.invocation import InvocationRecord, INSTANCE, STATIC
from sham.logging import log
from sham.util import format_call


__all__ = ['Dispatcher', 'INSTANCE', 'STATIC']


class Dispatcher(object):
    """Decide between a stub and the real method, and record the call."""

    def __init__(self, registry):
        self.registry = registry

    def find_stub(self, context, kind, method):
        return self.registry.find_stub(context, kind, method)

    def intercept(self, context, method, args, kwargs, kind, proceed):
        """Run one intercepted call.

        :param context: Instance called on, or the class for static calls.
        :param method: Method name.
        :param args: Positional arguments.
        :param kwargs: Keyword arguments.
        :param kind: STATIC or INSTANCE.
        :param proceed: Callable running the real method with args/kwargs.
        :returns: Result of the stub or the real method.
        """
        entries = self.registry.entries_for(context, kind)
        record = InvocationRecord(method, args, kwargs, kind, context)
        stub = None
        for entry in entries:
            entry.invocations.append(record)
            if stub is None:
                stub = entry.stubs.get(method)
        try:
            if stub is not None:
                log.debug('Stubbed %s with %r',
                          format_call(method, args, kwargs), stub)
                result = stub.evaluate(context, args, kwargs)
            else:
                result = proceed(*args, **kwargs)
        except BaseException as e:
            record.complete(raised=e)
            raise
        record.complete(returned=result)
        return result


if __name__ == '__main__':
    import doctest
    doctest.testmod()
