# encoding: utf-8
#
# Copyright (C) 2009 Alec Thomas <alec@swapoff.org>
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""Configuration for the sham kernel.

Configuration files consist of "key = value" lines. Both empty lines and
anything following a # are ignored:

>>> config = Configuration()
>>> config.load_lines('''
... # Log everything.
... log.level = debug
... weave.exclude = builtins, decimal
... '''.splitlines())
>>> config.options()
[('log.level', 'debug'), ('weave.exclude', 'builtins, decimal')]

Options are typed properties reading from a `_config` attribute:

>>> class Settings(object):
...   exclude = ListOption('example.exclude', 'builtins')
...   def __init__(self, config):
...     self._config = config
>>> Settings(Configuration()).exclude
['builtins']
>>> Settings(Configuration({'example.exclude': 'a,b'})).exclude
['a', 'b']
"""

import os

from sham.util import to_list, to_boolean


__all__ = """
Configuration
Option
BoolOption
IntOption
ListOption
""".split()


class Configuration(dict):
    """Abstraction layer for a basic key/value configuration file format."""

    def __init__(self, data=None, filename=None):
        super(Configuration, self).__init__()
        self.filename = filename
        if filename and os.path.exists(filename):
            self.load(filename)
        if data:
            self.update(data)

    def load(self, filename):
        with open(filename) as fd:
            self.load_lines(fd)

    def load_lines(self, lines):
        for line in lines:
            line = line.split('#', 1)[0].strip()
            if not line:
                continue

            key, value = line.split('=', 1)
            self[key.strip()] = value.strip()

    # Public API
    def options(self):
        return sorted(self.items())

    def get(self, name, default=None):
        if name in self:
            value = super(Configuration, self).get(name, default)
        else:
            option = Option.registry.get(name)
            if option is not None:
                value = option.default
                if value is None:
                    value = default
            else:
                value = default
        return value

    def set(self, name, value):
        self[name] = value

    def get_bool(self, name, default=None):
        return to_boolean(self.get(name, default))

    def get_int(self, name, default=None):
        return int(self.get(name, default))

    def get_list(self, name, default=None, sep=',', keep_empty=False):
        return to_list(self.get(name, default), sep, keep_empty)


class Option(object):
    """"A convenience property for accessing configuration entries."""

    registry = {}

    def __init__(self, name, default=None, help='', metavar=None):
        """Create a new Option.

        Args:
            name: Name of the option.
            default: Default value.
            help: Documentation string.
            metavar: Name of variable to display in help.
        """
        self.name = name
        if default is not None:
            self.default = self.cast(default)
        else:
            self.default = default
        self.__doc__ = help
        self.metavar = metavar
        self.registry[name] = self

    def __get__(self, instance, owner):
        if instance is None:
            return self
        config = getattr(instance, '_config', None)
        if config is not None:
            return self.accessor(config, self.name, self.default)
        else:
            return self.default

    def __set__(self, instance, value):
        instance._config.set(self.name, value)

    def accessor(self, config, name, default):
        return self.cast(config.get(name, default))

    def cast(self, value):
        return str(value)


class BoolOption(Option):
    def cast(self, value):
        return to_boolean(value)


class IntOption(Option):
    def cast(self, value):
        return int(value)


class ListOption(Option):
    def __init__(self, name, default=None, help='', metavar=None, sep=',',
                 keep_empty=False):
        self.sep = sep
        self.keep_empty = keep_empty
        Option.__init__(self, name, default, help, metavar)

    def cast(self, value):
        return to_list(value, self.sep, self.keep_empty)


if __name__ == '__main__':
    import doctest
    doctest.testmod()
