# encoding: utf-8
#
# Copyright (C) 2009 Alec Thomas <alec@swapoff.org>
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

from tempfile import NamedTemporaryFile

from sham.config import (Configuration, Option, BoolOption, IntOption,
                         ListOption)


class Settings(object):
    name = Option('test.name', 'sham')
    enabled = BoolOption('test.enabled', 'false')
    count = IntOption('test.count', 3)
    paths = ListOption('test.paths', 'a, b')
    nothing = Option('test.nothing')

    def __init__(self, config=None):
        self._config = config


def test_config_from_file():
    """Test basic config loading from a file."""
    with NamedTemporaryFile('w', suffix='.conf') as fd:
        fd.write("""
        # this is a comment
        test.count = 99  # trailing comment
        test.enabled = yes
        """)
        fd.flush()
        config = Configuration(filename=fd.name)
    assert config.options() == [('test.count', '99'), ('test.enabled', 'yes')]
    settings = Settings(config)
    assert settings.count == 99
    assert settings.enabled is True


def test_missing_file_is_ignored():
    config = Configuration(filename='/nonexistent/sham.conf')
    assert config.options() == []


def test_data_overrides_file():
    with NamedTemporaryFile('w', suffix='.conf') as fd:
        fd.write('test.name = from-file\n')
        fd.flush()
        config = Configuration({'test.name': 'from-data'}, filename=fd.name)
    assert Settings(config).name == 'from-data'


def test_option_defaults():
    settings = Settings(Configuration())
    assert settings.name == 'sham'
    assert settings.enabled is False
    assert settings.count == 3
    assert settings.paths == ['a', 'b']
    assert settings.nothing is None


def test_option_defaults_without_config():
    assert Settings().count == 3


def test_option_is_accessible_on_class():
    assert isinstance(Settings.count, IntOption)
    assert Settings.count.name == 'test.count'


def test_option_set():
    config = Configuration()
    settings = Settings(config)
    settings.count = 7
    assert config['test.count'] == 7
    assert settings.count == 7


def test_get_falls_back_to_registered_option_default():
    config = Configuration()
    assert config.get('test.paths') == ['a', 'b']
    assert config.get('test.undeclared', 'default') == 'default'


def test_typed_getters():
    config = Configuration({'a': 'on', 'b': '12', 'c': 'x;y'})
    assert config.get_bool('a') is True
    assert config.get_int('b') == 12
    assert config.get_list('c', sep=';') == ['x', 'y']
