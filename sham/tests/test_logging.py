# encoding: utf-8
#
# Copyright (C) 2009 Alec Thomas <alec@swapoff.org>
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

import logging

from mock import Mock

from sham.config import Configuration
from sham.kernel import Kernel, set_kernel
from sham.logging import log, on_log_level_change, to_level


def teardown_function():
    set_kernel(Kernel())


def test_to_level():
    assert to_level('debug') == logging.DEBUG
    assert to_level('ERROR') == logging.ERROR
    assert to_level(logging.INFO) == logging.INFO
    assert to_level('nonsense') == logging.WARN
    assert to_level('Formatter') == logging.WARN


def test_level_change_sets_logger_level():
    on_log_level_change('info')
    assert log.level == logging.INFO


def test_level_change_is_broadcast():
    listener = Mock()
    on_log_level_change.connect(listener)
    try:
        on_log_level_change('debug')
    finally:
        on_log_level_change.disconnect(listener)
    listener.assert_called_once_with('debug')


def test_default_kernel_applies_configured_log_level():
    set_kernel(Kernel(Configuration({'log.level': 'error'})))
    assert log.level == logging.ERROR
    set_kernel(Kernel())
    assert log.level == logging.WARN


def test_new_kernels_leave_log_level_alone():
    on_log_level_change('debug')
    Kernel()
    Kernel(Configuration({'log.level': 'error'}))
    assert log.level == logging.DEBUG
