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

from sham.signal import Signal


__all__ = ['log', 'on_log_level_change', 'to_level']


on_log_level_change = Signal()


def to_level(value):
    """Convert a level name such as "debug" to a logging level."""
    if isinstance(value, int):
        return value
    level = getattr(logging, str(value).upper(), None)
    if not isinstance(level, int):
        return logging.WARN
    return level


@on_log_level_change.connect
def _set_logger_level(level):
    """Set the log level of the default logger."""
    log.setLevel(to_level(level))


formatter = logging.Formatter(
    '%(asctime)s %(name)-12s %(levelname)-8s %(message)s',
    '%Y-%m-%d %H:%M:%S',
    )
console = logging.StreamHandler()
console.setLevel(logging.DEBUG)
console.setFormatter(formatter)

log = logging.getLogger('sham')
log.setLevel(logging.WARN)
log.addHandler(console)
