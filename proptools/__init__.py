# -*- coding: utf-8 -*-

'''

    proptools

    typed, access-controlled properties for python objects: schemas of
    validated entries, per-instance property managers with access modes,
    lazy building and a one-way read-only switch.

    :author: proptools authors
    :license: MIT, see ``LICENSE`` at the root of this project.

'''

__version__ = '1.0.0'


## proptools util
from proptools.util import appconfig

cfg = appconfig.ConfigProxy(appconfig._DEFAULT_CONFIG)


def configure(mapping):

    ''' Overlay ``mapping`` onto the process-wide config.

        :param mapping: Nested ``dict`` of config paths to settings.
        :returns: The new :py:class:`appconfig.ConfigProxy`. '''

    global cfg
    cfg = cfg.overlay(mapping)
    return cfg


## Expose property system
from proptools import properties
from proptools.properties import *  # noqa


__all__ = ['cfg', 'configure', 'properties'] + properties.__all__
