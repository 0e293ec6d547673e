# -*- coding: utf-8 -*-

'''

    proptools util

    holds small utilities and useful pieces of code/functionality that don't
    belong anywhere specific: logging channels, config, sentinels and
    decorators.

    :author: proptools authors
    :license: MIT, see ``LICENSE`` at the root of this project.

'''


## Export Util Controllers
from proptools.util.debug import ProptoolsLogger

## Exported Datastructures
from proptools.util.datastructures import Sentinel
from proptools.util.datastructures import _EMPTY

## Exported Decorators
from proptools.util.decorators import config
from proptools.util.decorators import memoize
from proptools.util.decorators import classproperty


__all__ = ['ProptoolsLogger', 'Sentinel', 'config', 'memoize', 'classproperty']
