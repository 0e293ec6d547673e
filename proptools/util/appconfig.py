# -*- coding: utf-8 -*-

'''

    proptools util: config

    holds utilities for dealing with proptools config, and the default config set.

    :author: proptools authors
    :license: MIT, see ``LICENSE`` at the root of this project.

'''

# Base Imports
import copy

# proptools util
from proptools.util import debug
from proptools.util.decorators import memoize


# Constants
_DEFAULT_CONFIG = {

    'proptools': {

    },

    'proptools.system': {

        'config': {
            'debug': debug.debug
        }

    },

    'proptools.properties': {

        'mode': 'rw',  # default base mode for property managers
        'strict': False,  # strict (non-coercive) validation of supplied values
        'debug': False

    },

    'proptools.properties.manager.PropertyManager': {
        'debug': False
    },

    'proptools.properties.manager.LazyPropertyManager': {
        'debug': False
    },

    'proptools.properties.readonly.ReadonlyManager': {
        'debug': False
    },

    'proptools.properties.meta.Meta': {
        'debug': False
    },

    'proptools.properties.evaluators.Evaluators': {
        'debug': False
    },

    'proptools.properties.host.Propertied': {
        'debug': False
    },

    'proptools.properties.host.LazyPropertied': {
        'debug': False
    }

}


## ConfigProxy
# Wraps proptools configuration, enabling log messages on config access/write.
class ConfigProxy(object):

    ''' Wraps config to enable debug features. '''

    debug = False
    _config = None
    _lookup = None

    def __init__(self, config):

        ''' Initialize this object. '''

        self._config = copy.deepcopy(config)
        self._lookup = set(self._config.keys())

    @memoize
    def logging(self):

        ''' Named logging pipe. '''

        self.debug = self._config.get('proptools.system', {}).get('config', {}).get('debug', False)
        return debug.ProptoolsLogger(path='proptools', name='Config')._setcondition(self.debug)

    def __iter__(self):

        ''' Iterate over ``(key, value)`` pairs in config. '''

        for item in list(self._config.items()):
            yield item

    def __len__(self):

        ''' Count top-level config entries. '''

        return len(self._lookup)

    def __getitem__(self, item):

        ''' Return an item in config. '''

        self.logging.debug("Config access: '%s'." % item)
        if item in self._lookup:
            return self._config[item]
        raise KeyError("No config entry by the name '%s'." % item)

    def __setitem__(self, item, value):

        ''' Set an item in config. '''

        self._lookup.add(item)
        self.logging.debug("Config write: '%s'=>'%s'." % (item, value))
        self._config[item] = value
        return value

    def __contains__(self, item):

        ''' Contains redirect. '''

        return item in self._lookup

    def _overlay(self, mapping, rov=None):

        ''' Recursively update config, from target `mapping`. '''

        if not isinstance(mapping, dict):
            return mapping
        if rov is None:
            rov = copy.deepcopy(self._config)
        for k, v in mapping.items():
            if k in rov and isinstance(rov[k], dict):
                rov[k] = self._overlay(v, rov[k])
            else:
                rov[k] = copy.deepcopy(v)
        return rov

    def overlay(self, mapping):

        ''' Exported method for recursively updating config. Returns a new proxy. '''

        return ConfigProxy(self._overlay(mapping))

    def get(self, name, default=None):

        ''' Retrieve an item from config without raising a ``KeyError``. '''

        self.logging.debug("Config access: '%s'." % name)
        return self._config.get(name, default)

    def items(self):

        ''' Retrieve a list of (key, value) tuples. '''

        return list(self._config.items())
