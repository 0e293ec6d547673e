# -*- coding: utf-8 -*-

'''

    proptools util: debug

    holds proptools' logging channels. every channel is a Logbook
    ``Logger``, cached by ``(path, name)`` and gated by a conditional
    flag so that debug output costs nothing when it is switched off.

    :author: proptools authors
    :license: MIT, see ``LICENSE`` at the root of this project.

'''

# Base Imports
import os
import sys

# Logbook
import logbook

# Exceptions
from proptools.exceptions import ProptoolsException

# Debug mode
debug = os.environ.get('PROPTOOLS_DEBUG', '').strip().lower() in frozenset(('1', 'true', 'yes', 'on'))

_loggers = {}
_root_logger = None


## LoggingException
# Thrown if a logging channel is requested with an invalid path or name.
class LoggingException(ProptoolsException):
    pass


## ProptoolsLogger
# Represents a logging channel for a single module or class.
class ProptoolsLogger(logbook.Logger):

    ''' Logging controller for outputting debug information from different levels of proptools. '''

    # Logging channel config
    channel_path = 'proptools'
    channel_name = ''
    channel_parent = None

    # Event/context config
    conditional = debug
    _registered = False

    def __new__(cls, path='proptools', name='', parent_channel=None):

        ''' Create a new logger channel, or return it if it already exists. '''

        if not path or not isinstance(path, str):
            raise LoggingException('Cannot open a logging channel without a valid path (got: "%s").' % path)

        logger_k = (path, name) if name else (path,)
        if logger_k in _loggers:
            return _loggers[logger_k]
        return super(ProptoolsLogger, cls).__new__(cls)

    def __init__(self, path='proptools', name='', parent_channel=None):

        ''' Init a new logger channel. '''

        if self._registered:
            return  # cached channel, already set up

        super(ProptoolsLogger, self).__init__('.'.join(i for i in (path, name) if i))

        ## splice in root as parent if unspecified, `False` means explicitly parent-less
        if parent_channel is None:
            parent_channel = _root_logger
        elif parent_channel is False:
            parent_channel = None

        self.channel_path, self.channel_name, self.channel_parent = path, name, parent_channel
        self._registered = True

        # Register this logger in the channel cache
        _loggers[(path, name) if name else (path,)] = self

    def extend(self, path=None, name=None):

        ''' Extend an existing channel into a new one. '''

        if path is not None and name is None:
            # If we have a path and no name, join the new path to the old one
            return self.__class__('.'.join(self.channel_path.split('.') + path.split('.')), parent_channel=self)
        elif path is None and name is not None:
            # If we have a name and no path, keep the old path and swap the name
            return self.__class__(path=self.channel_path, name=name, parent_channel=self)
        elif path is not None and name is not None:
            appended_path = '.'.join(self.channel_path.split('.') + path.split('.'))
            return self.__class__(path=appended_path, name=name, parent_channel=self)
        raise LoggingException('Cannot extend logging channel without appending a name or a path.')

    def _setcondition(self, conditional):

        ''' Set a local flag to enable/disable logging through this pipe. '''

        self.conditional = bool(conditional)
        return self

    def _send_log(self, message, module=None, severity='info', exc_info=None):

        ''' Output a proptools log message. '''

        if self.conditional:
            out_message = []
            if module is not None:
                out_message.append('[' + str(module) + ']')
            out_message.append(str(message))

            if exc_info:
                self.log(severity.upper(), ' '.join(out_message), exc_info=exc_info)
            else:
                self.log(severity.upper(), ' '.join(out_message))

    def debug(self, message, module=None):

        ''' `Debug` severity. '''

        return self._send_log(message, module, 'debug')

    def verbose(self, message, module=None):

        ''' `Verbose` severity. '''

        return self._send_log(message, module, 'info' if debug else 'debug')

    def info(self, message, module=None):

        ''' `Info` severity. '''

        return self._send_log(message, module, 'info')

    def warning(self, message, module=None):

        ''' `Warning` severity. '''

        return self._send_log(message, module, 'warning')

    def error(self, message, module=None, exc_info=None):

        ''' `Error` severity. '''

        return self._send_log(message, module, 'error', exc_info)

    def exception(self, message, module=None):

        ''' `Error` severity, with the active exception attached. '''

        return self._send_log(message, module, 'error', sys.exc_info())

    def critical(self, message, module=None):

        ''' `Critical` severity. '''

        return self._send_log(message, module, 'critical')


## create root logger
_root_logger = ProptoolsLogger(path='proptools', name='', parent_channel=False)
