# -*- coding: utf-8 -*-

'''

    proptools properties: readonly

    one-way read-only switch for an owner object. once enabled it cannot
    be turned off, and every mutating operation of the owner is expected
    to call :py:meth:`ReadonlyManager.guard_call` first.

    :author: proptools authors
    :license: MIT, see ``LICENSE`` at the root of this project.

'''

# proptools util
from proptools.util import decorators

# properties
from proptools.properties import exceptions


@decorators.config(path='proptools.properties.readonly.ReadonlyManager')
class ReadonlyManager(object):

    ''' Irrevocable read-only switch, with enablement callbacks. '''

    def __init__(self, owner):
        self._owner = owner
        self._enabled, self._enabling, self._callbacks = False, False, []

    owner = property(lambda self: self._owner)

    def is_enabled(self):
        return self._enabled

    def enable(self):

        ''' Switch read-only on. Callbacks run once, in registration order,
            before the switch flips; later calls do nothing. '''

        if self._enabled or self._enabling:
            return self

        self._enabling = True
        try:
            for callback in self._callbacks:
                callback()
        finally:
            self._enabling = False

        self._enabled = True
        self.logging.debug('Read-only enabled for "%s".' % self._owner.__class__.__name__)
        return self

    def add_callback(self, callback):

        ''' Register ``callback()`` to run on enablement. '''

        if self._enabled:
            raise exceptions.CallbackAfterEnable(self._owner)
        if not callable(callback):
            raise TypeError('Read-only callback must be callable, got "%r".' % (callback,))
        self._callbacks.append(callback)
        return self

    def guard_call(self, operation='modify'):

        ''' Raise :py:class:`exceptions.ReadonlyEnabled` if read-only is on. '''

        if self._enabled:
            raise exceptions.ReadonlyEnabled(operation, self._owner)

    def clone_for_owner(self, owner):

        ''' Fresh, disabled switch for ``owner`` with the same callbacks. '''

        clone = self.__class__(owner)
        clone._callbacks = list(self._callbacks)
        return clone

    def __repr__(self):
        return 'ReadonlyManager(%s%s)' % (self._owner.__class__.__name__, ', enabled' if self._enabled else '')
