# -*- coding: utf-8 -*-

'''

    proptools properties: exceptions

    holds core exceptions for the :py:mod:`proptools.properties` API.

    every exception renders its ``message`` template from the context it
    is raised with, and exposes each context item under the matching
    name in ``__fields__``.

    :author: proptools authors
    :license: MIT, see ``LICENSE`` at the root of this project.

'''

# proptools exceptions
from proptools.exceptions import ProptoolsException


def _describe(owner):

    ''' Render an owner (class, instance or key) for a message. '''

    if isinstance(owner, type):
        return owner.__name__
    if isinstance(owner, str):
        return owner
    return '%s@%x' % (owner.__class__.__name__, id(owner))


class Error(ProptoolsException): pass


class PropertiesException(Error):

    message = "Property error."
    __fields__ = tuple()

    def __init__(self, *context):

        ''' Bind context to named fields and render the message. '''

        # builtin bases (`AttributeError` has its own `name`) must init before fields are bound
        super(PropertiesException, self).__init__()
        for field, value in zip(self.__fields__, context):
            setattr(self, field, value)
        self.message = self.message % self._render(context)
        self.args = (self.message,)

    def _render(self, context):

        ''' Prepare context items for interpolation into the message. '''

        return tuple(_describe(i) if f == 'owner' else i for f, i in zip(self.__fields__, context))

    def __repr__(self):

        ''' Represent this exception by its message. '''

        return self.message

    __str__ = __repr__


## == Schema == ##

class Defined(PropertiesException, ValueError):
    message = "Property \"%s\" is already defined in the schema of \"%s\"."
    __fields__ = ('owner', 'name')

    def _render(self, context):
        return (self.name, _describe(self.owner))


class Undefined(PropertiesException, LookupError):
    message = "Property \"%s\" is not defined for \"%s\"."
    __fields__ = ('owner', 'name')

    def _render(self, context):
        return (self.name, _describe(self.owner))


class InvalidDefault(PropertiesException, ValueError):
    message = "Invalid default value %r for property \"%s\" of \"%s\": %s"
    __fields__ = ('owner', 'name', 'value', 'error')

    def _render(self, context):
        return (self.value, self.name, _describe(self.owner), self.error)


class InvalidMode(PropertiesException, ValueError):
    message = "Invalid property mode \"%s\" (allowed: %s)."
    __fields__ = ('mode', 'allowed')

    def _render(self, context):
        return (self.mode, ', '.join(self.allowed) or 'none')


## == Lifecycle == ##

class AlreadyInitialized(PropertiesException, RuntimeError):
    message = "Properties of \"%s\" are already initialized."
    __fields__ = ('owner',)


class NotInitialized(PropertiesException, RuntimeError):
    message = "Properties of \"%s\" are not initialized yet."
    __fields__ = ('owner',)


class NoBuilder(PropertiesException, RuntimeError):
    message = "No builder function set for the lazy properties of \"%s\"."
    __fields__ = ('owner',)


class BuilderMismatch(PropertiesException, RuntimeError):
    message = "Builder for \"%s\" was asked for property \"%s\" but built \"%s\"."
    __fields__ = ('owner', 'name', 'built')


## == Access == ##

class NotAllowed(PropertiesException, AttributeError):
    message = "Operation not allowed on \"%s\"."
    __fields__ = ('owner',)


class ReadonlyEnabled(NotAllowed):
    message = "Cannot %s \"%s\" while it is set as read-only."
    __fields__ = ('operation', 'owner')


class CallbackAfterEnable(NotAllowed):
    message = "Cannot add a read-only callback to \"%s\" after read-only has been enabled."
    __fields__ = ('owner',)


class ModeViolation(NotAllowed):
    message = "Cannot %s property \"%s\" of \"%s\" in mode \"%s\"."
    __fields__ = ('operation', 'owner', 'name', 'mode')

    def _render(self, context):
        return (self.operation, self.name, _describe(self.owner), self.mode)


class RequiredUnset(NotAllowed):
    message = "Cannot unset required property \"%s\" of \"%s\"."
    __fields__ = ('owner', 'name')

    def _render(self, context):
        return (self.name, _describe(self.owner))


class EvaluatorsLocked(NotAllowed):
    message = "Cannot %s evaluators of \"%s\" after they have been locked."
    __fields__ = ('operation', 'owner')


## == Values == ##

class ValidationError(PropertiesException, ValueError):
    pass


class InvalidValue(ValidationError):
    message = "Invalid value %r for property \"%s\" of \"%s\": %s"
    __fields__ = ('owner', 'name', 'value', 'error')

    def _render(self, context):
        return (self.value, self.name, _describe(self.owner), self.error)


class InvalidValues(ValidationError):
    message = "Invalid values given for properties of \"%s\": %s"
    __fields__ = ('owner', 'values', 'errors')

    def _render(self, context):
        return (_describe(self.owner), '; '.join('%s = %r (%s)' % (name, self.values.get(name), error)
                                                 for name, error in self.errors.items()))


class MissingRequired(ValidationError):
    message = "Missing required properties for \"%s\": %s."
    __fields__ = ('owner', 'names')

    def _render(self, context):
        return (_describe(self.owner), ', '.join('"%s"' % i for i in self.names))


class Unrecognized(ValidationError):
    message = "Unrecognized properties given for \"%s\": %s."
    __fields__ = ('owner', 'names')

    def _render(self, context):
        return (_describe(self.owner), ', '.join('"%s"' % (i,) for i in self.names))


class NotBoolean(PropertiesException, TypeError):
    message = "Property \"%s\" of \"%s\" holds %r, which is not a boolean."
    __fields__ = ('owner', 'name', 'value')

    def _render(self, context):
        return (self.name, _describe(self.owner), self.value)
