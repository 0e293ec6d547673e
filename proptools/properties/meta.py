# -*- coding: utf-8 -*-

'''

    proptools properties: meta

    schemas. a :py:class:`Meta` binds property names to validation units
    and (already validated) default values for a single owner. schemas
    are kept in an explicit registry, keyed by whatever identifier the
    caller chooses (host classes use their dotted path).

    :author: proptools authors
    :license: MIT, see ``LICENSE`` at the root of this project.

'''

# stdlib
import operator

# proptools util
from proptools.util import decorators
from proptools.util.datastructures import _EMPTY

# properties
from proptools.properties import exceptions
from proptools.properties import validation


# schema registry
_registry = {}


## Entry
# Small tuple that holds a validator and a default value.
class Entry(tuple):

    ''' Named-tuple class for ``(validator, default)`` schema entries. '''

    __slots__ = tuple()
    __fields__ = ('validator', 'default')

    def __new__(_cls, validator, default=_EMPTY):

        ''' Create a new `Entry` instance. '''

        return tuple.__new__(_cls, (validator, default))

    # util: generate a string representation of this entry
    __repr__ = lambda self: "Entry(%r, default=%r)" % (self[0], self[1])

    # util: reduce arguments for pickle
    __getnewargs__ = lambda self: tuple(self)

    # util: map validator and default properties
    validator = property(operator.itemgetter(0), doc='Alias for `Entry.validator` at index 0.')
    default = property(operator.itemgetter(1), doc='Alias for `Entry.default` at index 1.')
    has_default = property(lambda self: self[1] is not _EMPTY, doc='Whether a default was declared.')


## Meta
# Per-owner schema, mapping property names to entries.
@decorators.config(path='proptools.properties.meta.Meta')
class Meta(object):

    ''' Schema of named, validated properties for one owner. '''

    def __init__(self, owner):

        ''' Initialize an empty schema for ``owner``. '''

        self._owner, self._entries = owner, {}

    owner = property(lambda self: self._owner)

    def set(self, name, validator=None, default=_EMPTY):

        ''' Define property ``name``. Each name may be defined once, and
            a declared default must pass ``validator``.

            :param name: Property name.
            :param validator: Anything :py:func:`validation.resolve` accepts.
            :param default: Default value, validated and stored normalized.
            :raises Defined: If ``name`` already exists.
            :raises InvalidDefault: If the default fails validation.
            :returns: ``self``, for chaining. '''

        if name in self._entries:
            raise exceptions.Defined(self._owner, name)

        validator = validation.resolve(validator)
        if default is not _EMPTY:
            processed = validator.process(default, validation.Context.DEFINITION, False)
            if processed.error is not None:
                raise exceptions.InvalidDefault(self._owner, name, default, processed.error.tag(name))
            default = processed.value

        self._entries[name] = Entry(validator, default)
        self.logging.debug('Defined property "%s" on "%s".' % (name, self._owner))
        return self

    def adopt(self, name, entry):

        ''' Add an existing ``entry`` without re-validating it. Adopting
            the identical entry twice is a no-op. '''

        existing = self._entries.get(name)
        if existing is not None:
            if existing is entry:
                return self
            raise exceptions.Defined(self._owner, name)
        self._entries[name] = entry
        return self

    def get(self, name):

        ''' Return the :py:class:`Entry` for ``name``. '''

        try:
            return self._entries[name]
        except KeyError:
            raise exceptions.Undefined(self._owner, name) from None

    def has(self, name):
        return name in self._entries

    def names(self):

        ''' Property names, in definition order. '''

        return tuple(self._entries)

    def clone(self, owner):

        ''' Independent copy of this schema for ``owner``. Entries are
            shared as-is, defaults are not validated again. '''

        clone = self.__class__(owner)
        clone._entries = dict(self._entries)
        return clone

    def process(self, name, value, context=validation.Context.INTERNAL):

        ''' Validate ``value`` against the entry for ``name``, non-strictly. '''

        return self.get(name).validator.process(value, context, False)

    __contains__ = has
    __len__ = lambda self: len(self._entries)
    __iter__ = lambda self: iter(self._entries)
    __repr__ = lambda self: 'Meta(%s: %s)' % (self._owner, ', '.join(self._entries))


## == Registry == ##

def register(meta, key=None):

    ''' Register ``meta`` under ``key`` (default: its owner). A later
        registration under the same key replaces the earlier one. '''

    key = meta.owner if key is None else key
    if key in _registry and _registry[key] is not meta:
        Meta.logging.debug('Replacing schema registered under "%s".' % (key,))
    _registry[key] = meta
    return meta


def lookup(key):

    ''' Return the schema registered under ``key``, or ``None``. '''

    return _registry.get(key)


def registered(key):
    return key in _registry


__all__ = ['Entry', 'Meta', 'register', 'lookup', 'registered']
