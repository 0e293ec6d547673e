# -*- coding: utf-8 -*-

# meta
__doc__ = '''

    proptools: property
    -------------------------------------------------
    |                                               |
    |   `proptools.properties.property`             |
    |                                               |
    |   single named, validated value slot with an  |
    |   access mode and a load state.               |
    |                                               |
    -------------------------------------------------

'''

# stdlib
import operator

# proptools util
from proptools.util.datastructures import _EMPTY

# properties
from proptools.properties import exceptions
from proptools.properties import validation
from proptools.properties.evaluators import Evaluators


## Mode
# Access modes, and the lattice restricting them under a manager's base mode.
class Mode(object):

    ''' Property access modes. '''

    STRICT_READ = 'r'  # default value only, never written
    READ = 'r+'  # written at initialization only
    READ_WRITE = 'rw'
    WRITE = 'w'  # write-only
    WRITE_ONCE = 'w-'  # written at initialization only, never read
    TRANSIENT = 'w--'  # like `w-`, discarded after initialization

    ALL = (STRICT_READ, READ, READ_WRITE, WRITE, WRITE_ONCE, TRANSIENT)

    # base mode => {property mode => resolved mode}
    _lattice = {
        'r': {'r': 'r', 'r+': 'r', 'rw': 'r'},
        'r+': {'r': 'r', 'r+': 'r+', 'rw': 'r+'},
        'rw': dict((i, i) for i in ALL),
        'w': {'rw': 'w', 'w': 'w', 'w-': 'w-', 'w--': 'w--'},
        'w-': {'rw': 'w-', 'w': 'w-', 'w-': 'w-', 'w--': 'w--'},
        'w--': {'rw': 'w--', 'w': 'w--', 'w-': 'w--', 'w--': 'w--'},
    }

    @classmethod
    def validate(cls, mode):

        ''' Return ``mode`` if it is a known mode, else raise :py:class:`exceptions.InvalidMode`. '''

        if mode not in cls._lattice:
            raise exceptions.InvalidMode(mode, cls.ALL)
        return mode

    @classmethod
    def restrict(cls, base, mode):

        ''' Resolve property ``mode`` under manager ``base`` mode. '''

        allowed = cls._lattice[cls.validate(base)]
        if mode not in allowed:
            raise exceptions.InvalidMode(mode, tuple(i for i in cls.ALL if i in allowed))
        return allowed[mode]

    readable = staticmethod(lambda mode: mode[0] == 'r')
    writable = staticmethod(lambda mode: mode in ('rw', 'w'))
    initializable = staticmethod(lambda mode: mode != 'r')


## Load
# Load states for property values.
class Load(object):

    ''' Where a property's current value came from. '''

    UNSET, DEFAULTED, SET = 0, 1, 2


## Property
# Value slot owned by a property manager.
class Property(object):

    ''' Concrete Property class. '''

    __slots__ = ('name', '_evaluators', '_default', '_default_factory', '_canonical', '_declared', '_mode',
                 '_optional', '_setter', '_value', '_loaded')

    ## = Internal Methods = ##
    def __init__(self, name, validator=None, default=_EMPTY, mode=None, optional=False, setter=None,
                 default_factory=None):

        ''' Initialize this Property.

            :param name: Property name.
            :param validator: Anything :py:func:`validation.resolve` takes. It seeds
              this property's :py:class:`Evaluators` chain.
            :param default: Default value, validated when applied.
            :param mode: One of :py:class:`Mode`, or ``None`` to follow the manager.
            :param optional: Never required, even without a default.
            :param setter: Callable handed every value this property accepts.
            :param default_factory: Callable producing a fresh default, used
              when ``default`` is not given. '''

        if mode is not None:
            Mode.validate(mode)
        if setter is not None and not callable(setter):
            raise TypeError('Setter for property "%s" must be callable, got "%r".' % (name, setter))

        self.name, self._evaluators = name, Evaluators(name)
        if validator is not None:
            self._evaluators.add(validator)

        self._default, self._default_factory, self._canonical = default, default_factory, False
        self._declared, self._mode = mode, mode
        self._optional, self._setter = optional, setter
        self._value, self._loaded = _EMPTY, Load.UNSET

    def __repr__(self):

        ''' Generate a string representation of this Property. '''

        return 'Property(%s, mode=%s, loaded=%s)' % (self.name, self._mode, self._loaded)

    ## = Class Methods = ##
    @classmethod
    def from_entry(cls, name, entry, canonical=False, **options):

        ''' Build a property from a schema :py:class:`meta.Entry`.

            :param canonical: The entry's default was already normalized by
              :py:meth:`meta.Meta.set`, so it loads without validation. '''

        prop = cls(name, entry.validator, entry.default, **options)
        prop._canonical = canonical and entry.has_default
        return prop

    ## = Properties = ##
    evaluators = property(operator.attrgetter('_evaluators'))
    mode = property(operator.attrgetter('_mode'))
    loaded = property(operator.attrgetter('_loaded'))
    optional = property(operator.attrgetter('_optional'))
    setter = property(operator.attrgetter('_setter'))

    value = property(lambda self: None if self._value is _EMPTY else self._value)
    defaulted = property(lambda self: self._loaded == Load.DEFAULTED)
    isset = property(lambda self: self._loaded != Load.UNSET and self._value is not None)
    has_default = property(lambda self: self._default is not _EMPTY or self._default_factory is not None)

    @property
    def required(self):

        ''' Whether a value must be supplied at initialization. '''

        return not (self._optional or self.has_default or self._mode == Mode.STRICT_READ)

    ## = Public Methods = ##
    def resolve_mode(self, base):

        ''' Resolve this property's declared mode under manager ``base`` mode, without binding it. '''

        return Mode.restrict(base, self._declared if self._declared is not None else base)

    def bind_mode(self, base):
        self._mode = self.resolve_mode(base)
        return self._mode

    def evaluate(self, value, context=validation.Context.INTERNAL, strict=False):

        ''' Run ``value`` through this property's evaluators. '''

        return self._evaluators.process(value, context, strict)

    def assign(self, value, context=validation.Context.ASSIGNMENT, strict=False):

        ''' Validate and store ``value``.

            :returns: ``None`` on success, or the :py:class:`validation.Failure`
              (tagged with this property's name), in which case nothing changes. '''

        processed = self.evaluate(value, context, strict)
        if processed.error is not None:
            return processed.error.tag(self.name)
        if self._setter is not None:
            self._setter(processed.value)
        self._value, self._loaded = processed.value, Load.SET
        return None

    def apply_default(self, owner=None):

        ''' Load this property's default, if it has one.

            Schema defaults were validated when defined and load as-is.

            :raises InvalidDefault: If the default fails validation.
            :returns: ``True`` if a default was applied. '''

        if not self.has_default:
            return False

        if self._canonical:
            self._value, self._loaded = self._default, Load.DEFAULTED
            return True

        value = self._default if self._default is not _EMPTY else self._default_factory()
        processed = self.evaluate(value, validation.Context.DEFINITION)
        if processed.error is not None:
            raise exceptions.InvalidDefault(owner, self.name, value, processed.error.tag(self.name))
        self._value, self._loaded = processed.value, Load.DEFAULTED
        return True

    def clear(self, owner=None):

        ''' Restore the default, or the unset state. '''

        if not self.apply_default(owner):
            self.reset()
        return self

    def reset(self):

        ''' Drop any value, back to :py:attr:`Load.UNSET`. '''

        self._value, self._loaded = _EMPTY, Load.UNSET
        return self

    def clone(self):

        ''' Copy this property's definition (not its value) into a new one. '''

        clone = self.__class__(self.name, None, self._default, self._declared, self._optional,
                               self._setter, self._default_factory)
        clone._evaluators, clone._canonical = self._evaluators.clone_for_owner(self.name), self._canonical
        return clone


__all__ = ['Mode', 'Load', 'Property']
