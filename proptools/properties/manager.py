# -*- coding: utf-8 -*-

'''

    proptools properties: managers

    per-instance property managers. a :py:class:`PropertyManager` owns a
    set of :py:class:`Property` slots for one owner object, initializes
    them exactly once from supplied values and defaults, and then guards
    every read and write by the property's access mode and the owner's
    read-only switch.

    :py:class:`LazyPropertyManager` builds its properties on first touch
    through a builder function instead of holding them all up front.

    :author: proptools authors
    :license: MIT, see ``LICENSE`` at the root of this project.

'''

# stdlib
import weakref

# proptools
import proptools

# proptools util
from proptools.util import decorators
from proptools.util.datastructures import _EMPTY

# properties
from proptools.properties import meta
from proptools.properties import exceptions
from proptools.properties import validation
from proptools.properties.readonly import ReadonlyManager
from proptools.properties.property import Mode, Load, Property


def _settings():

    ''' Package-wide property settings. '''

    return proptools.cfg.get('proptools.properties', {})


## PropertyManager
# Holds, initializes and guards the properties of one owner object.
@decorators.config(path='proptools.properties.manager.PropertyManager')
class PropertyManager(object):

    ''' Eager property manager. '''

    def __init__(self, owner, mode=None, strict=None, readonly=None, fallback=None, remainderer=None,
                 properties=None):

        ''' Initialize this manager.

            :param owner: Object whose properties are managed.
            :param mode: Base :py:class:`Mode`, restricting every property's own mode.
              Defaults to ``proptools.properties.mode`` in config.
            :param strict: Validate supplied values without coercion. Defaults to
              ``proptools.properties.strict`` in config.
            :param readonly: Shared :py:class:`ReadonlyManager`, one is made if omitted.
            :param fallback: Object receiving calls for names not managed here.
            :param remainderer: Callable receiving left-over initialization values.
            :param properties: Iterable of :py:class:`Property` to add. '''

        settings = _settings()
        self._owner = owner
        self._mode = Mode.validate(mode if mode is not None else settings.get('mode', Mode.READ_WRITE))
        self._strict = bool(settings.get('strict', False) if strict is None else strict)
        self._readonly = readonly if readonly is not None else ReadonlyManager(owner)
        self._properties, self._initialized, self._initializing = {}, False, False
        self._fallback, self._remainderer = None, None

        if remainderer is not None:
            self.set_remainderer(remainderer)
        if fallback is not None:
            self.set_fallback(fallback)
        for prop in (properties or ()):
            self.add_property(prop)

    def __repr__(self):

        ''' Generate a string representation of this manager. '''

        return '%s(%s, mode=%s%s)' % (self.__class__.__name__, self._owner.__class__.__name__, self._mode,
                                      ', initialized' if self._initialized else '')

    ## == Properties == ##
    owner = property(lambda self: self._owner)
    mode = property(lambda self: self._mode)
    strict = property(lambda self: self._strict)
    readonly = property(lambda self: self._readonly)
    fallback = property(lambda self: self._fallback() if self._fallback is not None else None)

    def is_initialized(self):
        return self._initialized

    def is_initializing(self):
        return self._initializing

    ## == Internals == ##
    def _guard_initialized(self):
        if not self._initialized:
            raise exceptions.NotInitialized(self._owner)

    def _guard_uninitialized(self):
        if self._initialized:
            raise exceptions.AlreadyInitialized(self._owner)

    def _lookup(self, name):

        ''' Resolve the property for ``name``, or ``None``. '''

        return self._properties.get(name)

    def _property(self, name):

        ''' Resolve the property for ``name``, raising :py:class:`exceptions.Undefined`. '''

        prop = self._lookup(name)
        if prop is None:
            raise exceptions.Undefined(self._owner, name)
        return prop

    def _delegate(self, name):

        ''' Return the fallback if it should answer for ``name``. '''

        fallback = self.fallback
        if fallback is not None and self._lookup(name) is None:
            return fallback
        return None

    def _required_names(self):

        ''' Names that must be supplied at initialization, in declaration order. '''

        return [name for name, prop in self._properties.items() if prop.required]

    def _is_required(self, name, prop):
        return prop.required

    def _writable(self, operation, name):

        ''' Resolve ``name`` for a runtime write, enforcing read-only and mode. '''

        prop = self._property(name)
        self._readonly.guard_call(operation)
        if not Mode.writable(prop.mode):
            raise exceptions.ModeViolation(operation, self._owner, name, prop.mode)
        return prop

    def _adopt(self, prop):

        ''' Bind a property to this manager's base mode. '''

        prop.bind_mode(self._mode)
        return prop

    def _map_positional(self, supplied):

        ''' Split ``supplied`` into named values and positional left-overs.

            Integer keys are matched, in order, to required names. Any
            positional value beyond those is kept with its index shifted
            down by the number of required names. '''

        named, extra = {}, {}
        required = self._required_names()
        for key, value in supplied.items():
            if isinstance(key, int) and not isinstance(key, bool):
                if key < len(required):
                    named[required[key]] = value
                else:
                    extra[key - len(required)] = value
            else:
                named[key] = value
        return named, extra

    ## == Setup == ##
    def add_property(self, prop, validator=None, default=_EMPTY, **options):

        ''' Add a property before initialization.

            :param prop: A :py:class:`Property`, or a name to build one from
              ``validator``, ``default`` and ``options``.
            :returns: The added :py:class:`Property`. '''

        self._guard_uninitialized()
        if not isinstance(prop, Property):
            prop = Property(prop, validator, default, **options)
        if prop.name in self._properties:
            raise exceptions.Defined(self._owner, prop.name)
        self._properties[prop.name] = self._adopt(prop)
        return prop

    def set_remainderer(self, remainderer):

        ''' Set the callable that receives left-over initialization values. '''

        self._guard_uninitialized()
        if not callable(remainderer):
            raise TypeError('Remainderer must be callable, got "%r".' % (remainderer,))
        self._remainderer = remainderer
        return self

    def set_fallback(self, fallback):

        ''' Delegate unknown names to ``fallback``. Held by weak reference. '''

        self._fallback = weakref.ref(fallback)
        return self

    def unset_fallback(self):
        self._fallback = None
        return self

    ## == Initialization == ##
    def initialize(self, supplied=None, mode=None, remainderer=None):

        ''' Initialize properties, exactly once.

            :param supplied: Mapping of names (or positional integer keys) to values.
            :param mode: Replace the base mode before initializing.
            :param remainderer: Replace the remainderer before initializing.
            :raises AlreadyInitialized: If called twice.
            :raises InvalidValues: If supplied values fail validation.
            :raises MissingRequired: If required values are absent.
            :raises Unrecognized: If unknown names remain and no remainderer is set.
            :returns: ``self``. '''

        self._guard_uninitialized()
        if mode is not None:
            for prop in self._properties.values():
                prop.resolve_mode(mode)  # all or nothing
            self._mode = Mode.validate(mode)
            for prop in self._properties.values():
                prop.bind_mode(mode)
        if remainderer is not None:
            self.set_remainderer(remainderer)

        self._initializing = True
        try:
            self._initialize(dict(supplied or {}))
        except Exception:
            for prop in self._properties.values():
                prop.reset()
            raise
        finally:
            self._initializing = False

        self._finalize()
        self._initialized = True
        self.logging.debug('Initialized %s properties for "%s".' % (len(self._properties),
                                                                    self._owner.__class__.__name__))
        return self

    def _initialize(self, supplied):

        ''' Load supplied values and defaults. '''

        values, remainder = self._map_positional(supplied)

        ## supplied values
        invalid, errors = {}, {}
        for name, value in values.items():
            prop = self._lookup(name)
            if prop is None:
                remainder[name] = value
                continue
            if not Mode.initializable(prop.mode):
                raise exceptions.ModeViolation('initialize', self._owner, name, prop.mode)
            error = prop.assign(value, validation.Context.INITIALIZATION, self._strict)
            if error is not None:
                invalid[name], errors[name] = value, error

        if errors:
            self.logging.warning('Invalid values for "%s": %s.' % (self._owner.__class__.__name__,
                                                                    ', '.join(map(str, errors.values()))))
            raise exceptions.InvalidValues(self._owner, invalid, errors)

        ## required values
        missing = []
        for name in self._required_names():
            if name in values:
                continue
            prop = self._lookup(name)
            if prop is None or not prop.has_default:
                missing.append(name)
        if missing:
            raise exceptions.MissingRequired(self._owner, missing)

        ## defaults
        for prop in list(self._properties.values()):
            if prop.loaded == Load.UNSET:
                prop.apply_default(self._owner)

        ## left-overs
        if remainder:
            if self._remainderer is None:
                raise exceptions.Unrecognized(self._owner, list(remainder))
            self.logging.verbose('Handing %s left-over values of "%s" to its remainderer.' % (
                len(remainder), self._owner.__class__.__name__))
            self._remainderer(remainder)
            self._remainderer = None

    def _finalize(self):

        ''' Drop transient properties and lock evaluators. '''

        for name in [n for n, p in self._properties.items() if p.mode == Mode.TRANSIENT]:
            del self._properties[name]
        for prop in self._properties.values():
            prop.evaluators.lock()

    ## == Reads == ##
    def has(self, name):

        ''' Whether ``name`` is managed here or by the fallback. '''

        self._guard_initialized()
        if self._lookup(name) is not None:
            return True
        fallback = self.fallback
        return fallback.has(name) if fallback is not None else False

    def get(self, name):

        ''' Read property ``name``.

            :raises ModeViolation: If its mode is write-only.
            :raises Undefined: If neither this manager nor the fallback has it. '''

        self._guard_initialized()
        fallback = self._delegate(name)
        if fallback is not None:
            return fallback.get(name)
        prop = self._property(name)
        if not Mode.readable(prop.mode):
            raise exceptions.ModeViolation('get', self._owner, name, prop.mode)
        return prop.value

    def is_(self, name):

        ''' Read boolean property ``name``. '''

        self._guard_initialized()
        fallback = self._delegate(name)
        if fallback is not None:
            return fallback.is_(name)
        value = self.get(name)
        if not isinstance(value, bool):
            raise exceptions.NotBoolean(self._owner, name, value)
        return value

    def isset(self, name):

        ''' Whether ``name`` holds a non-``None`` loaded value. '''

        self._guard_initialized()
        fallback = self._delegate(name)
        if fallback is not None:
            return fallback.isset(name)
        prop = self._lookup(name)
        return prop.isset if prop is not None else False

    def loaded(self, name):

        ''' Whether a property object for ``name`` currently exists. '''

        self._guard_initialized()
        return name in self._properties

    def defaulted(self, name):

        ''' Whether ``name`` currently holds its default. '''

        self._guard_initialized()
        fallback = self._delegate(name)
        if fallback is not None:
            return fallback.defaulted(name)
        return self._property(name).defaulted

    def get_all(self):

        ''' Mapping of every readable property to its value, merged over the fallback's. '''

        self._guard_initialized()
        values = dict((n, p.value) for n, p in self._properties.items() if Mode.readable(p.mode))
        fallback = self.fallback
        if fallback is not None:
            for name, value in fallback.get_all().items():
                values.setdefault(name, value)
        return values

    def names(self):

        ''' Names of the property objects held here. '''

        return tuple(self._properties)

    ## == Writes == ##
    def set(self, name, value):

        ''' Write property ``name``.

            Read-only and mode are checked before validation runs.

            :raises ReadonlyEnabled: If the owner is read-only.
            :raises ModeViolation: If the mode forbids runtime writes.
            :raises InvalidValue: If ``value`` fails validation. The
              current value is kept.
            :returns: ``self``. '''

        self._guard_initialized()
        fallback = self._delegate(name)
        if fallback is not None:
            fallback.set(name, value)
            return self

        error = self._writable('set', name).assign(value, validation.Context.ASSIGNMENT, self._strict)
        if error is not None:
            self.logging.warning('Rejected value for "%s": %s.' % (name, error))
            raise exceptions.InvalidValue(self._owner, name, value, error)
        return self

    def try_set(self, name, value):

        ''' Like :py:meth:`set`, but a validation failure is returned
            (as a :py:class:`validation.Failure`) instead of raised.

            :returns: ``None`` on success. '''

        self._guard_initialized()
        fallback = self._delegate(name)
        if fallback is not None:
            return fallback.try_set(name, value)
        return self._writable('set', name).assign(value, validation.Context.ASSIGNMENT, self._strict)

    def unset(self, name):

        ''' Restore ``name`` to its default, or to the unset state.

            :raises RequiredUnset: If ``name`` is required. '''

        self._guard_initialized()
        fallback = self._delegate(name)
        if fallback is not None:
            fallback.unset(name)
            return self

        prop = self._writable('unset', name)
        if self._is_required(name, prop):
            raise exceptions.RequiredUnset(self._owner, name)
        prop.clear(self._owner)
        return self

    ## == Read-only == ##
    def is_readonly(self):
        return self._readonly.is_enabled()

    def set_as_readonly(self):

        ''' Switch the owner to read-only. Idempotent. '''

        self._guard_initialized()
        self._readonly.enable()
        return self


## LazyPropertyManager
# Builds properties on demand through a builder function.
@decorators.config(path='proptools.properties.manager.LazyPropertyManager')
class LazyPropertyManager(PropertyManager):

    ''' Lazy property manager. '''

    def __init__(self, owner, builder=None, names=None, required=None, **kwargs):

        ''' Initialize this manager.

            :param builder: ``builder(name)`` returning a :py:class:`Property`,
              a :py:class:`meta.Entry` or ``None``.
            :param names: Every buildable name (or a callable returning them),
              used by :py:meth:`get_all`.
            :param required: Names that must be supplied at initialization.
            :param kwargs: Passed to :py:class:`PropertyManager`. '''

        self._builder, self._names, self._required = None, names, []
        super(LazyPropertyManager, self).__init__(owner, **kwargs)
        if builder is not None:
            self.set_builder(builder)
        for name in (required or ()):
            self.add_required_name(name)

    ## == Setup == ##
    def add_property(self, prop, validator=None, default=_EMPTY, **options):
        raise exceptions.NotAllowed(self._owner)

    def set_builder(self, builder):

        ''' Set the function that builds properties by name. '''

        self._guard_uninitialized()
        if not callable(builder):
            raise TypeError('Builder must be callable, got "%r".' % (builder,))
        self._builder = builder
        return self

    def add_required_name(self, name):

        ''' Require ``name`` at initialization. '''

        self._guard_uninitialized()
        if self._mode == Mode.STRICT_READ:
            raise exceptions.ModeViolation('require', self._owner, name, self._mode)
        if name not in self._required:
            self._required.append(name)
        return self

    def add_required_names(self, names):
        for name in names:
            self.add_required_name(name)
        return self

    required_names = property(lambda self: tuple(self._required))

    ## == Internals == ##
    def _lookup(self, name):

        ''' Resolve ``name``, building and caching its property on first touch. '''

        prop = self._properties.get(name)
        if prop is not None or self._builder is None:
            return prop

        built = self._builder(name)
        if built is None:
            return None
        if isinstance(built, meta.Entry):
            built = Property.from_entry(name, built)
        if built.name != name:
            raise exceptions.BuilderMismatch(self._owner, name, built.name)
        self._adopt(built)

        if self._initialized:
            if built.mode == Mode.TRANSIENT:
                return None
            built.apply_default(self._owner)
            built.evaluators.lock()

        self._properties[name] = built
        return built

    def _required_names(self):
        return list(self._required)

    def _is_required(self, name, prop):
        return name in self._required

    ## == Initialization == ##
    def initialize(self, supplied=None, mode=None, remainderer=None):

        ''' Initialize, as :py:meth:`PropertyManager.initialize`. A builder must be set. '''

        if self._builder is None:
            self._guard_uninitialized()
            raise exceptions.NoBuilder(self._owner)
        return super(LazyPropertyManager, self).initialize(supplied, mode, remainderer)

    ## == Reads == ##
    def get_all(self):

        ''' As :py:meth:`PropertyManager.get_all`, after building every known name. '''

        self._guard_initialized()
        names = self._names() if callable(self._names) else self._names
        for name in (names or ()):
            self._lookup(name)
        return super(LazyPropertyManager, self).get_all()


__all__ = ['PropertyManager', 'LazyPropertyManager']
