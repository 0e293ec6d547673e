# -*- coding: utf-8 -*-

'''

    proptools properties: hosts

    declarative host classes. public class-body attributes holding a
    validation unit (or a ``(unit, options)`` pair) declare properties::

        class Car(Propertied):

            make = Text(non_empty=True)
            doors = Integer(minimum=2), {'default': 4}
            vin = Text(), {'mode': 'r+'}

    each class gets its own :py:class:`meta.Meta` (cloned from its first
    propertied base), registered under the class' dotted path. instances
    hold a :py:class:`manager.PropertyManager` and a
    :py:class:`readonly.ReadonlyManager`, and attribute access goes
    through the manager.

    :author: proptools authors
    :license: MIT, see ``LICENSE`` at the root of this project.

'''

# stdlib
import collections.abc

# proptools util
from proptools.util import decorators
from proptools.util.datastructures import _EMPTY

# properties
from proptools.properties import meta
from proptools.properties import exceptions
from proptools.properties import validation
from proptools.properties.readonly import ReadonlyManager
from proptools.properties.property import Mode, Property
from proptools.properties.manager import PropertyManager, LazyPropertyManager


# options understood in a property declaration, besides `default`
_OPTIONS = frozenset(('mode', 'optional', 'setter'))


def _declaration(value):

    ''' Split a class-body value into ``(unit, options)``, or ``None`` if
        it does not declare a property. '''

    if isinstance(value, validation.ValidationUnit):
        return value, {}
    if (isinstance(value, tuple) and len(value) == 2 and isinstance(value[0], validation.ValidationUnit)
            and isinstance(value[1], dict)):
        return value
    return None


## PropertyDescriptor
# Data descriptor routing attribute access to the instance's manager.
class PropertyDescriptor(object):

    ''' Attribute sugar for one declared property. '''

    __slots__ = ('name',)

    def __init__(self, name):
        self.name = name

    def __get__(self, instance, owner):

        ''' Read through the manager, or give the declared default at class level. '''

        if instance is None:
            entry = owner.__meta__.get(self.name)
            return entry.default if entry.has_default else None
        return instance.properties.get(self.name)

    def __set__(self, instance, value):
        instance.properties.set(self.name, value)

    def __delete__(self, instance):
        instance.properties.unset(self.name)


## PropertiedMeta
# Builds the schema of every propertied class.
class PropertiedMeta(type):

    ''' Metaclass for propertied host classes. '''

    def __new__(mcs, name, bases, namespace):

        ''' Collect declarations, build and register the class schema. '''

        declared = []
        for attr, value in list(namespace.items()):
            if attr.startswith('_'):
                continue
            declaration = _declaration(value)
            if declaration is not None:
                declared.append((attr, declaration))
                del namespace[attr]

        klass = super(PropertiedMeta, mcs).__new__(mcs, name, bases, namespace)
        key = '.'.join((klass.__module__, klass.__qualname__))

        # inherit schemas and options from propertied bases, first base wins
        parents = [b for b in bases if isinstance(b, PropertiedMeta)]
        schema = parents[0].__meta__.clone(key) if parents else meta.Meta(key)
        options = dict(parents[0].__options__) if parents else {}
        for parent in parents[1:]:
            for prop in parent.__meta__:
                schema.adopt(prop, parent.__meta__.get(prop))
                options.setdefault(prop, parent.__options__[prop])

        for prop, (unit, opts) in declared:
            unknown = set(opts) - _OPTIONS - set(('default',))
            if unknown:
                raise TypeError('Unknown options for property "%s" of "%s": %s.' % (
                    prop, name, ', '.join(sorted(unknown))))
            schema.set(prop, unit, opts.get('default', _EMPTY))
            options[prop] = dict((k, v) for k, v in opts.items() if k in _OPTIONS)
            if options[prop].get('mode') is not None:
                Mode.validate(options[prop]['mode'])

        klass.__meta__, klass.__options__, klass.__lookup__ = schema, options, frozenset(schema.names())
        for prop, _ in declared:
            setattr(klass, prop, PropertyDescriptor(prop))
        meta.register(schema, key)
        return klass


## Propertied
# Concrete host class with eagerly-built properties.
@decorators.config(path='proptools.properties.host.Propertied')
class Propertied(object, metaclass=PropertiedMeta):

    ''' Host object whose declared properties live in a :py:class:`PropertyManager`. '''

    __mode__ = None  # base mode, `None` for config default
    __strict__ = None  # strict validation, `None` for config default

    ## = Internal Methods = ##
    def __init__(self, *args, **values):

        ''' Initialize this host. Keyword arguments (or a single mapping)
            name property values, other positional arguments fill required
            properties in declaration order. '''

        if len(args) == 1 and not values and isinstance(args[0], collections.abc.Mapping):
            supplied = dict(args[0])
        else:
            supplied = dict(enumerate(args))
            supplied.update(values)

        self._readonly = ReadonlyManager(self)
        self._properties = self._create_manager()
        remainder = getattr(self, '__remainder__', None)
        self._properties.initialize(supplied, remainderer=remainder)

    def __setattr__(self, name, value):

        ''' Only private attributes and declared properties can be written. '''

        if name.startswith('_') or name in self.__lookup__:
            return super(Propertied, self).__setattr__(name, value)
        raise exceptions.Undefined(self, name)

    def __repr__(self):

        ''' Generate a string representation of this host. '''

        if '_properties' not in self.__dict__ or not self._properties.is_initialized():
            return '<%s (uninitialized)>' % self.__class__.__name__
        return '%s(%s)' % (self.__class__.__name__, ', '.join(
            '%s=%r' % i for i in sorted(self._properties.get_all().items())))

    ## = Manager construction = ##
    def _instantiate(self, name):

        ''' Build the live :py:class:`Property` for schema entry ``name``. '''

        options = dict(self.__options__.get(name, {}))
        setter = options.pop('setter', None)
        if setter is not None:
            options['setter'] = getattr(self, setter)
        return Property.from_entry(name, self.__meta__.get(name), canonical=True, **options)

    def _create_manager(self):

        ''' Create and populate this host's manager. '''

        return PropertyManager(self, mode=self.__mode__, strict=self.__strict__, readonly=self._readonly,
                               properties=[self._instantiate(name) for name in self.__meta__])

    ## = Properties = ##
    properties = property(lambda self: self._properties)
    readonly = property(lambda self: self._readonly)

    ## = Accessors = ##
    def has(self, name):
        return self._properties.has(name)

    def get(self, name):
        return self._properties.get(name)

    def is_(self, name):
        return self._properties.is_(name)

    def isset(self, name):
        return self._properties.isset(name)

    def defaulted(self, name):
        return self._properties.defaulted(name)

    def get_all(self):
        return self._properties.get_all()

    def set(self, name, value):
        self._properties.set(name, value)
        return self

    def try_set(self, name, value):
        return self._properties.try_set(name, value)

    def unset(self, name):
        self._properties.unset(name)
        return self

    def set_fallback(self, fallback):

        ''' Delegate unknown names to ``fallback`` (another host or manager). '''

        self._properties.set_fallback(fallback)
        return self

    ## = Read-only = ##
    def is_readonly(self):
        return self._readonly.is_enabled()

    def set_as_readonly(self):
        self._properties.set_as_readonly()
        return self

    def add_readonly_callback(self, callback):
        self._readonly.add_callback(callback)
        return self

    ## = Container protocol = ##
    __getitem__ = lambda self, name: self._properties.get(name)
    __setitem__ = lambda self, name, value: self._properties.set(name, value)
    __delitem__ = lambda self, name: self._properties.unset(name)
    __contains__ = lambda self, name: self._properties.has(name)
    __len__ = lambda self: len(self._properties.get_all())
    __iter__ = lambda self: iter(self._properties.get_all().items())


## LazyPropertied
# Host class whose properties are built on first touch.
@decorators.config(path='proptools.properties.host.LazyPropertied')
class LazyPropertied(Propertied):

    ''' Host object backed by a :py:class:`LazyPropertyManager`. '''

    def _build(self, name):

        ''' Builder function handed to the manager. '''

        return self._instantiate(name) if name in self.__meta__ else None

    def _create_manager(self):

        ''' Create this host's lazy manager. '''

        manager = LazyPropertyManager(self, builder=self._build, names=self.__meta__.names, mode=self.__mode__,
                                      strict=self.__strict__, readonly=self._readonly)
        if manager.mode != Mode.STRICT_READ:
            manager.add_required_names(self.load_required_property_names())
        return manager

    def load_required_property_names(self):

        ''' Names required at initialization. Default: entries without a
            default that are neither optional nor strict-read. '''

        names = []
        for name in self.__meta__:
            options = self.__options__.get(name, {})
            if self.__meta__.get(name).has_default or options.get('optional', False):
                continue
            if options.get('mode') == Mode.STRICT_READ:
                continue
            names.append(name)
        return names


__all__ = ['PropertyDescriptor', 'PropertiedMeta', 'Propertied', 'LazyPropertied']
