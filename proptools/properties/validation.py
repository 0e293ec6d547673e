# -*- coding: utf-8 -*-

'''

    proptools properties: validation

    the validation-unit contract consumed by schemas, properties and
    managers, plus the builtin units.

    every unit exposes ``process(value, context, strict)``, which returns
    a :py:class:`Processed` bundle of ``(value, error)``. on success the
    value is the canonical (possibly coerced) value and ``error`` is
    ``None``. on failure ``error`` is a :py:class:`Failure` and the value
    is the very object that was handed in, untouched.

    :author: proptools authors
    :license: MIT, see ``LICENSE`` at the root of this project.

'''

# stdlib
import abc
import numbers
import operator


## Context
# Where a value is being processed, handed to every unit.
class Context(object):

    ''' Processing contexts. '''

    INTERNAL = 'internal'  # direct use of a unit or schema
    DEFINITION = 'definition'  # defaults, at schema definition time
    INITIALIZATION = 'initialization'  # values supplied to `initialize`
    ASSIGNMENT = 'assignment'  # runtime writes through a manager

    ALL = frozenset((INTERNAL, DEFINITION, INITIALIZATION, ASSIGNMENT))


## Failure
# Structured failure descriptor returned (never raised) by validation units.
class Failure(object):

    ''' Describes why a value was rejected. '''

    __slots__ = ('expected', 'value', 'message', 'name', 'context')

    def __init__(self, expected=None, value=None, message=None, name=None, context=None):

        ''' Initialize this Failure. '''

        self.expected, self.value, self.message, self.name, self.context = expected, value, message, name, context

    def tag(self, name):

        ''' Return a copy of this failure tagged with a property name. '''

        return self.__class__(self.expected, self.value, self.message, name, self.context)

    def __repr__(self):

        ''' Generate a string representation of this Failure. '''

        parts = []
        if self.name is not None:
            parts.append('"%s": ' % self.name)
        if self.expected is not None:
            parts.append('expected %s, got %r' % (self.expected, self.value))
        else:
            parts.append('invalid value %r' % (self.value,))
        if self.message:
            parts.append(' (%s)' % self.message)
        return ''.join(parts)

    __str__ = __repr__


## Processed
# Small tuple bundling a processed value with its failure, if any.
class Processed(tuple):

    ''' Named-tuple class for ``(value, error)`` processing results. '''

    __slots__ = tuple()
    __fields__ = ('value', 'error')

    def __new__(_cls, value, error=None):

        ''' Create a new `Processed` instance. '''

        return tuple.__new__(_cls, (value, error))

    # util: generate a string representation of this result
    __repr__ = lambda self: "Processed(%r, %s)" % (self[0], 'ok' if self[1] is None else self[1])

    # util: reduce arguments for pickle
    __getnewargs__ = lambda self: tuple(self)

    # util: map value and error properties
    value = property(operator.itemgetter(0), doc='Alias for `Processed.value` at index 0.')
    error = property(operator.itemgetter(1), doc='Alias for `Processed.error` at index 1.')
    ok = property(lambda self: self[1] is None, doc='Whether processing succeeded.')


## ValidationUnit
# Abstract parent for everything that validates and coerces values.
class ValidationUnit(object, metaclass=abc.ABCMeta):

    ''' Abstract validation unit. '''

    expected = 'a valid value'

    def process(self, value, context=Context.INTERNAL, strict=False):

        ''' Validate and coerce ``value``.

            :param value: The value to process.
            :param context: One of :py:class:`Context`.
            :param strict: Disallow coercion, only canonical values pass.
            :returns: :py:class:`Processed`; on failure its value is ``value`` itself. '''

        result = self.evaluate(value, context, strict)
        if isinstance(result, Failure):
            if result.context is None:
                result.context = context
            return Processed(value, result)
        return Processed(result)

    @abc.abstractmethod
    def evaluate(self, value, context, strict):  # pragma: no cover

        ''' Return the canonical value, or a :py:class:`Failure`. Must be overridden. '''

        raise NotImplementedError('Method `ValidationUnit.evaluate` must be overridden by subclasses.')

    def fail(self, value, message=None):

        ''' Build a failure for ``value`` against this unit's expectation. '''

        return Failure(self.expected, value, message)

    # util: generate a string representation of this unit
    __repr__ = lambda self: '%s(%s)' % (self.__class__.__name__, self.expected)


## == Evaluator flavors == ##

## Evaluator
# Boolean-returning closure. A `False` verdict is a failure with no detail.
class Evaluator(ValidationUnit):

    ''' Wraps a predicate ``fn(value) -> bool``. '''

    def __init__(self, fn, expected=None):

        ''' Initialize this Evaluator. '''

        if not callable(fn):
            raise TypeError('Evaluator requires a callable, got "%r".' % (fn,))
        self.fn, self.expected = fn, expected

    def evaluate(self, value, context, strict):

        ''' Accept ``value`` as-is if the predicate holds. '''

        return value if self.fn(value) else Failure(self.expected, value)

    __repr__ = lambda self: 'Evaluator(%s)' % getattr(self.fn, '__name__', self.fn)


## Coercer
# Converting closure. `TypeError`/`ValueError` raised by the function become failures.
class Coercer(ValidationUnit):

    ''' Wraps a converter ``fn(value) -> value``. '''

    def __init__(self, fn, expected=None):

        ''' Initialize this Coercer. '''

        if not callable(fn):
            raise TypeError('Coercer requires a callable, got "%r".' % (fn,))
        self.fn, self.expected = fn, expected

    def evaluate(self, value, context, strict):

        ''' Convert ``value``; in strict mode the conversion must be a no-op. '''

        try:
            coerced = self.fn(value)
        except (TypeError, ValueError) as e:
            return self.fail(value, str(e))
        if strict and (type(coerced) is not type(value) or coerced != value):
            return self.fail(value, 'strict mode forbids coercion')
        return coerced

    __repr__ = lambda self: 'Coercer(%s)' % getattr(self.fn, '__name__', self.fn)


## == Type processors == ##

class AnyType(ValidationUnit):

    ''' Accepts anything. '''

    expected = 'any value'

    def evaluate(self, value, context, strict):
        return value


class Boolean(ValidationUnit):

    ''' Booleans. Non-strict mode also takes ``0``/``1`` and boolean words. '''

    expected = 'a boolean'

    _truthy = frozenset(('1', 'true', 'on', 'yes', 't', 'y'))
    _falsy = frozenset(('0', 'false', 'off', 'no', 'f', 'n'))

    def evaluate(self, value, context, strict):

        ''' Coerce to ``bool``. '''

        if isinstance(value, bool):
            return value
        if strict:
            return self.fail(value)
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        if isinstance(value, str):
            word = value.strip().lower()
            if word in self._truthy:
                return True
            if word in self._falsy:
                return False
        return self.fail(value)


class Number(ValidationUnit):

    ''' Integers and floats (never booleans). Numeric strings are parsed in non-strict mode. '''

    expected = 'a number'

    def __init__(self, minimum=None, maximum=None):

        ''' Initialize this Number type, with an optional inclusive range. '''

        self.minimum, self.maximum = minimum, maximum

    def _coerce(self, value, strict):

        ''' Produce a number from ``value``, or ``None``. '''

        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return value
        if not strict and isinstance(value, str):
            text = value.strip()
            try:
                return int(text)
            except ValueError:
                try:
                    return float(text)
                except ValueError:
                    return None
        return None

    def _bounded(self, number, value):

        ''' Check the inclusive range. '''

        if self.minimum is not None and number < self.minimum:
            return self.fail(value, 'minimum is %s' % self.minimum)
        if self.maximum is not None and number > self.maximum:
            return self.fail(value, 'maximum is %s' % self.maximum)
        return number

    def evaluate(self, value, context, strict):
        number = self._coerce(value, strict)
        if number is None:
            return self.fail(value)
        return self._bounded(number, value)


class Integer(Number):

    ''' Integers. Non-strict mode takes integral floats and integer strings. '''

    expected = 'an integer'

    def _coerce(self, value, strict):
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if strict:
            return None
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                return None
        return None


class Float(Number):

    ''' Floats. Non-strict mode takes integers and numeric strings. '''

    expected = 'a float'

    def _coerce(self, value, strict):
        if isinstance(value, bool):
            return None
        if isinstance(value, float):
            return value
        if strict:
            return None
        if isinstance(value, numbers.Real):
            return float(value)
        if isinstance(value, str):
            try:
                return float(value.strip())
            except ValueError:
                return None
        return None


class Text(ValidationUnit):

    ''' Strings. Non-strict mode also stringifies numbers. '''

    expected = 'a string'

    def __init__(self, non_empty=False, max_length=None):

        ''' Initialize this Text type. '''

        self.non_empty, self.max_length = non_empty, max_length

    def evaluate(self, value, context, strict):

        ''' Coerce to ``str`` and check length constraints. '''

        if isinstance(value, str):
            text = value
        elif not strict and isinstance(value, (int, float)) and not isinstance(value, bool):
            text = str(value)
        else:
            return self.fail(value)

        if self.non_empty and not text:
            return self.fail(value, 'must not be empty')
        if self.max_length is not None and len(text) > self.max_length:
            return self.fail(value, 'maximum length is %s' % self.max_length)
        return text


class Choices(ValidationUnit):

    ''' One of a fixed set of values. '''

    def __init__(self, values):

        ''' Initialize with the allowed values. '''

        self.values = tuple(values)
        self.expected = 'one of (%s)' % ', '.join(repr(i) for i in self.values)

    def evaluate(self, value, context, strict):
        return value if value in self.values else self.fail(value)


class Instance(ValidationUnit):

    ''' Instances of one or more classes. '''

    def __init__(self, *types):

        ''' Initialize with the accepted classes. '''

        if not types:
            raise TypeError('Instance requires at least one class.')
        self.types = types
        self.expected = 'an instance of %s' % ' or '.join(i.__name__ for i in types)

    def evaluate(self, value, context, strict):
        return value if isinstance(value, self.types) else self.fail(value)


class Callable(ValidationUnit):

    ''' Callables. '''

    expected = 'a callable'

    def evaluate(self, value, context, strict):
        return value if callable(value) else self.fail(value)


class Nullable(ValidationUnit):

    ''' ``None``, or whatever the wrapped unit accepts. '''

    def __init__(self, inner):

        ''' Wrap a unit. '''

        self.inner = resolve(inner)
        self.expected = '%s or None' % self.inner.expected

    def evaluate(self, value, context, strict):
        if value is None:
            return None
        return self.inner.evaluate(value, context, strict)


class Chain(ValidationUnit):

    ''' Several units applied in sequence, each fed the previous unit's output. '''

    def __init__(self, *units):

        ''' Initialize with the units to chain. '''

        self.units = tuple(resolve(i) for i in units)

    @property
    def expected(self):

        ''' Join the expectations of all chained units. '''

        return ' and '.join(i.expected for i in self.units if i.expected) or None

    def evaluate(self, value, context, strict):
        for unit in self.units:
            value = unit.evaluate(value, context, strict)
            if isinstance(value, Failure):
                return value
        return value


## Adapted
# Foreign objects honouring the `process` contract without subclassing.
class Adapted(ValidationUnit):

    ''' Wraps any object with a ``process(value, context, strict) -> (value, error)`` method. '''

    def __init__(self, target):
        self.target, self.expected = target, getattr(target, 'expected', None)

    def evaluate(self, value, context, strict):

        ''' Delegate to the wrapped object, turning foreign errors into failures. '''

        result, error = self.target.process(value, context, strict)
        if error is None:
            return result
        if isinstance(error, Failure):
            return error
        return Failure(self.expected, value, str(error) or None)


def resolve(validator):

    ''' Resolve ``validator`` into a :py:class:`ValidationUnit`.

        ``None`` accepts anything, units pass through, other objects with a
        ``process`` method are :py:class:`Adapted`, plain callables are
        boolean evaluators, and lists/tuples become a :py:class:`Chain`. '''

    if validator is None:
        return AnyType()
    if isinstance(validator, ValidationUnit):
        return validator
    if isinstance(validator, (list, tuple)):
        return Chain(*validator)
    if not isinstance(validator, type) and callable(getattr(validator, 'process', None)):
        return Adapted(validator)
    if callable(validator):
        return Evaluator(validator)
    raise TypeError('Cannot resolve "%r" into a validation unit.' % (validator,))


__all__ = ['Context', 'Failure', 'Processed', 'ValidationUnit', 'Evaluator', 'Coercer',
           'AnyType', 'Boolean', 'Number', 'Integer', 'Float', 'Text', 'Choices',
           'Instance', 'Callable', 'Nullable', 'Chain', 'Adapted', 'resolve']
