# -*- coding: utf-8 -*-

'''

    proptools properties: evaluators

    an :py:class:`Evaluators` chain is the validator a property owns. it
    holds an ordered list of validation units, runs them in sequence and
    can be locked once its owner is initialized.

    :author: proptools authors
    :license: MIT, see ``LICENSE`` at the root of this project.

'''

# proptools util
from proptools.util import decorators

# properties
from proptools.properties import exceptions
from proptools.properties import validation


## Evaluators
# Ordered, lockable chain of validation units owned by a single property.
@decorators.config(path='proptools.properties.evaluators.Evaluators')
class Evaluators(validation.ValidationUnit):

    ''' Chain of validation units. '''

    def __init__(self, owner=None):

        ''' Initialize this chain for ``owner``. '''

        self._owner = owner
        self._units, self._callbacks, self._locked = [], [], False

    ## == Internals == ##
    def _guard(self, operation):

        ''' Refuse mutation of a locked chain. '''

        if self._locked:
            raise exceptions.EvaluatorsLocked(operation, self._owner)

    ## == Properties == ##
    owner = property(lambda self: self._owner)
    is_locked = property(lambda self: self._locked)

    @property
    def expected(self):

        ''' Join the expectations of every unit in this chain. '''

        return ' and '.join(i.expected for i in self._units if i.expected) or None

    ## == Mutation == ##
    def add(self, evaluator):

        ''' Append ``evaluator`` (anything :py:func:`validation.resolve` takes). '''

        self._guard('add')
        unit = validation.resolve(evaluator)
        self._units.append(unit)
        for callback in self._callbacks:
            callback(unit)
        return self

    def set(self, evaluator):

        ''' Replace the whole chain with ``evaluator``. '''

        self._guard('set')
        del self._units[:]
        return self.add(evaluator)

    def clear(self):

        ''' Remove every unit. '''

        self._guard('clear')
        del self._units[:]
        return self

    def get_all(self):

        ''' Return the units in this chain, in order. '''

        return tuple(self._units)

    def add_addition_callback(self, callback):

        ''' Register ``callback(unit)``, fired for every unit added from now on. '''

        self._guard('add callbacks to')
        if not callable(callback):
            raise TypeError('Addition callback must be callable, got "%r".' % (callback,))
        self._callbacks.append(callback)
        return self

    def lock(self):

        ''' Forbid further changes. Idempotent. '''

        self._locked = True
        return self

    def clone_for_owner(self, owner):

        ''' Copy units and callbacks into a new, unlocked chain for ``owner``. '''

        clone = self.__class__(owner)
        clone._units, clone._callbacks = list(self._units), list(self._callbacks)
        return clone

    ## == Presets == ##
    def _preset(self, unit, nullable):
        return self.set(validation.Nullable(unit) if nullable else unit)

    def as_boolean(self, nullable=False):
        return self._preset(validation.Boolean(), nullable)

    def as_integer(self, nullable=False, minimum=None, maximum=None):
        return self._preset(validation.Integer(minimum, maximum), nullable)

    def as_float(self, nullable=False, minimum=None, maximum=None):
        return self._preset(validation.Float(minimum, maximum), nullable)

    def as_number(self, nullable=False, minimum=None, maximum=None):
        return self._preset(validation.Number(minimum, maximum), nullable)

    def as_string(self, nullable=False, non_empty=False, max_length=None):
        return self._preset(validation.Text(non_empty, max_length), nullable)

    def as_instance(self, *types, nullable=False):
        return self._preset(validation.Instance(*types), nullable)

    def as_callable(self, nullable=False):
        return self._preset(validation.Callable(), nullable)

    ## == Validation == ##
    def evaluate(self, value, context, strict):

        ''' Run every unit in order, stopping at the first failure. '''

        for unit in self._units:
            value = unit.evaluate(value, context, strict)
            if isinstance(value, validation.Failure):
                return value
        return value

    def __len__(self):
        return len(self._units)

    def __iter__(self):
        return iter(self._units)

    def __repr__(self):
        return 'Evaluators(%s%s)' % (', '.join(repr(i) for i in self._units), ', locked' if self._locked else '')
