# -*- coding: utf-8 -*-

# meta
__doc__ = '''

    proptools: properties API
    -------------------------------------------------
    |                                               |
    |   `proptools.properties`                      |
    |                                               |
    |   typed, validated, access-controlled         |
    |   properties for plain python objects.        |
    |                                               |
    -------------------------------------------------

'''

# properties: errors
from proptools.properties import exceptions

# properties: validation
from proptools.properties.validation import Context
from proptools.properties.validation import Failure
from proptools.properties.validation import Processed
from proptools.properties.validation import ValidationUnit
from proptools.properties.validation import Evaluator
from proptools.properties.validation import Coercer
from proptools.properties.validation import AnyType
from proptools.properties.validation import Boolean
from proptools.properties.validation import Number
from proptools.properties.validation import Integer
from proptools.properties.validation import Float
from proptools.properties.validation import Text
from proptools.properties.validation import Choices
from proptools.properties.validation import Instance
from proptools.properties.validation import Callable
from proptools.properties.validation import Nullable
from proptools.properties.validation import Chain
from proptools.properties.validation import Adapted
from proptools.properties.evaluators import Evaluators

# properties: schemas
from proptools.properties.meta import Entry
from proptools.properties.meta import Meta

# properties: live state
from proptools.properties.property import Mode
from proptools.properties.property import Load
from proptools.properties.property import Property
from proptools.properties.readonly import ReadonlyManager
from proptools.properties.manager import PropertyManager
from proptools.properties.manager import LazyPropertyManager

# properties: hosts
from proptools.properties.host import PropertiedMeta
from proptools.properties.host import Propertied
from proptools.properties.host import LazyPropertied


# Module Globals
__validation__ = [Context, Failure, Processed, ValidationUnit, Evaluator, Coercer, AnyType, Boolean, Number,
                  Integer, Float, Text, Choices, Instance, Callable, Nullable, Chain, Adapted,
                  Evaluators]
__concrete__ = [Entry, Meta, Mode, Load, Property, ReadonlyManager, PropertyManager, LazyPropertyManager,
                PropertiedMeta, Propertied, LazyPropertied]
__all__ = ['exceptions'] + [i.__name__ for i in __validation__ + __concrete__]
