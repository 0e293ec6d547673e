# -*- coding: utf-8 -*-

'''

    proptools properties tests: declarative hosts

    :author: proptools authors
    :license: MIT, see ``LICENSE`` at the root of this project.

'''

# proptools properties API
from proptools.properties import meta
from proptools.properties import exceptions
from proptools.properties.validation import Text, Integer, Boolean, Choices, Chain, Instance, Coercer
from proptools.properties.host import Propertied, LazyPropertied, PropertyDescriptor

# proptools tests
from proptools.tests import ProptoolsTest


## == Test Hosts == ##

## Car
# Simple host simulating a car.
class Car(Propertied):

    ''' An automobile. '''

    make = Text(non_empty=True)
    doors = Integer(minimum=2), {'default': 4}
    color = Choices(('blue', 'red', 'white')), {'optional': True}
    vin = Text(), {'mode': 'r+', 'optional': True}


## Truck
# Subclass inheriting the car schema.
class Truck(Car):

    ''' A bigger automobile. '''

    payload = Integer(minimum=0), {'default': 1000}


## Person
# Lazy host with a setter and a remainder hook.
class Person(LazyPropertied):

    ''' A human being. '''

    firstname = Text()
    lastname = Text(), {'optional': True}
    active = Boolean(), {'default': True}
    password = Text(), {'mode': 'w--', 'optional': True, 'setter': '_store_password'}

    def __init__(self, *args, **values):
        self._password, self._extra = None, {}
        super(Person, self).__init__(*args, **values)

    def _store_password(self, value):
        self._password = value[::-1]

    def __remainder__(self, remainder):
        self._extra.update(remainder)


## PropertiedTests
# Tests that `Propertied` hosts work properly.
class PropertiedTests(ProptoolsTest):

    ''' Tests `host.Propertied`. '''

    def test_construct(self):

        ''' Construct hosts from keywords, a mapping or positional values. '''

        car = Car(make='BMW', color='white')
        self.assertEqual(car.make, 'BMW')
        self.assertEqual(car.doors, 4)
        self.assertEqual(car.color, 'white')
        self.assertIsNone(car.vin)

        self.assertEqual(Car({'make': 'Volvo'}).make, 'Volvo')
        self.assertEqual(Car('Saab').make, 'Saab')

        with self.assertRaises(exceptions.MissingRequired):
            Car()
        with self.assertRaises(exceptions.InvalidValues):
            Car(make='BMW', color='green')
        with self.assertRaises(exceptions.Unrecognized):
            Car(make='BMW', wings=2)

    def test_schema(self):

        ''' Classes carry a registered schema and descriptors. '''

        self.assertIsInstance(Car.__lookup__, frozenset)
        self.assertEqual(Car.__lookup__, frozenset(('make', 'doors', 'color', 'vin')))
        self.assertIsInstance(Car.__dict__['make'], PropertyDescriptor)
        self.assertIs(meta.lookup('.'.join((Car.__module__, Car.__qualname__))), Car.__meta__)

        # class-level access gives declared defaults
        self.assertEqual(Car.doors, 4)
        self.assertIsNone(Car.make)

    def test_inheritance(self):

        ''' Subclasses extend a clone of their parent's schema. '''

        truck = Truck(make='MAN')
        self.assertEqual(truck.payload, 1000)
        self.assertEqual(truck.doors, 4)
        self.assertIsNot(Truck.__meta__, Car.__meta__)
        self.assertIn('payload', Truck.__meta__)
        self.assertNotIn('payload', Car.__meta__)

        with self.assertRaises(exceptions.Defined):
            class Duplicate(Car):
                make = Text()

    def test_attributes(self):

        ''' Attribute writes go through the manager. '''

        car = Car(make='BMW', vin='V1')
        car.doors = '2'
        self.assertEqual(car.doors, 2)

        with self.assertRaises(exceptions.InvalidValue):
            car.doors = 1
        with self.assertRaises(exceptions.ModeViolation):
            car.vin = 'V2'
        with self.assertRaises(exceptions.Undefined):
            car.wings = 2

        del car.doors
        self.assertEqual(car.doors, 4)
        with self.assertRaises(exceptions.RequiredUnset):
            del car.make

    def test_container(self):

        ''' Hosts act like read-mostly mappings. '''

        car = Car(make='BMW')
        self.assertEqual(car['make'], 'BMW')
        car['color'] = 'red'
        self.assertEqual(car.get('color'), 'red')
        self.assertIn('color', car)
        self.assertNotIn('wings', car)
        self.assertEqual(len(car), 4)
        self.assertEqual(dict(car), {'make': 'BMW', 'doors': 4, 'color': 'red', 'vin': None})
        del car['color']
        self.assertFalse(car.isset('color'))
        self.assertEqual(repr(car), "Car(color=None, doors=4, make='BMW', vin=None)")

    def test_readonly(self):

        ''' Read-only hosts refuse writes and fire callbacks once. '''

        calls = []
        car = Car(make='BMW').add_readonly_callback(lambda: calls.append(1))
        car.set_as_readonly()
        car.set_as_readonly()

        self.assertTrue(car.is_readonly())
        self.assertEqual(calls, [1])
        with self.assertRaises(exceptions.NotAllowed):
            car.doors = 3
        with self.assertRaises(exceptions.NotAllowed):
            car.unset('color')
        with self.assertRaises(exceptions.CallbackAfterEnable):
            car.add_readonly_callback(lambda: None)

    def test_fallback(self):

        ''' Hosts can answer for each other. '''

        class Fleet(Propertied):
            owner = Text(), {'default': 'ACME'}

        fleet = Fleet()
        car = Car(make='BMW').set_fallback(fleet)
        self.assertEqual(car.get('owner'), 'ACME')
        self.assertTrue(car.has('owner'))

    def test_base_mode(self):

        ''' The `__mode__` attribute sets the base mode. '''

        class Frozen(Propertied):
            __mode__ = 'r+'
            name = Text()

        frozen = Frozen(name='x')
        with self.assertRaises(exceptions.ModeViolation):
            frozen.name = 'y'

    def test_normalized_default(self):

        ''' Declared defaults are normalized once, when the class is built. '''

        class Tagged(Propertied):
            label = Chain(Instance(str), Coercer(lambda v: v + '_')), {'default': 'abc'}

        self.assertEqual(Tagged.label, 'abc_')
        self.assertEqual(Tagged().label, 'abc_')
        self.assertTrue(Tagged().defaulted('label'))

    def test_invalid_declarations(self):

        ''' Declarations are checked when the class is built. '''

        with self.assertRaises(TypeError):
            class Bad(Propertied):
                name = Text(), {'indexed': True}

        with self.assertRaises(exceptions.InvalidDefault):
            class Worse(Propertied):
                size = Integer(), {'default': 'big'}


## LazyPropertiedTests
# Tests that `LazyPropertied` hosts work properly.
class LazyPropertiedTests(ProptoolsTest):

    ''' Tests `host.LazyPropertied`. '''

    def test_construct(self):

        ''' Lazy hosts build properties on first touch. '''

        person = Person(firstname='John')
        self.assertFalse(person.properties.loaded('active'))
        self.assertIs(person.active, True)
        self.assertTrue(person.is_('active'))
        self.assertIsNone(person.lastname)

        with self.assertRaises(exceptions.MissingRequired):
            Person(lastname='Doe')

    def test_required_names(self):

        ''' Required names come from the schema. '''

        self.assertEqual(Person(firstname='x').load_required_property_names(), ['firstname'])

    def test_setter_and_transient(self):

        ''' Transient values only reach the setter. '''

        person = Person(firstname='John', password='hunter2')
        self.assertEqual(person._password, '2retnuh')
        self.assertFalse(person.has('password'))

    def test_remainder(self):

        ''' Left-over values reach the remainder hook. '''

        person = Person('John', nickname='JJ')
        self.assertEqual(person.firstname, 'John')
        self.assertEqual(person._extra, {'nickname': 'JJ'})
