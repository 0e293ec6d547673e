# -*- coding: utf-8 -*-

'''

    proptools properties tests: `proptools.properties`

    testsuite for the things exported by the
    properties API.

    :author: proptools authors
    :license: MIT, see ``LICENSE`` at the root of this project.

'''


# stdlib
import os

# proptools test
from proptools.tests import ProptoolsTest


## PropertiesExportTests
# Tests that things exported by the properties package are there.
class PropertiesExportTests(ProptoolsTest):

    ''' Tests objects exported by `properties`. '''

    def test_concrete(self):

        ''' Test that we can import concrete classes. '''

        try:
            from proptools import properties
            from proptools.properties import Meta
            from proptools.properties import Property
            from proptools.properties import PropertyManager
            from proptools.properties import LazyPropertyManager
            from proptools.properties import ReadonlyManager
            from proptools.properties import Propertied

        except ImportError:  # pragma: no cover
            return self.fail("Failed to import concrete classes exported by properties.")

        else:
            self.assertTrue(Meta)  # must export Meta
            self.assertTrue(Property)  # must export Property
            self.assertTrue(PropertyManager)  # must export PropertyManager
            self.assertTrue(LazyPropertyManager)  # must export LazyPropertyManager
            self.assertTrue(ReadonlyManager)  # must export ReadonlyManager
            self.assertTrue(Propertied)  # must export Propertied
            self.assertIsInstance(properties, type(os))

    def test_package_exports(self):

        ''' Test that the package root re-exports the properties API. '''

        import proptools
        from proptools import properties

        for name in properties.__all__:
            self.assertTrue(hasattr(proptools, name), name)
        self.assertIs(proptools.Propertied, properties.Propertied)

    def test_exceptions(self):

        ''' Test that property errors share a root and builtin bases. '''

        from proptools.exceptions import ProptoolsException
        from proptools.properties import exceptions

        self.assertTrue(issubclass(exceptions.Error, ProptoolsException))
        self.assertTrue(issubclass(exceptions.Undefined, LookupError))
        self.assertTrue(issubclass(exceptions.NotAllowed, AttributeError))
        self.assertTrue(issubclass(exceptions.ReadonlyEnabled, exceptions.NotAllowed))
        self.assertTrue(issubclass(exceptions.InvalidValue, ValueError))

        error = exceptions.ModeViolation('set', 'Car', 'vin', 'r')
        self.assertEqual(error.name, 'vin')
        self.assertEqual(error.mode, 'r')
        self.assertEqual(str(error), 'Cannot set property "vin" of "Car" in mode "r".')
