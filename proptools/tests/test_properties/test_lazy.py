# -*- coding: utf-8 -*-

'''

    proptools properties tests: lazy property manager

    :author: proptools authors
    :license: MIT, see ``LICENSE`` at the root of this project.

'''

# proptools properties API
from proptools.properties import exceptions
from proptools.properties import validation
from proptools.properties.meta import Meta
from proptools.properties.property import Property
from proptools.properties.manager import LazyPropertyManager

# proptools tests
from proptools.tests import ProptoolsTest


class Owner(object):
    pass


## LazyManagerTests
# Tests `LazyPropertyManager`.
class LazyManagerTests(ProptoolsTest):

    ''' Tests on-demand property building. '''

    def setUp(self):

        ''' Prepare a schema-backed builder that records what it builds. '''

        super(LazyManagerTests, self).setUp()
        self.built = []
        self.schema = (Meta('tests.Lazy')
                       .set('name', validation.Text())
                       .set('size', validation.Integer(), 1)
                       .set('note', validation.Text()))

    def builder(self, name):
        if not self.schema.has(name):
            return None
        self.built.append(name)
        return self.schema.get(name)

    def manager(self, **kwargs):
        return LazyPropertyManager(Owner(), builder=self.builder, names=self.schema.names, **kwargs)

    def test_builds_on_demand(self):

        ''' Only touched properties are built, once each. '''

        manager = self.manager(required=['name']).initialize({'name': 'box'})
        self.assertEqual(self.built, ['name'])
        self.assertFalse(manager.loaded('size'))

        self.assertEqual(manager.get('size'), 1)
        self.assertTrue(manager.defaulted('size'))
        manager.get('size')
        self.assertEqual(self.built, ['name', 'size'])
        self.assertTrue(manager.loaded('size'))

    def test_required_names(self):

        ''' Required names are checked against supplied names. '''

        manager = self.manager().add_required_names(['name', 'name'])
        self.assertEqual(manager.required_names, ('name',))
        with self.assertRaises(exceptions.MissingRequired) as context:
            manager.initialize({'size': 2})
        self.assertEqual(context.exception.names, ['name'])

        self.assertIsNone(self.manager(required=['size']).initialize().get('note'))

    def test_positional(self):

        ''' Integer keys map onto required names. '''

        manager = self.manager(required=['name']).initialize({0: 'box'})
        self.assertEqual(manager.get('name'), 'box')

    def test_undefined_and_unrecognized(self):

        ''' Names the builder refuses are undefined, or unrecognized at initialization. '''

        manager = self.manager().initialize()
        with self.assertRaises(exceptions.Undefined):
            manager.get('weight')
        self.assertFalse(manager.has('weight'))

        with self.assertRaises(exceptions.Unrecognized):
            self.manager().initialize({'weight': 3})

    def test_no_builder(self):

        ''' A builder is mandatory. '''

        with self.assertRaises(exceptions.NoBuilder):
            LazyPropertyManager(Owner()).initialize()
        with self.assertRaises(TypeError):
            LazyPropertyManager(Owner(), builder='nope')

    def test_builder_mismatch(self):

        ''' Builders must build the requested name. '''

        manager = LazyPropertyManager(Owner(), builder=lambda name: Property('other')).initialize()
        with self.assertRaises(exceptions.BuilderMismatch) as context:
            manager.get('name')
        self.assertEqual(context.exception.built, 'other')

    def test_required_under_strict_read(self):

        ''' Strict-read managers take no required names. '''

        with self.assertRaises(exceptions.ModeViolation):
            self.manager(mode='r').add_required_name('name')

    def test_unset_required(self):

        ''' Required names cannot be unset. '''

        manager = self.manager(required=['name']).initialize({'name': 'box'})
        with self.assertRaises(exceptions.RequiredUnset):
            manager.unset('name')
        manager.set('note', 'fragile').unset('note')
        self.assertFalse(manager.isset('note'))

    def test_get_all(self):

        ''' `get_all` builds every known name. '''

        manager = self.manager().initialize({'name': 'box'})
        self.assertEqual(manager.get_all(), {'name': 'box', 'size': 1, 'note': None})

    def test_no_adding(self):

        ''' Properties come from the builder only. '''

        with self.assertRaises(exceptions.NotAllowed):
            self.manager().add_property('extra')

    def test_transient(self):

        ''' Transient properties are gone after initialization. '''

        seen = []

        def builder(name):
            if name == 'secret':
                return Property('secret', mode='w--', setter=seen.append)
            return None

        manager = LazyPropertyManager(Owner(), builder=builder).initialize({'secret': 'x'})
        self.assertEqual(seen, ['x'])
        self.assertFalse(manager.has('secret'))
