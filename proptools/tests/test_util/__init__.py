# -*- coding: utf-8 -*-

'''

    proptools util tests: `proptools.util`

    testsuite for the small pieces in the util
    package: decorators and datastructures.

    :author: proptools authors
    :license: MIT, see ``LICENSE`` at the root of this project.

'''


# stdlib
import copy

# proptools util
from proptools.util import decorators
from proptools.util.datastructures import Sentinel, _EMPTY

# proptools test
from proptools.tests import ProptoolsTest


## DecoratorTests
# Tests the util decorators.
class DecoratorTests(ProptoolsTest):

    ''' Tests `util.decorators`. '''

    def test_memoize(self):

        ''' Memoized properties compute once per instance. '''

        class Counter(object):
            calls = 0

            @decorators.memoize
            def value(self):
                Counter.calls += 1
                return Counter.calls

        first, second = Counter(), Counter()
        self.assertEqual((first.value, first.value), (1, 1))
        self.assertEqual(second.value, 2)
        self.assertIsInstance(Counter.value, decorators.memoize)

    def test_classproperty(self):

        ''' Class properties resolve against the class. '''

        class Sample(object):
            kind = decorators.classproperty(lambda cls: cls.__name__)

        self.assertEqual(Sample.kind, 'Sample')
        self.assertEqual(Sample().kind, 'Sample')

    def test_config_injection(self):

        ''' The config decorator injects a path, config and a logging pipe. '''

        @decorators.config(path='proptools.tests.Injected')
        class Injected(object):
            pass

        self.assertEqual(Injected._config_path, 'proptools.tests.Injected')
        self.assertEqual(Injected.config, {'debug': False})
        self.assertEqual(Injected.logging.name, 'proptools.tests.Injected')
        self.assertFalse(Injected.logging.conditional)

        @decorators.config()
        class Defaulted(object):
            pass

        self.assertEqual(Defaulted._config_path, '.'.join((__name__, 'Defaulted')))


## SentinelTests
# Tests sentinel values.
class SentinelTests(ProptoolsTest):

    ''' Tests `datastructures.Sentinel`. '''

    def test_sentinel(self):

        ''' Sentinels are named, optionally falsy, and never copied. '''

        self.assertFalse(_EMPTY)
        self.assertTrue(Sentinel('TRUTHY'))
        self.assertEqual(repr(_EMPTY), '<Sentinel "EMPTY">')
        self.assertIs(copy.copy(_EMPTY), _EMPTY)
        self.assertIs(copy.deepcopy({'a': _EMPTY})['a'], _EMPTY)
