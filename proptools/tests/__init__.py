# -*- coding: utf-8 -*-

'''

    proptools: testsuite
    -------------------------------------------------
    |                                               |
    |   `proptools.tests`                           |
    |                                               |
    |   unit testing tools and test cases for       |
    |   proptools and encapsulating apps.           |
    |                                               |
    -------------------------------------------------

'''

# Base Imports
import sys
import unittest

# Logbook
import logbook


# Builtin Test Paths
_TEST_PATHS = [
    'proptools.tests.test_util',  # config/logging testsuite
    'proptools.tests.test_util.test_config',
    'proptools.tests.test_util.test_debug',
    'proptools.tests.test_properties',  # properties API testsuite
    'proptools.tests.test_properties.test_validation',
    'proptools.tests.test_properties.test_evaluators',
    'proptools.tests.test_properties.test_meta',
    'proptools.tests.test_properties.test_readonly',
    'proptools.tests.test_properties.test_property',
    'proptools.tests.test_properties.test_manager',
    'proptools.tests.test_properties.test_lazy',
    'proptools.tests.test_properties.test_host'
]


## ProptoolsTestCase - Parent class for proptools and application-level tests.
class ProptoolsTestCase(unittest.TestCase):

    ''' A test case that captures log output while it runs. '''

    ## == Logging == ##
    handler = None

    def setUp(self):

        ''' Push a Logbook test handler, so log records can be asserted. '''

        self.handler = logbook.TestHandler()
        self.handler.push_context()

    def tearDown(self):

        ''' Pop the test handler. '''

        self.handler.pop_context()


## AppTest - Test case that originates from an app built on proptools.
class AppTest(ProptoolsTestCase):
    pass


## ProptoolsTest - Test case for a test that is part of proptools.
class ProptoolsTest(ProptoolsTestCase):
    pass


## `load_test_module` - Load a single testsuite module.
def load_test_module(path):

    ''' Load every test case found at ``path``. '''

    suite = unittest.TestSuite()
    suite.addTest(unittest.TestLoader().loadTestsFromName(path))
    return suite


## `load_testsuite` - Gather proptools testsuites.
def load_testsuite(paths=None):

    ''' __main__ entrypoint '''

    ProptoolsTests = unittest.TestSuite()

    if paths is None:
        paths = _TEST_PATHS[:]

    for path in paths:
        ProptoolsTests.addTest(load_test_module(path))

    return ProptoolsTests


## `run_testsuite` - Run a suite of tests loaded via `load_testsuite`.
def run_testsuite(suite=None, args=None):

    ''' Optionally allow switching between XML or text output.

        :param suite: Suite to run, defaults to :py:func:`load_testsuite`.
        :param args: ``[<format>, <output location>]``, defaults to ``sys.argv[1:]``. '''

    if suite is None:
        suite = load_testsuite()
    if args is None:
        args = sys.argv[1:]  # slice off invocation

    if len(args) == 2:  # <format>, <output location>
        format, output = tuple(args)

        if format.lower().strip() == 'xml':
            import xmlrunner
            return xmlrunner.XMLTestRunner(output=output).run(suite)

    return unittest.TextTestRunner(verbosity=2).run(suite)


if __name__ == '__main__':  # pragma: no cover
    run_testsuite(load_testsuite())
