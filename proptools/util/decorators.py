# -*- coding: utf-8 -*-

'''

    proptools util: decorators

    this package provides useful decorators that crosscut the regular
    functional bounds of proptools' main packages. stuff in here is
    generally used everywhere.

    :author: proptools authors
    :license: MIT, see ``LICENSE`` at the root of this project.

'''


## ``classproperty`` - use like ``@property``, but at the class-level.
class classproperty(property):

    ''' Custom decorator for class-level property getters.
        Usable like ``@property``. '''

    def __get__(self, instance, owner):

        ''' Return the property value at the class level.

            :param instance: Current encapsulating object
            dispatching via the descriptor protocol,
            ``None`` if we are being dispatched from the
            class level.

            :param owner: Corresponding owner type, available
            whether we're dispatching at the class or instance
            level.

            :returns: Result of a ``classmethod``-wrapped,
            ``property``-decorated method. '''

        return classmethod(self.fget).__get__(None, owner)()


## ``memoize`` - cache the output of a property descriptor call
class memoize(property):

    ''' Custom decorator for property memoization. The first
        call for a given instance is cached on that instance,
        under ``__memo_<name>__``. '''

    def __get__(self, instance, owner):

        ''' If we have a cached value attached to this
            instance, return it.

            :param instance: Current encapsulating object
            dispatching via the descriptor protocol, or
            ``None`` if we are being dispatched from the
            class level.

            :param owner: Owner type for encapsulating
            object.

            :returns: Cached value, if any. If there is
            no cached value, defers to decorated method. '''

        if instance is None:
            return self

        slot = '__memo_%s__' % self.fget.__name__
        cache = instance.__dict__
        if slot not in cache:
            cache[slot] = self.fget(instance)
        return cache[slot]


## ``config`` - markup a class for proptools structure.
def config(debug=False, path=None):

    ''' Prepare to inject config/path values
        at ``debug`` and ``path``.

        :param debug: Default value for class-level
        ``debug`` flag. Overridden in config. Defaults
        to ``False``.

        :param path: String path to configuration blob
        in main appconfig. Defaults to Python module/name
        classpath of injectee.

        :returns: Closure that constructs an injected
        target class. '''

    # build injection closure
    def inject(klass):

        ''' Injection closure that prepares ``klass``
            with basic proptools structure.

            :param klass: Target class slated for injection.
            :returns: Injected class structure. '''

        def _config(cls):

            ''' Named config pipe. Resolves configuration
                at the local class' :py:attr:`cls._config_path`,
                layered over the package-wide debug flag.

                :returns: Configuration ``dict`` from the main
                appconfig, or a default ``dict`` of
                ``{'debug': <debug>}``. '''

            import proptools

            system = proptools.cfg.get('proptools.system', {}).get('config', {})
            resolved = {'debug': debug or system.get('debug', False)}
            resolved.update(proptools.cfg.get(cls._config_path, {}))
            if system.get('debug', False):
                resolved['debug'] = True
            return resolved

        def _logging(cls):

            ''' Named logging pipe. Prepares a Logbook-backed
                ``Logger`` via config path and class name, gated
                by the class' ``debug`` config flag.

                :returns: Customized :py:class:`debug.ProptoolsLogger`,
                attached with injectee's config path. '''

            from proptools.util import debug as _debug

            _csplit = cls._config_path.split('.')
            return _debug.ProptoolsLogger(**{
                'path': '.'.join(_csplit[:-1]),
                'name': _csplit[-1]
            })._setcondition(cls.config.get('debug', False))

        # attach injected properties and classmethods
        klass._config_path = path or '.'.join((klass.__module__, klass.__name__))
        klass.config, klass.logging = classproperty(_config), classproperty(_logging)
        return klass

    return inject
