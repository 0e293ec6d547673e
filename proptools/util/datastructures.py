# -*- coding: utf-8 -*-

'''

    proptools util: datastructures

    holds small specialized datastructures shared across proptools.

    :author: proptools authors
    :license: MIT, see ``LICENSE`` at the root of this project.

'''


class Sentinel(object):

    ''' Create a named sentinel object. '''

    __slots__ = ('name', '_falsy')

    def __init__(self, name, falsy=False):

        ''' Construct a new sentinel.

            :param name: Name to show in the sentinel's ``repr``.
            :param falsy: Whether the sentinel should evaluate as ``False``.
            :returns: ``None``. '''

        self.name, self._falsy = name, falsy

    def __repr__(self):

        ''' Represent this sentinel as a string.

            :returns: ``<Sentinel "NAME">``. '''

        return '<Sentinel "%s">' % self.name

    def __bool__(self):

        ''' Test whether this sentinel is falsy.

            :returns: ``False`` for falsy sentinels. '''

        return (not self._falsy)

    # sentinels are singletons, copies must keep identity
    __copy__ = lambda self: self
    __deepcopy__ = lambda self, memo: self


# Sentinels
_EMPTY = Sentinel("EMPTY", True)
