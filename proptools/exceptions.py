# -*- coding: utf-8 -*-

'''

    proptools exceptions

    holds the root of every exception that can happen inside proptools.

    :author: proptools authors
    :license: MIT, see ``LICENSE`` at the root of this project.

'''


## ProptoolsException
# All internal proptools exceptions extend this.
class ProptoolsException(Exception):

    ''' All proptools exceptions should inherit from this. '''
