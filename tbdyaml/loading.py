# -*- coding: utf-8 -*-
#
# Copyright (c) 2016-2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


from .parsing import Parser


_DEFAULT_PARSER = Parser()


def parse(s, cls=None, **kwargs):
    '''
    Parse a Unicode or byte string into a `Tree`.
    '''
    # The default parser holds no per-source state, so it is shared by every
    # call that doesn't need custom settings.
    if cls is None:
        if not kwargs:
            return _DEFAULT_PARSER.parse(s)
        return Parser(**kwargs).parse(s)
    return cls(**kwargs).parse(s)
