# -*- coding: utf-8 -*-
#
# Copyright (c) 2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


from .version import __version__, __version_info__


from .loading import parse
from .parsing import Parser, Tree
from .tokenizing import Token, TokenId, tokenize
from .astnodes import RootNode, DocumentNode, MappingNode, ValueNode
from .erring import (TbdYamlException, ParseError, NestedDocumentsError,
                     UnexpectedTagError, UnexpectedEofError,
                     UnexpectedTokenError, UnhandledError)
