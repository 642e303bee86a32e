# -*- coding: utf-8 -*-
#
# Copyright (c) 2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#

# pylint:  disable=C0301


class TbdYamlException(Exception):
    '''
    Base tbdyaml exception.
    '''
    pass


class SourceDecodeError(TbdYamlException):
    '''
    Error during decoding of binary source.
    '''
    def __init__(self, err_msg):
        self.err_msg = err_msg
    def __str__(self):
        return 'Could not decode binary source, or received a non-Unicode, non-bytes object:\n  {0}'.format(self.err_msg)


class TreeReleasedError(TbdYamlException):
    '''
    A token lookup was attempted on a tree whose contents have already been
    released.
    '''
    def __str__(self):
        return 'Tree has been released; its tokens and nodes are no longer available'


class ParseError(TbdYamlException):
    '''
    General error during parsing.

    Every grammar error refers to the token at which parsing stopped.  The
    offset of that token is always available; the line and column are only
    computed when the error is formatted, since most callers never need them.
    '''
    kind = 'ParseError'

    def __init__(self, msg, source, token, token_index):
        self.msg = msg
        self.source = source
        self.token = token
        self.token_index = token_index

    def fmt_msg_with_traceback(self, msg):
        offset = self.token.start
        lineno = self.source.count('\n', 0, offset) + 1
        colno = offset - (self.source.rfind('\n', 0, offset) + 1) + 1
        traceback = 'At line {0}:{1} (token {2}, "{3}", offset {4}):'.format(lineno, colno,
                                                                              self.token_index,
                                                                              self.token.id,
                                                                              offset)
        return '\n  {0}\n    {1}'.format(traceback, msg)

    def __str__(self):
        return self.fmt_msg_with_traceback(self.msg)


class NestedDocumentsError(ParseError):
    '''
    A document start marker was found before the current document ended.
    '''
    kind = 'NestedDocuments'


class UnexpectedTagError(ParseError):
    '''
    A tag appeared outside a document header.
    '''
    kind = 'UnexpectedTag'


class UnexpectedEofError(ParseError):
    '''
    End of input was reached while a document end marker or a mapping value
    was still expected.
    '''
    kind = 'UnexpectedEof'


class UnexpectedTokenError(ParseError):
    '''
    A mandatory token did not match the kind required by the grammar.
    '''
    kind = 'UnexpectedToken'


class UnhandledError(ParseError):
    '''
    A value position held a token kind that has no production.
    '''
    kind = 'Unhandled'


class IndentationError(ParseError):
    '''
    Error in relative indentation (only raised with strict indentation)
    '''
    kind = 'Indentation'


class NestingDepthError(ParseError):
    '''
    Mappings were nested deeper than the configured maximum.
    '''
    kind = 'NestingDepth'


class Bug(TbdYamlException):
    '''
    There is a bug in the program, as opposed to invalid user data.

    This exception is used at the end of a sequence of if/elif/else or in a
    similar context as a fallthrough.  This ensures that if bugs exist or are
    introduced in the future, a more informative error message is produced.
    '''
    def __init__(self, msg, node=None):
        self.msg = msg
        self.node = node
    def __str__(self):
        if self.node is None:
            return self.msg
        return '{0} (at {1} node)'.format(self.msg, self.node.basetype)
