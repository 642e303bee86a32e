# -*- coding: utf-8 -*-
#
# Copyright (c) 2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


# pylint: disable=C0301


import logging

from . import erring
from . import grammar
from .astnodes import RootNode, DocumentNode, MappingNode, ValueNode
from .tokenizing import TokenId, TokenIterator, tokenize


_LOGGER = logging.getLogger(__name__)

MAX_NESTING_DEPTH = grammar.PARAMS['max_nesting_depth']

# Tokens that may appear between the tokens a production is looking for
SKIPPABLE_TOKEN_IDS = set([TokenId.COMMENT, TokenId.SPACE])
INDENTATION_TOKEN_IDS = set([TokenId.SPACE, TokenId.TAB])




class Tree(object):
    '''
    Result of parsing a source.  Owns the source text, the full token
    sequence, and the root node.  Nodes refer to tokens by index, and resolve
    those indices through the tree.

    `release()` drops the tokens and the node tree in one step.  After that,
    any token lookup, including those that nodes perform to get their text,
    raises `TreeReleasedError`.  A tree may also be used as a context
    manager, which releases it on exit.
    '''
    __slots__ = ['source', 'tokens', 'root', '_released']

    def __init__(self, source, tokens):
        self.source = source
        self.tokens = tokens
        self.root = None
        self._released = False

    @property
    def released(self):
        return self._released

    def token(self, index):
        if self._released:
            raise erring.TreeReleasedError
        return self.tokens[index]

    def token_text(self, index):
        token = self.token(index)
        return self.source[token.start:token.end]

    def release(self):
        self.tokens = ()
        self.root = None
        self._released = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.release()

    def __str__(self):
        if self._released:
            raise erring.TreeReleasedError
        return str(self.root)




class State(object):
    '''
    Everything that belongs to a single parse:  the tree being built and the
    cursor over its tokens.  Keeping this separate from the parser means a
    parser only holds configuration, and can be reused for any number of
    sources.
    '''
    __slots__ = ['tree', 'cursor']

    def __init__(self, tree):
        self.tree = tree
        self.cursor = TokenIterator(tree.tokens)




class Parser(object):
    '''
    Recursive-descent parser that builds a `Tree` from a source.

    Each production is a method that receives the parse `State` and returns
    a finished node.  Optional tokens are handled speculatively:  a
    production saves the cursor position, reads ahead, and restores the
    saved position when what it found does not match.

    By default, indentation counts are recorded but never compared, so a
    nested mapping is recognized purely from a line break followed by an
    indentation token.  With `strict_indentation=True`, each nested block
    must be indented deeper than the block that contains it, and
    document-level keys must start at the beginning of a line.
    '''
    __slots__ = ['max_nesting_depth', 'strict_indentation']

    def __init__(self, *args, **kwargs):
        # Process args
        if args:
            raise TypeError('Explicit keyword arguments are required')
        max_nesting_depth = kwargs.pop('max_nesting_depth', MAX_NESTING_DEPTH)
        strict_indentation = kwargs.pop('strict_indentation', False)
        if strict_indentation not in (True, False):
            raise TypeError('strict_indentation must be True or False')
        if not isinstance(max_nesting_depth, int) or isinstance(max_nesting_depth, bool):
            raise TypeError('max_nesting_depth must be an integer')
        if max_nesting_depth < 1:
            raise ValueError('max_nesting_depth must be >= 1')
        if kwargs:
            raise TypeError('Unexpected keyword argument(s) {0}'.format(', '.join('"{0}"'.format(k) for k in kwargs)))
        self.max_nesting_depth = max_nesting_depth
        self.strict_indentation = strict_indentation


    @staticmethod
    def _as_unicode_string(unicode_string_or_bytes):
        '''
        Take an object that may be a Unicode string or bytes, and return
        a Unicode string.
        '''
        if isinstance(unicode_string_or_bytes, str):
            unicode_string = unicode_string_or_bytes
        else:
            try:
                unicode_string = unicode_string_or_bytes.decode('utf8')
            except Exception as e:
                raise erring.SourceDecodeError(e)
        return unicode_string


    def parse(self, unicode_string_or_bytes):
        '''
        Parse a Unicode string or byte string into a `Tree`.
        '''
        source = self._as_unicode_string(unicode_string_or_bytes)
        tokens = tokenize(source)
        _LOGGER.debug('Tokenized source into %d tokens', len(tokens))
        tree = Tree(source, tokens)
        state = State(tree)
        tree.root = self._parse_root(state)
        _LOGGER.debug('Parsed %d document(s)', len(tree.root.docs))
        return tree


    @staticmethod
    def _error(state, err_cls, msg, index=None):
        '''
        Create an error for the token at `index`.  By default, this is the
        token that the cursor would read next, which is the offending token
        whenever a lookahead has just been rewound.
        '''
        tokens = state.tree.tokens
        if index is None:
            index = min(state.cursor.position() + 1, len(tokens) - 1)
        return err_cls(msg, state.tree.source, tokens[index], index)


    def _eat_comments_and_space(self, state, skippable=SKIPPABLE_TOKEN_IDS):
        '''
        Consume comment and space tokens, stopping in front of the first
        token of any other kind.
        '''
        cursor = state.cursor
        while True:
            pos = cursor.position()
            if cursor.peek() is None:
                return
            if cursor.next().id not in skippable:
                cursor.reset_to(pos)
                return


    def _eat_token(self, state, token_id, skippable=SKIPPABLE_TOKEN_IDS):
        '''
        Skip comments and space, then consume one token if it is of kind
        `token_id` and return its index.  Otherwise, rewind to just before the
        token that was looked at and return `None`.
        '''
        cursor = state.cursor
        while True:
            pos = cursor.position()
            if cursor.peek() is None:
                return None
            next_id = cursor.next().id
            if next_id in skippable:
                continue
            if next_id == token_id:
                return cursor.position()
            cursor.reset_to(pos)
            return None


    def _expect_token(self, state, token_id, context):
        index = self._eat_token(state, token_id)
        if index is None:
            tokens = state.tree.tokens
            found_index = min(state.cursor.position() + 1, len(tokens) - 1)
            raise self._error(state, erring.UnexpectedTokenError,
                              'Expected a "{0}" token {1}, but found "{2}"'.format(token_id, context, tokens[found_index].id),
                              found_index)
        return index


    def _skip_blank_lines(self, state, blank=set([TokenId.NEW_LINE, TokenId.TAB])):
        '''
        Consume comments, whitespace, and line breaks.
        '''
        cursor = state.cursor
        while True:
            self._eat_comments_and_space(state)
            token = cursor.peek()
            if token is None or token.id not in blank:
                return
            cursor.next()


    def _parse_root(self, state):
        '''
        Parse documents until end of input.

        Blank and comment lines between documents are skipped when they are
        followed by end of input or by a document start marker.  In front of
        a bare document (one without a start marker), they are left in place,
        since a bare document begins with its (empty) header line.
        '''
        cursor = state.cursor
        docs = []
        while True:
            pos = cursor.position()
            self._skip_blank_lines(state)
            token = cursor.peek()
            if token is None or token.id == TokenId.EOF:
                cursor.next()
                eof = cursor.position()
                break
            if token.id != TokenId.DOC_START:
                cursor.reset_to(pos)
            docs.append(self._parse_document(state))
        return RootNode(state.tree, docs, eof)


    def _parse_document(self, state):
        cursor = state.cursor
        tree = state.tree
        start = cursor.position() + 1
        _LOGGER.debug('Document starts at token %d', start)

        directive = None
        if self._eat_token(state, TokenId.DOC_START) is not None:
            if self._eat_token(state, TokenId.TAG) is not None:
                directive = self._expect_token(state, TokenId.LITERAL, 'for the directive after a tag')
        self._expect_token(state, TokenId.NEW_LINE, 'after the document header')

        values = []
        while True:
            token = cursor.next()
            token_id = token.id
            if token_id == TokenId.LITERAL:
                key = cursor.position()
                if self.strict_indentation and tree.tokens[key - 1].id != TokenId.NEW_LINE:
                    raise self._error(state, erring.IndentationError, 'Document-level keys must start at the beginning of a line', key)
                self._expect_token(state, TokenId.MAP_VALUE_IND, 'after a key')
                values.append(self._parse_mapping(state, key, 1, 0))
            elif token_id == TokenId.DOC_END:
                end = cursor.position()
                break
            elif token_id == TokenId.DOC_START:
                raise self._error(state, erring.NestedDocumentsError, 'Cannot start a document before the current document has ended', cursor.position())
            elif token_id == TokenId.TAG:
                raise self._error(state, erring.UnexpectedTagError, 'Tags are only allowed in the document header', cursor.position())
            elif token_id == TokenId.EOF:
                raise self._error(state, erring.UnexpectedEofError, 'Reached end of data before the document end marker', cursor.position())
            # Anything else (line breaks, comments, indentation) carries no
            # structure at document level

        _LOGGER.debug('Document ends at token %d with %d value(s)', end, len(values))
        return DocumentNode(tree, start, directive, values, end)


    def _parse_mapping(self, state, key, depth, outer_indent):
        '''
        Parse the value bound to the key at token index `key`, and return the
        resulting mapping.

        A line break right after the key means the value is a mapping on the
        following, indented line.  Otherwise, the value is a leaf on the same
        line.  When a nested value ends in a leaf, the line break after that
        leaf closes the nested block, along with every block that encloses
        it.
        '''
        if depth > self.max_nesting_depth:
            raise self._error(state, erring.NestingDepthError, 'Max nesting depth {0} exceeded'.format(self.max_nesting_depth), key)
        cursor = state.cursor
        tree = state.tree

        indent = None
        if self._eat_token(state, TokenId.NEW_LINE) is not None:
            token = cursor.next()
            if token.id not in INDENTATION_TOKEN_IDS:
                raise self._error(state, erring.UnexpectedTokenError, 'Expected indentation at the start of a nested mapping, but found "{0}"'.format(token.id), cursor.position())
            indent = token.count
            if self.strict_indentation and indent <= outer_indent:
                raise self._error(state, erring.IndentationError, 'Nested mapping must be indented more than its parent ({0} <= {1})'.format(indent, outer_indent), cursor.position())

        token = cursor.next()
        if token.id == TokenId.LITERAL:
            pos = cursor.position()
            if indent is None:
                return MappingNode(tree, key, ValueNode(tree, pos))
            self._expect_token(state, TokenId.MAP_VALUE_IND, 'after a key')
            child = self._parse_mapping(state, pos, depth + 1, indent)
            if child.is_leaf:
                self._expect_token(state, TokenId.NEW_LINE, 'to close a nested mapping')
            return MappingNode(tree, key, child)
        if token.id == TokenId.EOF:
            raise self._error(state, erring.UnexpectedEofError, 'Reached end of data while a mapping value was expected', cursor.position())
        raise self._error(state, erring.UnhandledError, 'Unsupported "{0}" token where a mapping value was expected'.format(token.id), cursor.position())
