# -*- coding: utf-8 -*-
#
# Copyright (c) 2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#

'''
Tokenization of source text, and the cursor the parser uses to walk the
resulting token sequence.
'''


# pylint: disable=C0301

import collections
import re
from . import erring
from . import grammar


SPACE = grammar.LIT_GRAMMAR['space']
TAB = grammar.LIT_GRAMMAR['tab']
WHITESPACE = grammar.LIT_GRAMMAR['whitespace']
LINE_TERMINATOR = grammar.LIT_GRAMMAR['line_terminator']
DOC_START = grammar.LIT_GRAMMAR['doc_start']
DOC_END = grammar.LIT_GRAMMAR['doc_end']
DOC_START_CHAR = grammar.LIT_GRAMMAR['doc_start_char']
DOC_END_CHAR = grammar.LIT_GRAMMAR['doc_end_char']
COMMENT_DELIM = grammar.LIT_GRAMMAR['comment_delim']
LITERAL_TERMINATOR = grammar.LIT_GRAMMAR['literal_terminator']




class TokenId(object):
    '''
    Token kinds.  Kinds are plain strings so that they read naturally in
    error messages and debug output.
    '''
    EOF = 'eof'
    NEW_LINE = 'new_line'
    DOC_START = 'doc_start'
    DOC_END = 'doc_end'
    SEQ_ITEM_IND = 'seq_item_ind'
    MAP_VALUE_IND = 'map_value_ind'
    FLOW_MAP_START = 'flow_map_start'
    FLOW_MAP_END = 'flow_map_end'
    FLOW_SEQ_START = 'flow_seq_start'
    FLOW_SEQ_END = 'flow_seq_end'
    COMMA = 'comma'
    SPACE = 'space'
    TAB = 'tab'
    COMMENT = 'comment'
    ALIAS = 'alias'
    ANCHOR = 'anchor'
    TAG = 'tag'
    SINGLE_QUOTE = 'single_quote'
    DOUBLE_QUOTE = 'double_quote'
    LITERAL = 'literal'


# Code points that always form a token on their own
_SINGLE_CODE_POINT_TOKENS = {grammar.LIT_GRAMMAR['map_value_ind']: TokenId.MAP_VALUE_IND,
                             grammar.LIT_GRAMMAR['start_flow_map']: TokenId.FLOW_MAP_START,
                             grammar.LIT_GRAMMAR['end_flow_map']: TokenId.FLOW_MAP_END,
                             grammar.LIT_GRAMMAR['start_flow_seq']: TokenId.FLOW_SEQ_START,
                             grammar.LIT_GRAMMAR['end_flow_seq']: TokenId.FLOW_SEQ_END,
                             grammar.LIT_GRAMMAR['flow_element_separator']: TokenId.COMMA,
                             grammar.LIT_GRAMMAR['alias_prefix']: TokenId.ALIAS,
                             grammar.LIT_GRAMMAR['anchor_prefix']: TokenId.ANCHOR,
                             grammar.LIT_GRAMMAR['tag_prefix']: TokenId.TAG,
                             grammar.LIT_GRAMMAR['singlequote_delim']: TokenId.SINGLE_QUOTE,
                             grammar.LIT_GRAMMAR['doublequote_delim']: TokenId.DOUBLE_QUOTE}




class Token(object):
    '''
    A classified run of source text.  `start` and `end` delimit the half-open
    range `[start, end)` in the source.  `count` is the length of the run for
    space and tab tokens, and `None` otherwise.
    '''
    __slots__ = ['id', 'start', 'end', 'count']

    def __init__(self, id, start, end, count=None):
        self.id = id
        self.start = start
        self.end = end
        self.count = count

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.id == other.id and self.start == other.start and
                self.end == other.end and self.count == other.count)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        if self.count is None:
            return 'Token({0}, {1}, {2})'.format(self.id, self.start, self.end)
        return 'Token({0}, {1}, {2}, count={3})'.format(self.id, self.start, self.end, self.count)




class Tokenizer(object):
    '''
    Split source text into tokens, one token per call to `next()`.  Once the
    end of the source is reached, every further call returns an end-of-input
    token.
    '''
    __slots__ = ['source', 'pos', '_tokenize_code_point']

    _space_re = re.compile('{0}+'.format(re.escape(SPACE)))
    _tab_re = re.compile('{0}+'.format(re.escape(TAB)))
    _comment_re = re.compile('{0}[^{1}]*'.format(re.escape(COMMENT_DELIM), re.escape(LINE_TERMINATOR)))
    _literal_re = re.compile('[^{0}]+'.format(re.escape(WHITESPACE + LITERAL_TERMINATOR)))

    def __init__(self, source):
        self.source = source
        self.pos = 0

        # Dict of tokenizing functions, keyed by the first code point of a
        # token.  Anything not listed starts a literal.
        tokenize_code_point = collections.defaultdict(lambda: self._tokenize_literal)
        for c in _SINGLE_CODE_POINT_TOKENS:
            tokenize_code_point[c] = self._tokenize_single_code_point
        for c in LINE_TERMINATOR:
            tokenize_code_point[c] = self._tokenize_newline
        tokenize_code_point[SPACE] = self._tokenize_space
        tokenize_code_point[TAB] = self._tokenize_tab
        tokenize_code_point[COMMENT_DELIM] = self._tokenize_comment
        tokenize_code_point[DOC_START_CHAR] = self._tokenize_hyphen
        tokenize_code_point[DOC_END_CHAR] = self._tokenize_dot
        self._tokenize_code_point = tokenize_code_point


    def next(self, len=len):
        '''
        Return the next token, advancing past it.
        '''
        source = self.source
        start = self.pos
        if start >= len(source):
            return Token(TokenId.EOF, len(source), len(source))
        token = self._tokenize_code_point[source[start]](start)
        self.pos = token.end
        return token


    def _tokenize_single_code_point(self, start):
        return Token(_SINGLE_CODE_POINT_TOKENS[self.source[start]], start, start + 1)


    def _tokenize_newline(self, start):
        if self.source.startswith('\r\n', start):
            return Token(TokenId.NEW_LINE, start, start + 2)
        return Token(TokenId.NEW_LINE, start, start + 1)


    def _tokenize_space(self, start):
        end = self._space_re.match(self.source, start).end()
        return Token(TokenId.SPACE, start, end, count=end - start)


    def _tokenize_tab(self, start):
        end = self._tab_re.match(self.source, start).end()
        return Token(TokenId.TAB, start, end, count=end - start)


    def _tokenize_comment(self, start):
        return Token(TokenId.COMMENT, start, self._comment_re.match(self.source, start).end())


    def _ends_token(self, index, len=len):
        '''
        Whether the code point at `index` cannot continue a marker token.
        '''
        return index >= len(self.source) or self.source[index] in WHITESPACE


    def _tokenize_hyphen(self, start):
        '''
        `---` starts a document and a lone `-` marks a sequence item.  Any
        other run beginning with a hyphen, such as a negative number, is a
        literal.
        '''
        if self.source.startswith(DOC_START, start) and self._ends_token(start + len(DOC_START)):
            return Token(TokenId.DOC_START, start, start + len(DOC_START))
        if self._ends_token(start + 1):
            return Token(TokenId.SEQ_ITEM_IND, start, start + 1)
        return self._tokenize_literal(start)


    def _tokenize_dot(self, start):
        if self.source.startswith(DOC_END, start) and self._ends_token(start + len(DOC_END)):
            return Token(TokenId.DOC_END, start, start + len(DOC_END))
        return self._tokenize_literal(start)


    def _tokenize_literal(self, start):
        m = self._literal_re.match(self.source, start)
        if m is None:
            raise erring.Bug('No tokenizing rule for code point "{0}" at offset {1}'.format(self.source[start], start))
        return Token(TokenId.LITERAL, start, m.end())




def tokenize(source):
    '''
    Tokenize an entire source.  The returned tuple always ends with exactly
    one end-of-input token.
    '''
    tokenizer = Tokenizer(source)
    tokens = []
    while True:
        token = tokenizer.next()
        tokens.append(token)
        if token.id == TokenId.EOF:
            break
    return tuple(tokens)




class TokenIterator(object):
    '''
    Cursor over a tokenized source.

    The position is the index of the last consumed token, or `-1` before
    anything has been consumed.  Speculative parsing saves `position()` and
    later passes the saved value to `reset_to()`.  Reading past the end keeps
    returning the terminating end-of-input token.
    '''
    __slots__ = ['buffer', '_pos']

    def __init__(self, buffer):
        self.buffer = buffer
        # Index of the next token to read
        self._pos = 0

    def peek(self, len=len):
        if self._pos >= len(self.buffer):
            return None
        return self.buffer[self._pos]

    def next(self, len=len):
        if self._pos >= len(self.buffer):
            return self.buffer[-1]
        token = self.buffer[self._pos]
        self._pos += 1
        return token

    def position(self):
        return self._pos - 1

    def reset_to(self, index):
        self._pos = index + 1
