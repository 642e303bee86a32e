# -*- coding: utf-8 -*-
#
# Copyright (c) 2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#


import sys
import os

if all(os.path.isdir(x) for x in ('tbdyaml', 'test')):
    sys.path.insert(0, '.')

import tbdyaml.tokenizing as mdl

import pytest


T = mdl.TokenId


def ids(source):
    return [token.id for token in mdl.tokenize(source)]


def texts(source):
    return [source[token.start:token.end] for token in mdl.tokenize(source)]


def test_empty_source():
    tokens = mdl.tokenize('')
    assert(len(tokens) == 1)
    assert(tokens[0] == mdl.Token(T.EOF, 0, 0))


def test_tbd_header_and_map():
    s = '--- !tapi-tbd\ntbd-version: 4\n...\n'
    assert(ids(s) == [T.DOC_START, T.SPACE, T.TAG, T.LITERAL, T.NEW_LINE,
                      T.LITERAL, T.MAP_VALUE_IND, T.SPACE, T.LITERAL, T.NEW_LINE,
                      T.DOC_END, T.NEW_LINE, T.EOF])
    assert(texts(s) == ['---', ' ', '!', 'tapi-tbd', '\n',
                        'tbd-version', ':', ' ', '4', '\n',
                        '...', '\n', ''])


def test_eof_is_positioned_at_end():
    s = '---\n...'
    tokens = mdl.tokenize(s)
    assert(tokens[-1] == mdl.Token(T.EOF, len(s), len(s)))
    assert(sum(1 for t in tokens if t.id == T.EOF) == 1)


def test_indentation_counts():
    tokens = mdl.tokenize('key:\n    a:b\n\t\tc')
    spaces = [t for t in tokens if t.id == T.SPACE]
    tabs = [t for t in tokens if t.id == T.TAB]
    assert(len(spaces) == 1 and spaces[0].count == 4)
    assert(len(tabs) == 1 and tabs[0].count == 2)
    assert(all(t.count is None for t in tokens if t.id not in (T.SPACE, T.TAB)))


def test_line_breaks():
    assert(ids('a\r\nb\rc\nd') == [T.LITERAL, T.NEW_LINE, T.LITERAL, T.NEW_LINE,
                                   T.LITERAL, T.NEW_LINE, T.LITERAL, T.EOF])
    assert(texts('a\r\nb')[1] == '\r\n')


def test_comment_runs_to_end_of_line():
    s = 'key: value # trailing comment\n# full line\n'
    assert(ids(s) == [T.LITERAL, T.MAP_VALUE_IND, T.SPACE, T.LITERAL, T.SPACE,
                      T.COMMENT, T.NEW_LINE, T.COMMENT, T.NEW_LINE, T.EOF])
    assert(texts(s)[5] == '# trailing comment')
    assert(texts(s)[7] == '# full line')


def test_hyphens_and_dots():
    assert(ids('---') == [T.DOC_START, T.EOF])
    assert(ids('...') == [T.DOC_END, T.EOF])
    assert(ids('- a') == [T.SEQ_ITEM_IND, T.SPACE, T.LITERAL, T.EOF])
    assert(ids('-1') == [T.LITERAL, T.EOF])
    assert(texts('----') == ['----', ''])
    assert(texts('.5') == ['.5', ''])
    assert(texts('1.2.3') == ['1.2.3', ''])


def test_literal_terminators():
    assert(texts('key1_1:value1_1') == ['key1_1', ':', 'value1_1', ''])
    assert(texts('a,b]c}d') == ['a', ',', 'b', ']', 'c', '}', 'd', ''])
    assert(texts("a'b\"c") == ['a', "'", 'b', '"', 'c', ''])
    # A comment delimiter only starts a comment at the start of a token
    assert(texts('a#b') == ['a#b', ''])
    assert(texts('x86_64-macos') == ['x86_64-macos', ''])


def test_single_code_point_tokens():
    assert(ids('{}[],*&!:') == [T.FLOW_MAP_START, T.FLOW_MAP_END,
                                T.FLOW_SEQ_START, T.FLOW_SEQ_END, T.COMMA,
                                T.ALIAS, T.ANCHOR, T.TAG, T.MAP_VALUE_IND,
                                T.EOF])


def test_tokenizer_repeats_eof():
    tokenizer = mdl.Tokenizer('a')
    assert(tokenizer.next().id == T.LITERAL)
    assert(tokenizer.next().id == T.EOF)
    assert(tokenizer.next().id == T.EOF)


def test_token_iterator():
    tokens = mdl.tokenize('a: b')
    it = mdl.TokenIterator(tokens)
    assert(it.position() == -1)
    assert(it.peek() is tokens[0])
    assert(it.position() == -1)
    assert(it.next() is tokens[0])
    assert(it.position() == 0)
    pos = it.position()
    assert(it.next().id == T.MAP_VALUE_IND)
    assert(it.next().id == T.SPACE)
    it.reset_to(pos)
    assert(it.next().id == T.MAP_VALUE_IND)
    it.reset_to(-1)
    assert(it.next() is tokens[0])


def test_token_iterator_past_end():
    tokens = mdl.tokenize('a')
    it = mdl.TokenIterator(tokens)
    it.next()
    assert(it.next().id == T.EOF)
    assert(it.peek() is None)
    assert(it.next().id == T.EOF)
    assert(it.next().id == T.EOF)
    assert(it.position() == len(tokens) - 1)


def test_token_equality():
    assert(mdl.Token(T.SPACE, 0, 2, count=2) == mdl.Token(T.SPACE, 0, 2, count=2))
    assert(mdl.Token(T.SPACE, 0, 2, count=2) != mdl.Token(T.TAB, 0, 2, count=2))
    assert(repr(mdl.Token(T.SPACE, 0, 2, count=2)) == 'Token(space, 0, 2, count=2)')
    assert(repr(mdl.Token(T.LITERAL, 3, 5)) == 'Token(literal, 3, 5)')
    with pytest.raises(TypeError):
        hash(mdl.Token(T.EOF, 0, 0))
