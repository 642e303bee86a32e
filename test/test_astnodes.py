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

import tbdyaml.astnodes as mdl
import tbdyaml.erring as err
from tbdyaml.parsing import Tree
from tbdyaml.tokenizing import tokenize

import pytest


def test_render_scenario_with_directive():
    s = '--- !tapi-tbd\ntbd-version: 4\n...\n'
    tree = Tree(s, tokenize(s))
    value = mdl.ValueNode(tree, 8)
    mapping = mdl.MappingNode(tree, 5, value)
    doc = mdl.DocumentNode(tree, 0, 3, [mapping], 10)
    root = mdl.RootNode(tree, [doc], 12)
    assert(str(value) == 'Value { .value = 4 }')
    assert(str(mapping) == 'Map { .key = tbd-version, .value = Value { .value = 4 } }')
    assert(str(root) == 'Root { .docs = [ Doc { .directive = tapi-tbd, .values = [ Map { .key = tbd-version, .value = Value { .value = 4 } } ] } ] }')


def test_render_empty_lists():
    s = '---\n...'
    tree = Tree(s, tokenize(s))
    doc = mdl.DocumentNode(tree, 0, None, [], 2)
    assert(str(doc) == 'Doc { .values = [ ] }')
    assert(str(mdl.RootNode(tree, [], 3)) == 'Root { .docs = [ ] }')


def test_render_separates_siblings():
    s = 'a:b\nc:d\n'
    tree = Tree(s, tokenize(s))
    first = mdl.MappingNode(tree, 0, mdl.ValueNode(tree, 2))
    second = mdl.MappingNode(tree, 4, mdl.ValueNode(tree, 6))
    doc = mdl.DocumentNode(tree, 0, None, [first, second], None)
    assert(str(doc) == 'Doc { .values = [ Map { .key = a, .value = Value { .value = b } }, Map { .key = c, .value = Value { .value = d } } ] }')


def test_accessors():
    s = 'a:b'
    tree = Tree(s, tokenize(s))
    leaf = mdl.MappingNode(tree, 0, mdl.ValueNode(tree, 2))
    nested = mdl.MappingNode(tree, 0, leaf)
    assert(leaf.is_leaf)
    assert(not nested.is_leaf)
    assert(leaf.key_text == 'a')
    assert(leaf.value.text == 'b')
    assert(mdl.DocumentNode(tree, 0, None, [], None).directive_text is None)


def test_basetypes():
    assert([cls.basetype for cls in (mdl.RootNode, mdl.DocumentNode, mdl.MappingNode, mdl.ValueNode)] ==
           ['root', 'doc', 'map', 'value'])


def test_mapping_value_must_be_mapping_or_leaf():
    s = '---\n...'
    tree = Tree(s, tokenize(s))
    doc = mdl.DocumentNode(tree, 0, None, [], 2)
    with pytest.raises(err.Bug):
        mdl.MappingNode(tree, 0, doc)


def test_walk_order():
    s = 'a:b'
    tree = Tree(s, tokenize(s))
    value = mdl.ValueNode(tree, 2)
    inner = mdl.MappingNode(tree, 0, value)
    outer = mdl.MappingNode(tree, 0, inner)
    doc = mdl.DocumentNode(tree, 0, None, [outer], None)
    root = mdl.RootNode(tree, [doc], 3)
    assert(list(root.walk()) == [root, doc, outer, inner, value])
    assert(list(value.walk()) == [value])


def test_nodes_do_not_accept_new_attributes():
    s = 'a'
    tree = Tree(s, tokenize(s))
    value = mdl.ValueNode(tree, 0)
    with pytest.raises(AttributeError):
        value.text_copy = 'a'
