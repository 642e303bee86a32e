# -*- coding: utf-8 -*-
#
# Copyright (c) 2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#

'''
Abstract syntax tree (AST) nodes.

Nodes never copy source text.  They store indices into the token sequence of
the tree that owns them, and resolve text through that tree on demand.  Every
node class has a `basetype` that identifies it; code that needs to treat
nodes differently dispatches on `basetype` rather than on `isinstance()`.

A node receives all of its children when it is created.  Children are always
built before their parent, so a child never exists without the parent that
owns it once parsing succeeds, and a mapping can never lack a value.
'''


# pylint: disable=C0301

from . import erring




_node_common_slots = ['tree']




def _fmt_list(nodes):
    if not nodes:
        return '[ ]'
    return '[ {0} ]'.format(', '.join(str(node) for node in nodes))




class RootNode(object):
    '''
    Top-level node.  Holds the documents of a source in source order, plus
    the index of the end-of-input token.
    '''
    basetype = 'root'

    __slots__ = _node_common_slots + ['docs', 'eof']

    def __init__(self, tree, docs, eof):
        self.tree = tree
        self.docs = docs
        self.eof = eof

    def __str__(self):
        return 'Root {{ .docs = {0} }}'.format(_fmt_list(self.docs))

    def walk(self):
        yield self
        for doc in self.docs:
            for node in doc.walk():
                yield node




class DocumentNode(object):
    '''
    A single document.

    `start` is the index of the first token belonging to the document.
    `directive` is the index of the literal that follows a tag in the
    document header, or `None` for a header without a tag (or no header at
    all).  `end` is the index of the document end marker.
    '''
    basetype = 'doc'

    __slots__ = _node_common_slots + ['start', 'directive', 'values', 'end']

    def __init__(self, tree, start, directive, values, end):
        self.tree = tree
        self.start = start
        self.directive = directive
        self.values = values
        self.end = end

    @property
    def directive_text(self):
        if self.directive is None:
            return None
        return self.tree.token_text(self.directive)

    def __str__(self):
        if self.directive is None:
            return 'Doc {{ .values = {0} }}'.format(_fmt_list(self.values))
        return 'Doc {{ .directive = {0}, .values = {1} }}'.format(self.directive_text, _fmt_list(self.values))

    def walk(self):
        yield self
        for value in self.values:
            for node in value.walk():
                yield node




class MappingNode(object):
    '''
    A key bound to a value.  The value is either another mapping, one level
    deeper, or a leaf value on the same line as the key.
    '''
    basetype = 'map'

    __slots__ = _node_common_slots + ['key', 'value']

    def __init__(self, tree, key, value):
        if value.basetype not in ('map', 'value'):
            raise erring.Bug('A mapping value must be a mapping or a leaf value', value)
        self.tree = tree
        self.key = key
        self.value = value

    @property
    def key_text(self):
        return self.tree.token_text(self.key)

    @property
    def is_leaf(self):
        return self.value.basetype == 'value'

    def __str__(self):
        return 'Map {{ .key = {0}, .value = {1} }}'.format(self.key_text, self.value)

    def walk(self):
        yield self
        for node in self.value.walk():
            yield node




class ValueNode(object):
    '''
    Leaf scalar.
    '''
    basetype = 'value'

    __slots__ = _node_common_slots + ['value']

    def __init__(self, tree, value):
        self.tree = tree
        self.value = value

    @property
    def text(self):
        return self.tree.token_text(self.value)

    def __str__(self):
        return 'Value {{ .value = {0} }}'.format(self.text)

    def walk(self):
        yield self
