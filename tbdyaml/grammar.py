# -*- coding: utf-8 -*-
#
# Copyright (c) 2017, Geoffrey M. Poore
# All rights reserved.
#
# Licensed under the BSD 3-Clause License:
# http://opensource.org/licenses/BSD-3-Clause
#

'''
Literal grammar of the text-based dylib (tbd) subset of YAML, plus general
parser parameters.
'''


# pylint: disable=C0301, C0330




# Non-textual general parameters
PARAMS = {'max_nesting_depth': 100}




# Assemble literal grammar
_RAW_LIT_GRAMMAR = [# Whitespace
                    ('tab', '\t'),
                    ('space', '\x20'),
                    ('indent', '{tab}{space}'),
                    ('newline', '\n'),
                    ('carriage_return', '\r'),
                    ('line_terminator', '{newline}{carriage_return}'),
                    ('whitespace', '{indent}{line_terminator}'),
                    # Document markers.  Both are a run of exactly three
                    # copies of the marker code point.
                    ('doc_start_char', '-'),
                    ('doc_end_char', '.'),
                    ('doc_start', '---'),
                    ('doc_end', '...')]

_RAW_LIT_SPECIAL = [# Special code points
                    ('comment_delim', '#'),
                    ('map_value_ind', ':'),
                    ('start_flow_map', '{'),
                    ('end_flow_map', '}'),
                    ('start_flow_seq', '['),
                    ('end_flow_seq', ']'),
                    ('flow_element_separator', ','),
                    ('alias_prefix', '*'),
                    ('anchor_prefix', '&'),
                    ('tag_prefix', '!'),
                    ('singlequote_delim', "'"),
                    ('doublequote_delim', '"'),
                    # Code points that end an unquoted literal, in addition
                    # to whitespace
                    ('literal_terminator', ':,]}}{singlequote_delim}{doublequote_delim}')]
_RAW_LIT_GRAMMAR.extend(_RAW_LIT_SPECIAL)

LIT_GRAMMAR = {}
for k, v in _RAW_LIT_GRAMMAR:
    if k in ('start_flow_map', 'end_flow_map'):
        LIT_GRAMMAR[k] = v
    else:
        LIT_GRAMMAR[k] = v.format(**LIT_GRAMMAR)
