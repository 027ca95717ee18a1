# -*- coding: utf-8; -*-

import string

from mediatype.citation import RFC
from mediatype.parse import Terminal, literal, octet, octet_range
from mediatype.syntax import common, rfc6838
from mediatype.syntax.common import (is_alphabetic, is_alphabetic_lowercase,
                                     is_alphabetic_uppercase, is_alphanumeric,
                                     is_alphanumeric_lowercase,
                                     is_alphanumeric_uppercase, is_blank,
                                     is_control, is_digit, is_graphical,
                                     is_hexadecimal, is_printable,
                                     is_punctuation, is_space, to_lowercase,
                                     to_uppercase)


ALL_PREDICATES = [
    is_alphabetic, is_alphabetic_lowercase, is_alphabetic_uppercase,
    is_alphanumeric, is_alphanumeric_lowercase, is_alphanumeric_uppercase,
    is_blank, is_control, is_digit, is_graphical, is_hexadecimal,
    is_printable, is_punctuation, is_space,
]


def test_terminal_operations():
    t = octet_range(0x30, 0x32) | 'x'
    assert t.chars() == ['0', '1', '2', 'X', 'x']
    assert t.match('1')
    assert 'X' in t
    assert not t.match('3')
    assert (t - 'X').chars() == ['0', '1', '2']
    assert ('y' | t).match('Y')
    assert literal('a', case_sensitive=True).chars() == ['a']
    assert octet(0x22).chars() == ['"']
    assert Terminal().chars() == []
    assert t.find_mismatch('012x') == -1
    assert t.find_mismatch('01x3') == 3
    assert t.find_mismatch('01x3', end=3) == -1
    assert t.find_mismatch('a01', start=1) == -1


def test_terminal_storage():
    assert len(Terminal().bits) == 256
    assert not any(Terminal().bits)
    full = octet_range(0x00, 0xFF)
    assert len(full.bits) == 256
    assert full.chars() == [chr(i) for i in range(256)]
    assert octet(0xFF).match('\xff')
    assert not octet(0xFF).match('\u0100')
    assert (full - octet_range(0x01, 0xFF)).chars() == ['\x00']


def test_names():
    assert common.ALPHA.name == 'ALPHA'
    assert common.ALPHA.citation == RFC(5234)
    assert common.PUNCT.name == 'PUNCT'
    assert common.PUNCT.citation is None
    assert rfc6838.restricted_name_chars.name == 'restricted-name-chars'
    assert rfc6838.restricted_name_chars.citation == RFC(6838, section='4.2')
    assert repr(rfc6838.restricted_name_first) == \
        '<Terminal restricted-name-first>'


def test_restricted_name():
    assert rfc6838.restricted_name_first.describe() == 'A–Z or a–z or 0–9'
    assert rfc6838.restricted_name_chars.describe() == \
        'A–Z or a–z or 0–9 or dash (-) or period (.) or !#$&+^_'
    assert rfc6838.modified_restricted_name_chars.describe() == \
        'A–Z or a–z or 0–9 or dash (-) or !#$&^_'
    for c in '.+':
        assert rfc6838.restricted_name_chars.match(c)
        assert not rfc6838.modified_restricted_name_chars.match(c)
    for c in ' "%\'()*,/:;<=>?@[\\]`{|}~':
        assert not rfc6838.restricted_name_chars.match(c)


def test_classifier_ascii():
    for i in range(128):
        c = chr(i)
        assert is_alphabetic(c) == (c in string.ascii_letters)
        assert is_alphabetic_lowercase(c) == (c in string.ascii_lowercase)
        assert is_alphabetic_uppercase(c) == (c in string.ascii_uppercase)
        assert is_digit(c) == (c in string.digits)
        assert is_hexadecimal(c) == (c in string.hexdigits)
        assert is_alphanumeric(c) == \
            (c in string.ascii_letters + string.digits)
        assert is_alphanumeric_lowercase(c) == \
            (c in string.ascii_lowercase + string.digits)
        assert is_alphanumeric_uppercase(c) == \
            (c in string.ascii_uppercase + string.digits)
        assert is_punctuation(c) == (c in string.punctuation)
        assert is_space(c) == (c in string.whitespace)
        assert is_printable(c) == c.isprintable()
        assert is_graphical(c) == (c.isprintable() and c != ' ')
        assert is_control(c) == (i < 0x20 or i == 0x7F)
        assert is_blank(c) == (c in ' \t')
        assert (c in common.CHAR) == (i != 0)
        assert (c in common.CR) == (c == '\r')
        assert (c in common.LF) == (c == '\n')


def test_classifier_non_ascii():
    for c in ['\x80', '\xa0', '\xc9', '\xff', 'Ā', '€',
              '\U0001F600']:
        for predicate in ALL_PREDICATES:
            assert not predicate(c)


def test_case_conversion():
    assert to_lowercase('Application/VND.Foo+JSON') == \
        'application/vnd.foo+json'
    assert to_uppercase('text/x-c') == 'TEXT/X-C'
    assert to_lowercase('\xc9T\xc9') == '\xc9t\xc9'
    assert to_uppercase('\xe9') == '\xe9'
    assert to_lowercase('') == ''
