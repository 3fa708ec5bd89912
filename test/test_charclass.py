# -*- coding: utf-8; -*-

import pytest

from httpchars.charclass import (CharClass, ParseError, auto, fill_names,
                                 literal, octet, octet_range, scan)
from httpchars.citation import RFC
from httpchars.syntax.common import ALPHA, DIGIT, DQUOTE, VCHAR
from httpchars.syntax.rfc6265 import cookie_octet
from httpchars.syntax.rfc7230 import delimiters, tchar


def test_octet_range():
    c = octet_range(0x30, 0x39)
    assert c.chars() == [b'0', b'1', b'2', b'3', b'4', b'5', b'6', b'7',
                         b'8', b'9']
    assert c.match(0x30)
    assert b'9' in c
    assert b'/' not in c
    assert 0x3A not in c


def test_combinators():
    c = octet(0x41) | 'b' | octet_range(0x30, 0x31)
    assert c.chars() == [b'0', b'1', b'A', b'B', b'b']
    assert (c - 'a').chars() == [b'0', b'1', b'B', b'b']
    assert (literal('a') | octet(0x30)).chars() == [b'0', b'A', b'a']
    assert ('xyz' | octet(0x20)).chars() == [b' ', b'X', b'Y', b'Z',
                                             b'x', b'y', b'z']
    assert literal('Q', case_sensitive=True).chars() == [b'Q']
    assert CharClass().chars() == []


def test_tables_are_immutable():
    with pytest.raises(TypeError):
        tchar.bits[0x20] = True
    assert not tchar.match(0x20)


def test_core_rules():
    assert len(ALPHA.chars()) == 52
    assert len(DIGIT.chars()) == 10
    assert DQUOTE.chars() == [b'"']
    assert len(VCHAR.chars()) == 0x7E - 0x21 + 1


def test_tchar_is_vchar_except_delimiters():
    symbols = literal("!#$%&'*+-.^_`|~")
    assert tchar.bits == (symbols | DIGIT | ALPHA).bits
    assert (tchar | delimiters).bits == VCHAR.bits
    assert len(delimiters.chars()) == 17


def test_cookie_octet_excludes():
    excluded = VCHAR - cookie_octet
    assert excluded.chars() == [b'"', b',', b';', b'\\']


def test_names():
    assert tchar.name == u'tchar'
    assert tchar.citation == RFC(7230, section=u'3.2.6')
    assert cookie_octet.name == u'cookie-octet'
    assert str(cookie_octet.citation) == u'RFC 6265 § 4.1.1'
    assert cookie_octet.citation.url == \
        u'https://tools.ietf.org/html/rfc6265#section-4.1.1'
    assert DQUOTE.name == u'DQUOTE'
    assert repr(tchar) == '<CharClass tchar>'


def test_fill_names():
    foo_bar_ = octet(0x66) | octet(0x62)                > auto
    other = octet(0x71)
    scope = {'foo_bar_': foo_bar_, 'other': other, 'junk': 123}
    fill_names(scope, RFC(1234))
    assert foo_bar_.name == u'foo-bar'
    assert foo_bar_.citation == RFC(1234)
    assert other.name is None


def test_sealing_a_named_class_copies_it():
    dquote_too = DQUOTE                                 > auto
    assert dquote_too is not DQUOTE
    assert DQUOTE.name == u'DQUOTE'
    assert dquote_too.bits == DQUOTE.bits


def test_scan():
    assert scan(b'abc', ALPHA) is None
    assert scan(b'', ALPHA) is None
    assert scan(b'ab1c', ALPHA) == 2
    assert scan(b'1abc2', ALPHA, 1, 4) is None
    assert scan(b'1abc2', ALPHA, 1) == 4
    assert scan(b'1abc2', ALPHA, 3, 3) is None


def test_parse_error():
    exc = ParseError(3, tchar, b';')
    assert exc.position == 3
    assert exc.expected is tchar
    assert exc.found == b';'
    assert str(exc).startswith(
        u'unexpected semicolon (;) at byte position 3; expected A–Z or a–z')
    assert str(exc).endswith(u'(tchar, RFC 7230 § 3.2.6)')

    exc = ParseError(0, DIGIT | DQUOTE, b'')
    assert str(exc) == (u'unexpected end of input at byte position 0; '
                        u'expected 0–9 or double quote (")')
