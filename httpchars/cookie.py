# -*- coding: utf-8; -*-

"""Checking strings against the ``cookie-value`` rule of RFC 6265 § 4.1.1::

    cookie-value = *cookie-octet / ( DQUOTE *cookie-octet DQUOTE )

A value that starts with DQUOTE must also end with one, and then only
the octets between the quotes are checked. Unlike RFC 6265, an empty value
is rejected.
"""

from httpchars.charclass import ParseError, scan
from httpchars.syntax.common import DQUOTE
from httpchars.syntax.rfc6265 import cookie_octet
from httpchars.util.text import as_octets


_DQUOTE = b'"'[0]


def _bounds(data):
    """Get the range of `data` to be scanned, or `None` if quoting is broken."""
    if data[0] == _DQUOTE:
        if len(data) == 1 or data[-1] != _DQUOTE:
            return None
        return (1, len(data) - 1)
    return (0, len(data))


def _find_error(data):
    if not data:
        return ParseError(0, cookie_octet | DQUOTE, b'')
    bounds = _bounds(data)
    if bounds is None:
        if len(data) == 1:
            return ParseError(1, DQUOTE, b'')
        return ParseError(len(data) - 1, DQUOTE, data[-1:])
    i = scan(data, cookie_octet, *bounds)
    if i is not None:
        return ParseError(i, cookie_octet, data[i:i + 1])
    return None


def is_cookie_value(data):
    """Is `data` a valid cookie value?

    >>> is_cookie_value(b'"abc"')
    True
    >>> is_cookie_value(b'""')
    True
    >>> is_cookie_value(b'"abc')
    False
    >>> is_cookie_value(b'a;b')
    False
    """
    data = as_octets(data)
    if not data:
        return False
    bounds = _bounds(data)
    return bounds is not None and scan(data, cookie_octet, *bounds) is None


def check_cookie_value(data):
    """Like :func:`is_cookie_value`, but explain what is wrong.

    :raises ParseError: If `data` is not a valid cookie value.
    """
    error = _find_error(as_octets(data))
    if error is not None:
        raise error
