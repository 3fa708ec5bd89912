# -*- coding: utf-8; -*-

"""Checking strings against the ``token`` rule of RFC 7230 § 3.2.6.

A token is one or more ``tchar``. This checks one already-delimited token
(such as a header field name); it does not split strings on delimiters.
"""

from httpchars.charclass import ParseError, scan
from httpchars.syntax.rfc7230 import tchar
from httpchars.util.text import as_octets


def _find_error(data):
    if not data:
        return ParseError(0, tchar, b'')
    i = scan(data, tchar)
    if i is not None:
        return ParseError(i, tchar, data[i:i + 1])
    return None


def is_token(data):
    """Is `data` a valid token?

    >>> is_token(b'Content-Type')
    True
    >>> is_token(b'a,b')
    False
    >>> is_token(b'')
    False
    """
    data = as_octets(data)
    return len(data) > 0 and scan(data, tchar) is None


def check_token(data):
    """Like :func:`is_token`, but explain what is wrong.

    :raises ParseError: If `data` is not a valid token.
    """
    error = _find_error(as_octets(data))
    if error is not None:
        raise error
