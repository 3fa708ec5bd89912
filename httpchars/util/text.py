# -*- coding: utf-8; -*-

import io
import re
import string


CHAR_NAMES = {
    b'\t': u'tab',
    b'\n': u'LF',
    b'\r': u'CR',
    b' ': u'space',
    b'"': u'double quote (")',
    b"'": u"single quote (')",
    b',': u'comma (,)',
    b'.': u'period (.)',
    b';': u'semicolon (;)',
    b'-': u'dash (-)',
    b'\\': u'backslash (\\)',
}


def as_octets(data):
    """Get the bytes to be checked from `data`.

    Unicode is encoded to ISO-8859-1, the historic encoding of HTTP.

    >>> as_octets(u'Content-Type')
    b'Content-Type'
    >>> as_octets(bytearray(b'foo'))
    b'foo'
    >>> as_octets(42)
    Traceback (most recent call last):
      ...
    TypeError: expected bytes or str, not int

    :raises UnicodeEncodeError:
        If `data` is Unicode that cannot be encoded to ISO-8859-1.
    """
    if isinstance(data, bytes):
        return data
    elif isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    elif isinstance(data, str):
        return data.encode('iso-8859-1')
    else:
        raise TypeError(u'expected bytes or str, not %s' %
                        type(data).__name__)


def _char_ranges(chars, as_hex=False):
    intervals = []
    min_ = max_ = None
    for c in chars:
        point = ord(c)
        if max_ == point - 1:
            max_ = point
        else:
            if min_ is not None:
                intervals.append((min_, max_))
            min_ = max_ = point
    if min_ is not None:
        intervals.append((min_, max_))
    if as_hex:
        show = lambda point: u'%#04x' % point
    else:
        show = chr
    return [
        (u'%s' % show(p1)) if p1 == p2 else (u'%s–%s' % (show(p1), show(p2)))
        for (p1, p2) in intervals]


def format_chars(chars):
    u"""
    >>> print(format_chars([b'\\x00', b'\\x04', b'\\x05', b'\\x06', b'\\x07',
    ...                     b' ', b'0', b'1', b'2', b'3', b'4', b'5', b'6',
    ...                     b'7', b'8', b'9', b'A', b'B', b'C', b'D', b'E',
    ...                     b'F']))
    A–F or 0–9 or space or 0x00 or 0x04–0x07

    >>> print(format_chars([b'\\t', b' ']))
    tab or space

    >>> print(format_chars([b'!', b'#', b'$', b'%', b'&', b"'", b'*', b'+',
    ...                     b'.', b'0', b'1', b'2', b'3', b'4', b'5', b'6',
    ...                     b'7', b'8', b'9', b'a', b'b', b'c', b'd', b'e']))
    a–e or 0–9 or single quote (') or period (.) or !#$%&*+

    >>> print(format_chars([b'V', b'W', b'X', b'Y', b'Z', b'a', b'b', b'c']))
    V–Z or a–c
    """
    (letters, digits, named, visible, other) = ([], [], [], [], [])
    for c in chars:
        if c.decode('iso-8859-1') in string.ascii_letters:
            letters.append(c)
        elif c.decode('iso-8859-1') in string.digits:
            digits.append(c)
        elif c in CHAR_NAMES:
            named.append(c)
        elif 0x21 <= ord(c) < 0x7F:
            visible.append(c)
        else:
            other.append(c)
    pieces = (_char_ranges(letters) + _char_ranges(digits) +
              [CHAR_NAMES[c] for c in named] +
              [u''.join(c.decode('ascii') for c in visible)] +
              _char_ranges(other, as_hex=True))
    return u' or '.join(piece for piece in pieces if piece)


def format_char(c):
    """
    >>> print(format_char(b','))
    comma (,)
    >>> print(format_char(b'x'))
    x
    >>> print(format_char(b'\\x7f'))
    0x7f
    >>> print(format_char(b''))
    end of input
    """
    if not c:
        return u'end of input'
    elif c in CHAR_NAMES:
        return CHAR_NAMES[c]
    elif 0x21 <= ord(c) < 0x7F:
        return c.decode('ascii')
    else:
        return u'%#04x' % ord(c)


def stdio_as_bytes(f):
    return f.buffer if hasattr(f, 'buffer') else f


def ellipsize(s, max_length=60):
    """
    >>> print(ellipsize(u'lorem ipsum dolor sit amet', 40))
    lorem ipsum dolor sit amet
    >>> print(ellipsize(u'lorem ipsum dolor sit amet', 20))
    lorem ipsum dolor...
    """
    if len(s) > max_length:
        ellipsis = u'...'
        return s[:(max_length - len(ellipsis))] + ellipsis
    else:
        return s


def printable(s):
    # Based on `XML 1.0 section 2.2 <https://www.w3.org/TR/xml/#charsets>`_,
    # with the addition of U+0085.
    return re.sub(
        pattern=(u'[\u0000-\u0008\u000B\u000C\u000E-\u001F'
                 u'\u007F-\u009F\uD800-\uDFFF\uFDD0-\uFDEF\uFFFE\uFFFF]'),
        repl=u'\N{REPLACEMENT CHARACTER}',
        string=s
    )


class MockStdio(object):

    """Suitable as a mock stdout/stderr for tests."""

    def __init__(self):
        self.buffer = io.BytesIO()

    def write(self, s):
        self.buffer.write(s.encode('utf-8'))
