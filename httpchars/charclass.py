# -*- coding: utf-8; -*-

"""Classes of octets, as they appear in the ABNF of RFCs.

A grammar like RFC 7230's ``tchar`` or RFC 6265's ``cookie-octet`` is just
a set of allowed octets. We represent it as a :class:`CharClass`:
an immutable table of 256 bits (one per octet value), built once
at import time from the ranges given in the RFC::

    cookie_octet = (octet(0x21) | octet_range(0x23, 0x2B) |
                    octet_range(0x2D, 0x3A) | octet_range(0x3C, 0x5B) |
                    octet_range(0x5D, 0x7E))                    > auto

Checking a string against such a class (:func:`scan`) is then a single pass
with one table lookup per byte.

The grammars themselves are in :mod:`httpchars.syntax`.
"""

from bitstring import BitArray, Bits

from httpchars.util.text import format_char, format_chars


class CharClass(object):

    """A set of octets, matching one byte at a time."""

    __slots__ = ('name', 'citation', 'bits')

    def __init__(self, name=None, citation=None, bits=None):
        """
        :param name:
            The name of this class in the grammar, normally as specified
            in `citation`.
        :param citation:
            The :class:`~httpchars.citation.Citation` for the document that
            defines this class.
        :param bits:
            A :class:`bitstring.Bits` of length 256, where bit number `i`
            is set if the octet `i` belongs to this class.
        """
        self.name = name
        self.citation = citation
        self.bits = bits if bits is not None else Bits(bytes(32))

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__,
                            self.name or hex(id(self)))

    def __gt__(self, seal):
        """``cls >seal`` gives `cls` a name and citation (see :func:`named`)."""
        sealed = self if self.name is None else CharClass(bits=self.bits)
        (sealed.name, sealed.citation) = seal
        return sealed

    def chars(self):
        return [bytes((i,)) for (i, v) in enumerate(self.bits) if v]

    def match(self, char):
        if isinstance(char, bytes):
            char = ord(char)
        return self.bits[char]

    __contains__ = match

    def __or__(self, other):
        other = as_charclass(other)
        return CharClass(bits=self.bits | other.bits)

    def __ror__(self, other):
        return as_charclass(other) | self

    def __sub__(self, other):
        other = as_charclass(other)
        return CharClass(bits=self.bits ^ (self.bits & other.bits))

    def __rsub__(self, other):
        return as_charclass(other) - self

    def describe(self):
        """Human-readable description, for use in error messages."""
        r = format_chars(self.chars()) or u'nothing'
        if self.name and self.citation:
            r += u' (%s, %s)' % (self.name, self.citation)
        elif self.name:
            r += u' (%s)' % self.name
        return r


def octet_range(min_, max_):
    """Create a class that accepts bytes from `min_` to `max_` inclusive."""
    bits = BitArray(bytes(32))
    for i in range(min_, max_ + 1):
        bits[i] = True
    return CharClass(bits=Bits(bits))

def octet(value):
    """Create a class that accepts only the `value` byte."""
    return octet_range(value, value)

def literal(s, case_sensitive=False):
    """Create a class that accepts any one of the characters in `s`."""
    r = CharClass()
    for c in s:
        if case_sensitive:
            r = r | octet(ord(c))
        else:
            r = r | octet(ord(c.lower())) | octet(ord(c.upper()))
    return r

def as_charclass(x):
    return x if isinstance(x, CharClass) else literal(x)


class _AutoName(object):

    pass


_AUTO = _AutoName()


def named(name, citation=None):
    return (name, citation)

auto = named(_AUTO)

def fill_names(scope, citation):
    """Process automatic names for all classes in `scope`.

    When we write::

      foobar = literal('f') | literal('b')      > auto

    there is no way for `foobar` to know its own name (which is ``foobar``,
    important for error reporting), unless we post-process it with this
    function. It takes names from `scope` and writes them back into
    the classes. This only happens for classes sealed with :data:`auto`.
    """
    for name, x in scope.items():
        if isinstance(x, CharClass) and x.name is _AUTO:
            x.name = name.rstrip('_').replace('_', '-')
            x.citation = citation


def scan(data, charclass, start=0, end=None):
    """Find the first byte in ``data[start:end]`` not in `charclass`.

    :param data: A bytestring.
    :return:
        The offset of that byte in `data`, or `None` if all bytes
        in the range belong to `charclass` (including when the range is empty).
    """
    bits = charclass.bits
    if end is None:
        end = len(data)
    for i in range(start, end):
        if not bits[data[i]]:
            return i
    return None


class ParseError(Exception):

    def __init__(self, position, expected, found):
        """
        :param position: Byte offset at which the error was encountered.
        :param expected:
            The :class:`CharClass` that would have been accepted
            at `position`.
        :param found:
            A bytestring of length 1, or 0 (for end of input), that was found
            at `position`.
        """
        super(ParseError, self).__init__(
            u'unexpected %s at byte position %d; expected %s' %
            (format_char(found), position, expected.describe()))
        self.position = position
        self.expected = expected
        self.found = found
