# -*- coding: utf-8; -*-

from httpchars.charclass import auto, fill_names, octet, octet_range
from httpchars.citation import RFC


# US-ASCII characters excluding CTLs, whitespace, DQUOTE, comma, semicolon,
# and backslash.
cookie_octet = (octet(0x21) | octet_range(0x23, 0x2B) |
                octet_range(0x2D, 0x3A) | octet_range(0x3C, 0x5B) |
                octet_range(0x5D, 0x7E))                                > auto

fill_names(globals(), RFC(6265, section=u'4.1.1'))
