# -*- coding: utf-8; -*-

from httpchars.charclass import auto, fill_names, octet, octet_range
from httpchars.citation import RFC


ALPHA = octet_range(0x41, 0x5A) | octet_range(0x61, 0x7A)               > auto
DIGIT = octet_range(0x30, 0x39)                                         > auto
DQUOTE = octet(0x22)                                                    > auto
VCHAR = octet_range(0x21, 0x7E)                                         > auto

fill_names(globals(), RFC(5234, section=u'B.1'))
