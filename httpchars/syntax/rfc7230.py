# -*- coding: utf-8; -*-

from httpchars.charclass import auto, fill_names, literal
from httpchars.citation import RFC
from httpchars.syntax.common import VCHAR


# tchar          = "!" / "#" / "$" / "%" / "&" / "'" / "*"
#                / "+" / "-" / "." / "^" / "_" / "`" / "|" / "~"
#                / DIGIT / ALPHA
#                ; any VCHAR, except delimiters
delimiters = literal('"(),/:;<=>?@[\\]{}')                              > auto

tchar = VCHAR - delimiters                                              > auto

fill_names(globals(), RFC(7230, section=u'3.2.6'))
