# -*- coding: utf-8; -*-

from httpchars.__metadata__ import version as __version__
from httpchars.charclass import ParseError
from httpchars.cookie import check_cookie_value, is_cookie_value
from httpchars.token import check_token, is_token

__all__ = [
    'ParseError',
    'check_cookie_value',
    'check_token',
    'is_cookie_value',
    'is_token',
]
