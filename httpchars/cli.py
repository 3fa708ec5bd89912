# -*- coding: utf-8; -*-

"""The command-line interface to httpchars."""

import argparse
import io
import os
import sys
import traceback

import httpchars
from httpchars.charclass import ParseError
from httpchars.cookie import check_cookie_value
from httpchars.token import check_token
from httpchars.util.text import ellipsize, printable, stdio_as_bytes


grammars = {
    u'token': check_token,
    u'cookie-value': check_cookie_value,
}


def parse_args(argv):
    parser = argparse.ArgumentParser(
        description=u'Check strings against the HTTP token '
                    u'or cookie-value grammar.')
    parser.add_argument(u'--version', action='version',
                        version=u'httpchars %s' % httpchars.__version__)
    parser.add_argument(u'-f', u'--file', metavar=u'PATH', action='append',
                        default=[],
                        help=u'also check every line of this file')
    parser.add_argument(u'-v', u'--verbose', action='store_true',
                        help=u'report valid values, too')
    parser.add_argument(u'--full-traceback', action='store_true',
                        help=u'do not hide the traceback on exceptions')
    parser.add_argument(u'grammar', choices=sorted(grammars))
    parser.add_argument(u'value', nargs='*')
    args = parser.parse_args(argv[1:])
    if not args.value and not args.file:
        parser.error(u'nothing to check: give some values or --file')
    return args


def read_values(args):
    for value in args.value:
        # Get back the original bytes, even if they are not valid
        # in the locale's encoding.
        yield os.fsencode(value)
    for path in args.file:
        with io.open(path, 'rb') as f:
            for line in f.read().splitlines():
                if line:
                    yield line


def run_cli(args, stdout, stderr):
    check = grammars[args.grammar]
    out = stdio_as_bytes(stdout)
    n_bad = 0

    try:
        for value in read_values(args):
            shown = printable(ellipsize(value.decode('iso-8859-1')))
            try:
                check(value)
            except ParseError as exc:
                n_bad += 1
                out.write((u'"%s": %s\n' % (shown, exc)).encode('utf-8'))
            else:
                if args.verbose:
                    out.write((u'"%s": ok\n' % shown).encode('utf-8'))
    except EnvironmentError as exc:
        if args.full_traceback:
            traceback.print_exc(file=stderr)
        stderr.write('httpchars: %s\n' % exc)
        return 1

    return 1 if n_bad > 0 else 0


def excepthook(_type, exc, _traceback):     # pragma: no cover
    sys.stderr.write('httpchars: unhandled exception: %r\n' % exc)


def main():     # pragma: no cover
    args = parse_args(sys.argv)
    if not args.full_traceback:
        sys.excepthook = excepthook
    sys.exit(run_cli(args, sys.stdout, sys.stderr))

if __name__ == '__main__':
    main()
