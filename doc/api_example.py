import httpchars

headers = [
    (b'Content-Type', b'text/plain'),
    (b'Set-Cookie', b'session="0123abcd"'),
    (b'X Forwarded', b'yes'),
    (b'Set-Cookie', b'theme=dark; light'),
]

for (name, value) in headers:
    try:
        httpchars.check_token(name)
    except httpchars.ParseError as exc:
        print('bad header name %r: %s' % (name, exc))
        continue
    if name.lower() == b'set-cookie':
        cookie_value = value.split(b'=', 1)[1]
        if not httpchars.is_cookie_value(cookie_value):
            print('bad cookie value in %r' % value)
