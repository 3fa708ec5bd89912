# -*- coding: utf-8; -*-


class Citation(object):

    """A reference to a relevant document."""

    __slots__ = ('title', 'url')
    __str__ = lambda self: self.title or self.url

    def __init__(self, title, url):
        self.title = title
        self.url = url

    def __eq__(self, other):
        return isinstance(other, Citation) and \
            self.title == other.title and self.url == other.url

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.title, self.url))


class RFC(Citation):

    """A reference to an RFC document, optionally to a specific section."""

    __slots__ = ('num', 'section')

    def __init__(self, num, section=None):
        self.num = num = int(num)
        self.section = section = str(section) if section else None
        title = u'RFC %d' % num
        url = u'https://tools.ietf.org/html/rfc%d' % num
        if section:
            title += u' § %s' % section
            url += u'#section-%s' % section
        super(RFC, self).__init__(title, url)
