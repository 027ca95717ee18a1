# -*- coding: utf-8; -*-


class Citation:

    """A reference to a relevant document."""

    __slots__ = ('title', 'url')

    def __init__(self, title, url):
        self.title = title
        self.url = url

    def __str__(self):
        return self.title or self.url

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__, self)

    def __eq__(self, other):
        return isinstance(other, Citation) and \
            self.title == other.title and self.url == other.url

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.title, self.url))


class RFC(Citation):

    """A reference to an RFC document, optionally to a specific section.

    >>> print(RFC(6838, section='4.2.8'))
    RFC 6838 § 4.2.8
    >>> print(RFC(6838, section='4.2.8').url)
    https://tools.ietf.org/html/rfc6838#section-4.2.8
    """

    __slots__ = ('num', 'section', 'appendix')

    def __init__(self, num, section=None, appendix=None):
        assert bool(section) + bool(appendix) <= 1
        self.num = num = int(num)
        self.section = section = str(section) if section else None
        self.appendix = appendix = str(appendix) if appendix else None
        title = 'RFC %d' % num
        url = 'https://tools.ietf.org/html/rfc%d' % num
        if section or appendix:
            word1 = '§' if section else 'appendix'
            word2 = 'section' if section else 'appendix'
            title += ' %s %s' % (word1, section or appendix)
            url += '#%s-%s' % (word2, section or appendix)
        super().__init__(title, url)
