# -*- coding: utf-8; -*-

import string


CHAR_NAMES = {
    '\t': 'tab',
    '\n': 'LF',
    '\r': 'CR',
    ' ': 'space',
    '"': 'double quote (")',
    "'": "single quote (')",
    ',': 'comma (,)',
    '.': 'period (.)',
    ';': 'semicolon (;)',
    '-': 'dash (-)',
}


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
        show = lambda point: '%#04x' % point
    else:
        show = chr
    return [
        ('%s' % show(p1)) if p1 == p2 else ('%s–%s' % (show(p1), show(p2)))
        for (p1, p2) in intervals]


def format_chars(chars):
    """
    >>> print(format_chars(['\\x00', '\\x04', '\\x05', '\\x06', '\\x07',
    ...                     ' ', '0', '1', '2', '3', '4', '5', '6',
    ...                     '7', '8', '9', 'A', 'B', 'C', 'D', 'E', 'F']))
    A–F or 0–9 or space or 0x00 or 0x04–0x07

    >>> print(format_chars(['\\t', ' ']))
    tab or space

    >>> print(format_chars(['!', '#', '$', '&', '+', '-', '.',
    ...                     '0', '1', '2', '3', '4', '5', '6', '7', '8', '9',
    ...                     'X', 'Y', 'Z', '^', '_', 'a', 'b', 'c']))
    X–Z or a–c or 0–9 or dash (-) or period (.) or !#$&+^_
    """
    (letters, digits, named, visible, other) = ([], [], [], [], [])
    for c in chars:
        if c in string.ascii_letters:
            letters.append(c)
        elif c in string.digits:
            digits.append(c)
        elif c in CHAR_NAMES:
            named.append(c)
        elif 0x21 <= ord(c) < 0x7F:
            visible.append(c)
        else:
            other.append(c)
    pieces = (_char_ranges(letters) + _char_ranges(digits) +
              [CHAR_NAMES[c] for c in named] +
              [''.join(visible)] +
              _char_ranges(other, as_hex=True))
    return ' or '.join(piece for piece in pieces if piece)


def format_char(c):
    """
    >>> print(format_char(';'))
    semicolon (;)
    >>> print(format_char('@'))
    @
    >>> print(format_char('\\x7f'))
    0x7f
    """
    if c in CHAR_NAMES:
        return CHAR_NAMES[c]
    elif 0x21 <= ord(c) < 0x7F:
        return c
    else:
        return '%#04x' % ord(c)


def force_unicode(x):
    """
    >>> print(force_unicode(b'text/plain'))
    text/plain
    >>> force_unicode(42)
    Traceback (most recent call last):
        ...
    TypeError: expected a string, got int
    """
    if isinstance(x, bytes):
        return x.decode('iso-8859-1')
    elif isinstance(x, str):
        return x
    else:
        raise TypeError('expected a string, got %s' % type(x).__name__)


def ellipsize(s, max_length=60):
    """
    >>> print(ellipsize('lorem ipsum dolor sit amet', 40))
    lorem ipsum dolor sit amet
    >>> print(ellipsize('lorem ipsum dolor sit amet', 20))
    lorem ipsum dolor...
    """
    if len(s) > max_length:
        ellipsis = '...'
        return s[:(max_length - len(ellipsis))] + ellipsis
    else:
        return s
