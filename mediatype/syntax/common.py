# -*- coding: utf-8; -*-

"""Core rules of RFC 5234 and a classifier for single ASCII characters.

The predicates accept any one-character string. Only ASCII is ever
matched: characters above 0x7F are rejected by every predicate,
and left alone by the case conversions.
"""

from mediatype.citation import RFC
from mediatype.parse import auto, fill_names, octet, octet_range


ALPHA = octet_range(0x41, 0x5A) | octet_range(0x61, 0x7A)               > auto
CHAR = octet_range(0x01, 0x7F)                                          > auto
CTL = octet_range(0x00, 0x1F) | octet(0x7F)                             > auto
CR = octet(0x0D)                                                        > auto
DIGIT = octet_range(0x30, 0x39)                                         > auto
DQUOTE = octet(0x22)                                                    > auto
HEXDIG = DIGIT | 'A' | 'B' | 'C' | 'D' | 'E' | 'F'                      > auto
HTAB = octet(0x09)                                                      > auto
LF = octet(0x0A)                                                        > auto
SP = octet(0x20)                                                        > auto
VCHAR = octet_range(0x21, 0x7E)                                         > auto
WSP = SP | HTAB                                                         > auto

fill_names(globals(), RFC(5234))


# Not in RFC 5234, but handy to have alongside.
UPPER = octet_range(0x41, 0x5A)                                         > auto
LOWER = octet_range(0x61, 0x7A)                                         > auto
PRINT = SP | VCHAR                                                      > auto
SPACE = octet_range(0x09, 0x0D) | SP                                    > auto
PUNCT = (octet_range(0x21, 0x2F) | octet_range(0x3A, 0x40) |
         octet_range(0x5B, 0x60) | octet_range(0x7B, 0x7E))             > auto

fill_names(globals(), citation=None)


is_digit = DIGIT.match
is_alphabetic = ALPHA.match
is_alphabetic_lowercase = LOWER.match
is_alphabetic_uppercase = UPPER.match
is_hexadecimal = HEXDIG.match
is_control = CTL.match
is_printable = PRINT.match
is_graphical = VCHAR.match
is_blank = WSP.match
is_space = SPACE.match
is_punctuation = PUNCT.match


def is_alphanumeric(c):
    return is_alphabetic(c) or is_digit(c)

def is_alphanumeric_lowercase(c):
    return is_alphabetic_lowercase(c) or is_digit(c)

def is_alphanumeric_uppercase(c):
    return is_alphabetic_uppercase(c) or is_digit(c)


_TO_LOWER = {c: c + 0x20 for c in range(0x41, 0x5B)}
_TO_UPPER = {c: c - 0x20 for c in range(0x61, 0x7B)}

def to_lowercase(s):
    """Convert ASCII letters in `s` to lowercase, leaving the rest alone.

    >>> print(to_lowercase('Application/VND.Foo+JSON'))
    application/vnd.foo+json
    >>> print(to_lowercase('\\xc9'))
    \xc9
    """
    return s.translate(_TO_LOWER)

def to_uppercase(s):
    """Convert ASCII letters in `s` to uppercase, leaving the rest alone."""
    return s.translate(_TO_UPPER)
