# -*- coding: utf-8; -*-

"""Character classes and rule checks for the media type grammar.

The grammar in RFC 6838 (and RFC 5234, which it builds on) has octets
as terminal symbols, and we follow it: a :class:`Terminal` is a set of
octets, stored as a 256-bit :class:`bitstring.Bits`. Terminals combine
with ``|`` (union) and ``-`` (difference), so the character classes
in :mod:`mediatype.syntax` read almost exactly like the RFCs::

    restricted_name_chars = (ALPHA | DIGIT | '!' | '#' | ...)   > auto

The grammar for a media type is simple enough that we don't need
a general parser. Instead, every token type in :mod:`mediatype.structure`
checks its input against a few rules, always in the same order:
length, then the anchor character(s), then the full character set.
The first rule that is violated raises :exc:`ParsingError`, so the same
bad input always produces the same diagnostic.

Whole media types are parsed through :func:`parse`, which memoizes
successful results. Media types come mostly from HTTP headers, where
the same few strings are seen over and over again.

"""

from collections import OrderedDict
import enum
import logging
import threading

from bitstring import BitArray, Bits

from mediatype.util.text import ellipsize, force_unicode, format_char, \
    format_chars


logger = logging.getLogger(__name__)


###############################################################################
# The main interface to parsing.

def parse(data, symbol):
    """(Try to) parse a string with `symbol`.

    Uses memoization internally, so parsing the same strings many times isn't
    expensive.

    :param data:
        The bytestring or Unicode string to parse. Bytes are decoded
        from ISO-8859-1 first.
    :param symbol:
        A callable that builds a value from a Unicode string,
        raising :exc:`ParsingError` if it can't.

    :raises:
        :exc:`ParsingError` on parse failure.

    """
    data = force_unicode(data)

    # Check if we have already memoized this.
    key = (data, symbol)
    with _memo_lock:
        r = _memo.pop(key, None)
        if r is not None:
            _memo[key] = r      # Reinsertion maintains LRU order.
            return r

    try:
        r = symbol(data)
    except ParsingError as e:
        logger.debug('cannot parse %r: %s', ellipsize(data), e)
        raise

    with _memo_lock:
        _memo[key] = r
        while len(_memo) > MEMO_LIMIT:
            _memo.popitem(last=False)
    return r


_memo = OrderedDict()
_memo_lock = threading.Lock()

MEMO_LIMIT = 500


class Violation(enum.Enum):

    """The kinds of grammar rules that a token can violate."""

    length = 'empty or too long'
    first_char = 'invalid first character'
    charset = 'invalid character set'
    missing_delimiter = 'missing required delimiter'
    missing_quote = 'missing trailing quote'
    empty_quoted = 'empty quoted value'
    quote_inside = 'quote character inside quoted value'


class ParsingError(ValueError):

    def __init__(self, symbol, violation, description, citation=None,
                 position=None, found=None, expected=None):
        """
        :param symbol:
            Name of the token or segment that failed,
            such as ``top-level type`` or ``media type``.
        :param violation: The :class:`Violation` that was detected.
        :param description: Free-form description of the violated rule.
        :param citation:
            The :class:`~mediatype.citation.Citation` for the document
            that defines the rule, or `None`.
        :param position:
            Character offset (within the token) at which the error was
            encountered, or `None` if irrelevant.
        :param found: The character found at `position`, or `None`.
        :param expected:
            Human-readable description of what could be at `position`,
            or `None`.

        """
        message = '%s: %s' % (symbol, description)
        if found is not None:
            message += ' (found %s at position %d' % (format_char(found),
                                                      position)
            if expected is not None:
                message += ', expected %s' % expected
            message += ')'
        super().__init__(message)
        self.symbol = symbol
        self.violation = violation
        self.description = description
        self.citation = citation
        self.position = position
        self.found = found
        self.expected = expected


###############################################################################
# Character classes.


class Terminal:

    """A terminal symbol of the grammar, matching some set of octets."""

    def __init__(self, name=None, citation=None, bits=None):
        self.name = name
        self.citation = citation
        self.bits = bits if bits is not None else Bits.from_zeros(256)

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__,
                            self.name or hex(id(self)))

    def __gt__(self, seal):
        """``sym >seal`` names the `sym` symbol, see :func:`fill_names`."""
        if self.name is None:
            sealed = self
        else:
            sealed = Terminal(bits=self.bits)
        (sealed.name, sealed.citation) = seal
        return sealed

    def chars(self):
        return [chr(i) for (i, v) in enumerate(self.bits) if v]

    def describe(self):
        return format_chars(self.chars())

    def match(self, char):
        point = ord(char)
        return point < 256 and self.bits[point]

    __contains__ = match

    def find_mismatch(self, s, start=0, end=None):
        """Return the index of the first character not matching, or -1."""
        end = len(s) if end is None else end
        for i in range(start, end):
            if not self.match(s[i]):
                return i
        return -1

    def __or__(self, other):
        other = as_terminal(other)
        return Terminal(bits=self.bits | other.bits)

    __ror__ = __or__

    def __sub__(self, other):
        other = as_terminal(other)
        return Terminal(bits=self.bits ^ (self.bits & other.bits))


def octet_range(min_, max_):
    """Create a terminal that accepts bytes from `min_` to `max_` inclusive."""
    bits = BitArray.from_zeros(256)
    for i in range(min_, max_ + 1):
        bits[i] = True
    return Terminal(bits=Bits(bits))

def octet(value):
    """Create a terminal that accepts only the `value` byte."""
    return octet_range(value, value)

def literal(c, case_sensitive=False):
    """Create a terminal that accepts the single character `c`."""
    if case_sensitive:
        return octet(ord(c))
    else:
        return octet(ord(c.lower())) | octet(ord(c.upper()))

def as_terminal(x):
    return x if isinstance(x, Terminal) else literal(x)


class _AutoName:

    def __repr__(self):
        return '_AUTO'

_AUTO = _AutoName()


def named(name, citation=None):
    return (name, citation)

auto = named(_AUTO)

def fill_names(scope, citation):
    """Process automatic names for all terminals in `scope`.

    When we write::

      foobar = literal('f') | literal('b')      > auto

    there is no way for `foobar` to know its own name (which is ``foobar``,
    useful in diagnostics), unless we post-process it with this
    function. It takes names from `scope` and writes them back into
    the terminals. This only happens for terminals sealed with :func:`auto`.
    """
    for name, x in scope.items():
        if isinstance(x, Terminal) and x.name is _AUTO:
            x.name = name.rstrip('_').replace('_', '-')
            x.citation = citation


###############################################################################
# Rule checks used by the token types.

def check_length(symbol, s, min_, max_, citation=None):
    if not min_ <= len(s) <= max_:
        raise ParsingError(
            symbol, Violation.length,
            'length required to be [%d..%d] characters' % (min_, max_),
            citation)

def check_char(symbol, s, position, terminal, description, citation=None):
    """Check that the character of `s` at `position` is in `terminal`."""
    if not terminal.match(s[position]):
        raise ParsingError(symbol, Violation.first_char, description,
                           citation, position=position, found=s[position],
                           expected=terminal.describe())

def check_chars(symbol, s, terminal, citation=None, start=0, end=None,
                description='containing non-valid characters'):
    """Check that every character of ``s[start:end]`` is in `terminal`."""
    i = terminal.find_mismatch(s, start, end)
    if i != -1:
        raise ParsingError(symbol, Violation.charset, description,
                           citation, position=i, found=s[i],
                           expected=terminal.describe())
