# -*- coding: utf-8; -*-

"""Classes for representing media types and their parts."""

from collections import namedtuple

from mediatype.parse import (ParsingError, Violation, check_char, check_chars,
                             check_length, parse)
from mediatype.syntax import rfc6838
from mediatype.syntax.common import DQUOTE, to_lowercase
from mediatype.util.text import force_unicode


###############################################################################
# Commonly useful structures


class Unavailable:

    """A wrapper for a value that has no useful representation in context.

    This is used to represent failures to parse a string,
    in which case the underlying string is passed to the constructor.
    """

    __slots__ = ('inner',)

    def __init__(self, inner=None):
        self.inner = inner

    def __repr__(self):
        return 'Unavailable(%r)' % self.inner

    def __str__(self):
        if self.inner is None:
            return '(?)'
        else:
            return force_unicode(self.inner)

    def __eq__(self, other):
        return isinstance(other, Unavailable) and \
            self.inner is not None and self.inner == other.inner

    def __hash__(self):
        return hash(self.inner)


def okay(x):
    return (x is not None) and not isinstance(x, Unavailable)


class Parametrized(namedtuple('Parametrized', ('item', 'param'))):

    """Anything that consists of some "item" + some parameters to that item."""

    __slots__ = ()

    def __eq__(self, other):
        if isinstance(other, Parametrized):
            return super().__eq__(other)
        else:
            return self.item == other

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self.item)

    def __str__(self):
        params = ''.join('; %s=%s' % (name, value)
                         for (name, value) in self.param.sequence)
        return str(self.item) + params


class MultiDict:

    """A bunch of key-value pairs where keys are not unique."""

    __slots__ = ('sequence',)

    def __init__(self, sequence=None):
        if sequence is None:
            sequence = []
        self.sequence = sequence

    @property
    def dictionary(self):
        r = {}
        for k, v in self.sequence:
            r.setdefault(k, []).append(v)
        return r

    def __repr__(self):
        return 'MultiDict(%r)' % self.sequence

    def __eq__(self, other):
        if isinstance(other, MultiDict):
            return self.sequence == other.sequence
        return NotImplemented

    def __ne__(self, other):
        return not self == other

    def __getitem__(self, name):
        return self.dictionary[name][0]

    def __contains__(self, name):
        return name in self.dictionary

    def __iter__(self):
        return iter(self.dictionary)

    def __len__(self):
        return len(self.sequence)

    def get(self, name, default=None):
        return self[name] if name in self else default

    def getall(self, name):
        return self.dictionary.get(name, [])

    def duplicates(self):
        return [k for k, v in self.dictionary.items() if len(v) > 1]


class ProtocolString(str):

    """Base class for various constant strings."""

    __slots__ = ()

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, str.__repr__(self))


###############################################################################
# The parts of a media type


class Token(ProtocolString):

    """Base class for the validated parts of a media type.

    The only way to get a token is to construct it from a string,
    which validates the string and normalizes its case,
    raising :exc:`~mediatype.parse.ParsingError` if it's no good.
    Thus, a token is always valid.
    """

    __slots__ = ()

    symbol = None
    citation = None

    def __new__(cls, value):
        return super().__new__(cls, cls.validate(force_unicode(value)))

    @classmethod
    def validate(cls, s):
        """Check `s`, returning its normalized form."""
        raise NotImplementedError

    def string(self):
        return str(self)


def _restricted_name(cls, s):
    check_length(cls.symbol, s, 1, rfc6838.MAX_LENGTH, cls.citation)
    check_char(cls.symbol, s, 0, rfc6838.restricted_name_first,
               'first character required to be alphanumeric', cls.citation)
    check_chars(cls.symbol, s, rfc6838.restricted_name_chars, cls.citation)
    return to_lowercase(s)


class Type(Token):

    """A top-level type, such as ``text`` in ``text/plain``."""

    __slots__ = ()

    symbol = 'top-level type'
    citation = rfc6838.type_citation

    @classmethod
    def validate(cls, s):
        return _restricted_name(cls, s)


class Tree(Token):

    """A registration tree, such as ``vnd.`` in ``application/vnd.api+json``.

    The standards tree has no prefix, so it is represented
    by an empty string. Any other tree includes its trailing period.
    """

    __slots__ = ()

    symbol = 'tree'
    citation = rfc6838.tree_citation

    @classmethod
    def validate(cls, s):
        if s == '':
            return s
        check_length(cls.symbol, s, 2, rfc6838.MAX_LENGTH, cls.citation)
        check_char(cls.symbol, s, 0, rfc6838.restricted_name_first,
                   'first character required to be alphanumeric',
                   cls.citation)
        if not rfc6838.tree_delimiter.match(s[-1]):
            raise ParsingError(cls.symbol, Violation.missing_delimiter,
                               "last character required to be '.'",
                               cls.citation, position=len(s) - 1,
                               found=s[-1])
        check_chars(cls.symbol, s, rfc6838.modified_restricted_name_chars,
                    cls.citation, end=len(s) - 1)
        return to_lowercase(s)

    @property
    def standard(self):
        return self == ''


class Subtype(Token):

    """A subtype, such as ``plain`` in ``text/plain``."""

    __slots__ = ()

    symbol = 'subtype'
    citation = rfc6838.subtype_citation

    @classmethod
    def validate(cls, s):
        return _restricted_name(cls, s)


class Suffix(Token):

    """A structured syntax suffix, such as ``+json``, including the plus."""

    __slots__ = ()

    symbol = 'suffix'
    citation = rfc6838.suffix_citation

    @classmethod
    def validate(cls, s):
        check_length(cls.symbol, s, 2, rfc6838.MAX_LENGTH, cls.citation)
        check_char(cls.symbol, s, 0, rfc6838.suffix_delimiter,
                   "first character required to be '+'", cls.citation)
        check_char(cls.symbol, s, 1, rfc6838.restricted_name_first,
                   'second character required to be alphanumeric',
                   cls.citation)
        # The plus itself is not part of the name.
        check_chars(cls.symbol, s, rfc6838.modified_restricted_name_chars,
                    cls.citation, start=1)
        return to_lowercase(s)


class ParameterName(Token):

    """The name of a media type parameter, such as ``charset``.

    Parameter names are ordered, so they can be sorted.
    """

    __slots__ = ()

    symbol = 'parameter name'
    citation = rfc6838.parameter_citation

    @classmethod
    def validate(cls, s):
        return _restricted_name(cls, s)


class ParameterValue(Token):

    """The value of a media type parameter, such as ``utf-8``.

    A value can be written as a token or as a quoted string,
    and both spellings mean the same thing, so ``"utf-8"`` equals ``utf-8``.
    The string itself keeps the spelling it was given;
    :attr:`value` has the quotes removed.

    Comparisons, including with plain strings, and hashing use :attr:`value`.
    So a quoted value is not equal to its own spelling:

    >>> ParameterValue('"utf-8"') == 'utf-8'
    True
    >>> ParameterValue('"utf-8"') == '"utf-8"'
    False

    Unlike the other tokens, parameter values are not case-folded.
    """

    __slots__ = ()

    symbol = 'parameter value'
    citation = rfc6838.parameter_citation

    @classmethod
    def validate(cls, s):
        check_length(cls.symbol, s, 1, rfc6838.MAX_LENGTH, cls.citation)
        if DQUOTE.match(s[0]):
            if len(s) == 1 or not DQUOTE.match(s[-1]):
                raise ParsingError(cls.symbol, Violation.missing_quote,
                                   'quoted string missing trailing \'"\'',
                                   cls.citation)
            if len(s) == 2:
                raise ParsingError(cls.symbol, Violation.empty_quoted,
                                   'quoted string empty', cls.citation)
            i = s.find('"', 1, len(s) - 1)
            if i != -1:
                raise ParsingError(cls.symbol, Violation.quote_inside,
                                   'quoted string containing \'"\'',
                                   cls.citation, position=i, found=s[i])
        else:
            check_chars(cls.symbol, s, rfc6838.restricted_name_chars,
                        cls.citation,
                        description='non-quoted string '
                                    'containing non-valid characters')
        return s

    @property
    def quoted(self):
        return self.startswith('"')

    @property
    def value(self):
        return self[1:-1] if self.quoted else str(self)

    def __eq__(self, other):
        if isinstance(other, ParameterValue):
            return self.value == other.value
        if isinstance(other, str):
            return self.value == other
        return NotImplemented

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self.value)


def _coerce(cls, x):
    return x if isinstance(x, cls) else cls(x)


class MediaType(namedtuple('MediaType', ('type', 'tree', 'subtype',
                                         'suffix'))):

    """A media type as defined by RFC 6838.

    For example, ``application/vnd.api+json`` consists of
    the :class:`Type` ``application``, the :class:`Tree` ``vnd.``,
    the :class:`Subtype` ``api``, and the :class:`Suffix` ``+json``.
    Plain strings passed to the constructor are validated
    as the corresponding tokens.

    Parameters, such as ``charset=utf-8``, are not part of a `MediaType`:
    :meth:`parse` drops them. If you need them,
    see :func:`mediatype.parameters.parse_parametrized`.
    """

    __slots__ = ()

    # pylint: disable=redefined-builtin
    def __new__(cls, type, tree, subtype, suffix=None):
        return super().__new__(
            cls, _coerce(Type, type), _coerce(Tree, tree),
            _coerce(Subtype, subtype),
            None if suffix is None else _coerce(Suffix, suffix))

    def __str__(self):
        return '%s/%s%s%s' % (self.type, self.tree, self.subtype,
                              self.suffix or '')

    def string(self):
        return str(self)

    def without_suffix(self):
        return self._replace(suffix=None)

    @classmethod
    def _make(cls, iterable):
        # Also used by `_replace`. Must validate like the constructor.
        return cls(*iterable)

    @classmethod
    def parse(cls, data):
        """Parse a string such as ``application/vnd.api+json;v=1``.

        Everything from the first semicolon onward is ignored.

        :raises:
            :exc:`~mediatype.parse.ParsingError` if the string
            (or any part of it) is not valid.
        """
        return parse(data, cls._from_string)

    @classmethod
    def _from_string(cls, data):
        data = data.partition(';')[0]

        (type_, slash, rest) = data.partition('/')
        if not slash:
            raise ParsingError('media type', Violation.missing_delimiter,
                               "missing delimiter '/' after type",
                               rfc6838.media_type_citation,
                               position=len(data))

        # The first period ends the registration tree.
        dot = rest.find('.')
        if dot == 0:
            raise ParsingError('media type', Violation.missing_delimiter,
                               "missing tree between '/' and '.'",
                               rfc6838.media_type_citation,
                               position=len(type_) + 1)
        elif dot == -1:
            tree = ''
        else:
            (tree, rest) = (rest[:dot + 1], rest[dot + 1:])

        # A subtype may itself contain a plus,
        # so only the last one can begin the suffix.
        plus = rest.rfind('+')
        if plus == -1:
            (subtype, suffix) = (rest, '')
        else:
            (subtype, suffix) = (rest[:plus], rest[plus:])

        return cls(Type(type_), Tree(tree), Subtype(subtype),
                   Suffix(suffix) if suffix else None)


def media_type(data):
    """Shorthand for :meth:`MediaType.parse`, for media types written in code.

    >>> media_type('application/problem+json').suffix
    Suffix('+json')
    """
    return MediaType.parse(data)


def try_parse(data):
    """Like :meth:`MediaType.parse`, but returns `Unavailable` on failure.

    This is convenient for untrusted input, such as HTTP headers,
    where failures are expected and not exceptional.

    >>> print(try_parse('Text/HTML; charset=utf-8'))
    text/html
    >>> try_parse('text')
    Unavailable('text')
    """
    try:
        return MediaType.parse(data)
    except ParsingError:
        return Unavailable(data)
