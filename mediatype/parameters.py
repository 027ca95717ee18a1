# -*- coding: utf-8; -*-

"""Parsing media types together with their parameters.

:meth:`MediaType.parse <mediatype.structure.MediaType.parse>` ignores
parameters. This module is for when you need them::

    >>> p = parse_parametrized('text/html; charset="UTF-8"; level=1')
    >>> p.item
    MediaType(type=Type('text'), tree=Tree(''), subtype=Subtype('html'), suffix=None)
    >>> p.param['charset'].value
    'UTF-8'
    >>> print(p)
    text/html; charset="UTF-8"; level=1

The syntax after the media type is that of RFC 7231 Section 3.1.1.1::

    *( OWS ";" OWS parameter )

except that empty elements (``text/html;;charset=utf-8``) are skipped,
and names and values are validated as :class:`ParameterName`
and :class:`ParameterValue`.

"""

from mediatype.citation import RFC
from mediatype.parse import ParsingError, Violation
from mediatype.structure import (MediaType, MultiDict, ParameterName,
                                 ParameterValue, Parametrized)
from mediatype.syntax.common import DQUOTE, WSP
from mediatype.util.text import force_unicode


citation = RFC(7231, section='3.1.1.1')


def parse_parametrized(data):
    """Parse a media type with parameters into a :class:`Parametrized`.

    The `item` is the :class:`MediaType`, and the `param` is a
    :class:`MultiDict` of :class:`ParameterName` to :class:`ParameterValue`,
    in the order they were given. Repeated names are kept.

    :raises:
        :exc:`~mediatype.parse.ParsingError` if anything is not valid.
    """
    return _parametrized(force_unicode(data))


def _parametrized(data):
    (head, semicolon, tail) = data.partition(';')
    item = MediaType.parse(head.rstrip(' \t'))
    if semicolon:
        param = MultiDict(list(_parameters(tail, offset=len(head) + 1)))
    else:
        param = MultiDict()
    return Parametrized(item, param)


def _skip_whitespace(s, i):
    while i < len(s) and WSP.match(s[i]):
        i += 1
    return i


def _parameters(s, offset):
    i = 0
    while True:
        i = _skip_whitespace(s, i)
        if i == len(s):
            return
        if s[i] == ';':                 # empty element
            i += 1
            continue

        eq = s.find('=', i)
        semicolon = s.find(';', i)
        if eq == -1 or (semicolon != -1 and semicolon < eq):
            raise ParsingError('parameter', Violation.missing_delimiter,
                               "missing delimiter '=' after name", citation,
                               position=offset + i)
        name = ParameterName(s[i:eq])

        i = eq + 1
        if i < len(s) and DQUOTE.match(s[i]):
            close = s.find('"', i + 1)
            end = len(s) if close == -1 else close + 1
            value = ParameterValue(s[i:end])
        else:
            end = len(s) if semicolon == -1 else semicolon
            value = ParameterValue(s[i:end].rstrip(' \t'))
        yield (name, value)

        i = _skip_whitespace(s, end)
        if i < len(s) and s[i] != ';':
            raise ParsingError('parameter', Violation.missing_delimiter,
                               "missing delimiter ';' between parameters",
                               citation, position=offset + i, found=s[i])
