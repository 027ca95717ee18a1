# -*- coding: utf-8; -*-

import pytest

from mediatype.known import media
from mediatype.parameters import parse_parametrized
from mediatype.parse import ParsingError, Violation
from mediatype.structure import (MediaType, MultiDict, ParameterName,
                                 ParameterValue, Parametrized)


def no_parse(text, violation, symbol=None):
    with pytest.raises(ParsingError) as info:
        parse_parametrized(text)
    assert info.value.violation is violation
    if symbol is not None:
        assert info.value.symbol == symbol
    return info.value


def names(p):
    return [name for (name, _) in p.param.sequence]


def test_no_parameters():
    p = parse_parametrized('text/html')
    assert p == Parametrized(media.text_html, MultiDict())
    assert p.item == media.text_html
    assert len(p.param) == 0
    assert parse_parametrized('text/html;') == \
        Parametrized(media.text_html, MultiDict())


def test_parameters():
    p = parse_parametrized('Text/HTML; Charset="utf-8"')
    assert p == Parametrized(media.text_html,
                             MultiDict([('charset', 'utf-8')]))
    assert isinstance(names(p)[0], ParameterName)
    assert isinstance(p.param['charset'], ParameterValue)
    assert p.param['charset'].quoted
    assert p.param['charset'].value == 'utf-8'

    p = parse_parametrized('text/html;charset=UTF-8')
    assert p.param['charset'] == 'UTF-8'
    assert p.param['charset'] != 'utf-8'

    p = parse_parametrized(b'text/html ; charset=utf-8 ;\tlevel=1 ')
    assert p.item == media.text_html
    assert names(p) == ['charset', 'level']
    assert p.param['level'] == '1'

    p = parse_parametrized('application/vnd.api+json;;ext=bulk;')
    assert p.item == media.application_vnd_api_json
    assert names(p) == ['ext']

    p = parse_parametrized('text/plain; x="a;b = c"; y=1')
    assert p.param['x'].value == 'a;b = c'
    assert p.param['y'] == '1'


def test_duplicates():
    p = parse_parametrized('text/plain; a=1; A="2"; b=3')
    assert p.param.duplicates() == ['a']
    assert p.param.getall('a') == ['1', '2']
    assert p.param['a'] == '1'
    assert p.param.get('c') is None
    assert list(p.param) == ['a', 'b']


def test_format():
    p = parse_parametrized('Text/HTML;Charset="UTF-8";  Level=1')
    assert str(p) == 'text/html; charset="UTF-8"; level=1'
    assert parse_parametrized(str(p)) == p
    assert str(parse_parametrized('image/png')) == 'image/png'


def test_parameter_errors():
    no_parse('text/html; charset', Violation.missing_delimiter, 'parameter')
    no_parse('text/html; a; b=c', Violation.missing_delimiter, 'parameter')
    e = no_parse('text/html; charset="utf-8" x',
                 Violation.missing_delimiter, 'parameter')
    assert e.position == 27
    assert e.found == 'x'
    no_parse('text/html; charset=utf-8 x', Violation.charset,
             'parameter value')
    no_parse('text/html; charset="utf-8', Violation.missing_quote,
             'parameter value')
    no_parse('text/html; charset=""', Violation.empty_quoted,
             'parameter value')
    no_parse('text/html; charset=', Violation.length, 'parameter value')
    no_parse('text/html; charset=;', Violation.length, 'parameter value')
    no_parse('text/html; =utf-8', Violation.length, 'parameter name')
    no_parse('text/html; -x=1', Violation.first_char, 'parameter name')
    no_parse('text/html; char set=1', Violation.charset, 'parameter name')
    no_parse('text/.html; a=b', Violation.missing_delimiter, 'media type')


def test_media_type_ignores_parameters():
    # The core parser doesn't look at parameters at all,
    # even when they are malformed.
    assert MediaType.parse('text/html; charset=""') == media.text_html
    with pytest.raises(ParsingError):
        parse_parametrized('text/html; charset=""')
