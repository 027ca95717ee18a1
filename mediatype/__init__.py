# -*- coding: utf-8; -*-

from mediatype.__metadata__ import version as __version__
from mediatype.parameters import parse_parametrized
from mediatype.parse import ParsingError, Violation
from mediatype.structure import (MediaType, MultiDict, ParameterName,
                                 ParameterValue, Parametrized, Subtype, Suffix,
                                 Tree, Type, Unavailable, media_type, okay,
                                 try_parse)

__all__ = [
    'MediaType',
    'MultiDict',
    'ParameterName',
    'ParameterValue',
    'Parametrized',
    'ParsingError',
    'Subtype',
    'Suffix',
    'Tree',
    'Type',
    'Unavailable',
    'Violation',
    'media_type',
    'okay',
    'parse_parametrized',
    'try_parse',
]
