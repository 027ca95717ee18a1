# -*- coding: utf-8; -*-

from mediatype.citation import RFC
from mediatype.parse import auto, fill_names, literal
from mediatype.syntax.common import ALPHA, DIGIT


MAX_LENGTH = 127

restricted_name_first = ALPHA | DIGIT                                   > auto
restricted_name_chars = (ALPHA | DIGIT | '!' | '#' |
                         '$' | '&' | '-' | '^' | '_' |
                         '.' | '+')                                     > auto

# Registration tree facets and structured syntax suffixes are delimited
# by ``.`` and ``+``, so those can't appear inside them.
modified_restricted_name_chars = restricted_name_chars - '.' - '+'      > auto

tree_delimiter = literal('.')                                           > auto
suffix_delimiter = literal('+')                                         > auto

fill_names(globals(), RFC(6838, section='4.2'))


type_citation = RFC(6838, section='4.2')
tree_citation = RFC(6838, section='3')
subtype_citation = RFC(6838, section='4.2')
suffix_citation = RFC(6838, section='4.2.8')
parameter_citation = RFC(6838, section='4.3')
media_type_citation = RFC(6838, section='4.2')
