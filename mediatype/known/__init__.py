# -*- coding: utf-8; -*-

"""Well-known media types and helpers to reason about them.

>>> media.application_problem_json
MediaType(type=Type('application'), tree=Tree(''), subtype=Subtype('problem'), suffix=Suffix('+json'))
>>> media.application_problem_json in media
True
"""

from mediatype.known.media_type import is_json, is_xml, preferred
from mediatype.known.media_type import known as media


__all__ = ['is_json', 'is_xml', 'media', 'preferred']
