# -*- coding: utf-8; -*-

from mediatype.citation import Citation, RFC
from mediatype.known.base import KnownDict
from mediatype.structure import MediaType, media_type


known = KnownDict(MediaType, [
 {'_': media_type('application/atom+xml'), '_citations': [RFC(4287)]},
 {'_': media_type('application/gzip'), '_citations': [RFC(6713)]},
 {'_': media_type('application/http'), '_citations': [RFC(7230)]},
 {'_': media_type('application/json'), '_citations': [RFC(8259)]},
 {'_': media_type('application/json-patch+json'), '_citations': [RFC(6902)]},
 {'_': media_type('application/ld+json'),
  '_citations': [Citation('JSON-LD 1.0', 'https://www.w3.org/TR/json-ld/')]},
 {'_': media_type('application/merge-patch+json'),
  '_citations': [RFC(7396)]},
 {'_': media_type('application/octet-stream'), '_citations': [RFC(2045)]},
 {'_': media_type('application/pdf'), '_citations': [RFC(8118)]},
 {'_': media_type('application/problem+json'), '_citations': [RFC(7807)]},
 {'_': media_type('application/problem+xml'), '_citations': [RFC(7807)]},
 {'_': media_type('application/vnd.api+json'), '_title': 'JSON:API',
  '_citations': [Citation('JSON:API', 'https://jsonapi.org/format/')]},
 {'_': media_type('application/x-www-form-urlencoded'),
  '_citations': [Citation('HTML', 'https://url.spec.whatwg.org/')]},
 {'_': media_type('application/xhtml+xml'), '_citations': [RFC(3236)]},
 {'_': media_type('application/xml'), '_citations': [RFC(7303)]},
 {'_': media_type('image/gif'), '_citations': [RFC(2046)]},
 {'_': media_type('image/jpeg'), '_citations': [RFC(2046)]},
 {'_': media_type('image/png'),
  '_citations': [Citation('PNG', 'https://www.w3.org/TR/PNG/')]},
 {'_': media_type('image/svg+xml'),
  '_citations': [Citation('SVG', 'https://www.w3.org/TR/SVG/')]},
 {'_': media_type('message/http'), '_citations': [RFC(7230)]},
 {'_': media_type('multipart/byteranges'), '_citations': [RFC(7233)]},
 {'_': media_type('multipart/form-data'), '_citations': [RFC(7578)]},
 {'_': media_type('text/css'), '_citations': [RFC(2318)]},
 {'_': media_type('text/csv'), '_citations': [RFC(4180)]},
 {'_': media_type('text/html'),
  '_citations': [Citation('HTML', 'https://html.spec.whatwg.org/')]},
 {'_': media_type('text/javascript'), '_citations': [RFC(9239)]},
 {'_': media_type('text/markdown'), '_citations': [RFC(7763)]},
 {'_': media_type('text/plain'), '_citations': [RFC(2046)]},
 {'_': media_type('text/xml'), '_citations': [RFC(7303)]},
])


_MISSPELLINGS = {
    media_type('plain/text'): known.text_plain,
    media_type('text/json'): known.application_json,
    media_type('application/x-json'): known.application_json,
    media_type('text/x-json'): known.application_json,
    media_type('application/javascript'): known.text_javascript,
    media_type('application/x-javascript'): known.text_javascript,
}


def preferred(mtype):
    """Return the registered media type that `mtype` is meant to be.

    >>> print(preferred(media_type('text/json')))
    application/json
    >>> print(preferred(media_type('text/plain')))
    text/plain
    """
    return _MISSPELLINGS.get(mtype, mtype)


def is_json(mtype):
    """Is `mtype` JSON, either plain or as a structured syntax suffix?

    >>> is_json(media_type('application/vnd.api+json'))
    True
    >>> is_json(media_type('application/json-seq'))
    False
    """
    return mtype.subtype == 'json' or mtype.suffix == '+json'


def is_xml(mtype):
    """Is `mtype` XML, either plain or as a structured syntax suffix?

    >>> is_xml(media_type('image/svg+xml'))
    True
    """
    return mtype.subtype == 'xml' or mtype.suffix == '+xml'
