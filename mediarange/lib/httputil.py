"""Mime-type and media-range parsing.

See section 14.1 of RFC 2616 for the grammar handled here:

    http://www.w3.org/Protocols/rfc2616/rfc2616-sec14.html#sec14.1

A media range is a mime-type which may use '*' wildcards for its type or
subtype, and which always carries a 'q' (quality) parameter once parsed.
"""

import collections
import re

import jaraco.collections

from mediarange._mrerror import InvalidMimeType


# qvalue = ( "0" [ "." 0*3DIGIT ] ) | ( "1" [ "." 0*3("0") ] ), loosened to
# any plain ASCII decimal; the range is checked separately.
QVALUE_RE = re.compile(r'(?:\d+(?:\.\d*)?|\.\d+)\Z', re.ASCII)


class ParamDict(jaraco.collections.KeyTransformingDict):
    """A dict of media type parameters with case-insensitive keys.

    Each key is changed on entry to key.lower(). Values are stored as
    given. Used while parsing; a MediaType holds a frozen copy.
    """

    @staticmethod
    def transform_key(key):
        return key.lower()


_MediaType = collections.namedtuple('MediaType', 'maintype subtype params')


class MediaType(_MediaType):
    """A parsed mime-type: (maintype, subtype, params).

    Unpacks like the plain tuple, so ``maintype, subtype, params =
    parse_media_range(value)`` works. 'params' is a FrozenDict with
    lower-cased keys, so instances are immutable and hashable.
    """

    __slots__ = ()

    def __new__(cls, maintype, subtype, params=()):
        return super().__new__(
            cls, maintype, subtype, jaraco.collections.FrozenDict(params))

    def __str__(self):
        p = []
        for k, v in self.params.items():
            if v:
                p.append(';%s=%s' % (k, v))
            else:
                p.append(';%s' % k)
        return '%s/%s%s' % (self.maintype, self.subtype, ''.join(p))

    @property
    def qvalue(self):
        """The qvalue, or priority, of this value."""
        return float(self.params.get('q', '1'))

    @classmethod
    def from_str(cls, elementstr):
        """Construct an instance from a string like 'type/sub;key=val'."""
        return parse_mime_type(elementstr)


# Stands in for a media range that could not be parsed. None never equals
# a parsed type, and the scoring code refuses it even against '*'.
UNMATCHABLE = MediaType(None, None, {'q': '0'})


def _parse_params(atoms):
    params = ParamDict()
    for atom in atoms:
        key, _, val = atom.partition('=')
        key = key.strip()
        if key:
            params[key] = val.strip()
    return params


def _parse(mime_type):
    atoms = mime_type.split(';')
    full_type = atoms.pop(0).strip()
    params = _parse_params(atoms)

    # Java URLConnection class sends an Accept header that includes a
    # single '*'. Turn it into a legal wildcard.
    if full_type == '*':
        full_type = '*/*'

    type_parts = full_type.split('/')
    if len(type_parts) != 2:
        raise InvalidMimeType(mime_type, "expected exactly one '/'")

    maintype, subtype = [x.strip().lower() for x in type_parts]
    if not maintype or not subtype:
        raise InvalidMimeType(mime_type, 'empty type or subtype')

    return maintype, subtype, params


def parse_mime_type(mime_type):
    """Carve up a mime-type into a MediaType of (type, subtype, params).

    'params' is a dict of all the parameters for the media range. For
    example, the media range 'application/xhtml;q=0.5' would get parsed
    into:

        ('application', 'xhtml', {'q': '0.5'})

    Raise InvalidMimeType unless the 'type/subtype' head has exactly one
    '/' and both halves are non-empty.
    """
    return MediaType(*_parse(mime_type))


def _valid_qvalue(value):
    if not value or not QVALUE_RE.match(value):
        return False
    return 0 <= float(value) <= 1


def parse_media_range(media_range):
    """Carve up a media range into a MediaType of (type, subtype, params).

    For example, the media range 'application/*;q=0.5' would get parsed
    into:

        ('application', '*', {'q': '0.5'})

    In addition this function also guarantees that there is a value for
    'q' in the params dict. A missing, empty, non-decimal or out of range
    'q' is replaced by '1'; a valid one is kept exactly as it was sent.
    """
    maintype, subtype, params = _parse(media_range)
    if not _valid_qvalue(params.get('q')):
        params['q'] = '1'
    return MediaType(maintype, subtype, params)


def parse_header(header, debug=False):
    """Return a MediaType list from a comma-separated Accept header str.

    A media range which cannot be parsed is kept in its place as
    UNMATCHABLE, so one bad entry does not spoil the whole header.
    """
    if not header:
        return []

    result = []
    for element in header.split(','):
        try:
            result.append(parse_media_range(element))
        except InvalidMimeType as exc:
            if debug:
                import mediarange
                mediarange.log('Ignoring media range: %s' % exc,
                               'HTTPUTIL.PARSE')
            result.append(UNMATCHABLE)
    return result
