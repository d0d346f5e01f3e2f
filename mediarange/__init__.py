"""HTTP content-type negotiation for any Python application.

Given the media types an application can emit and the value of a
client's Accept header, pick the one the client prefers (RFC 2616,
section 14.1)::

    >>> import mediarange
    >>> mediarange.best_match(['application/xbel+xml', 'text/xml'],
    ...                       'text/*;q=0.5,*/*; q=0.1')
    'text/xml'

Every function here is a pure function of its string arguments. Pass
debug=True to parse_header() or best_match() to have the decisions written
to ``mediarange.log``.
"""

__version__ = '1.0.0'

from mediarange._mrerror import MediaRangeError, InvalidMimeType  # noqa: F401

from mediarange import _mrlogging
log = _mrlogging.LogManager()

from mediarange.lib.httputil import (  # noqa: E402,F401
    MediaType, ParamDict, UNMATCHABLE,
    parse_mime_type, parse_media_range, parse_header,
)
from mediarange.lib.quality import (  # noqa: E402,F401
    fitness_and_quality_parsed, quality_parsed, quality,
)
from mediarange.lib.accept import best_match  # noqa: E402,F401


__all__ = (
    'MediaRangeError', 'InvalidMimeType',
    'MediaType', 'ParamDict', 'UNMATCHABLE',
    'parse_mime_type', 'parse_media_range', 'parse_header',
    'fitness_and_quality_parsed', 'quality_parsed', 'quality',
    'best_match', 'log', '__version__',
)
