"""Pick the media type to emit for a client's Accept header."""

import more_itertools

import mediarange
from mediarange.lib import httputil
from mediarange.lib.quality import fitness_and_quality_parsed


def best_match(supported, header, debug=False):
    """Return the supported mime-type the client likes best, or ''.

    'supported' should be the Content-Type value (as a string) or values
    (as a list or tuple of strings) which the current resource can emit.
    'header' must be a string in the format of the HTTP Accept header.

    Every supported value is scored against the client's media ranges
    and the one with the highest quality wins; when two of them tie, the
    one listed first in 'supported' is kept. The return value is always
    one of the strings in 'supported', or '' if none of them has a
    positive quality.

    >>> best_match(['application/xbel+xml', 'text/xml'],
    ...            'text/*;q=0.5,*/*; q=0.1')
    'text/xml'

    Malformed media ranges in the header never raise; they just match
    nothing.
    """
    supported = list(more_itertools.always_iterable(supported))
    parsed_header = httputil.parse_header(header, debug=debug)

    best_q = 0
    best_mime = ''
    for mime_type in supported:
        fitness, q = fitness_and_quality_parsed(mime_type, parsed_header)
        if debug:
            mediarange.log('%s scored fitness %d, quality %s' %
                           (mime_type, fitness, q), 'ACCEPT')
        if q > best_q:
            best_q = q
            best_mime = mime_type

    if debug:
        if best_mime:
            mediarange.log('Match due to %s' % best_mime, 'ACCEPT')
        else:
            mediarange.log('Your client sent this Accept header: %s. '
                           'But no supported media type matched it: %s.' %
                           (header, ', '.join(supported)),
                           'ACCEPT')
    return best_mime
