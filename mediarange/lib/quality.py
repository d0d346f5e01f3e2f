"""Score a mime-type against the media ranges of an Accept header."""

from mediarange._mrerror import InvalidMimeType
from mediarange.lib import httputil


def _type_matches(range_type, target_type):
    if range_type is None:
        # UNMATCHABLE; not even a wildcard target may pick it up.
        return False
    return range_type in (target_type, '*') or target_type == '*'


def fitness_and_quality_parsed(mime_type, parsed_ranges):
    """Find the best match for a mime-type amongst parsed media ranges.

    'parsed_ranges' must be a list of media ranges already parsed by
    parse_media_range() (or parse_header()). Returns a tuple of the
    fitness value and the value of the 'q' quality parameter of the best
    match, or (-1, 0) if no match was found.

    Fitness is 100 for an exact type match, plus 10 for an exact subtype
    match, plus 1 for each parameter of mime_type (besides 'q') that the
    range carries with the same value. The first range to reach the
    highest fitness supplies the quality.
    """
    best_fitness = -1
    best_fit_q = 0
    try:
        target_type, target_subtype, target_params = \
            httputil.parse_media_range(mime_type)
    except InvalidMimeType:
        return best_fitness, best_fit_q

    for maintype, subtype, params in parsed_ranges:
        if not (_type_matches(maintype, target_type) and
                _type_matches(subtype, target_subtype)):
            continue

        param_matches = sum(
            1 for key, value in target_params.items()
            if key != 'q' and key in params and params[key] == value
        )

        fitness = 100 if maintype == target_type else 0
        fitness += 10 if subtype == target_subtype else 0
        fitness += param_matches

        if fitness > best_fitness:
            best_fitness = fitness
            best_fit_q = float(params['q'])

    return best_fitness, best_fit_q


def quality_parsed(mime_type, parsed_ranges):
    """Return the 'q' of the best match for mime_type, 0 if none.

    Behaves the same as quality() except that 'parsed_ranges' must be a
    list of parsed media ranges.
    """
    return fitness_and_quality_parsed(mime_type, parsed_ranges)[1]


def quality(mime_type, ranges):
    """Return the quality ('q') of a mime-type against a list of media ranges.

    For example:

    >>> quality('text/html', 'text/*;q=0.3, text/html;q=0.7, '
    ...         'text/html;level=1, text/html;level=2;q=0.4, */*;q=0.5')
    0.7
    """
    return quality_parsed(mime_type, httputil.parse_header(ranges))
