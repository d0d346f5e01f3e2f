"""Tests for ``mediarange.lib.quality``."""
import pytest

from mediarange.lib import httputil
from mediarange.lib.quality import (
    fitness_and_quality_parsed, quality, quality_parsed,
)


@pytest.mark.parametrize(
    ('mime_type', 'expected_q'),
    (
        pytest.param('text/html;level=1', 1.0, id='param-match-wins'),
        ('text/html', 0.7),
        ('text/plain', 0.3),
        ('image/jpeg', 0.5),
        ('text/html;level=2', 0.4),
        ('text/html;level=3', 0.7),
    ),
)
def test_rfc2616_example(rfc2616_accept, mime_type, expected_q):
    """Check the example qualities given in RFC 2616, section 14.1."""
    assert quality(mime_type, rfc2616_accept) == expected_q


def test_quality_parsed_reuses_ranges(rfc2616_accept):
    parsed = httputil.parse_header(rfc2616_accept)
    assert quality_parsed('text/html', parsed) == 0.7
    assert quality_parsed('text/plain', parsed) == 0.3


@pytest.mark.parametrize(
    ('mime_type', 'ranges', 'expected'),
    (
        ('text/html', 'text/html', (110, 1.0)),
        ('text/html', 'text/*;q=0.2', (100, 0.2)),
        ('text/html', '*/*;q=0.1', (0, 0.1)),
        ('text/html;level=1', 'text/html;level=1;q=0.5', (111, 0.5)),
        pytest.param(
            'text/html;level=1', 'text/html;level=1;q=0.5;x=y', (111, 0.5),
            id='extra-range-params-ignored',
        ),
        pytest.param(
            'image/*', 'image/png;q=0.6', (100, 0.6),
            id='wildcard-candidate',
        ),
        ('text/html', 'image/png', (-1, 0)),
        ('text/html', '', (-1, 0)),
    ),
)
def test_fitness_and_quality_parsed(mime_type, ranges, expected):
    parsed = httputil.parse_header(ranges)
    assert fitness_and_quality_parsed(mime_type, parsed) == expected


def test_fitness_prefers_exact_type_by_100():
    exact = fitness_and_quality_parsed(
        'text/html', [httputil.parse_media_range('text/*')])[0]
    wildcard = fitness_and_quality_parsed(
        'text/html', [httputil.parse_media_range('*/*')])[0]
    assert exact - wildcard >= 100


def test_first_range_wins_fitness_ties():
    """A later range with equal fitness does not replace the quality."""
    parsed = httputil.parse_header('text/html;q=0.2, text/html;q=0.9')
    assert fitness_and_quality_parsed('text/html', parsed) == (110, 0.2)


def test_parameter_values_are_case_sensitive():
    parsed = httputil.parse_header('text/plain;charset=UTF-8;q=0.8, */*;q=0.1')
    assert fitness_and_quality_parsed(
        'text/plain;charset=utf-8', parsed) == (110, 0.8)
    assert fitness_and_quality_parsed(
        'text/plain;Charset=UTF-8', parsed) == (111, 0.8)


def test_candidate_q_is_ignored():
    parsed = httputil.parse_header('text/html;q=0.3')
    assert fitness_and_quality_parsed('text/html;q=0.3', parsed) == (110, 0.3)
    assert fitness_and_quality_parsed('text/html;q=0.9', parsed) == (110, 0.3)


def test_unmatchable_never_matches():
    """Not even a full wildcard candidate picks up a bad range."""
    parsed = [httputil.UNMATCHABLE]
    assert fitness_and_quality_parsed('*/*', parsed) == (-1, 0)
    assert fitness_and_quality_parsed('text/html', parsed) == (-1, 0)


def test_malformed_candidate_matches_nothing():
    parsed = httputil.parse_header('*/*')
    assert fitness_and_quality_parsed('not-a-type', parsed) == (-1, 0)


def test_quality_ignores_malformed_ranges():
    assert quality('text/html', 'garbage, text/html;q=0.4') == 0.4
    assert quality('text/html', 'garbage') == 0


def test_empty_parameters_do_not_score():
    """A stray ';' is not a parameter that can match."""
    parsed = httputil.parse_header('text/html;;q=0.5, text/html;')
    assert fitness_and_quality_parsed('text/html;', parsed) == (110, 0.5)
