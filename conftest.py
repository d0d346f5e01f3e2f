"""test configuration for pytest."""

import logging

import pytest

import mediarange


# The example Accept header from RFC 2616, section 14.1.
RFC2616_ACCEPT = (
    'text/*;q=0.3, text/html;q=0.7, text/html;level=1, '
    'text/html;level=2;q=0.4, */*;q=0.5'
)


@pytest.fixture
def rfc2616_accept():
    return RFC2616_ACCEPT


@pytest.fixture
def error_log(caplog):
    """Capture everything written to ``mediarange.log``."""
    caplog.set_level(logging.DEBUG, logger=mediarange.log.error_log.name)
    return caplog
