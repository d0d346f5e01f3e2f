"""Error classes for MediaRange."""

import sys
import traceback as _traceback


class MediaRangeError(Exception):
    """A base class for MediaRange exceptions."""
    pass


class InvalidMimeType(MediaRangeError, ValueError):
    """A mime-type or media-range string could not be carved up.

    The type/subtype head of the value must contain exactly one '/',
    with a non-empty token on each side of it. The offending string is
    kept on the 'mime_type' attribute so that code which traps this
    error can report it.
    """

    def __init__(self, mime_type, reason=None):
        self.mime_type = mime_type
        self.reason = reason
        msg = 'Not a valid mime-type: %r' % (mime_type,)
        if reason:
            msg += ' (%s)' % reason
        MediaRangeError.__init__(self, msg)


def format_exc(exc=None):
    """Return exc (or sys.exc_info if None), formatted."""
    try:
        if exc is None:
            exc = sys.exc_info()
        if exc == (None, None, None):
            return ''
        return ''.join(_traceback.format_exception(*exc))
    finally:
        del exc
