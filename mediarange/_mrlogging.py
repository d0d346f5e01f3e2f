"""MediaRange logging.

The library never configures logging on its own; it writes to the
'mediarange.error' logger only when a caller asks for it by passing
debug=True to parse_header() or best_match(). Handlers, levels and
formatting are left to the application's logging configuration.
"""

import datetime
import logging

from mediarange import _mrerror


monthname = [None, 'Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
             'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']


class LogManager(object):
    """Write negotiation decisions, tagged with a context, to one logger."""

    def __init__(self, appid=None):
        self.appid = appid
        name = 'mediarange.error'
        if appid is not None:
            name += '.%s' % appid
        self.error_log = logging.getLogger(name)

    def error(self, msg='', context='', severity=logging.DEBUG,
              traceback=False):
        """Write msg to the error log as '<time> <context> <msg>'.

        Despite the name this is mostly used at DEBUG severity, to explain
        how a media range was skipped or why a match was (or was not)
        made.
        """
        if traceback:
            msg += _mrerror.format_exc()
        if self.error_log.isEnabledFor(severity):
            self.error_log.log(severity,
                               ' '.join((self.time(), context, msg)))

    def __call__(self, *args, **kwargs):
        return self.error(*args, **kwargs)

    def time(self):
        """Return now() in Apache Common Log Format (no timezone)."""
        now = datetime.datetime.now()
        return ('[%02d/%s/%04d:%02d:%02d:%02d]' %
                (now.day, monthname[now.month], now.year,
                 now.hour, now.minute, now.second))
