"""
Logging utilities for logstore xAPI.

Messages are tagged with the plugin name and, inside a request, with the
X-Request-ID header so a failed delivery can be traced back to the request
that produced the event.
"""
import logging

import crum

LOG_PREFIX = '[Logstore xAPI]'


def getLogstoreLogger(name):
    """
    Get a logger whose messages carry the plugin prefix and the current request id.
    """
    return LogstoreLoggerAdapter(logging.getLogger(name), {'prefix': LOG_PREFIX})


def get_request_id():
    """
    Return the X-Request-ID of the request being served, or None outside a request.
    """
    request = crum.get_current_request()
    if request is None or request.headers is None:
        return None
    return request.headers.get('X-Request-ID')


class LogstoreLoggerAdapter(logging.LoggerAdapter):
    """
    Prefix log messages with the plugin tag and the current request id.

    https://docs.python.org/3/howto/logging-cookbook.html#using-loggeradapters-to-impart-contextual-information
    """
    def process(self, msg, kwargs):
        prefix = self.extra['prefix']
        if request_id := get_request_id():
            prefix = f'{prefix}[request_id {request_id}]'
        return f'{prefix} {msg}', kwargs
