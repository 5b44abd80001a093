# -*- coding: utf-8 -*-
"""
Logstore xAPI custom exceptions.
"""


class LogstoreXAPIError(Exception):
    """
    Indicate a problem while turning platform events into xAPI data.
    """


class UnknownVerbError(LogstoreXAPIError):
    """
    Raised when an event verb key has no xAPI verb definition.
    """

    def __init__(self, verb_key):
        """Keep the offending key so callers can branch on it."""
        self.verb_key = verb_key
        super().__init__("Unknown xAPI verb: {verb_key!r}".format(verb_key=verb_key))
