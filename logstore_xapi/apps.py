"""
Logstore xAPI Django application initialization.
"""

from django.apps import AppConfig


class LogstoreXAPIConfig(AppConfig):
    """
    Configuration for the logstore xAPI Django application.
    """
    name = 'logstore_xapi'
    verbose_name = "Logstore xAPI"
