"""
Plugin configuration helpers for logstore xAPI.
"""

from django.conf import settings

from logstore_xapi.constants import DEFAULT_PLUGIN_CONFIG

ENABLED_VALUES = ('1', 'true', 'yes', 'on')


def is_enabled_config(config, option):
    """
    Return whether a configuration option is switched on.

    Values coming back from a key-value store are usually strings, so
    ``'1'``, ``'true'``, ``'yes'`` and ``'on'`` count as enabled.

    Arguments:
        config (dict): Materialized plugin configuration.
        option (str): Name of the option to check.

    Returns:
        (bool): True if the option is present and enabled.
    """
    value = config.get(option)
    if isinstance(value, str):
        return value.strip().lower() in ENABLED_VALUES
    return bool(value)


def get_plugin_config():
    """
    Return a snapshot of the plugin configuration.

    The ``LOGSTORE_XAPI`` Django setting is merged over the defaults; the
    returned dict is a fresh copy on every call.
    """
    config = dict(DEFAULT_PLUGIN_CONFIG)
    config.update(getattr(settings, 'LOGSTORE_XAPI', None) or {})
    return config
