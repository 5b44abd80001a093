# -*- coding: utf-8 -*-

"""
xAPI verbs for platform event verb keys.
"""

from collections import namedtuple
from types import MappingProxyType

from tincan import LanguageMap, Verb

from logstore_xapi import constants
from logstore_xapi.config import is_enabled_config
from logstore_xapi.exceptions import UnknownVerbError

VerbDefinition = namedtuple('VerbDefinition', ['key', 'uri', 'label', 'flag', 'flag_uri'], defaults=(None, None))


class VerbDescriptor(namedtuple('VerbDescriptor', ['id', 'display'])):
    """
    Resolved xAPI verb: its URI and a read-only display map keyed by language tag.
    """
    __slots__ = ()

    def __hash__(self):
        return hash((self.id, frozenset(self.display.items())))

    def as_dict(self):
        """
        Return the verb as it appears in a statement document.
        """
        return {'id': self.id, 'display': dict(self.display)}

    def as_tincan(self):
        """
        Return the verb as a ``tincan.Verb``.
        """
        return Verb(
            id=self.id,
            display=LanguageMap(dict(self.display)),
        )


VERB_DEFINITIONS = {
    definition.key: definition
    for definition in (
        VerbDefinition(
            key=constants.VERB_COMPLETED,
            uri=constants.X_API_VERB_COMPLETED,
            label='completed',
        ),
        VerbDefinition(
            key=constants.VERB_SUBMITTED,
            uri=constants.X_API_VERB_SUBMITTED,
            label='submitted',
        ),
        VerbDefinition(
            key=constants.VERB_LOGGEDIN,
            uri=constants.X_API_VERB_LOGGEDIN,
            label='logged into',
            flag=constants.CONFIG_SEND_JISC_DATA,
            flag_uri=constants.X_API_VERB_LOGGEDIN_JISC,
        ),
        VerbDefinition(
            key=constants.VERB_LOGGEDOUT,
            uri=constants.X_API_VERB_LOGGEDOUT,
            label='logged out of',
            flag=constants.CONFIG_SEND_JISC_DATA,
            flag_uri=constants.X_API_VERB_LOGGEDOUT_JISC,
        ),
    )
}


def get_verb(verb_key, config, lang):
    """
    Return the xAPI verb for an event verb key.

    Arguments:
        verb_key (str): Internal verb key, one of ``constants.VERB_KEYS``.
        config (dict): Plugin configuration, e.g. from ``get_plugin_config``.
        lang (str): Language tag used as the only key of the display map.

    Returns:
        (VerbDescriptor): Resolved verb.

    Raises:
        UnknownVerbError: If ``verb_key`` has no definition.
    """
    try:
        definition = VERB_DEFINITIONS[verb_key]
    except (KeyError, TypeError):
        raise UnknownVerbError(verb_key) from None

    uri = definition.uri
    if definition.flag and is_enabled_config(config, definition.flag):
        uri = definition.flag_uri

    return VerbDescriptor(id=uri, display=MappingProxyType({lang: definition.label}))
