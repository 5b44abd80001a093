# -*- coding: utf-8 -*-
"""
Tests for xAPI verb resolution.
"""

import json
import unittest

import ddt
from pytest import raises

from logstore_xapi.constants import (
    VERB_KEYS,
    X_API_VERB_COMPLETED,
    X_API_VERB_LOGGEDIN,
    X_API_VERB_LOGGEDIN_JISC,
    X_API_VERB_LOGGEDOUT,
    X_API_VERB_LOGGEDOUT_JISC,
    X_API_VERB_SUBMITTED,
)
from logstore_xapi.exceptions import LogstoreXAPIError, UnknownVerbError
from logstore_xapi.transformer.verbs import VERB_DEFINITIONS, VerbDescriptor, get_verb
from test_utils import JISC_DISABLED_CONFIG, JISC_ENABLED_CONFIG, TEST_LANG


@ddt.ddt
class TestGetVerb(unittest.TestCase):
    """
    Tests for ``get_verb``.
    """

    @ddt.data(*VERB_KEYS)
    def test_known_verbs_resolve(self, verb_key):
        """
        Every known verb key resolves to a URI and a single display entry for the requested language.
        """
        verb = get_verb(verb_key, JISC_DISABLED_CONFIG, 'de')
        assert verb.id
        assert list(verb.display) == ['de']

    def test_every_verb_key_has_a_definition(self):
        assert set(VERB_DEFINITIONS) == set(VERB_KEYS)

    @ddt.data(JISC_DISABLED_CONFIG, JISC_ENABLED_CONFIG, {})
    def test_completed_ignores_jisc_flag(self, config):
        verb = get_verb('completed', config, TEST_LANG)
        assert verb == VerbDescriptor(id=X_API_VERB_COMPLETED, display={'en': 'completed'})

    @ddt.data(JISC_DISABLED_CONFIG, JISC_ENABLED_CONFIG)
    def test_submitted_ignores_jisc_flag(self, config):
        verb = get_verb('submitted', config, TEST_LANG)
        assert verb.id == X_API_VERB_SUBMITTED
        assert verb.display == {'en': 'submitted'}

    @ddt.data(
        ('loggedin', JISC_DISABLED_CONFIG, X_API_VERB_LOGGEDIN),
        ('loggedin', {}, X_API_VERB_LOGGEDIN),
        ('loggedin', JISC_ENABLED_CONFIG, X_API_VERB_LOGGEDIN_JISC),
        ('loggedin', {'send_jisc_data': '1'}, X_API_VERB_LOGGEDIN_JISC),
        ('loggedin', {'send_jisc_data': '0'}, X_API_VERB_LOGGEDIN),
        ('loggedout', JISC_DISABLED_CONFIG, X_API_VERB_LOGGEDOUT),
        ('loggedout', JISC_ENABLED_CONFIG, X_API_VERB_LOGGEDOUT_JISC),
    )
    @ddt.unpack
    def test_jisc_verb_ids(self, verb_key, config, expected_id):
        """
        Only the login and logout verbs switch to the JISC ids, which drop the trailing slash.
        """
        assert get_verb(verb_key, config, TEST_LANG).id == expected_id

    def test_loggedin_uri_values(self):
        assert get_verb('loggedin', JISC_DISABLED_CONFIG, 'en').id == \
            'https://brindlewaye.com/xAPITerms/verbs/loggedin/'
        assert get_verb('loggedin', JISC_ENABLED_CONFIG, 'en').id == \
            'https://brindlewaye.com/xAPITerms/verbs/loggedin'

    def test_loggedin_display_is_keyed_by_language(self):
        verb = get_verb('loggedin', JISC_DISABLED_CONFIG, 'es')
        assert verb.display == {'es': 'logged into'}

    def test_loggedout_french(self):
        verb = get_verb('loggedout', JISC_ENABLED_CONFIG, 'fr')
        assert verb.id == 'https://brindlewaye.com/xAPITerms/verbs/loggedout'
        assert verb.display == {'fr': 'logged out of'}

    @ddt.data('unknown_verb', '', 'Completed', None, ['completed'], {'completed': True})
    def test_unknown_verb(self, verb_key):
        """
        Unknown verb keys raise ``UnknownVerbError`` carrying the key.
        """
        with raises(UnknownVerbError) as excinfo:
            get_verb(verb_key, {}, TEST_LANG)
        assert excinfo.value.verb_key == verb_key
        assert isinstance(excinfo.value, LogstoreXAPIError)

    @ddt.data(*VERB_KEYS)
    def test_resolution_is_idempotent(self, verb_key):
        config = dict(JISC_ENABLED_CONFIG)
        first = get_verb(verb_key, config, TEST_LANG)
        second = get_verb(verb_key, config, TEST_LANG)
        assert first == second
        assert config == JISC_ENABLED_CONFIG


class TestVerbDescriptor(unittest.TestCase):
    """
    Tests for ``VerbDescriptor`` conversions.
    """

    def setUp(self):
        super().setUp()
        self.verb = get_verb('loggedout', JISC_ENABLED_CONFIG, 'en-US')
        self.expected = {
            'id': X_API_VERB_LOGGEDOUT_JISC,
            'display': {'en-US': 'logged out of'},
        }

    def test_as_dict(self):
        assert self.verb.as_dict() == self.expected

    def test_as_tincan(self):
        """
        The tincan verb serializes to the same document as ``as_dict``.
        """
        tincan_verb = self.verb.as_tincan()
        assert tincan_verb.id == X_API_VERB_LOGGEDOUT_JISC
        assert json.loads(tincan_verb.to_json()) == self.expected

    def test_display_is_read_only(self):
        with raises(TypeError):
            self.verb.display['en-US'] = 'tampered'
        assert self.verb.display == {'en-US': 'logged out of'}

    def test_hashable_value(self):
        """
        Equal descriptors hash alike, so they can be used as keys and set members.
        """
        same = get_verb('loggedout', JISC_ENABLED_CONFIG, 'en-US')
        other = get_verb('loggedout', JISC_DISABLED_CONFIG, 'en-US')
        assert hash(self.verb) == hash(same)
        assert {self.verb, same, other} == {self.verb, other}

    def test_as_dict_is_independent_copy(self):
        document = self.verb.as_dict()
        document['display']['en-US'] = 'changed'
        assert self.verb.display['en-US'] == 'logged out of'
