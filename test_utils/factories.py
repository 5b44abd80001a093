"""
Factoryboy factories.
"""

import json
from types import SimpleNamespace

import factory
from faker import Factory as FakerFactory

from logstore_xapi.constants import ERROR_TYPE_RECIPE

FAKER = FakerFactory.create()


class FailedLogRowFactory(factory.Factory):
    """
    Failed delivery row factory.

    Creates a row as read from the failed log table, with minimal boilerplate.
    """

    class Meta:
        """
        Meta for ``FailedLogRowFactory``.
        """

        model = SimpleNamespace

    id = factory.Sequence(lambda n: n + 1)
    eventname = '\\core\\event\\user_loggedin'
    errortype = ERROR_TYPE_RECIPE
    response = factory.LazyAttribute(
        lambda x: json.dumps({'errorId': FAKER.uuid4(), 'warnings': [FAKER.sentence()]})
    )
