"""
Helpers for the failed delivery report.
"""

import json

from django.utils.translation import gettext as _
from django.utils.translation import gettext_lazy

from logstore_xapi import constants
from logstore_xapi.logging import getLogstoreLogger

LOGGER = getLogstoreLogger(__name__)

EMPTY_RESPONSE = '-'

ERROR_MESSAGES = {
    constants.ERROR_TYPE_NETWORK: gettext_lazy('Network error, the LRS could not be reached: {response}'),
    constants.ERROR_TYPE_RECIPE: gettext_lazy('Recipe error, the LRS rejected the statement: {response}'),
    constants.ERROR_TYPE_AUTH: gettext_lazy('Authentication error, check the LRS credentials: {response}'),
    constants.ERROR_TYPE_LRS: gettext_lazy('LRS error, the LRS failed to process the statement: {response}'),
}


def decode_response(response):
    """
    Decode the JSON stored in the response column of a failed delivery.

    Arguments:
        response (str): Raw response body recorded for the delivery.

    Returns:
        The decoded value, or ``False`` if ``response`` is not valid JSON.
    """
    try:
        return json.loads(response)
    except (TypeError, ValueError):
        LOGGER.debug('Stored response is not valid JSON: %r', response)
        return False


def _format_response(row):
    """
    Return the printable response of a failed delivery row.
    """
    response = getattr(row, 'response', None)
    if response is None:
        return EMPTY_RESPONSE

    decoded = decode_response(response)
    if not decoded:
        return EMPTY_RESPONSE
    if isinstance(decoded, str):
        return decoded
    return json.dumps(decoded, sort_keys=True)


def get_info_string(row):
    """
    Build the text for the info column of the failed delivery report.

    Arguments:
        row: Failed delivery record exposing ``errortype`` and, optionally, ``response``.

    Returns:
        (str): Description of the error, or an empty string if no error type was captured.
    """
    errortype = getattr(row, 'errortype', None)
    # Database columns come back as strings, '0' means no error was captured
    if not errortype or str(errortype).strip() == '0':
        return ''

    response = _format_response(row)
    try:
        message = ERROR_MESSAGES[int(errortype)]
    except (KeyError, TypeError, ValueError):
        # Generic catch all
        return _('Unknown error {errortype}: {response}').format(errortype=errortype, response=response)
    return str(message).format(response=response)
