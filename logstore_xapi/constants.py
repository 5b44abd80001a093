"""
Constants for the logstore xAPI plugin.
"""

# Internal event verb keys
VERB_COMPLETED = 'completed'
VERB_SUBMITTED = 'submitted'
VERB_LOGGEDIN = 'loggedin'
VERB_LOGGEDOUT = 'loggedout'

VERB_KEYS = (
    VERB_COMPLETED,
    VERB_SUBMITTED,
    VERB_LOGGEDIN,
    VERB_LOGGEDOUT,
)

# URI constants for xAPI verbs
X_API_VERB_COMPLETED = 'http://adlnet.gov/expapi/verbs/completed'
X_API_VERB_SUBMITTED = 'http://activitystrea.ms/schema/1.0/submit'
X_API_VERB_LOGGEDIN = 'https://brindlewaye.com/xAPITerms/verbs/loggedin/'
X_API_VERB_LOGGEDOUT = 'https://brindlewaye.com/xAPITerms/verbs/loggedout/'

# JISC profile variants, same path without the trailing slash
X_API_VERB_LOGGEDIN_JISC = 'https://brindlewaye.com/xAPITerms/verbs/loggedin'
X_API_VERB_LOGGEDOUT_JISC = 'https://brindlewaye.com/xAPITerms/verbs/loggedout'

# Plugin configuration options
CONFIG_SEND_JISC_DATA = 'send_jisc_data'
CONFIG_LANG = 'lang'

DEFAULT_LANG = 'en'

DEFAULT_PLUGIN_CONFIG = {
    CONFIG_SEND_JISC_DATA: False,
    CONFIG_LANG: DEFAULT_LANG,
}

# Failure report identifiers
XAPI_REPORT_ID_ERROR = 0
XAPI_REPORT_ID_HISTORIC = 1

# Error types recorded against failed deliveries
ERROR_TYPE_NETWORK = 101
ERROR_TYPE_RECIPE = 400
ERROR_TYPE_AUTH = 401
ERROR_TYPE_LRS = 500
