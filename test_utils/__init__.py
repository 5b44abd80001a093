"""
Test utilities.
"""
# Since py.test discourages putting __init__.py into test directory (i.e. making tests a package)
# one cannot import from anywhere under tests folder. However, some utility classes/methods might be useful
# in multiple test modules. So this package the place to put them.

TEST_LANG = 'en'
TEST_REQUEST_ID = 'a5a7e3c1-0d5c-4b1b-9bd4-3f8a0c1ea2f1'

JISC_ENABLED_CONFIG = {'send_jisc_data': True}
JISC_DISABLED_CONFIG = {'send_jisc_data': False}
