"""
These settings are here to use during tests, because django requires them.

In a real-world use case, this app is installed into another Django
application, so these settings will not be used.
"""

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": "default.db",
        "USER": "",
        "PASSWORD": "",
        "HOST": "",
        "PORT": "",
    }
}

INSTALLED_APPS = (
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",

    "logstore_xapi",
)

MIDDLEWARE = [
    "django.contrib.sessions.middleware.SessionMiddleware",
    "crum.CurrentRequestUserMiddleware",
]

SECRET_KEY = "insecure-secret-key"

USE_TZ = True

LANGUAGE_CODE = 'en'

LOGSTORE_XAPI = {
    'send_jisc_data': False,
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {
            'level': 'DEBUG',
            'class': 'logging.StreamHandler',
        },
    },
    'loggers': {
        'logstore_xapi': {
            'handlers': ['console'],
            'level': 'DEBUG',
            'propagate': True,
        },
    },
}
