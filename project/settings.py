import os

PROJECT_DIR = os.path.dirname(os.path.abspath(__file__))

BASE_DIR = os.path.dirname(PROJECT_DIR)
SECRET_KEY = os.getenv("WEBID_SECRET_KEY", "testing-key-11234567890")
ALLOWED_HOSTS = ["*"]
DEBUG = True

# Application definition
INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "rest_framework",
    "webid",
]

# Database
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.getenv("WEBID_DATABASE_NAME", "webid.db"),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Rest Framework
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
}

# WebID
WEBID = {
    "REQUEST_TIMEOUT": int(os.getenv("WEBID_REQUEST_TIMEOUT", 10)),
}

LOG_LEVEL = "DEBUG" if DEBUG else "INFO"
LOGGING_HANDLERS = {
    "null": {"level": "DEBUG", "class": "logging.NullHandler"},
    "console": {
        "level": LOG_LEVEL,
        "class": "logging.StreamHandler",
        "formatter": "verbose",
    },
}

LOGGING_HANDLER_METHODS = ["console"]

LOGGING = {
    "version": 1,
    "disable_existing_loggers": "WEBID_LOG_DISABLE_EXISTING_LOGGERS" in os.environ,
    "formatters": {
        "verbose": {
            "format": "%(asctime)s %(levelname)s:%(pathname)s %(process)d %(lineno)d %(message)s"
        },
        "simple": {"format": "%(levelname)s:%(module)s %(lineno)d %(message)s"},
    },
    "handlers": LOGGING_HANDLERS,
    "loggers": {
        "django": {"handlers": ["null"], "propagate": True, "level": "INFO"},
        "webid": {
            "handlers": LOGGING_HANDLER_METHODS,
            "level": LOG_LEVEL,
            "propagate": False,
        },
    },
}
