import logging

from django.conf import settings
from django.test.signals import setting_changed
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)

DEFAULTS = {
    "DEFAULT_HIGHLIGHT_COLOR": "#341bee",
    "DOCUMENT_RESOLVERS": ["webid.resolvers.HttpDocumentResolver"],
    "REQUEST_TIMEOUT": 10,
    "ACCEPT_HEADER": "text/turtle",
}


class AppSettings:
    class Profile:
        default_highlight_color = "#341bee"

    class LinkedData:
        document_resolvers = ["webid.resolvers.HttpDocumentResolver"]

    class Http:
        request_timeout = 10
        accept_header = "text/turtle"

    @property
    def DOCUMENT_RESOLVERS(self):
        return [import_string(s) for s in self.LinkedData.document_resolvers]

    def __init__(self):
        self.load()

    def load(self):
        ATTRS = {
            "DEFAULT_HIGHLIGHT_COLOR": (self.Profile, "default_highlight_color"),
            "DOCUMENT_RESOLVERS": (self.LinkedData, "document_resolvers"),
            "REQUEST_TIMEOUT": (self.Http, "request_timeout"),
            "ACCEPT_HEADER": (self.Http, "accept_header"),
        }
        user_settings = {**DEFAULTS, **getattr(settings, "WEBID", {})}

        for setting, value in user_settings.items():
            logger.debug(f"setting {setting} -> {value}")
            if setting not in ATTRS:
                logger.warning(f"Ignoring {setting} as it is not a setting for WebID")
                continue

            setting_class, attr = ATTRS[setting]
            setattr(setting_class, attr, value)


app_settings = AppSettings()


def reload_settings(*args, **kw):
    setting = kw["setting"]
    if setting == "WEBID":
        app_settings.load()


setting_changed.connect(reload_settings)
