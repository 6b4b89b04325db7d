from pathlib import Path

from django.apps import AppConfig


class WebIDConfig(AppConfig):
    name = "webid"
    verbose_name = "WebID Profiles"
    path = str(Path(__file__).parent)

    def ready(self):
        from . import signals  # noqa
