import datetime
import logging
import re

from django.conf import settings
from django.utils import dateparse, timezone

from .profiles import ColorScheme, Pronouns
from .settings import app_settings

logger = logging.getLogger(__name__)

# xsd:date allows a trailing timezone, e.g. "2000-03-15Z" or "2000-03-15+02:00"
DATE_TIMEZONE_RE = re.compile(r"^(\d{4}-\d{1,2}-\d{1,2})(?:Z|[+-]\d{2}:\d{2})$")


def parse_birthday(value):
    if isinstance(value, datetime.datetime):
        return value.date()

    if isinstance(value, datetime.date):
        return value

    if isinstance(value, str):
        value = DATE_TIMEZONE_RE.sub(r"\1", value.strip())

    try:
        return dateparse.parse_date(value) or dateparse.parse_datetime(value).date()
    except (AttributeError, TypeError, ValueError):
        return None


def get_today():
    if settings.USE_TZ:
        return timezone.localdate()
    return datetime.date.today()


def calculate_age(birthday, today=None):
    """
    Whole calendar years elapsed between `birthday` and `today`.

    Returns None when the birthday can not be read as a date.
    """
    born = parse_birthday(birthday)
    if born is None:
        logger.warning(f"Could not compute age from birthday {birthday!r}")
        return None

    today = today or get_today()
    had_birthday = (today.month, today.day) >= (born.month, born.day)
    return today.year - born.year - (0 if had_birthday else 1)


def make_pronouns(subject, obj=None, possessive=None):
    if subject is None:
        return None

    return Pronouns(subject=subject, object=obj or "", possessive=possessive or "")


def make_color_scheme(background, highlight=None, default_highlight=None):
    if background is None:
        return None

    default_highlight = default_highlight or app_settings.Profile.default_highlight_color
    return ColorScheme(background=background, highlight=highlight or default_highlight)
