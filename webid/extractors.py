import logging

from .accounts import resolve_social_accounts
from .derived import calculate_age, make_color_scheme, make_pronouns
from .exceptions import ExtractionError, GraphStoreError
from .lookups import resolve_one, resolve_value, resolve_values
from .profiles import Profile
from .schemas import PROFILE_FIELDS

logger = logging.getLogger(__name__)


class ProfileExtractor:
    """
    Builds a Profile for a subject out of a fully parsed graph store.

    Fields the graph says nothing about are left empty. The only failure is
    a store that can not be queried, which aborts the whole extraction with
    an ExtractionError.

    Args:
        graph: a graph store (see `webid.graph.BaseGraphStore`)
        today: date used to compute the age, defaults to the current date
    """

    def __init__(self, graph, today=None):
        self.graph = graph
        self.today = today

    def get_value(self, subject, field_name):
        return resolve_value(self.graph, subject, PROFILE_FIELDS[field_name])

    def get_values(self, subject, field_name):
        return tuple(resolve_values(self.graph, subject, PROFILE_FIELDS[field_name]))

    def get_email(self, subject):
        container = resolve_one(self.graph, subject, PROFILE_FIELDS["email"])
        if container is None:
            return None

        value = self.get_value(container, "email_value")
        return value and value.removeprefix("mailto:") or None

    def get_bio(self, subject):
        bio = self.get_value(subject, "bio")
        return bio and bio.strip()

    def get_age(self, birthday):
        if birthday is None:
            return None
        return calculate_age(birthday, today=self.today)

    def get_pronouns(self, subject):
        return make_pronouns(
            self.get_value(subject, "subject_pronoun"),
            self.get_value(subject, "object_pronoun"),
            self.get_value(subject, "possessive_pronoun"),
        )

    def get_colors(self, subject):
        return make_color_scheme(
            self.get_value(subject, "background_color"),
            self.get_value(subject, "highlight_color"),
        )

    def build(self, subject):
        birthday = self.get_value(subject, "birthday")

        return Profile(
            webid=subject,
            name=self.get_value(subject, "name"),
            nickname=self.get_value(subject, "nickname"),
            image=self.get_value(subject, "image"),
            email=self.get_email(subject),
            homepage=self.get_value(subject, "homepage"),
            birthday=birthday,
            age=self.get_age(birthday),
            organization=self.get_value(subject, "organization"),
            role=self.get_value(subject, "role"),
            bio=self.get_bio(subject),
            pronouns=self.get_pronouns(subject),
            social_accounts=tuple(resolve_social_accounts(self.graph)),
            storage=self.get_values(subject, "storage"),
            inbox=self.get_value(subject, "inbox"),
            colors=self.get_colors(subject),
            friends=self.get_values(subject, "friends"),
        )

    def extract(self, subject):
        logger.debug(f"Extracting profile for {subject}")
        try:
            return self.build(subject)
        except GraphStoreError as exc:
            logger.warning(f"Could not read graph for {subject}: {exc}")
            raise ExtractionError(
                f"Graph for {subject} can not be queried",
                kind=ExtractionError.Kinds.GRAPH_UNREADABLE,
            ) from exc


def extract(graph, subject, today=None):
    return ProfileExtractor(graph, today=today).extract(subject)
