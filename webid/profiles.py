from dataclasses import dataclass, field
from typing import Optional, Tuple

from django.db import models


class AccountTypes(models.TextChoices):
    MASTODON = "Mastodon"
    ORCID = "ORCID"
    BLUESKY = "BlueSky"
    MATRIX = "Matrix"


@dataclass(frozen=True)
class SocialAccount:
    type: AccountTypes
    handle: str
    url: Optional[str] = None


@dataclass(frozen=True)
class Pronouns:
    subject: str
    object: str = ""
    possessive: str = ""


@dataclass(frozen=True)
class ColorScheme:
    background: str
    highlight: str


@dataclass(frozen=True)
class Profile:
    """
    Flat, display-ready view of a WebID profile document.

    Optional scalars are None when the graph has nothing for them. The
    collections are tuples and are empty, never None, when nothing matches.
    `languages` is reserved and always empty.
    """

    webid: str
    name: Optional[str] = None
    nickname: Optional[str] = None
    image: Optional[str] = None
    email: Optional[str] = None
    homepage: Optional[str] = None
    birthday: Optional[str] = None
    age: Optional[int] = None
    organization: Optional[str] = None
    role: Optional[str] = None
    bio: Optional[str] = None
    pronouns: Optional[Pronouns] = None
    social_accounts: Tuple[SocialAccount, ...] = ()
    storage: Tuple[str, ...] = ()
    inbox: Optional[str] = None
    colors: Optional[ColorScheme] = None
    languages: Tuple[str, ...] = field(default=(), init=False)
    friends: Tuple[str, ...] = ()


__all__ = ("AccountTypes", "SocialAccount", "Pronouns", "ColorScheme", "Profile")
