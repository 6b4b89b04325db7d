from types import MappingProxyType

from rdflib.namespace import RDF, Namespace

from .profiles import AccountTypes

VCARD = Namespace("http://www.w3.org/2006/vcard/ns#")
FOAF = Namespace("http://xmlns.com/foaf/0.1/")
SOLID = Namespace("http://www.w3.org/ns/solid/terms#")
SPACE = Namespace("http://www.w3.org/ns/pim/space#")
LDP = Namespace("http://www.w3.org/ns/ldp#")
SCHEMA = Namespace("http://schema.org/")
SOC = Namespace("https://solidos.github.io/profile-pane/src/ontology/socialMedia.ttl#")


# Logical profile field -> candidate predicates, tried in order.
PROFILE_FIELDS = MappingProxyType(
    {
        "name": (VCARD.fn,),
        "nickname": (FOAF.nick,),
        "image": (VCARD.hasPhoto,),
        "email": (VCARD.hasEmail,),
        "email_value": (VCARD.value,),
        "homepage": (VCARD.url,),
        "organization": (VCARD["organization-name"],),
        "role": (VCARD.role,),
        "bio": (VCARD.note,),
        "birthday": (VCARD.bday,),
        "subject_pronoun": (SOLID.preferredSubjectPronoun,),
        "object_pronoun": (SOLID.preferredObjectPronoun,),
        "possessive_pronoun": (SOLID.preferredRelativePronoun,),
        "background_color": (SOLID.profileBackgroundColor,),
        "highlight_color": (SOLID.profileHighlightColor,),
        "storage": (SPACE.storage,),
        "inbox": (LDP.inbox,),
        "friends": (FOAF.knows,),
    }
)

# Scanned in this order when discovering social accounts.
ACCOUNT_CLASSES = (
    (SOC.MastodonAccount, AccountTypes.MASTODON),
    (SOC.OrcidAccount, AccountTypes.ORCID),
    (SOC.BlueSkyAccount, AccountTypes.BLUESKY),
    (SOC.MatrixAccount, AccountTypes.MATRIX),
)

ACCOUNT_HANDLE = FOAF.accountName

ACCOUNT_URL = (FOAF.accountServiceHomepage, VCARD.url, SCHEMA.url)


__all__ = [
    "RDF",
    "VCARD",
    "FOAF",
    "SOLID",
    "SPACE",
    "LDP",
    "SCHEMA",
    "SOC",
    "PROFILE_FIELDS",
    "ACCOUNT_CLASSES",
    "ACCOUNT_HANDLE",
    "ACCOUNT_URL",
]
