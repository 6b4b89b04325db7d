import logging

from .lookups import resolve_one, resolve_typed
from .profiles import SocialAccount
from .schemas import ACCOUNT_CLASSES, ACCOUNT_HANDLE, ACCOUNT_URL

logger = logging.getLogger(__name__)


def find_account_subjects(graph):
    """
    Yields (subject, account type) for every node typed with one of the
    known account classes. A node typed with more than one class is
    yielded once per class.
    """
    for account_class, account_type in ACCOUNT_CLASSES:
        for subject in resolve_typed(graph, account_class):
            yield subject, account_type


def resolve_social_accounts(graph):
    accounts = []

    for subject, account_type in find_account_subjects(graph):
        handle = resolve_one(graph, subject, ACCOUNT_HANDLE)
        if handle is None:
            logger.debug(f"Skipping {account_type} account {subject.value}: no handle")
            continue

        url = resolve_one(graph, subject, ACCOUNT_URL)
        accounts.append(
            SocialAccount(type=account_type, handle=handle.value, url=url and url.value)
        )

    return accounts
