import logging
from urllib.parse import urldefrag

import rdflib
import requests
from rdflib.plugins.parsers.notation3 import BadSyntax

from .exceptions import DocumentResolutionError, UnparseableDocument
from .extractors import extract
from .graph import RdflibGraphStore
from .settings import app_settings
from .signals import document_loaded, profile_resolved

logger = logging.getLogger(__name__)


def get_document_uri(uri):
    return urldefrag(uri).url


class BaseDocumentResolver:
    def can_resolve(self, uri):
        raise NotImplementedError

    def resolve(self, uri):
        raise NotImplementedError


class HttpDocumentResolver(BaseDocumentResolver):
    def can_resolve(self, uri):
        return uri.startswith("http://") or uri.startswith("https://")

    def resolve(self, uri):
        document_uri = get_document_uri(uri)
        logger.debug(f"Fetching {document_uri}")
        try:
            response = requests.get(
                document_uri,
                headers={"Accept": app_settings.Http.accept_header},
                timeout=app_settings.Http.request_timeout,
            )
        except requests.RequestException as exc:
            raise DocumentResolutionError(f"Could not fetch {document_uri}") from exc

        if response.status_code >= 400:
            raise DocumentResolutionError(
                f"Fetching {document_uri} failed with status {response.status_code}"
            )
        # Turtle is always UTF-8, let the parser decode the raw bytes
        return response.content


def resolve_document(uri):
    for resolver_class in app_settings.DOCUMENT_RESOLVERS:
        resolver = resolver_class()
        if resolver.can_resolve(uri):
            return resolver.resolve(uri)

    raise DocumentResolutionError(f"No resolver available for {uri}")


def load_graph(uri, data=None):
    """
    Parses the Turtle document for `uri` into a graph store. The document is
    fetched with the configured resolvers unless `data` is given.
    """
    document_uri = get_document_uri(uri)
    if data is None:
        data = resolve_document(document_uri)

    g = rdflib.Graph(identifier=document_uri)
    try:
        g.parse(data=data, format="turtle", publicID=document_uri)
    except BadSyntax as exc:
        raise UnparseableDocument(f"{document_uri} is not a valid Turtle document") from exc

    logger.debug(f"Loaded {len(g)} triples from {document_uri}")
    graph = RdflibGraphStore(g)
    document_loaded.send_robust(sender=RdflibGraphStore, uri=document_uri, graph=graph)
    return graph


def fetch_profile(webid, today=None):
    graph = load_graph(webid)
    profile = extract(graph, webid, today=today)
    profile_resolved.send_robust(sender=profile.__class__, profile=profile)
    return profile
