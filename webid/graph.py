from collections import namedtuple

import rdflib
from rdflib.namespace import RDF

from .exceptions import GraphStoreError

# `term` keeps the store's own identity for the node (e.g. a blank node), so
# that it can be used as the subject of a follow-up lookup.
Node = namedtuple("Node", ["value", "is_resource", "term"], defaults=[None])


class BaseGraphStore:
    """
    Read-only view over the triples of one parsed document.

    Subjects can be given either as URI strings or as Nodes returned by a
    previous lookup. Implementations raise GraphStoreError when they cannot
    be queried at all.
    """

    def any(self, subject, predicate):
        raise NotImplementedError

    def each(self, subject, predicate):
        raise NotImplementedError

    def match_by_type(self, type_uri):
        raise NotImplementedError


class RdflibGraphStore(BaseGraphStore):
    def __init__(self, graph: rdflib.Graph):
        self.graph = graph

    @staticmethod
    def to_node(term):
        is_resource = not isinstance(term, rdflib.Literal)
        return Node(value=str(term), is_resource=is_resource, term=term)

    @staticmethod
    def to_term(subject):
        if isinstance(subject, Node):
            return subject.term if subject.term is not None else rdflib.URIRef(subject.value)
        if isinstance(subject, rdflib.term.Identifier):
            return subject
        return rdflib.URIRef(subject)

    def _query(self, query, description):
        try:
            return query()
        except Exception as exc:
            raise GraphStoreError(f"Could not query graph for {description}") from exc

    def any(self, subject, predicate):
        s, p = self.to_term(subject), rdflib.URIRef(predicate)
        value = self._query(lambda: self.graph.value(s, p, any=True), f"{s} {p}")
        if value is None:
            return None
        return self.to_node(value)

    def each(self, subject, predicate):
        s, p = self.to_term(subject), rdflib.URIRef(predicate)
        objects = self._query(lambda: list(self.graph.objects(s, p)), f"{s} {p}")
        return [self.to_node(o) for o in objects]

    def match_by_type(self, type_uri):
        o = rdflib.URIRef(type_uri)
        subjects = self._query(lambda: list(self.graph.subjects(RDF.type, o)), f"type {o}")
        return [self.to_node(s) for s in subjects]

    def __len__(self):
        return len(self.graph)
