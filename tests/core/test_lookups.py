from rdflib import Literal
from rdflib.namespace import RDF

from webid.exceptions import GraphStoreError
from webid.lookups import (
    query_store,
    resolve_all,
    resolve_one,
    resolve_typed,
    resolve_value,
    resolve_values,
)
from webid.schemas import FOAF, SCHEMA, SOC, VCARD

from ..base import BaseTestCase, BrokenGraphStore, FailingGraphStore, InMemoryGraphStore

ME = "https://alice.example.org/profile/card#me"


class ResolveOneTestCase(BaseTestCase):
    def test_returns_first_matching_candidate(self):
        graph = InMemoryGraphStore(
            [
                (ME, SCHEMA.url, "https://schema.example.org/"),
                (ME, VCARD.url, "https://vcard.example.org/"),
            ]
        )
        node = resolve_one(graph, ME, (FOAF.homepage, VCARD.url, SCHEMA.url))
        self.assertEqual(node.value, "https://vcard.example.org/")
        self.assertTrue(node.is_resource)

    def test_falls_back_to_later_candidates(self):
        graph = InMemoryGraphStore([(ME, SCHEMA.url, "https://schema.example.org/")])
        node = resolve_one(graph, ME, (FOAF.homepage, VCARD.url, SCHEMA.url))
        self.assertEqual(node.value, "https://schema.example.org/")

    def test_returns_none_when_nothing_matches(self):
        graph = InMemoryGraphStore([(ME, FOAF.nick, Literal("alice"))])
        self.assertIsNone(resolve_one(graph, ME, (VCARD.fn, FOAF.name)))

    def test_accepts_a_single_predicate(self):
        graph = InMemoryGraphStore([(ME, FOAF.nick, Literal("alice"))])
        node = resolve_one(graph, ME, FOAF.nick)
        self.assertEqual(node.value, "alice")
        self.assertFalse(node.is_resource)

    def test_keeps_empty_literals(self):
        graph = InMemoryGraphStore([(ME, VCARD.fn, Literal(""))])
        self.assertEqual(resolve_value(graph, ME, VCARD.fn), "")

    def test_resolve_value_returns_none_when_absent(self):
        graph = InMemoryGraphStore([])
        self.assertIsNone(resolve_value(graph, ME, VCARD.fn))


class ResolveAllTestCase(BaseTestCase):
    def test_keeps_store_order_and_duplicates(self):
        graph = InMemoryGraphStore(
            [
                (ME, FOAF.knows, "https://carol.example.org/#me"),
                (ME, FOAF.knows, "https://bob.example.org/#me"),
                (ME, FOAF.knows, "https://carol.example.org/#me"),
            ]
        )
        values = [n.value for n in resolve_all(graph, ME, FOAF.knows)]
        self.assertListEqual(
            values,
            [
                "https://carol.example.org/#me",
                "https://bob.example.org/#me",
                "https://carol.example.org/#me",
            ],
        )

    def test_returns_empty_list_when_nothing_matches(self):
        graph = InMemoryGraphStore([])
        self.assertListEqual(resolve_all(graph, ME, FOAF.knows), [])

    def test_resolve_values_collects_every_candidate(self):
        graph = InMemoryGraphStore(
            [
                (ME, SCHEMA.url, "https://schema.example.org/"),
                (ME, VCARD.url, "https://vcard.example.org/"),
            ]
        )
        self.assertListEqual(
            resolve_values(graph, ME, (VCARD.url, SCHEMA.url)),
            ["https://vcard.example.org/", "https://schema.example.org/"],
        )


class StoreFailureTestCase(BaseTestCase):
    def test_store_errors_are_reported_as_graph_store_errors(self):
        graph = FailingGraphStore()

        with self.assertRaises(GraphStoreError):
            resolve_one(graph, ME, VCARD.fn)

        with self.assertRaises(GraphStoreError):
            resolve_all(graph, ME, FOAF.knows)

        with self.assertRaises(GraphStoreError):
            resolve_typed(graph, SOC.MastodonAccount)

    def test_graph_store_errors_pass_through_unchanged(self):
        graph = BrokenGraphStore()
        with self.assertRaises(GraphStoreError) as ctx:
            query_store(graph.any, ME, VCARD.fn)

        self.assertIsNone(ctx.exception.__cause__)

    def test_resolve_typed_keeps_store_order(self):
        graph = InMemoryGraphStore(
            [
                ("_:b", RDF.type, SOC.MatrixAccount),
                ("_:a", RDF.type, SOC.MatrixAccount),
            ]
        )
        self.assertListEqual(
            [n.value for n in resolve_typed(graph, SOC.MatrixAccount)], ["_:b", "_:a"]
        )
