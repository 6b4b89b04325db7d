from .exceptions import GraphStoreError


def _as_candidates(predicates):
    if isinstance(predicates, str):
        return (predicates,)
    return tuple(predicates)


def query_store(lookup, *args):
    """
    Runs one graph store lookup. Whatever the store raises is reported as a
    GraphStoreError, so callers only deal with one failure type.
    """
    try:
        return lookup(*args)
    except GraphStoreError:
        raise
    except Exception as exc:
        raise GraphStoreError(f"Graph store lookup {args} failed: {exc}") from exc


def resolve_one(graph, subject, predicates):
    """
    Return the first node found for `subject` by trying each candidate
    predicate in the order given, or None when none of them matches.
    """
    for predicate in _as_candidates(predicates):
        node = query_store(graph.any, subject, predicate)
        if node is not None:
            return node
    return None


def resolve_all(graph, subject, predicate):
    """
    Return every object of (subject, predicate, *), in the order the graph
    store yields them.
    """
    return list(query_store(graph.each, subject, predicate))


def resolve_typed(graph, type_uri):
    return list(query_store(graph.match_by_type, type_uri))


def resolve_value(graph, subject, predicates):
    node = resolve_one(graph, subject, predicates)
    return node and node.value


def resolve_values(graph, subject, predicates):
    return [
        node.value
        for predicate in _as_candidates(predicates)
        for node in resolve_all(graph, subject, predicate)
    ]
