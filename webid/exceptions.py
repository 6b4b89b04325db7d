class GraphStoreError(Exception):
    pass


class ExtractionError(Exception):
    class Kinds:
        GRAPH_UNREADABLE = "graph_unreadable"

    def __init__(self, message, kind=Kinds.GRAPH_UNREADABLE):
        super().__init__(message)
        self.kind = kind


class DocumentResolutionError(Exception):
    pass


class UnparseableDocument(Exception):
    pass
