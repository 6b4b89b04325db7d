from django.dispatch import Signal

# Sent with `uri` and `graph` once a WebID document has been parsed.
document_loaded = Signal()
# Sent with `profile` after a fetched document has been extracted.
profile_resolved = Signal()
