# ContactStore adapters

from .contact_stores import DisabledContactStore, SqlContactStore

__all__ = [
    "DisabledContactStore",
    "SqlContactStore",
]
