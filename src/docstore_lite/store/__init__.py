"""Document stores: the abstract interface and the filesystem driver.

The driver maps collections to directories and resources to JSON files,
serializes writers per collection, and swaps new versions into place with
an atomic replace so unlocked readers never see a partial file.
"""
from docstore_lite.store.base import DocumentStoreBase
from docstore_lite.store.file_store import FileStore, open_store

__all__ = [
    "DocumentStoreBase",
    "FileStore",
    "open_store",
]
