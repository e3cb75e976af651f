"""docstore-lite: a JSON document store on the plain filesystem.

    from docstore_lite import open_store

    db = open_store("./data")
    db.write("users", "john", {"Name": "John", "Age": 23})
    db.read("users", "john")          # {'Name': 'John', 'Age': 23}
    db.read_all("users")              # ['{\\n\\t"Name": "John", ...}\\n']
    db.delete("users", "john")
"""
from docstore_lite.domain.user import Address, User
from docstore_lite.errors import (
    EncodingFailure,
    InvalidArgument,
    IOFailure,
    NotFound,
    StoreError,
)
from docstore_lite.log import ConsoleLogger, Logger
from docstore_lite.options import Options
from docstore_lite.store import DocumentStoreBase, FileStore, open_store
from docstore_lite.users import UserDirectory

__version__ = "1.0.0"

__all__ = [
    "Address",
    "ConsoleLogger",
    "DocumentStoreBase",
    "EncodingFailure",
    "FileStore",
    "InvalidArgument",
    "IOFailure",
    "Logger",
    "NotFound",
    "Options",
    "StoreError",
    "User",
    "UserDirectory",
    "open_store",
]
