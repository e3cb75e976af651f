"""UserDirectory: user CRUD on top of any DocumentStoreBase.

This is the request-handling layer without the transport: each method
is one endpoint of the old user API (add, get, get all, delete, delete
all). Records live in one collection, keyed by the user's name. Store
errors pass straight through; only decoding into User is done here.
"""
from __future__ import annotations

from docstore_lite.domain.types import CollectionName
from docstore_lite.domain.user import User
from docstore_lite.errors import EncodingFailure, InvalidArgument
from docstore_lite.store import codec
from docstore_lite.store.base import DocumentStoreBase

USERS: CollectionName = "users"


class UserDirectory:
    """Typed access to the users collection.

    Args:
        store: where records are kept.
        collection: collection name (default "users").
    """

    def __init__(self, store: DocumentStoreBase, collection: CollectionName = USERS) -> None:
        self._store = store
        self._collection = collection

    @property
    def collection(self) -> CollectionName:
        return self._collection

    def add_user(self, user: User) -> User:
        """Save (or overwrite) a user under its name."""
        if not user.name:
            raise InvalidArgument("name is required")
        self._store.write(self._collection, user.name, user.to_dict())
        return user

    def get_user(self, name: str) -> User:
        if not name:
            raise InvalidArgument("name is required")
        data = self._store.read(self._collection, name)
        try:
            return User.from_dict(data)
        except ValueError as exc:
            raise EncodingFailure(f"{self._collection}/{name}: {exc}") from exc

    def get_all_users(self) -> list[User]:
        """Every stored user. Order is not meaningful."""
        users = []
        for raw in self._store.read_all(self._collection):
            data = codec.decode(raw, source=self._collection)
            try:
                users.append(User.from_dict(data))
            except ValueError as exc:
                raise EncodingFailure(f"{self._collection}: bad user record: {exc}") from exc
        return users

    def delete_user(self, name: str) -> None:
        if not name:
            raise InvalidArgument("name is required")
        self._store.delete(self._collection, name)

    def delete_all_users(self) -> None:
        self._store.delete(self._collection, "")
