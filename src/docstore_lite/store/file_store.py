"""Filesystem-backed document store.

Each resource is one JSON file, each collection one directory:

    <root>/<collection>/<resource>.json

Concurrency model:
  - write() and delete() hold the collection's lock for their whole body,
    so there is at most one mutation in flight per collection. Different
    collections proceed in parallel.
  - read() and read_all() take no lock. They are safe against a concurrent
    write because a write lands in <resource>.json.tmp and is then moved
    over the target with os.replace(), which is atomic on POSIX and
    Windows. A reader sees the old complete file or the new complete file,
    never a torn one. Which of the two it sees is not defined.
  - Nothing times out. A stalled write blocks every other writer and
    deleter of that collection until it finishes.

Failure model: a write encodes the value before touching the disk, so an
unencodable value leaves no trace. If the final replace fails the temp
file can be left behind; sweep_temp_files() (or Options.sweep_temp_files
at open time) removes those.
"""
from __future__ import annotations

import os
import shutil
from typing import Any

from docstore_lite import paths
from docstore_lite.concurrency.lock_registry import CollectionLockRegistry
from docstore_lite.domain.types import CollectionName, RawRecord, ResourceName
from docstore_lite.errors import EncodingFailure, InvalidArgument, IOFailure, NotFound
from docstore_lite.log import ConsoleLogger, Logger
from docstore_lite.options import Options
from docstore_lite.store import codec
from docstore_lite.store.base import DocumentStoreBase

DIR_MODE = 0o755
FILE_MODE = 0o644


def _require(value: str, message: str) -> None:
    if not value:
        raise InvalidArgument(message)


def _write_file(path: str, data: bytes) -> None:
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
    with os.fdopen(fd, "wb") as f:
        f.write(data)


class FileStore(DocumentStoreBase):
    """Document store rooted at a directory.

    Args:
        root_dir: directory holding every collection. Normalized, then
            created with its parents if it does not exist yet.
        options: see Options. None means all defaults.

    Raises:
        IOFailure: the root could not be created, or exists as a file.
    """

    def __init__(self, root_dir: str | os.PathLike[str], options: Options | None = None) -> None:
        opts = options or Options()
        self._root = paths.normalize_root(root_dir)
        self._log: Logger = opts.logger if opts.logger is not None else ConsoleLogger()
        self._locks = CollectionLockRegistry()

        if os.path.isdir(self._root):
            self._log.debug("Using '%s' (database already exists)", self._root)
        else:
            self._log.debug("Creating the database at '%s'...", self._root)
            try:
                os.makedirs(self._root, mode=DIR_MODE, exist_ok=True)
            except OSError as exc:
                raise IOFailure(f"cannot create database at {self._root!r}: {exc}") from exc

        if opts.sweep_temp_files:
            self.sweep_temp_files()

    @property
    def root(self) -> str:
        return self._root

    @property
    def locks(self) -> CollectionLockRegistry:
        return self._locks

    def __repr__(self) -> str:
        return f"FileStore({self._root!r})"

    # ---- the four operations ----

    def write(self, collection: CollectionName, resource: ResourceName, value: Any) -> None:
        """Persist value as <collection>/<resource>.json.

        Raises InvalidArgument for empty names, EncodingFailure when value
        is not JSON (nothing is written), IOFailure on filesystem errors.
        """
        _require(collection, "missing collection - no place to save record")
        _require(resource, "missing resource - unable to save record (no name)")

        data = codec.encode(value)

        with self._locks.hold(collection):
            directory = paths.collection_dir(self._root, collection)
            final_path = paths.resource_path(self._root, collection, resource)
            tmp_path = paths.temp_path(final_path)
            try:
                os.makedirs(directory, mode=DIR_MODE, exist_ok=True)
                _write_file(tmp_path, data)
                os.replace(tmp_path, final_path)
            except OSError as exc:
                raise IOFailure(f"cannot write {collection}/{resource}: {exc}") from exc

        self._log.trace("Wrote %s/%s (%d bytes)", collection, resource, len(data))

    def read(self, collection: CollectionName, resource: ResourceName) -> Any:
        """Return the decoded JSON value of a resource.

        Raises InvalidArgument, NotFound, IOFailure, or EncodingFailure
        when the file exists but is not valid JSON.
        """
        _require(collection, "missing collection - unable to read")
        _require(resource, "missing resource - unable to read record (no name)")

        path = paths.resolve_resource(self._root, collection, resource)
        if path is None:
            raise NotFound(f"unable to find resource {collection}/{resource}")

        try:
            with open(path, "rb") as f:
                data = f.read()
        except FileNotFoundError as exc:
            # deleted between the lookup and the open
            raise NotFound(f"unable to find resource {collection}/{resource}") from exc
        except OSError as exc:
            raise IOFailure(f"cannot read {collection}/{resource}: {exc}") from exc

        return codec.decode(data, source=f"{collection}/{resource}")

    def read_all(self, collection: CollectionName) -> list[RawRecord]:
        """Return the raw JSON text of every resource in a collection.

        Entries come back in name order, but callers should not depend on
        that. Temp files from in-flight writes are skipped. Any entry that
        cannot be read as a file (a subdirectory, say) fails the whole call
        with IOFailure; there are no partial results.
        """
        _require(collection, "missing collection - unable to read")

        directory = paths.resolve_collection(self._root, collection)
        if directory is None:
            raise NotFound(f"unable to find collection {collection}")

        try:
            names = sorted(os.listdir(directory))
        except OSError as exc:
            raise IOFailure(f"cannot list {collection}: {exc}") from exc

        records: list[RawRecord] = []
        for name in names:
            if paths.is_temp_file(name):
                continue
            path = os.path.join(directory, name)
            try:
                with open(path, "rb") as f:
                    data = f.read()
            except OSError as exc:
                raise IOFailure(f"cannot read {collection}/{name}: {exc}") from exc
            try:
                records.append(data.decode(codec.ENCODING))
            except UnicodeDecodeError as exc:
                raise EncodingFailure(f"{collection}/{name} is not UTF-8 text") from exc
        return records

    def delete(self, collection: CollectionName, resource: ResourceName = "") -> None:
        """Remove one resource, or the whole collection when resource is "".

        Deleting something that does not exist is an error (NotFound), never
        a silent no-op. A deleted collection is recreated by the next write.
        """
        _require(collection, "missing collection - unable to delete")

        with self._locks.hold(collection):
            if not resource:
                target = paths.resolve_collection(self._root, collection)
                if target is None:
                    raise NotFound(f"unable to find file or directory named {collection}")
                try:
                    shutil.rmtree(target)
                except OSError as exc:
                    raise IOFailure(f"cannot delete collection {collection}: {exc}") from exc
                self._log.trace("Deleted collection %s", collection)
                return

            target = paths.resolve_resource(self._root, collection, resource)
            if target is None:
                raise NotFound(
                    f"unable to find file or directory named {collection}/{resource}"
                )
            try:
                os.remove(target)
            except FileNotFoundError as exc:
                raise NotFound(
                    f"unable to find file or directory named {collection}/{resource}"
                ) from exc
            except OSError as exc:
                raise IOFailure(f"cannot delete {collection}/{resource}: {exc}") from exc
            self._log.trace("Deleted %s/%s", collection, resource)

    # ---- listing and housekeeping ----

    def collections(self) -> list[CollectionName]:
        """Names of the collection directories under the root."""
        try:
            with os.scandir(self._root) as it:
                return sorted(e.name for e in it if e.is_dir())
        except OSError as exc:
            raise IOFailure(f"cannot list {self._root}: {exc}") from exc

    def resources(self, collection: CollectionName) -> list[ResourceName]:
        """Names of the resources in a collection, suffix stripped."""
        _require(collection, "missing collection - unable to list")

        directory = paths.resolve_collection(self._root, collection)
        if directory is None:
            raise NotFound(f"unable to find collection {collection}")
        try:
            with os.scandir(directory) as it:
                return sorted(
                    paths.resource_name(e.name)
                    for e in it
                    if e.is_file() and e.name.endswith(paths.JSON_SUFFIX)
                )
        except OSError as exc:
            raise IOFailure(f"cannot list {collection}: {exc}") from exc

    def sweep_temp_files(self) -> list[str]:
        """Remove *.json.tmp files a failed write left in any collection.

        Holds each collection's lock while sweeping it, so an in-flight
        write's temp file is never pulled out from under it.
        Returns the removed paths.
        """
        removed: list[str] = []
        for collection in self.collections():
            with self._locks.hold(collection):
                directory = paths.collection_dir(self._root, collection)
                try:
                    with os.scandir(directory) as it:
                        stray = [e.path for e in it if e.is_file() and paths.is_stray_temp_file(e.name)]
                    for path in stray:
                        os.remove(path)
                        self._log.warn("Removed stray temp file '%s'", path)
                        removed.append(path)
                except FileNotFoundError:
                    # deleted since the listing
                    continue
                except OSError as exc:
                    raise IOFailure(f"cannot sweep {collection}: {exc}") from exc
        if removed:
            self._log.debug("Swept %d temp file(s) under %s", len(removed), self._root)
        return removed


def open_store(root_dir: str | os.PathLike[str], options: Options | None = None) -> FileStore:
    """Open (creating if needed) the store rooted at root_dir."""
    return FileStore(root_dir, options)
