"""Path construction and the lookup rule shared by every operation.

Layout on disk:

    <root>/<collection>/<resource>.json

Resolution for a resource tries the stored name first, then the name as
given when the caller already included the extension:

    resolve_resource(root, "users", "john")       -> users/john.json
    resolve_resource(root, "users", "john.json")  -> users/john.json.json
                                                     else users/john.json

The stored name is tried first so that write(c, r) followed by read(c, r)
always lands on the same file, whatever r looks like. Only regular files
count as resources; a directory is never resolved as one.
"""
from __future__ import annotations

import os

JSON_SUFFIX = ".json"
TEMP_SUFFIX = ".tmp"


def normalize_root(root: str | os.PathLike[str]) -> str:
    """Clean redundant separators and relative segments."""
    return os.path.normpath(os.fspath(root))


def collection_dir(root: str, collection: str) -> str:
    return os.path.join(root, collection)


def resource_path(root: str, collection: str, resource: str) -> str:
    """Where write() puts a resource."""
    return os.path.join(root, collection, resource + JSON_SUFFIX)


def temp_path(final_path: str) -> str:
    """Sibling that a write lands in before the atomic replace."""
    return final_path + TEMP_SUFFIX


def resource_candidates(root: str, collection: str, resource: str) -> list[str]:
    """Paths to try for a resource, in order."""
    candidates = [resource_path(root, collection, resource)]
    if resource.endswith(JSON_SUFFIX):
        candidates.append(os.path.join(root, collection, resource))
    return candidates


def resolve_collection(root: str, collection: str) -> str | None:
    """Return the collection directory if it exists, else None."""
    path = collection_dir(root, collection)
    return path if os.path.isdir(path) else None


def resolve_resource(root: str, collection: str, resource: str) -> str | None:
    """Return the first candidate that is an existing regular file, else None."""
    for path in resource_candidates(root, collection, resource):
        if os.path.isfile(path):
            return path
    return None


def is_temp_file(name: str) -> bool:
    return name.endswith(TEMP_SUFFIX)


def is_stray_temp_file(name: str) -> bool:
    """A temp file left behind by a write whose replace never happened."""
    return name.endswith(JSON_SUFFIX + TEMP_SUFFIX)


def resource_name(filename: str) -> str:
    """Strip the storage suffix from a file name."""
    if filename.endswith(JSON_SUFFIX):
        return filename[: -len(JSON_SUFFIX)]
    return filename
