"""Error kinds raised by the store.

Every operation raises synchronously; nothing is retried or swallowed.
Each kind also inherits the closest builtin so callers that only know
about ValueError or LookupError still catch the right thing.
"""
from __future__ import annotations


class StoreError(Exception):
    """Base class for every error the store raises."""


class InvalidArgument(StoreError, ValueError):
    """An empty collection or resource name was passed."""


class NotFound(StoreError, LookupError):
    """No file or directory matched after probing."""


class IOFailure(StoreError):
    """The filesystem refused a create/read/write/remove/rename.

    The original OSError is chained as __cause__.
    """


class EncodingFailure(StoreError, ValueError):
    """A value could not be encoded to JSON, or a file did not decode."""
