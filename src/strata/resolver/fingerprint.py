"""Search path fingerprinting for cache invalidation."""

from __future__ import annotations

import hashlib
import json

from strata.model import SearchPathEntry


def search_path_fingerprint(entries: list[SearchPathEntry]) -> str:
    """Return a stable hash of the sorted search path.

    Any change to a module name, root, precedence, or the resulting order
    produces a different fingerprint.
    """
    payload = [[entry.module, str(entry.root), entry.precedence] for entry in entries]
    blob = json.dumps(payload, separators=(",", ":")).encode("utf-8")
    return hashlib.sha256(blob).hexdigest()
