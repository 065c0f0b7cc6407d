from __future__ import annotations

import posixpath


def _is_dir(url: str) -> bool:
    return url.endswith("/")


def compute_relative_url_path(from_: str, to: str, hash: str = "") -> str:
    """
    Compute the shortest relative path between two root-relative URLs.

    Directory URLs (ending in ``/``) and extensionless URLs are handled.
    A ``to`` that is not root-relative is returned as-is, with the hash.
    """
    if not to.startswith("/"):
        return to + hash
    if to == from_:
        return hash or ("./" if _is_dir(to) else posixpath.basename(to))
    # "+ ." makes dirname() keep the last segment of a directory URL
    base = posixpath.dirname(from_ + ".")
    rel = posixpath.relpath(to, base) or "."
    if _is_dir(to):
        return rel + "/" + hash
    return rel + hash
