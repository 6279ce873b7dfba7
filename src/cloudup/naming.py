"""Asset name normalisation.

Turns a filesystem path into the canonical identifier ("public ID") under
which the asset is stored remotely: a forward-slash delimited relative
path with no extension and no leading slash.
"""

from __future__ import annotations

import posixpath


def _strip_separators(value: str) -> str:
    return value.strip().replace("\\", "/")


def clean_asset_name(path: str, base_path: str = "", prepend: str = "") -> str:
    """Return the canonical identifier for *path*.

    Parameters
    ----------
    path:
        Full path of the local asset.
    base_path:
        Prefix removed from *path* before naming.  Surrounding whitespace
        and trailing separators are ignored.  A *base_path* that is not a
        prefix of *path* is silently ignored.
    prepend:
        Optional leading path segment (surrounding whitespace and slashes
        are trimmed).

    Returns
    -------
    str
        The identifier, e.g. ``"new/css/default"``.

    Only the last extension is removed, so the result is idempotent only
    for file names with at most one dot: ``c.tar.gz`` becomes ``c.tar``
    and re-normalising that gives ``c``.

    Examples
    --------
    >>> clean_asset_name("/tmp/css/default.css", "/tmp/", "new")
    'new/css/default'
    >>> clean_asset_name("/a/b/c.png", "/a", "")
    'b/c'
    >>> clean_asset_name("/a/b/c.png", "", "/x")
    'x/a/b/c'
    """
    name = _strip_separators(path)
    base = _strip_separators(base_path).rstrip("/")

    if base and (name == base or name.startswith(base + "/")):
        name = name[len(base):]
    name = name.lstrip("/")

    head, tail = posixpath.split(name)
    stem, _ext = posixpath.splitext(tail)
    name = posixpath.join(head, stem) if head else stem

    prefix = _strip_separators(prepend).strip("/")
    if prefix:
        name = f"{prefix}/{name}" if name else prefix
    return name
