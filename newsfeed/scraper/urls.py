"""Turn the hrefs and image sources found on a page into absolute URLs."""

from __future__ import annotations

from urllib.parse import urlsplit


def _origin(base: str) -> str:
    parts = urlsplit(base)
    return f"{parts.scheme}://{parts.netloc}"


def resolve_url(base: str, candidate: str | None) -> str | None:
    """Resolve *candidate* against the origin of *base*.

    Rules, in order:

    * empty / ``None`` → ``None``
    * already absolute (scheme and host present) → unchanged
    * protocol-relative (``//cdn/x.png``) → ``https:`` prefixed
    * root-relative (``/a/b``) → ``<origin of base>/a/b``
    * anything else (``a/b``, ``?page=2``) → ``None``

    Bare relative paths are rejected rather than joined: the source site only
    emits root-relative or absolute links, so anything else is treated as
    noise.
    """
    if not candidate:
        return None
    candidate = candidate.strip()
    if not candidate:
        return None

    if candidate.startswith("//"):
        return "https:" + candidate

    try:
        parts = urlsplit(candidate)
    except ValueError:
        # e.g. an unbalanced "[" in the host part
        return None
    if parts.scheme and parts.netloc:
        return candidate

    if candidate.startswith("/"):
        return _origin(base) + candidate

    return None
