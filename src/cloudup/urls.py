"""Delivery URLs and public-ID extraction.

Delivery URLs have the shape::

    <host>/<cloud_name>/<resource_type>/upload/<public_id>

:func:`extract_public_id` recovers the public ID from such a URL and
:func:`delivery_url` builds one.
"""

from __future__ import annotations

from urllib.parse import quote, unquote, urlsplit

from cloudup.config import DEFAULT_DELIVERY_HOST
from cloudup.errors import CloudupUnexpectedURLPathFormatError
from cloudup.models import ResourceType


def extract_public_id(url: str) -> str:
    """Return the public ID carried by the delivery *url*.

    The URL path must end in ``<resource_type>/upload/<segment>`` with
    exactly one non-empty segment after ``upload/``.  The segment is
    returned percent-decoded.

    Raises
    ------
    CloudupUnexpectedURLPathFormatError
        If nothing, an empty segment, or more than one segment follows
        ``upload/``.

    Examples
    --------
    >>> extract_public_id("http://res.cloudinary.com/demo/image/upload/857477010")
    '857477010'
    """
    try:
        path = urlsplit(url).path
    except ValueError as exc:
        raise CloudupUnexpectedURLPathFormatError(
            message=f"Cannot parse URL {url!r}: {exc}",
            context={"url": url, "path": None},
            cause=exc,
        ) from exc

    segments = path.split("/")
    # ["", <cloud>, <type>, "upload", <public_id>]
    if (
        len(segments) < 4
        or segments[-2] != "upload"
        or not segments[-3]
        or not segments[-1]
    ):
        raise CloudupUnexpectedURLPathFormatError(
            message=(
                f"Unexpected URL path {path!r}: expected "
                "'.../<resource_type>/upload/<public_id>'"
            ),
            context={"url": url, "path": path},
        )
    return unquote(segments[-1])


def delivery_url(
    cloud_name: str,
    public_id: str,
    resource_type: ResourceType | str = ResourceType.IMAGE,
    host: str = DEFAULT_DELIVERY_HOST,
) -> str:
    """Build the delivery URL of *public_id*.

    >>> delivery_url("demo", "css/default", "raw")
    'http://res.cloudinary.com/demo/raw/upload/css/default'
    """
    rtype = ResourceType(resource_type).value
    return f"{host.rstrip('/')}/{cloud_name}/{rtype}/upload/{quote(public_id)}"
