"""Public data models for cloudup.

Result types, tracking records and the resource-type enum referenced by
the public API surface.  All types are plain dataclasses with no
behaviour beyond what is needed for structural equality and
serialisation.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ResourceType(str, Enum):
    """Kinds of remote resources an upload can create."""

    IMAGE = "image"
    """Image assets; transformations and delivery through the image CDN."""

    RAW = "raw"
    """Static files delivered verbatim (CSS, JS, fonts, ...)."""


# ---------------------------------------------------------------------------
# Upload results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class UploadResult:
    """Outcome of a single upload call.

    ``public_id`` is the identifier echoed by the remote service, which may
    differ from the locally computed name when the service renames on
    collision.
    """

    public_id: str
    format: str = ""
    resource_type: str = ResourceType.IMAGE.value
    version: int = 0
    url: str | None = None
    source_path: str | None = None
    simulated: bool = False
    tracked: bool = False
    kept: bool | None = None
    """``True``/``False`` when a local source file was retained/deleted,
    ``None`` when retention did not apply."""

    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


# ---------------------------------------------------------------------------
# Tracking
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TrackingRecord:
    """Metadata persisted for each successful upload when a store is attached.

    Records are inserted once and never mutated.
    """

    source_path: str
    public_id: str
    uploaded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    checksum: str | None = None
    version: int | None = None
    resource_type: str = ResourceType.IMAGE.value

    def to_document(self) -> dict[str, Any]:
        """Return the record as a document ready for insertion."""
        return asdict(self)
