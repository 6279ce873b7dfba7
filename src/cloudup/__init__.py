"""cloudup -- upload local assets to Cloudinary and track their public IDs.

Public re-exports
-----------------

* **Client:** :class:`CloudupClient`, :func:`dial`
* **Configuration:** :class:`ServiceConfig`, :func:`parse_descriptor`
* **Naming & URLs:** :func:`clean_asset_name`, :func:`extract_public_id`,
  :func:`delivery_url`
* **Errors:** Every :class:`CloudupError` subclass and :class:`ErrorCode`
* **Models:** :class:`UploadResult`, :class:`TrackingRecord`,
  :class:`ResourceType`

Usage::

    from cloudup import dial

    client = dial("cloudinary://<api_key>:<api_secret>@<cloud_name>")
    public_id = client.upload_image("/tmp/img/logo.png", base_path="/tmp")
"""

from __future__ import annotations

# ── Client ──────────────────────────────────────────────────────────────
from cloudup.client import CloudupClient, dial

# ── Configuration ───────────────────────────────────────────────────────
from cloudup.config import (
    DEFAULT_DELIVERY_HOST,
    DEFAULT_UPLOAD_HOST,
    ServiceConfig,
    parse_descriptor,
)

# ── Errors ──────────────────────────────────────────────────────────────
from cloudup.errors import (
    CloudupDescriptorError,
    CloudupError,
    CloudupInvalidDescriptorError,
    CloudupInvalidPatternError,
    CloudupMalformedResponseError,
    CloudupMissingCredentialError,
    CloudupStoreUnavailableError,
    CloudupUnexpectedURLPathFormatError,
    CloudupUnsupportedSchemeError,
    CloudupUploadError,
    CloudupUploadFailedError,
    ErrorCode,
)

# ── Models ──────────────────────────────────────────────────────────────
from cloudup.models import ResourceType, TrackingRecord, UploadResult

# ── Naming & URLs ───────────────────────────────────────────────────────
from cloudup.naming import clean_asset_name
from cloudup.retention import RetentionFilter
from cloudup.tracking import TrackingStore
from cloudup.urls import delivery_url, extract_public_id

__all__ = [
    # Client
    "CloudupClient",
    "dial",
    # Configuration
    "ServiceConfig",
    "parse_descriptor",
    "DEFAULT_UPLOAD_HOST",
    "DEFAULT_DELIVERY_HOST",
    # Components
    "RetentionFilter",
    "TrackingStore",
    "clean_asset_name",
    "extract_public_id",
    "delivery_url",
    # Error base + code enum
    "CloudupError",
    "ErrorCode",
    # Descriptor errors
    "CloudupDescriptorError",
    "CloudupInvalidDescriptorError",
    "CloudupUnsupportedSchemeError",
    "CloudupMissingCredentialError",
    # Retention / tracking errors
    "CloudupInvalidPatternError",
    "CloudupStoreUnavailableError",
    # Upload errors
    "CloudupUploadError",
    "CloudupUploadFailedError",
    "CloudupMalformedResponseError",
    # Extraction errors
    "CloudupUnexpectedURLPathFormatError",
    # Models
    "UploadResult",
    "TrackingRecord",
    "ResourceType",
]
