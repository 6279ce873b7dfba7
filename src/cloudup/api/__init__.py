"""HTTP layer for the upload API.

Exports
-------
UploadTransport
    Synchronous ``httpx`` transport issuing one signed request per call.
"""

from .transport import UploadTransport

__all__ = ["UploadTransport"]
