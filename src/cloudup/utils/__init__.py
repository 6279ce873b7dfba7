from .hashing import api_signature, md5_checksum
from .redact import redact

__all__ = [
    "api_signature",
    "md5_checksum",
    "redact",
]
