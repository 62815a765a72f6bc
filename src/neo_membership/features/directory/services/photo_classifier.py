"""Default profile photo detection.

SharePoint serves a generic silhouette from ``userphoto.aspx`` when a user
has no photo. Those placeholders are recognised by the md5 of their
base64 encoding.
"""

import base64
import hashlib
import logging
from typing import FrozenSet, Iterable, Optional

logger = logging.getLogger(__name__)


DEFAULT_PERSONA_IMAGE_HASHES: FrozenSet[str] = frozenset({
    "7ad602295f8386b7615b582d87bcc294",
    "4a48f26592f4e1498d7a478a4c48609c",
    "6de6a017bc934f55835ac9b721d04b8b",
    "f8cb5c6ed63e440b90d962f8c4b2377b",
    "9a06a83c57864b16a5eef56e83dd5c67",
    "dc9713f1e28b6ec4d4acba8a50c45caa",
})


class DefaultPhotoClassifier:
    """Classifies photo payloads as real photos or placeholders."""
    
    def __init__(self, extra_hashes: Optional[Iterable[str]] = None):
        self._hashes = set(DEFAULT_PERSONA_IMAGE_HASHES)
        if extra_hashes:
            self._hashes.update(h.lower() for h in extra_hashes)
    
    @staticmethod
    def fingerprints(photo: bytes) -> FrozenSet[str]:
        """md5 of the base64 text and of the raw bytes."""
        encoded = base64.b64encode(photo)
        return frozenset({
            hashlib.md5(encoded).hexdigest(),
            hashlib.md5(photo).hexdigest(),
        })
    
    def is_default_photo(self, photo: Optional[bytes]) -> bool:
        if not photo:
            return True
        is_default = not self._hashes.isdisjoint(self.fingerprints(photo))
        if is_default:
            logger.debug("Suppressing placeholder profile photo")
        return is_default


def to_data_url(photo: bytes, media_type: str = "image/png") -> str:
    """Encode a photo as a ``data:`` URL."""
    return f"data:{media_type};base64,{base64.b64encode(photo).decode('ascii')}"
