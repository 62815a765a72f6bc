"""Directory services."""

from .photo_classifier import DefaultPhotoClassifier, DEFAULT_PERSONA_IMAGE_HASHES, to_data_url

__all__ = ["DefaultPhotoClassifier", "DEFAULT_PERSONA_IMAGE_HASHES", "to_data_url"]
