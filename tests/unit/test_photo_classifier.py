"""Tests for placeholder photo detection."""

import base64
import hashlib

from neo_membership.features.directory.services.photo_classifier import (
    DEFAULT_PERSONA_IMAGE_HASHES,
    DefaultPhotoClassifier,
    to_data_url,
)


def test_empty_photo_is_default():
    classifier = DefaultPhotoClassifier()

    assert classifier.is_default_photo(b"") is True
    assert classifier.is_default_photo(None) is True


def test_real_photo_is_not_default():
    assert DefaultPhotoClassifier().is_default_photo(b"\xff\xd8\xff\xe0 a real portrait") is False


def test_matches_md5_of_base64_encoding():
    photo = b"silhouette"
    digest = hashlib.md5(base64.b64encode(photo)).hexdigest()

    assert DefaultPhotoClassifier(extra_hashes=[digest.upper()]).is_default_photo(photo) is True


def test_matches_md5_of_raw_bytes():
    photo = b"silhouette"
    digest = hashlib.md5(photo).hexdigest()

    assert DefaultPhotoClassifier(extra_hashes=[digest]).is_default_photo(photo) is True


def test_known_hashes_are_lowercase_md5():
    assert len(DEFAULT_PERSONA_IMAGE_HASHES) == 6
    assert all(len(h) == 32 and h == h.lower() for h in DEFAULT_PERSONA_IMAGE_HASHES)


def test_to_data_url():
    assert to_data_url(b"abc") == "data:image/png;base64,YWJj"
    assert to_data_url(b"abc", "image/jpeg").startswith("data:image/jpeg;base64,")
