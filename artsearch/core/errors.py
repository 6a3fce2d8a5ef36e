# Path: artsearch/core/errors.py
# Purpose: Define the error taxonomy shared by stores, the image extractor, and the pipeline.
# Layer: core.
# Details: Search entrypoints catch these and degrade to empty results unless configured to raise.

from __future__ import annotations


class ArtSearchError(Exception):
    """Base class for recoverable search failures."""


class UpstreamFetchError(ArtSearchError):
    """The artwork or preference store was unreachable, failed, or exceeded its deadline."""


class ImageDecodeError(ArtSearchError):
    """An image could not be fetched or decoded into a pixel buffer."""


__all__ = ["ArtSearchError", "UpstreamFetchError", "ImageDecodeError"]
