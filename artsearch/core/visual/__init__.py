# Path: artsearch/core/visual/__init__.py
# Purpose: Package initializer for image feature extraction.
# Layer: core/visual.
# Details: Exposes the extractor and the feature bundle it produces.

from .extractor import ImageSource, VisualFeatureExtractor
from .features import VisualFeatures, is_cool, is_warm

__all__ = ["ImageSource", "VisualFeatureExtractor", "VisualFeatures", "is_cool", "is_warm"]
