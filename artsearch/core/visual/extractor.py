# Path: artsearch/core/visual/extractor.py
# Purpose: Decode images and compute color, composition, and texture features.
# Layer: core/visual.
# Details: Pillow decodes (URLs fetched with httpx); numpy does the pixel math on a thumbnailed RGB buffer.

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import List, Optional, Union

import httpx
import numpy as np
from PIL import Image

from artsearch.config.settings import VisualSettings
from artsearch.core.errors import ImageDecodeError

from .features import RGB, VisualFeatures, is_cool, is_warm

logger = logging.getLogger(__name__)

ImageSource = Union[str, Path, bytes, bytearray, Image.Image]

BRIGHT_LEVEL = 200.0
DARK_LEVEL = 100.0
HIGH_CONTRAST = 100.0
SYMMETRICAL = 0.7
LINE_DENSITY = 0.1
ROUGH_EDGES = 1000
MEDIUM_EDGES = 500


class VisualFeatureExtractor:
    """Extract deterministic visual features from an image source."""

    def __init__(self, settings: Optional[VisualSettings] = None, client: Optional[httpx.Client] = None) -> None:
        self.settings = settings or VisualSettings()
        self._client = client

    def extract(self, source: ImageSource) -> Optional[VisualFeatures]:
        """Return features for ``source`` or ``None`` when the image cannot be fetched or decoded."""

        try:
            image = self.load_image(source)
        except ImageDecodeError as exc:
            logger.warning("Visual feature extraction skipped: %s", exc)
            return None
        return self.analyze(image)

    def load_image(self, source: ImageSource) -> Image.Image:
        """Decode ``source`` into an RGB image no larger than ``max_side`` on either axis."""

        try:
            if isinstance(source, Image.Image):
                image = source.copy()
            elif isinstance(source, (bytes, bytearray)):
                image = Image.open(io.BytesIO(bytes(source)))
            elif isinstance(source, str) and source.startswith(("http://", "https://")):
                image = Image.open(io.BytesIO(self._download(source)))
            else:
                image = Image.open(Path(source))
            image.load()
            rgb = image.convert("RGB")
        except (OSError, ValueError, httpx.HTTPError, Image.DecompressionBombError) as exc:
            raise ImageDecodeError(f"Could not decode image {self._describe(source)}: {exc}") from exc

        rgb.thumbnail((self.settings.max_side, self.settings.max_side))
        return rgb

    def _download(self, url: str) -> bytes:
        if self._client is not None:
            response = self._client.get(url, timeout=self.settings.download_timeout)
        else:
            response = httpx.get(url, timeout=self.settings.download_timeout, follow_redirects=True)
        response.raise_for_status()
        return response.content

    @staticmethod
    def _describe(source: ImageSource) -> str:
        if isinstance(source, (bytes, bytearray)):
            return f"<{len(source)} bytes>"
        if isinstance(source, Image.Image):
            return f"<{source.mode} image {source.size}>"
        return str(source)

    # ---------------------- pixel analysis ----------------------
    def analyze(self, image: Image.Image) -> VisualFeatures:
        """Compute features for an already decoded image."""

        pixels = np.asarray(image.convert("RGB"), dtype=np.uint8)
        brightness_map = pixels.astype(np.float64).mean(axis=2)

        colors = self.dominant_colors(pixels)
        brightness = float(brightness_map.mean()) if brightness_map.size else 0.0
        contrast = float(brightness_map.std()) if brightness_map.size else 0.0
        symmetry = self.symmetry(brightness_map)
        thirds = self.rule_of_thirds(brightness_map)
        edge_count = self.edge_count(brightness_map)
        height, width = brightness_map.shape
        edge_density = edge_count / (width * height) if width and height else 0.0
        texture = self.classify_texture(edge_count)

        features = VisualFeatures(
            dominant_colors=colors,
            brightness=brightness,
            contrast=contrast,
            symmetry=symmetry,
            rule_of_thirds=thirds,
            edge_count=edge_count,
            edge_density=edge_density,
            texture=texture,
        )
        self._derive_vocabulary(features)
        logger.debug(
            "Visual features: brightness=%.1f contrast=%.1f symmetry=%.2f edges=%d vocabulary=%s",
            brightness,
            contrast,
            symmetry,
            edge_count,
            features.vocabulary,
        )
        return features

    def dominant_colors(self, pixels: np.ndarray) -> List[RGB]:
        """Most frequent exact RGB values among every ``sample_step``-th pixel."""

        flat = pixels.reshape(-1, 3)[:: self.settings.sample_step]
        if flat.size == 0:
            return []
        values, counts = np.unique(flat, axis=0, return_counts=True)
        order = np.argsort(-counts, kind="stable")[: self.settings.palette_size]
        return [(int(values[i][0]), int(values[i][1]), int(values[i][2])) for i in order]

    def symmetry(self, brightness_map: np.ndarray) -> float:
        """Fraction of left/right mirrored pixel pairs whose brightness differs by less than the tolerance."""

        width = brightness_map.shape[1]
        if width == 0:
            return 0.0
        half = (width + 1) // 2
        left = brightness_map[:, :half]
        mirrored = brightness_map[:, ::-1][:, :half]
        return float((np.abs(left - mirrored) < self.settings.symmetry_tolerance).mean())

    @staticmethod
    def rule_of_thirds(brightness_map: np.ndarray) -> bool:
        """True when the third-line intersections carry more detail than the centre of the frame."""

        height, width = brightness_map.shape
        if height < 3 or width < 3:
            return False
        radius = max(1, min(height, width) // 12)

        def detail(row: int, col: int) -> float:
            window = brightness_map[max(0, row - radius): row + radius + 1, max(0, col - radius): col + radius + 1]
            return float(window.std())

        rows = (height // 3, (2 * height) // 3)
        cols = (width // 3, (2 * width) // 3)
        intersections = [detail(row, col) for row in rows for col in cols]
        return float(np.mean(intersections)) > detail(height // 2, width // 2)

    def edge_count(self, brightness_map: np.ndarray) -> int:
        """Interior pixels whose |top - bottom| + |left - right| gradient exceeds the edge threshold."""

        height, width = brightness_map.shape
        if height < 3 or width < 3:
            return 0
        vertical = np.abs(brightness_map[:-2, 1:-1] - brightness_map[2:, 1:-1])
        horizontal = np.abs(brightness_map[1:-1, :-2] - brightness_map[1:-1, 2:])
        return int(((vertical + horizontal) > self.settings.edge_threshold).sum())

    @staticmethod
    def classify_texture(edge_count: int) -> str:
        if edge_count > ROUGH_EDGES:
            return "rough"
        if edge_count > MEDIUM_EDGES:
            return "medium"
        return "smooth"

    @staticmethod
    def _derive_vocabulary(features: VisualFeatures) -> None:
        warm = any(is_warm(color) for color in features.dominant_colors)
        cool = any(is_cool(color) for color in features.dominant_colors)
        bright = features.brightness > BRIGHT_LEVEL
        dark = features.brightness < DARK_LEVEL
        symmetrical = features.symmetry > SYMMETRICAL
        high_contrast = features.contrast > HIGH_CONTRAST
        linear = features.edge_density > LINE_DENSITY

        concept_flags = [
            ("warm", warm),
            ("cool", cool),
            ("bright", bright),
            ("dark", dark),
            ("symmetrical", symmetrical),
            ("high_contrast", high_contrast),
            ("textured", features.texture == "rough"),
            ("smooth", features.texture == "smooth"),
        ]
        emotion_flags = [("joy", bright), ("melancholy", dark), ("warmth", warm), ("calm", cool)]
        style_flags = [("expressionist", high_contrast), ("classical", symmetrical), ("abstract", linear)]
        element_flags = [
            ("contrast", high_contrast),
            ("symmetry", symmetrical),
            ("line", linear),
            ("composition", features.rule_of_thirds),
        ]

        features.concepts = [name for name, flag in concept_flags if flag]
        features.emotions = [name for name, flag in emotion_flags if flag]
        features.styles = [name for name, flag in style_flags if flag]
        features.elements = [name for name, flag in element_flags if flag]
