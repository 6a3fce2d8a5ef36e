# Path: artsearch/core/market/__init__.py
# Purpose: Package initializer for market signals.
# Layer: core/market.
# Details: Exposes the market analyzer and the shared recency helper.

from .analyzer import MarketContextAnalyzer, clamp, recency_score, utc_now

__all__ = ["MarketContextAnalyzer", "clamp", "recency_score", "utc_now"]
