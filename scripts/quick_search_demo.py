# Path: scripts/quick_search_demo.py
# Purpose: Simple CLI to run a semantic search against a JSON artwork catalog.
# Layer: scripts.
# Details: Loads the catalog into the in-memory store and prints ranked results, suggestions, or trending terms.

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure project root is on sys.path when running as a script.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from artsearch.config import AppSettings, configure_logging
from artsearch.core.search.pipeline import SearchPipeline
from artsearch.core.stores.memory_store import InMemoryArtworkStore


def main() -> None:
    """Execute a quick search from the command line."""

    parser = argparse.ArgumentParser(description="Run a quick semantic search against an artwork catalog")
    parser.add_argument("--catalog", type=Path, help="JSON catalog file (defaults to ARTSEARCH_CATALOG_PATH)")
    parser.add_argument("--text", type=str, help="Text query to search for")
    parser.add_argument("--image", type=str, help="Image path or URL to search with")
    parser.add_argument("--mood", type=str, help="Search by mood instead of free text")
    parser.add_argument("--limit", type=int, default=10, help="Number of results to return")
    parser.add_argument("--suggest", action="store_true", help="Print query suggestions instead of results")
    parser.add_argument("--trending", action="store_true", help="Print trending search terms")
    args = parser.parse_args()

    settings = AppSettings.from_env()
    configure_logging(settings.log_level)
    catalog = args.catalog or settings.catalog_path
    if catalog is None:
        parser.error("a catalog is required (--catalog or ARTSEARCH_CATALOG_PATH)")

    store = InMemoryArtworkStore.from_json(str(catalog))
    pipeline = SearchPipeline(store, settings=settings.search, visual_settings=settings.visual)
    try:
        if args.trending:
            for term in pipeline.get_trending_searches(limit=args.limit):
                print(term)
            return
        if args.suggest:
            for suggestion in pipeline.get_search_suggestions(args.text or "", limit=args.limit):
                print(suggestion)
            return

        if args.image:
            results = pipeline.search_by_image(args.image)[: args.limit]
        elif args.mood:
            results = pipeline.search_by_mood(args.mood, limit=args.limit)
        else:
            results = pipeline.search(args.text or "", limit=args.limit)

        for result in results:
            context = result.market_context
            print(
                f"id={result.id} score={result.relevance_score:.3f} title={result.title!r} "
                f"artist={result.artist_name!r} demand={context.demand_level.value} "
                f"price={context.price_competitiveness.value} matches={result.semantic_matches}"
            )
    finally:
        pipeline.close()


if __name__ == "__main__":
    main()
