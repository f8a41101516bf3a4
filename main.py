"""
newswatch main entry point.
Runs the three headline analyzers once over a JSON file of news items.
"""

import argparse
import json
import sys
from pathlib import Path

from loguru import logger

from newswatch.analysis import (
    CorrelationEngine,
    EntityRanker,
    NarrativeTracker,
    get_detector_config,
)
from newswatch.errors import AnalysisError
from newswatch.settings import global_settings


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Analyze a batch of news headlines")
    parser.add_argument("items", type=Path, help="JSON file with a list of news items")
    parser.add_argument(
        "--json", action="store_true", help="Print full results as JSON to stdout"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=global_settings.log_level)

    try:
        config = get_detector_config(global_settings)
        news_items = json.loads(args.items.read_text(encoding="utf-8"))
    except AnalysisError as e:
        logger.error(f"Failed to load detectors: {e}")
        return 1
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to read news items from {args.items}: {e}")
        return 1

    if not isinstance(news_items, list):
        logger.error(f"Expected a JSON list of news items in {args.items}")
        return 1

    correlation = CorrelationEngine(config=config)
    narratives = NarrativeTracker(config=config)
    entities = EntityRanker(config=config)

    correlation_results = correlation.analyze(news_items)
    narrative_results = narratives.analyze(news_items)
    entity_results = entities.analyze(news_items)

    if args.json:
        output = {
            "correlation": (
                correlation_results.model_dump(mode="json")
                if correlation_results is not None
                else None
            ),
            "narratives": (
                narrative_results.model_dump(mode="json")
                if narrative_results is not None
                else None
            ),
            "main_character": entity_results.model_dump(mode="json"),
        }
        print(json.dumps(output, indent=2, ensure_ascii=False))
        return 0

    logger.info(f"Correlation: {correlation.get_summary(correlation_results).status}")
    logger.info(f"Narratives: {narratives.get_summary(narrative_results).status}")
    logger.info(f"Main character: {entities.get_summary(entity_results).status}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
