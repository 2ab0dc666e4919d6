"""Bundled fact file loading and validation."""

import json
from pathlib import Path

import structlog
from pydantic import ValidationError

from facts.models import Fact, validate_fact

logger = structlog.get_logger().bind(source="facts_loader")

BUNDLED_FACTS_PATH = Path(__file__).parent / "data" / "contrary_facts.json"


class FactsLoadError(Exception):
    """Fact file missing or not decodable as a list of facts."""


def load_facts_file(path: str | Path = BUNDLED_FACTS_PATH) -> list[Fact]:
    """Read a JSON array of facts and return the ones that pass validation.

    Entries that fail to decode or fail the content checks are dropped.

    Raises:
        FactsLoadError: file missing, not JSON, or not a JSON array.
    """
    path = Path(path)
    if not path.exists():
        raise FactsLoadError(f"Facts file not found: {path}")

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise FactsLoadError(f"Failed to decode facts file {path}: {e}") from e

    if not isinstance(raw, list):
        raise FactsLoadError(f"Facts file {path} must contain a JSON array")

    facts = []
    dropped = 0
    for entry in raw:
        try:
            fact = Fact.model_validate(entry)
        except ValidationError:
            dropped += 1
            continue
        if validate_fact(fact):
            facts.append(fact)
        else:
            dropped += 1

    if dropped:
        logger.warning("facts_dropped", path=str(path), dropped=dropped, kept=len(facts))
    logger.debug("facts_loaded", path=str(path), count=len(facts))
    return facts
