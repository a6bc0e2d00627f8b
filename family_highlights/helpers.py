"""Utility functions for walking family-tree datasets."""

import logging
from collections.abc import Iterable, Iterator

from .models import Person

logger = logging.getLogger(__name__)


def as_list(value) -> list:
    """Return value if it is a JSON array, otherwise an empty list."""
    return value if isinstance(value, list) else []


def iter_persons(dataset) -> Iterator[Person]:
    """Yield every person in the dataset, generation by generation.

    Missing or malformed levels (no generations, no persons, non-object
    entries) are skipped rather than treated as errors.
    """
    generations = dataset.get("generations") if isinstance(dataset, dict) else None
    if generations is None:
        logger.debug("Dataset has no generations")

    for generation in as_list(generations):
        if not isinstance(generation, dict):
            continue
        for raw_person in as_list(generation.get("persons")):
            if isinstance(raw_person, dict):
                yield Person.from_dict(raw_person)


def unique_in_order(items: Iterable[str]) -> list[str]:
    """Drop repeated strings, keeping the first occurrence of each."""
    return list(dict.fromkeys(items))
