"""Collect birth, death and marriage anniversaries falling on a given day."""

from datetime import date, timedelta

from .constants import UNKNOWN_SPOUSE
from .dates import date_key, parse_exact_date
from .helpers import iter_persons, unique_in_order
from .models import ExactDate, Highlights, Person


def person_event_sentences(person: Person) -> list[tuple[ExactDate, str]]:
    """Describe each exactly dated life event of a person.

    Returns (date, sentence) pairs for the birth, the death and then every
    marriage in record order. Events without an exact date are left out.
    """
    name = person.display_name()
    events: list[tuple[ExactDate, str]] = []

    birth = parse_exact_date(person.birth_date)
    if birth:
        events.append((birth, f"{name} was born in {birth.year}."))

    death = parse_exact_date(person.death_date)
    if death:
        events.append((death, f"{name} died in {death.year}."))

    for marriage in person.marriages:
        married = parse_exact_date(marriage.marriage_date)
        if not married:
            continue
        spouse = marriage.spouse_name or UNKNOWN_SPOUSE
        events.append((married, f"{name} married {spouse} in {married.year}."))

    return events


def collect_highlights(dataset, reference_today: date) -> Highlights:
    """Bucket the dataset's anniversaries into today and tomorrow.

    Args:
        dataset: Decoded family-data document ({"generations": [...]})
        reference_today: The caller's local calendar date

    Returns:
        Highlights with de-duplicated sentences in dataset order
    """
    tomorrow = reference_today + timedelta(days=1)
    today_key = date_key(reference_today)
    tomorrow_key = date_key(tomorrow)

    today_sentences: list[str] = []
    tomorrow_sentences: list[str] = []

    for person in iter_persons(dataset):
        for event_date, sentence in person_event_sentences(person):
            # Both buckets are checked independently
            if event_date.key == today_key:
                today_sentences.append(sentence)
            if event_date.key == tomorrow_key:
                tomorrow_sentences.append(sentence)

    return Highlights(
        reference_date=reference_today,
        today=unique_in_order(today_sentences),
        tomorrow=unique_in_order(tomorrow_sentences),
    )
