"""Tests for collecting today/tomorrow event sentences."""

from datetime import date

from family_highlights.events import collect_highlights, person_event_sentences
from family_highlights.models import ExactDate, Marriage, Person


def _dataset(*persons):
    return {"generations": [{"persons": list(persons)}]}


class TestPersonEventSentences:
    """Tests for the person_event_sentences function."""

    def test_birth_death_and_marriage(self):
        """Should describe each exactly dated event in order."""
        person = Person(
            first_name="Ada",
            last_name="Lovelace",
            birth_date="10 Dec 1815",
            death_date="27 Nov 1852",
            marriages=[Marriage(marriage_date="8 Jul 1835", spouse_name="William King")],
        )
        assert person_event_sentences(person) == [
            (ExactDate(12, 10, 1815), "Ada Lovelace was born in 1815."),
            (ExactDate(11, 27, 1852), "Ada Lovelace died in 1852."),
            (ExactDate(7, 8, 1835), "Ada Lovelace married William King in 1835."),
        ]

    def test_skips_inexact_dates(self):
        """Approximate and partial dates should produce no sentences."""
        person = Person(
            first_name="Robert",
            birth_date="circa 1850",
            death_date="May 1892",
            marriages=[Marriage(marriage_date="1870", spouse_name="Jane")],
        )
        assert person_event_sentences(person) == []

    def test_unknown_spouse(self):
        """Missing spouse names should read as Unknown."""
        person = Person(
            first_name="John",
            marriages=[
                Marriage(marriage_date="15 Feb 1850"),
                Marriage(marriage_date="1 Mar 1860", spouse_name=""),
            ],
        )
        sentences = [s for _, s in person_event_sentences(person)]
        assert sentences == ["John married Unknown in 1850.", "John married Unknown in 1860."]


class TestCollectHighlights:
    """Tests for the collect_highlights function."""

    def test_end_to_end_single_person(self, ada_dataset):
        """A birth on the reference day lands in today only."""
        result = collect_highlights(ada_dataset, date(2024, 2, 14))
        assert result.today == ["Ada Lovelace was born in 1825."]
        assert result.tomorrow == []

    def test_year_is_ignored(self, ada_dataset):
        """Matching should work for any reference year."""
        for year in (1900, 2000, 2023, 2099):
            result = collect_highlights(ada_dataset, date(year, 2, 14))
            assert result.today == ["Ada Lovelace was born in 1825."]

    def test_tomorrow_bucket(self, ada_dataset):
        """A birth on the following day lands in tomorrow only."""
        result = collect_highlights(ada_dataset, date(2024, 2, 13))
        assert result.today == []
        assert result.tomorrow == ["Ada Lovelace was born in 1825."]

    def test_no_match(self, ada_dataset):
        result = collect_highlights(ada_dataset, date(2024, 6, 1))
        assert result.is_empty

    def test_year_boundary(self):
        """Dec 31 reference should match Jan 1 events as tomorrow."""
        dataset = _dataset(
            {"firstName": "Eve", "birth": {"date": "31 Dec 1899"}},
            {"firstName": "Newt", "birth": {"date": "1 Jan 1900"}},
        )
        result = collect_highlights(dataset, date(2023, 12, 31))
        assert result.today == ["Eve was born in 1899."]
        assert result.tomorrow == ["Newt was born in 1900."]
        assert result.next_date == date(2024, 1, 1)

    def test_month_boundary(self):
        """Tomorrow should roll over into the next month."""
        dataset = _dataset({"firstName": "May", "birth": {"date": "1 May 1901"}})
        result = collect_highlights(dataset, date(2024, 4, 30))
        assert result.tomorrow == ["May was born in 1901."]

    def test_leap_day_reference(self):
        """Feb 29 reference should look ahead to Mar 1."""
        dataset = _dataset(
            {"firstName": "Leap", "birth": {"date": "29 Feb 1904"}},
            {"firstName": "March", "birth": {"date": "1 Mar 1905"}},
        )
        result = collect_highlights(dataset, date(2024, 2, 29))
        assert result.today == ["Leap was born in 1904."]
        assert result.tomorrow == ["March was born in 1905."]

    def test_impossible_dates_still_match_their_key(self):
        """Feb 30 parses, but no real calendar day ever produces its key."""
        dataset = _dataset({"firstName": "Odd", "birth": {"date": "30 Feb 1900"}})
        result = collect_highlights(dataset, date(2024, 2, 29))
        assert result.today == []
        assert result.tomorrow == []

    def test_duplicate_sentences_collapsed(self):
        """Identical sentences from different persons appear once."""
        dataset = _dataset(
            {"id": "A", "firstName": "John", "lastName": "Smith", "birth": {"date": "14 Feb 1825"}},
            {"id": "B", "firstName": "John", "lastName": "Smith", "birth": {"date": "14 Feb 1825"}},
        )
        result = collect_highlights(dataset, date(2024, 2, 14))
        assert result.today == ["John Smith was born in 1825."]

    def test_dedup_preserves_first_occurrence_order(self):
        dataset = _dataset(
            {"firstName": "B", "birth": {"date": "14 Feb 1800"}},
            {"firstName": "A", "birth": {"date": "14 Feb 1800"}},
            {"firstName": "B", "birth": {"date": "14 Feb 1800"}},
        )
        result = collect_highlights(dataset, date(2024, 2, 14))
        assert result.today == ["B was born in 1800.", "A was born in 1800."]

    def test_events_in_dataset_order(self):
        """Sentences follow generation, person, then event order."""
        dataset = {
            "generations": [
                {"persons": [{"firstName": "Old", "death": {"date": "14 Feb 1900"}}]},
                {
                    "persons": [
                        {
                            "firstName": "Young",
                            "birth": {"date": "14 Feb 1880"},
                            "marriages": [{"marriageDate": "14 Feb 1905", "spouseName": "Kim"}],
                        }
                    ]
                },
            ]
        }
        result = collect_highlights(dataset, date(2024, 2, 14))
        assert result.today == [
            "Old died in 1900.",
            "Young was born in 1880.",
            "Young married Kim in 1905.",
        ]

    def test_name_fallbacks(self):
        """Names fall back to id, then to Unknown."""
        dataset = _dataset(
            {"id": "P42", "birth": {"date": "14 Feb 1825"}},
            {"birth": {"date": "14 Feb 1826"}},
        )
        result = collect_highlights(dataset, date(2024, 2, 14))
        assert result.today == ["P42 was born in 1825.", "Unknown was born in 1826."]

    def test_sample_data_valentines_day(self, sample_dataset, valentines_day):
        """Sample data should match John Smith today and two events tomorrow."""
        result = collect_highlights(sample_dataset, valentines_day)
        assert result.today == ["John Smith was born in 1825."]
        assert result.tomorrow == [
            "John Smith married Unknown in 1850.",
            "Mary Anne Smith was born in 1852.",
        ]

    def test_sample_data_new_years_eve(self, sample_dataset):
        result = collect_highlights(sample_dataset, date(2023, 12, 31))
        assert result.today == ["Unknown died in 1899."]
        assert result.tomorrow == ["P4 was born in 1900."]


class TestMalformedDatasets:
    """The collector treats malformed structure as empty, never raising."""

    def test_missing_generations(self):
        assert collect_highlights({}, date(2024, 2, 14)).is_empty

    def test_null_and_non_object_dataset(self):
        assert collect_highlights(None, date(2024, 2, 14)).is_empty
        assert collect_highlights([], date(2024, 2, 14)).is_empty
        assert collect_highlights("nonsense", date(2024, 2, 14)).is_empty

    def test_generations_wrong_type(self):
        assert collect_highlights({"generations": {"persons": []}}, date(2024, 2, 14)).is_empty

    def test_missing_and_null_persons(self):
        dataset = {"generations": [{}, {"persons": None}, None, {"persons": [None, 7]}]}
        assert collect_highlights(dataset, date(2024, 2, 14)).is_empty

    def test_missing_and_null_event_records(self):
        dataset = _dataset(
            {"firstName": "A", "birth": None, "death": "14 Feb 1900"},
            {"firstName": "B", "birth": {}, "marriages": [None, {}, {"marriageDate": None}]},
            {"firstName": "C", "marriages": "14 Feb 1900"},
        )
        assert collect_highlights(dataset, date(2024, 2, 14)).is_empty

    def test_null_marriage_entries_skipped(self):
        dataset = _dataset(
            {
                "firstName": "D",
                "marriages": [None, {"marriageDate": "14 Feb 1901", "spouseName": "E"}],
            }
        )
        result = collect_highlights(dataset, date(2024, 2, 14))
        assert result.today == ["D married E in 1901."]
