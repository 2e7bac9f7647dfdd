"""Unit tests for the search engine core functionality."""

import pytest
from guideline_search.config.settings import Settings
from guideline_search.core.engine import SearchEngine, search_records
from guideline_search.models.record import Record
from guideline_search.models.response import SearchResponse


class TestSearchEngine:
    """Test cases for the SearchEngine class."""

    @pytest.fixture
    def engine(self):
        """Create a search engine instance for testing."""
        return SearchEngine()

    @pytest.fixture
    def sample_records(self):
        """Sample guideline records for testing."""
        return [
            Record(
                id="A1",
                category="cardiac",
                keywords=["chest pain", "angina"],
                instruction="monitor vitals",
                policy="P1",
            ),
            Record(
                id="B2",
                category="respiratory",
                keywords=["asthma", "wheeze", "shortness of breath"],
                instruction="Monitor peak flow every 4 hours.",
                policy="P2",
            ),
            Record(
                id="C3",
                category="sepsis",
                keywords=["fever", "infection"],
                instruction="Start fluids and monitor lactate.",
                policy="P3",
            ),
        ]

    def test_engine_initialization(self, engine):
        """Test search engine initialization."""
        assert engine.fuzzy_threshold == 2
        assert engine.matcher.fuzzy_threshold == 2
        assert "the" in engine.tokenizer.stop_words

    def test_from_settings(self):
        """Test building an engine from settings."""
        settings = Settings(fuzzy_threshold=1, stop_words=["pain"])
        engine = SearchEngine.from_settings(settings)

        assert engine.fuzzy_threshold == 1
        assert engine.matcher.fuzzy_threshold == 1
        assert engine.tokenizer.stop_words == frozenset({"pain"})

    def test_exact_search(self, engine, sample_records):
        """Test a keyword substring query."""
        response = engine.search(sample_records, "chest")

        assert isinstance(response, SearchResponse)
        assert response.query == "chest"
        assert response.terms == ["chest"]
        assert response.total_results == 1
        assert response.results[0].id == "A1"
        assert response.execution_time_ms >= 0.0

    def test_fuzzy_search(self, engine, sample_records):
        """Test a misspelt query still finds the record."""
        response = engine.search(sample_records, "angna")
        assert [r.id for r in response.results] == ["A1"]

    def test_stop_words_ignored(self, engine, sample_records):
        """Test stop-words do not contribute to matching."""
        response = engine.search(sample_records, "how often should I check the lactate")

        assert response.terms == ["lactate"]
        assert [r.id for r in response.results] == ["C3"]

    def test_ranking(self, engine, sample_records):
        """Test records matching more terms rank higher."""
        response = engine.search(sample_records, "monitor fluids")
        assert [r.id for r in response.results] == ["C3", "A1", "B2"]

    def test_tie_broken_by_id(self, engine, sample_records):
        """Test equal scores fall back to id order."""
        response = engine.search(list(reversed(sample_records)), "monitor")
        assert [r.id for r in response.results] == ["A1", "B2", "C3"]

    def test_case_insensitive_search(self, engine, sample_records):
        """Test queries are case-insensitive."""
        for query in ["CHEST", "Chest", "  chest  "]:
            response = engine.search(sample_records, query)
            assert [r.id for r in response.results] == ["A1"]

    def test_empty_query(self, engine, sample_records):
        """Test blank queries produce no results."""
        for query in ["", "   ", None]:
            response = engine.search(sample_records, query)
            assert response.terms == []
            assert response.results == []
            assert response.total_results == 0

    def test_no_match(self, engine, sample_records):
        """Test a query with no matches returns an empty list."""
        response = engine.search(sample_records, "orthopaedic")

        assert response.query == "orthopaedic"
        assert response.terms == ["orthopaedic"]
        assert response.results == []

    def test_short_terms_hit_empty_fuzzy_fields(self, engine):
        """Test short queries reach records with an empty category or keyword."""
        records = [
            Record(id="Z1", category="", keywords=["fluids"], instruction="start fluids"),
            Record(id="Z2", category="cardiac", keywords=[""]),
        ]

        assert [r.id for r in engine.search(records[:1], "iv").results] == ["Z1"]
        assert [r.id for r in engine.search(records[1:], "ox").results] == ["Z2"]

    def test_empty_collection(self, engine):
        """Test searching an empty collection."""
        assert engine.search([], "chest").results == []

    def test_idempotent(self, engine, sample_records):
        """Test the same query gives the same ordered results."""
        first = engine.search(sample_records, "monitor angna")
        second = engine.search(sample_records, "monitor angna")
        assert [r.id for r in first.results] == [r.id for r in second.results]

    def test_results_are_shared_references(self, engine, sample_records):
        """Test results refer to the input records."""
        response = engine.search(sample_records, "chest")
        assert response.results[0] is sample_records[0]

    def test_search_records_helper(self, sample_records):
        """Test the functional entry point."""
        assert [r.id for r in search_records(sample_records, "wheeze")] == ["B2"]
