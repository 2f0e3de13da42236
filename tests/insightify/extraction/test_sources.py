"""Tests for citation source normalization and grounding chunk access."""

from types import SimpleNamespace

from insightify.extraction.models import Citation
from insightify.extraction.sources import grounding_candidates, normalize_sources


class TestNormalizeSources:
    """Tests for normalize_sources()."""

    def test_drops_candidate_without_uri(self):
        result = normalize_sources([{"title": "A", "uri": "http://a"}, {"title": None}])
        assert result == [Citation(title="A", uri="http://a")]

    def test_drops_candidates_with_absent_keys(self):
        candidates = [{}, {"uri": "http://b"}, {"title": "C"}, {"title": "A", "uri": "http://a"}]
        assert normalize_sources(candidates) == [Citation(title="A", uri="http://a")]

    def test_drops_none_and_empty_fields(self, sample_sources):
        result = normalize_sources(sample_sources)
        assert [c.title for c in result] == ["Acme newsroom", "Tech Daily"]

    def test_whitespace_only_counts_as_empty(self):
        assert normalize_sources([{"title": "   ", "uri": "http://a"}]) == []

    def test_non_string_fields_dropped(self):
        assert normalize_sources([{"title": 42, "uri": "http://a"}]) == []

    def test_duplicates_preserved(self):
        source = {"title": "A", "uri": "http://a"}
        assert len(normalize_sources([source, source])) == 2

    def test_values_not_repaired(self):
        result = normalize_sources([{"title": " A ", "uri": "http://a"}])
        assert result[0].title == " A "

    def test_attribute_objects(self):
        web = SimpleNamespace(title="SDK title", uri="https://sdk.example.com")
        assert normalize_sources([web]) == [Citation("SDK title", "https://sdk.example.com")]

    def test_none_collection(self):
        assert normalize_sources(None) == []


class TestGroundingCandidates:
    """Tests for grounding_candidates()."""

    def test_yields_web_entries_and_none_for_other_chunks(self, sample_response):
        chunks = list(grounding_candidates(sample_response))
        assert len(chunks) == 3
        assert chunks[0]["title"] == "Acme newsroom"
        assert chunks[1] is None

    def test_sdk_style_snake_case_objects(self):
        web = SimpleNamespace(title="T", uri="https://t.example.com")
        response = SimpleNamespace(
            candidates=[
                SimpleNamespace(
                    grounding_metadata=SimpleNamespace(
                        grounding_chunks=[SimpleNamespace(web=web), SimpleNamespace(web=None)]
                    )
                )
            ]
        )
        assert list(grounding_candidates(response)) == [web, None]

    def test_missing_metadata(self):
        assert list(grounding_candidates({"candidates": [{}]})) == []

    def test_no_candidates(self):
        assert list(grounding_candidates({"text": "x"})) == []
        assert list(grounding_candidates(None)) == []
