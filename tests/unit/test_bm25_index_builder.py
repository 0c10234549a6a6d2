"""
Unit tests for BM25 index construction.
"""

import dataclasses
import math

import pytest
from skill_injection.bm25.index_builder import BM25Index, build_bm25_index

pytestmark = pytest.mark.unit


class TestBuildIndex:
    """Test index building and precomputed statistics"""

    def test_document_count(self, sample_index):
        """Test one document per skill"""
        assert sample_index.total_documents == 3
        assert len(sample_index.documents) == sample_index.total_documents

    def test_skill_name_included_in_document(self):
        """Test the skill name is tokenized with the body"""
        index = build_bm25_index({"typescript-tdd": "TypeScript development"})
        assert index.documents[0] == ("typescript-tdd", "typescript", "development")

    def test_names_follow_mapping_order(self, sample_index, sample_names):
        """Test document positions line up with mapping iteration order"""
        assert list(sample_index.names) == sample_names
        assert sample_index.documents[1][0] == "react-hooks"

    def test_average_document_length(self):
        """Test mean token count (skill name counts as a token)"""
        index = build_bm25_index({
            "short": "Short content",
            "long": "This is a much longer content with many words for testing",
        })
        # 3 tokens and 12 tokens
        assert index.average_document_length == pytest.approx(7.5)

    def test_idf_cache_covers_exactly_corpus_terms(self, sample_index):
        """Test IDF cache has one entry per distinct token and nothing else"""
        all_terms = {term for doc in sample_index.documents for term in doc}
        assert set(sample_index.idf_cache) == all_terms

    def test_idf_cache_values(self):
        """Test cached IDF matches the formula"""
        index = build_bm25_index({
            "skill-a": "common unique",
            "skill-b": "common rare",
        })
        assert index.idf_cache["common"] == pytest.approx(math.log(0.5 / 2.5 + 1))
        assert index.idf_cache["unique"] == pytest.approx(math.log(2))
        assert index.idf_cache["unique"] > index.idf_cache["common"]

    def test_identical_content(self):
        """Test shared terms get the low all-documents IDF"""
        index = build_bm25_index({"skill-a": "Same content", "skill-b": "Same content"})
        assert index.total_documents == 2
        assert index.idf_cache["content"] < math.log(2)

    def test_empty_corpus(self):
        """Test empty corpus yields zero documents and 0.0 average length (not NaN)"""
        index = build_bm25_index({})
        assert index.total_documents == 0
        assert index.documents == ()
        assert index.average_document_length == 0.0
        assert not math.isnan(index.average_document_length)
        assert len(index.idf_cache) == 0

    def test_index_is_immutable(self, sample_index):
        """Test the index and its IDF cache cannot be modified"""
        with pytest.raises(dataclasses.FrozenInstanceError):
            sample_index.total_documents = 10
        with pytest.raises(TypeError):
            sample_index.idf_cache["new-term"] = 1.0
        assert isinstance(sample_index.documents, tuple)
        assert all(isinstance(doc, tuple) for doc in sample_index.documents)

    def test_rebuild_is_independent(self, sample_corpus):
        """Test building a new index does not touch an existing one"""
        first = build_bm25_index(sample_corpus)
        sample_corpus["bun-runtime"] = "Bun runtime"
        second = build_bm25_index(sample_corpus)
        assert first.total_documents == 3
        assert second.total_documents == 4
        assert "bun" not in first.idf_cache
        assert "bun" in second.idf_cache

    def test_returns_bm25_index(self, sample_index):
        """Test return type"""
        assert isinstance(sample_index, BM25Index)
