"""Unit tests for the batch build facade."""

import pytest

from little_search.config import Settings
from little_search.engine import SearchEngine
from little_search.search.index import IndexFrozenError
from little_search.search.models import Occurrence
from little_search.sources import DocumentNotFoundError, InMemoryDocumentSource


class TestBuildFromFiles:
    def test_two_document_scenario(self, corpus_dir):
        engine = SearchEngine.build_from_files(
            corpus_dir / "docs.txt", corpus_dir / "noisewords.txt", docs_root=corpus_dir
        )

        assert engine.index.frozen
        assert engine.index.postings("banana") == (Occurrence("D2", 2), Occurrence("D1", 1))
        assert engine.top5_search("banana", "cherry") == ["D2", "D1"]
        assert engine.top5_search("grape", "mango") == []

    def test_story_corpus(self, story_dir):
        engine = SearchEngine.build_from_files(
            story_dir / "docs.txt", story_dir / "noisewords.txt", docs_root=story_dir
        )

        assert [str(o) for o in engine.index.postings("deer")] == [
            "(deer.txt,5)",
            "(train.txt,2)",
            "(forest.txt,1)",
        ]
        assert [str(o) for o in engine.index.postings("train")] == [
            "(train.txt,3)",
            "(station.txt,2)",
            "(deer.txt,1)",
        ]
        assert engine.top5_search("deer", "train") == ["deer.txt", "train.txt", "station.txt", "forest.txt"]
        assert engine.top5_search("TRAIN", "forest") == ["train.txt", "station.txt", "forest.txt", "deer.txt"]
        assert engine.top5_search("the", "quiet") == []
        assert "the" not in engine.index

    def test_missing_document_aborts_build(self, corpus_dir):
        (corpus_dir / "docs.txt").write_text("D1\nmissing\nD2\n", encoding="utf-8")

        with pytest.raises(DocumentNotFoundError, match="missing"):
            SearchEngine.build_from_files(corpus_dir / "docs.txt", corpus_dir / "noisewords.txt", docs_root=corpus_dir)

    def test_missing_noise_words_file(self, corpus_dir):
        with pytest.raises(DocumentNotFoundError):
            SearchEngine.build_from_files(corpus_dir / "docs.txt", corpus_dir / "nope.txt", docs_root=corpus_dir)

    def test_from_settings_resolves_relative_lists(self, corpus_dir):
        settings = Settings(docs_root=corpus_dir)

        engine = SearchEngine.from_settings(settings)

        assert engine.top5_search("apple", "cherry") == ["D1", "D2"]


class TestMakeIndex:
    def test_repeated_document_is_indexed_once(self):
        engine = SearchEngine(source=InMemoryDocumentSource({"a": "kiwi kiwi", "b": "kiwi"}))

        engine.make_index(["a", "b", "a"])

        assert engine.index.postings("kiwi") == (Occurrence("a", 2), Occurrence("b", 1))

    def test_second_build_is_rejected(self):
        engine = SearchEngine(source=InMemoryDocumentSource({"a": "kiwi"}))
        engine.make_index(["a"])

        with pytest.raises(IndexFrozenError):
            engine.make_index(["a"])

    def test_noise_words_apply_to_scanning(self):
        engine = SearchEngine(["Of"], InMemoryDocumentSource({"a": "state of the art"}))

        engine.make_index(["a"])

        assert set(engine.index.keywords()) == {"state", "the", "art"}
        assert engine.stopwords == frozenset({"of"})


    def test_failed_build_publishes_nothing(self):
        source = InMemoryDocumentSource({"a": "kiwi", "b": "kiwi kiwi"})
        engine = SearchEngine(source=source)

        with pytest.raises(DocumentNotFoundError):
            engine.make_index(["a", "missing", "b"])

        assert not engine.index.frozen
        assert len(engine.index) == 0
        assert engine.top5_search("kiwi", "apple") == []

    def test_build_can_run_again_after_failure(self):
        source = InMemoryDocumentSource({"a": "kiwi", "b": "kiwi kiwi"})
        engine = SearchEngine(source=source)
        with pytest.raises(DocumentNotFoundError):
            engine.make_index(["a", "missing", "b"])

        source.documents["missing"] = "pear"
        engine.make_index(["a", "missing", "b"])

        assert engine.index.frozen
        assert engine.top5_search("kiwi", "pear") == ["b", "a", "missing"]

    def test_nested_build_is_rejected(self):
        engine = SearchEngine(source=InMemoryDocumentSource({"a": "kiwi"}))

        def documents():
            yield "a"
            engine.make_index(["a"])

        with pytest.raises(RuntimeError, match="in progress"):
            engine.make_index(documents())
        assert not engine.index.frozen


class TestDelegates:
    def test_get_keyword(self):
        engine = SearchEngine(["and"])

        assert engine.get_keyword("Hello!") == "hello"
        assert engine.get_keyword("AND") is None
        assert engine.get_keyword(None) is None

    def test_load_and_merge_keywords(self):
        engine = SearchEngine(source=InMemoryDocumentSource({"d": "sun sun moon"}))

        table = engine.load_keywords("d")
        engine.merge_keywords(table)

        assert table == {"sun": Occurrence("d", 2), "moon": Occurrence("d", 1)}
        assert engine.index.postings("sun") == (Occurrence("d", 2),)

    def test_insert_last_occurrence(self):
        postings = [Occurrence("a", 9), Occurrence("b", 7), Occurrence("c", 7), Occurrence("d", 3), Occurrence("e", 7)]

        assert SearchEngine.insert_last_occurrence(postings) == [1]
        assert [o.document for o in postings] == ["a", "b", "e", "c", "d"]
