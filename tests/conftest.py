"""Shared fixtures: a small on-disk corpus and an engine built over it."""

import pytest

from search_engine import SearchEngine

NOISE_WORDS = "a\nthe\nis\nand\nof\n"

CORPUS = {
    "doc1.txt": "The green bike is green.\nGreen!\n",
    "doc2.txt": "A bike, a bike, and a green tree?\n",
    "doc3.txt": "Bike bike bike\nit's fast\n",
}


def pytest_collection_modifyitems(config, items):
    for item in items:
        item.add_marker(pytest.mark.unit)


@pytest.fixture
def corpus_dir(tmp_path, monkeypatch):
    """Writes the corpus, its document list and noise words, and chdirs into it."""

    for name, text in CORPUS.items():
        (tmp_path / name).write_text(text, encoding="utf-8")
    (tmp_path / "docs.txt").write_text("\n".join(CORPUS) + "\n", encoding="utf-8")
    (tmp_path / "noisewords.txt").write_text(NOISE_WORDS, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def engine(corpus_dir):
    engine = SearchEngine()
    result = engine.make_index("docs.txt", "noisewords.txt")
    assert result.ok
    return engine


def memory_engine(corpus: dict[str, str], noise_words=()) -> SearchEngine:
    """Engine over in-memory documents, built in the dict's order."""
    engine = SearchEngine(noise_words=noise_words, token_source=lambda doc: corpus[doc].split())
    result = engine.build_index(list(corpus))
    assert result.ok
    return engine


def postings(engine: SearchEngine) -> dict[str, list[tuple[str, int]]]:
    return {k: [(o.document, o.frequency) for o in v] for k, v in engine.index.items()}
