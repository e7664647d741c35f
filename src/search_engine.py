import logging
from typing import Callable, Iterable

from tqdm import tqdm

from class_definitions import (
    BuildResult,
    Index,
    InvalidInput,
    Occurrence,
    PoolEntry,
    PostingList,
    SourceNotFound,
    insert_last_occurrence,
)
from tokenization_utils import load_noise_words, load_word_list, normalize, read_tokens

logger = logging.getLogger(__name__)

TOP_K = 5


class SearchEngine:
    """Keyword index over a set of documents, answering "kw1 OR kw2" queries."""

    def __init__(
        self,
        noise_words: Iterable[str] = (),
        token_source: Callable[[str], Iterable[str]] = read_tokens,
        top_k: int = TOP_K,
    ) -> None:
        self.noise_words: frozenset[str] = frozenset(w.lower() for w in noise_words)
        self.token_source = token_source
        self.top_k = top_k
        self.index = Index()

    def get_keyword(self, token: str) -> str | None:
        return normalize(token, self.noise_words)

    def load_keywords(self, document: str) -> dict[str, Occurrence]:
        """Counts the keywords of one document."""
        if document is None:
            raise InvalidInput("document name is missing")
        keywords: dict[str, Occurrence] = {}
        try:
            for token in self.token_source(document):
                word = self.get_keyword(token)
                if word is None:
                    continue
                if word in keywords:
                    keywords[word].frequency += 1
                else:
                    keywords[word] = Occurrence(document, 1)
        except OSError as e:
            raise SourceNotFound(document, "file not found on disk") from e
        logger.debug(f"{document}: {len(keywords)} keywords")
        return keywords

    def merge_keywords(self, keywords: dict[str, Occurrence]):
        for word, occurrence in keywords.items():
            midpoints = self.index.add(word, occurrence)
            if midpoints is not None:
                logger.debug(f"{word}: inserted {occurrence} after probing {midpoints}")

    def insert_last_occurrence(self, posting_list: PostingList | list[Occurrence]) -> list[int] | None:
        if isinstance(posting_list, PostingList):
            return posting_list.insert_last()
        return insert_last_occurrence(posting_list)

    def build_index(
        self,
        documents: Iterable[str],
        noise_words: Iterable[str] | None = None,
        progress: bool = False,
    ) -> BuildResult:
        """Indexes the documents in the order given; a missing source is returned in the result."""
        if noise_words is not None:
            self.noise_words = frozenset(w.lower() for w in noise_words)
        self.index = Index()
        indexed = 0
        for document in tqdm(documents, disable=not progress, unit="doc"):
            try:
                keywords = self.load_keywords(document)
            except SourceNotFound as e:
                logger.error(f"indexing aborted after {indexed} documents: {e}")
                return BuildResult(indexed, e)
            self.merge_keywords(keywords)
            indexed += 1
        logger.info(f"indexed {indexed} documents, {len(self.index)} keywords")
        return BuildResult(indexed)

    def make_index(self, docs_file: str, noise_words_file: str, progress: bool = False) -> BuildResult:
        try:
            noise_words = load_noise_words(noise_words_file)
            documents = load_word_list(docs_file)
        except SourceNotFound as e:
            logger.error(f"cannot load index inputs: {e}")
            return BuildResult(0, e)
        return self.build_index(documents, noise_words, progress=progress)

    def top_k_search(self, kw1: str | None, kw2: str | None, k: int | None = None) -> list[str] | None:
        """Documents containing kw1 or kw2, highest frequency first, or None when neither is indexed."""
        if k is None:
            k = self.top_k
        kw1 = kw1.lower() if kw1 is not None else None
        kw2 = kw2.lower() if kw2 is not None else None
        list1, list2 = self.index.get(kw1), self.index.get(kw2)

        if list1 is None and list2 is None:
            logger.debug(f"neither {kw1!r} nor {kw2!r} is indexed")
            return None
        if list2 is None or list1 is None:
            single = list1 if list1 is not None else list2
            results = single.documents()[:k]
            logger.debug(f"only one keyword of {kw1!r}, {kw2!r} is indexed: {results}")
            return results

        pool = [PoolEntry(o, "kw1") for o in list1] + [PoolEntry(o, "kw2") for o in list2]
        results: list[str] = []
        while len(results) < k and pool:
            best = None
            for i, entry in enumerate(pool):
                if entry.document in results:
                    continue
                if (
                    best is None
                    or entry.frequency > pool[best].frequency
                    or (entry.frequency == pool[best].frequency and entry.source == "kw1")
                ):
                    best = i
            if best is None:
                break
            results.append(pool.pop(best).document)
        logger.debug(f"{kw1!r} or {kw2!r}: {results}")
        return results

    def search(self, kw1: str | None, kw2: str | None) -> list[str] | None:
        return self.top_k_search(kw1, kw2, TOP_K)
