from typing import Iterable, Iterator


class SearchEngineError(Exception):
    pass


class SourceNotFound(SearchEngineError):
    def __init__(self, source: str | None, reason: str = "source not found") -> None:
        super().__init__(f"{reason}: {source}")
        self.source = source


class InvalidInput(SearchEngineError, ValueError):
    pass


class Occurrence:
    def __init__(self, document: str, frequency: int = 1) -> None:
        self.document = document
        self.frequency = frequency

    def __repr__(self) -> str:
        return f"({self.document},{self.frequency})"


def insert_last_occurrence(occurrences: list[Occurrence]) -> list[int] | None:
    """Binary-search insertion of the last occurrence; returns the probed midpoints, or None for lists of at most one element."""
    if len(occurrences) <= 1:
        return None
    target = occurrences[-1]
    midpoints: list[int] = []
    lo, hi = 0, len(occurrences) - 2
    position = None
    while lo <= hi:
        mid = (lo + hi) // 2
        midpoints.append(mid)
        candidate = occurrences[mid].frequency
        if candidate == target.frequency:
            position = mid + 1
            break
        if target.frequency < candidate:
            lo = mid + 1
        else:
            hi = mid - 1
    if position is None:
        position = lo
    occurrences.insert(position, occurrences.pop())
    return midpoints


class PostingList:
    def __init__(self, occurrences: Iterable[Occurrence] | None = None) -> None:
        self.occurrences: list[Occurrence] = list(occurrences or [])

    def append(self, occurrence: Occurrence):
        self.occurrences.append(occurrence)

    def insert_last(self) -> list[int] | None:
        return insert_last_occurrence(self.occurrences)

    def add(self, occurrence: Occurrence) -> list[int] | None:
        self.append(occurrence)
        return self.insert_last()

    def documents(self) -> list[str]:
        return [o.document for o in self.occurrences]

    def frequencies(self) -> list[int]:
        return [o.frequency for o in self.occurrences]

    def is_sorted(self) -> bool:
        freqs = self.frequencies()
        return all(a >= b for a, b in zip(freqs, freqs[1:]))

    def __len__(self) -> int:
        return len(self.occurrences)

    def __iter__(self) -> Iterator[Occurrence]:
        return iter(self.occurrences)

    def __getitem__(self, i: int) -> Occurrence:
        return self.occurrences[i]

    def __repr__(self) -> str:
        return repr(self.occurrences)


class Index:
    def __init__(self) -> None:
        self._index: dict[str, PostingList] = dict()

    def add(self, k: str, o: Occurrence) -> list[int] | None:
        if k not in self._index:
            self._index[k] = PostingList([o])
            return None
        return self._index[k].add(o)

    def has(self, k: str | None):
        return k in self._index

    def get(self, k: str | None) -> PostingList | None:
        if k not in self._index:
            return None
        return self._index[k]

    def items(self):
        return self._index.items()

    def values(self):
        return self._index.values()

    def is_empty(self) -> bool:
        return not self._index

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return str(self.__dict__)


class PoolEntry:
    """An occurrence in the query merge pool, tagged with the keyword list it came from."""

    def __init__(self, occurrence: Occurrence, source: str) -> None:
        self.occurrence = occurrence
        self.source = source

    @property
    def document(self) -> str:
        return self.occurrence.document

    @property
    def frequency(self) -> int:
        return self.occurrence.frequency

    def __repr__(self) -> str:
        return str(self.__dict__)


class BuildResult:
    def __init__(self, documents_indexed: int = 0, error: SourceNotFound | None = None) -> None:
        self.documents_indexed = documents_indexed
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    def __repr__(self) -> str:
        return str(self.__dict__)
