import re
from typing import Iterable, Iterator

from class_definitions import SourceNotFound

PUNCTUATION = ".,?:;!"

token_pattern = re.compile(r"\S+")


def normalize(token: str, noise_words: Iterable[str] = frozenset()) -> str | None:
    """Returns the keyword for a raw token, or None when it isn't one."""
    word = token.lower().rstrip(PUNCTUATION)
    if not word or word in noise_words:
        return None
    if not word.isalpha():
        return None
    return word


def tokenize(text: str) -> list[str]:
    return token_pattern.findall(text)


def read_tokens(path: str) -> Iterator[str]:
    try:
        f = open(path, "r", encoding="utf-8", errors="replace")
    except OSError as e:
        raise SourceNotFound(path, "file not found on disk") from e
    with f:
        for line in f:
            yield from tokenize(line)


def load_word_list(path: str) -> list[str]:
    # noise word and document list files: one entry per whitespace-delimited token
    return list(read_tokens(path))


def load_noise_words(path: str) -> frozenset[str]:
    return frozenset(w.lower() for w in load_word_list(path))
