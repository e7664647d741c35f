import sys
import time
import logging
import argparse
from pprint import pprint

from search_engine import TOP_K, SearchEngine


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ir-system", description="index text documents and search them for two keywords"
    )
    parser.add_argument(
        "--docs", help="file listing the documents to index, one per line", required=True
    )
    parser.add_argument(
        "--noise-words", help="file listing words to leave out of the index", required=True
    )
    parser.add_argument(
        "-q",
        "--query",
        nargs=2,
        metavar=("KW1", "KW2"),
        help="search for documents containing KW1 or KW2",
        required=False,
    )
    parser.add_argument(
        "--n-results", type=int, help="number of top results to show", required=False
    )
    parser.add_argument(
        "--keyword",
        action="append",
        help="show the keyword a token normalizes to (repeatable)",
        required=False,
    )
    parser.add_argument(
        "--progress", action="store_true", help="show indexing progress", required=False
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log debug output", required=False
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.n_results is not None and args.n_results < 1:
        sys.stdout.write("invalid options\n")
        return 1

    engine = SearchEngine(top_k=args.n_results or TOP_K)
    start = time.time()
    result = engine.make_index(args.docs, args.noise_words, progress=args.progress)
    if not result.ok:
        print(f"indexing failed: {result.error}")
        return 1
    print(f"indexing {result.documents_indexed} documents took {time.time() - start}s")

    for token in args.keyword or []:
        print(f"{token!r} -> {engine.get_keyword(token)!r}")

    if args.query:
        kw1, kw2 = args.query
        answer = engine.top_k_search(kw1, kw2)
        if answer is None:
            print("no matching documents")
        else:
            pprint(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())
