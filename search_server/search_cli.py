"""
Interactive search console over an in-memory SearchServer.

Documents are loaded from a JSONL file, one object per line:
    {"id": 1, "text": "...", "status": "ACTUAL", "ratings": [1, 5, 7]}
status and ratings are optional (ACTUAL, no ratings).

Commands at the prompt:
    some words -minus       search ACTUAL documents
    :status BANNED words    search documents with another status
    :match 12 words         show which query words a document matches
    :count                  number of indexed documents
Empty line or Ctrl+D exits.

Usage:
    search-server --stop-words "и в на" --docs data/docs.jsonl
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Iterable, TextIO

from loguru import logger

from .config import get_settings
from .document import DocumentStatus, format_match
from .exceptions import InvalidArgument, SearchServerError
from .log_config import setup_logging
from .paginator import paginate
from .request_queue import RequestQueue
from .search_server import SearchServer


def parse_status(name: str) -> DocumentStatus:
    try:
        return DocumentStatus[name.upper()]
    except KeyError:
        raise InvalidArgument(f"unknown document status: {name!r}") from None


def load_documents(server: SearchServer, lines: Iterable[str]) -> int:
    """
    Add documents from JSONL lines. Malformed or rejected records are logged
    and skipped. Returns the number of documents added.
    """
    added = 0
    for line_no, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            obj = json.loads(line)
            server.add_document(
                int(obj["id"]),
                obj["text"],
                parse_status(obj.get("status", "ACTUAL")),
                [int(r) for r in obj.get("ratings", [])],
            )
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Skipping document on line {line_no}: {e}")
            continue
        added += 1
    return added


def run_command(line: str, server: SearchServer, requests: RequestQueue, page_size: int, out: TextIO) -> None:
    """Execute one console command. Search errors propagate to the caller."""
    if line == ":count":
        print(server.get_document_count(), file=out)
        return

    if line.startswith(":match "):
        _, doc_id, *words = line.split(" ")
        try:
            document_id = int(doc_id)
        except ValueError:
            raise InvalidArgument(f"invalid document id: {doc_id!r}") from None
        words_found, status = server.match_document(" ".join(words), document_id)
        print(format_match(words_found, status), file=out)
        return

    status = DocumentStatus.ACTUAL
    raw_query = line
    if line.startswith(":status "):
        _, name, *words = line.split(" ")
        status = parse_status(name)
        raw_query = " ".join(words)

    documents = requests.add_find_request(raw_query, status)
    if not documents:
        print("No documents matched the query.", file=out)
        return
    for page_no, page in enumerate(paginate(documents, page_size), start=1):
        print(f"-- page {page_no} --", file=out)
        for document in page:
            print(document, file=out)


def run_search_loop(server: SearchServer, page_size: int, inp: TextIO, out: TextIO) -> RequestQueue:
    """
    Read commands until an empty line or EOF. Returns the request history.
    """
    requests = RequestQueue(server)
    print(f"Loaded {server.get_document_count()} documents.", file=out)
    print("Enter queries (-word excludes). Empty line or Ctrl+D to exit.", file=out)

    while True:
        print("query> ", end="", file=out, flush=True)
        line = inp.readline()
        if not line:
            print(file=out)
            break
        line = line.rstrip("\n")
        if not line.strip():
            break
        try:
            run_command(line, server, requests, page_size, out)
        except SearchServerError as e:
            print(f"Error: {e}", file=out)

    print(f"Requests without results: {requests.get_no_result_requests()}", file=out)
    return requests


def main(argv: Iterable[str] | None = None) -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="In-memory TF-IDF search console.")
    parser.add_argument(
        "--stop-words",
        default="",
        help="Space-separated stop words.",
    )
    parser.add_argument(
        "--docs",
        type=Path,
        default=None,
        help="Path to JSONL documents file.",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=settings.page_size,
        help="Results per page.",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Log level for stderr output.",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.page_size <= 0:
        parser.error(f"Incorrect page size: {args.page_size}")

    setup_logging(args.log_level)

    try:
        server = SearchServer(args.stop_words)
    except InvalidArgument as e:
        parser.error(str(e))

    if args.docs is not None:
        if not args.docs.exists():
            parser.error(f"Documents file not found: {args.docs}")
        with open(args.docs, "r", encoding="utf-8") as f:
            added = load_documents(server, f)
        logger.info(f"Loaded {added} documents from {args.docs}")

    run_search_loop(server, args.page_size, sys.stdin, sys.stdout)


if __name__ == "__main__":
    main()
