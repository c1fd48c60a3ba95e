from __future__ import annotations
import argparse
import mimetypes
import os
from typing import List, Optional

from rich import print
from tqdm import tqdm

from .container import Container
from .config import CHUNK_SIZE, CHUNK_OVERLAP, LLM_PROVIDER
from .chunking import chunk_spans
from .application.use_cases import ChatUseCase, IngestUseCase, GENERIC_ERROR_MESSAGE
from .infrastructure.extraction.file_text_extractor import EXTENSIONS
from .exceptions import DocumentProcessingError, LLMError
from .error_handler import log_error

EXIT_COMMANDS = {"exit", "quit", ":q"}


def gather_files(paths: List[str]) -> List[str]:
    """Expand files and directories into the list of candidate files, in order."""
    found: List[str] = []
    for path in paths:
        if os.path.isdir(path):
            for base, dirs, files in os.walk(path):
                dirs.sort()
                for fname in sorted(files):
                    if os.path.splitext(fname)[1].lower() in EXTENSIONS:
                        found.append(os.path.join(base, fname))
        elif os.path.isfile(path):
            found.append(path)
        else:
            print(f"[yellow]Skipping missing path:[/] {path}")
    return found


def _parse_arguments(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Chat with your documents from the terminal")
    ap.add_argument('--input', nargs='+', required=True, help='Files or folders to ingest')
    ap.add_argument('--question', '-q', action='append', default=[],
                    help='Question to answer (repeatable); omit for an interactive prompt')
    ap.add_argument('--chunk-size', type=int, default=CHUNK_SIZE, help='Chunk size in characters')
    ap.add_argument('--overlap', type=int, default=CHUNK_OVERLAP, help='Overlap between chunks in characters')
    ap.add_argument('--provider', default=LLM_PROVIDER, choices=['gemini', 'openai', 'ollama'],
                    help='Generation service')
    ap.add_argument('--debug', action='store_true', help='List chunk offsets and retrieval scores')
    return ap.parse_args(argv)


def ingest_files(files: List[str], ingest: IngestUseCase, debug: bool = False) -> int:
    """Ingest files one by one and print a summary; returns the number accepted."""
    counters = {"files": 0, "accepted": 0, "errored": 0, "chunks": 0}
    for fp in tqdm(files, desc="Files"):
        counters["files"] += 1
        content_type = mimetypes.guess_type(fp)[0]
        try:
            with open(fp, 'rb') as f:
                data = f.read()
            doc = ingest.ingest(os.path.basename(fp), data, content_type)
        except (OSError, DocumentProcessingError) as e:
            counters["errored"] += 1
            reason = e.kind.value if isinstance(e, DocumentProcessingError) else "unreadable"
            print(f"[red]Failed to process {fp}:[/] {getattr(e, 'message', str(e))} ({reason})")
            continue
        counters["accepted"] += 1
        counters["chunks"] += doc.chunk_count
        if debug:
            spans = chunk_spans(doc.raw_text, ingest.chunk_size, ingest.chunk_overlap)
            print(f"[cyan]{doc.name}:[/] {doc.char_count} chars -> {spans}")

    print(f"[green]Summary:[/] processed={counters['files']} accepted={counters['accepted']} "
          f"errors={counters['errored']} total_chunks={counters['chunks']}")
    return counters["accepted"]


def answer(chat: ChatUseCase, question: str, debug: bool = False) -> None:
    """Print the answer to one question; generation failures never stop the loop."""
    if debug:
        for c in chat.search(question):
            print(f"[cyan]score={c.score}[/] {c.source_name}#{c.chunk_index}")
    try:
        result = chat.execute(question)
    except LLMError as e:
        log_error(e, "Generation failed")
        print(f"[red]{GENERIC_ERROR_MESSAGE}[/]")
        return
    if not result.grounded:
        print("[yellow]No relevant passages found; answering without document context.[/]")
    print(result.answer)
    if result.sources:
        print(f"[cyan]Sources:[/] {', '.join(result.sources)}")


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_arguments(argv)

    container = Container(llm_provider=args.provider)
    ingest = container.ingest_use_case()
    ingest.chunk_size = args.chunk_size
    ingest.chunk_overlap = args.overlap

    files = gather_files(args.input)
    print(f"[cyan]Found candidate files:[/] {len(files)}")
    if not ingest_files(files, ingest, debug=args.debug):
        print("[yellow]No files could be processed successfully; answers will not use document context.[/]")

    chat = container.chat_use_case()
    if args.question:
        for question in args.question:
            print(f"[bold]Q:[/] {question}")
            answer(chat, question, debug=args.debug)
        return

    while True:
        try:
            question = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not question:
            continue
        if question.lower() in EXIT_COMMANDS:
            break
        answer(chat, question, debug=args.debug)


if __name__ == '__main__':  # pragma: no cover
    main()
