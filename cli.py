import json
import logging
from typing import Optional

import typer
from dotenv import load_dotenv

from config import get_settings
from rag import EmptyQueryError, TfidfIndex, ingest_directory

app = typer.Typer(add_completion=False)


def _build_index(docs_dir: Optional[str], chunk_max_chars: Optional[int]) -> TfidfIndex:
    settings = get_settings()
    index = TfidfIndex(stopwords=settings.stopword_set())
    report = ingest_directory(
        index,
        docs_dir or settings.docs_dir,
        chunk_max_chars=chunk_max_chars or settings.chunk_max_chars,
    )
    for failure in report.failures:
        typer.echo(f"Warning: {failure.source}: {failure.error}", err=True)
    return index


@app.command()
def search(
    query: str = typer.Argument(..., help="Question or keywords to look up"),
    docs_dir: Optional[str] = typer.Option(None, "--docs", "-d", help="Directory of .txt documents"),
    top_k: Optional[int] = typer.Option(None, "--top-k", "-k", min=0, help="Number of passages to return"),
    chunk_max_chars: Optional[int] = typer.Option(None, "--chunk", min=1, help="Split files into chunks"),
    as_json: bool = typer.Option(False, "--json", help="Emit one JSON object per hit"),
):
    """Print the passages most relevant to QUERY."""
    index = _build_index(docs_dir, chunk_max_chars)
    try:
        hits = index.search_scored(query, top_k=get_settings().top_k if top_k is None else top_k)
    except EmptyQueryError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)
    if not hits:
        typer.echo("No passages found")
        return
    for rank, hit in enumerate(hits, start=1):
        if as_json:
            typer.echo(json.dumps({"rank": rank, "id": hit.document.id, "score": hit.score, "text": hit.content}, ensure_ascii=False))
        else:
            typer.echo(f"[{rank}] score={hit.score:.4f}")
            typer.echo(hit.content)
            typer.echo("-" * 80)


@app.command()
def stats(
    docs_dir: Optional[str] = typer.Option(None, "--docs", "-d", help="Directory of .txt documents"),
    chunk_max_chars: Optional[int] = typer.Option(None, "--chunk", min=1, help="Split files into chunks"),
):
    """Show how many passages and terms a directory yields."""
    index = _build_index(docs_dir, chunk_max_chars)
    typer.echo(f"documents={len(index)} vocabulary={len(index.vocabulary)}")


def main():
    load_dotenv()
    logging.basicConfig(level=get_settings().log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    app()

if __name__ == "__main__":
    main()
