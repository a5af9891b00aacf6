from __future__ import annotations

import json
from typing import List

import typer

from .client import JishoPack
from .core.contracts import DictionaryRecord
from .core.errors import JishoPackError

app = typer.Typer(help="jishopack: look up words on Jisho.org")


def _emit(records: List[DictionaryRecord], as_json: bool) -> None:
    for r in records:
        if as_json:
            typer.echo(json.dumps(r.to_dict(), ensure_ascii=False))
            continue
        level = " / ".join(x for x in [r.jlpt_level, r.wanikani_level] if x)
        typer.echo(f"{r.slug}\t{r.reading}\t{level}\t{'; '.join(r.meanings)}")


def _run(fn, *args, as_json: bool) -> None:
    try:
        records = fn(*args)
    except JishoPackError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    _emit(records, as_json)


@app.command("lookup")
def lookup(
    term: str = typer.Argument(..., help="Word to search for (e.g., 道具)"),
    common: bool = typer.Option(False, help="Only common vocabulary"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON lines"),
    debug: bool = typer.Option(False, help="Verbose request diagnostics"),
):
    """Search for a word."""
    _run(JishoPack(debug=debug).lookup, term, common, as_json=as_json)


@app.command("common")
def common(
    term: str = typer.Argument(..., help="Word to search for"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON lines"),
    debug: bool = typer.Option(False, help="Verbose request diagnostics"),
):
    """Search for a word among common vocabulary only."""
    _run(JishoPack(debug=debug).lookup_common, term, as_json=as_json)


@app.command("prefix")
def prefix(
    term: str = typer.Argument(..., help="Start of the word (e.g., 同)"),
    common: bool = typer.Option(False, help="Only common vocabulary"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON lines"),
    debug: bool = typer.Option(False, help="Verbose request diagnostics"),
):
    """Words starting with TERM."""
    _run(JishoPack(debug=debug).lookup_prefix, term, common, as_json=as_json)


@app.command("suffix")
def suffix(
    term: str = typer.Argument(..., help="End of the word (e.g., 同)"),
    common: bool = typer.Option(False, help="Only common vocabulary"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON lines"),
    debug: bool = typer.Option(False, help="Verbose request diagnostics"),
):
    """Words ending with TERM."""
    _run(JishoPack(debug=debug).lookup_suffix, term, common, as_json=as_json)


@app.command("jlpt")
def jlpt(
    term: str = typer.Argument(..., help="Word to search for"),
    level: str = typer.Option(..., help="JLPT level (N3, n3 or 3)"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON lines"),
    debug: bool = typer.Option(False, help="Verbose request diagnostics"),
):
    """Search restricted to one JLPT level."""
    _run(JishoPack(debug=debug).lookup_by_jlpt, term, level, as_json=as_json)


@app.command("wasei")
def wasei(
    term: str = typer.Argument(..., help="Word to search for (e.g., ボ)"),
    common: bool = typer.Option(False, help="Only common vocabulary"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON lines"),
    debug: bool = typer.Option(False, help="Verbose request diagnostics"),
):
    """Search wasei-eigo (Japanese-made English) words."""
    _run(JishoPack(debug=debug).lookup_wasei, term, common, as_json=as_json)


@app.command("kanji")
def kanji(
    term: str = typer.Argument(..., help="Word to search for"),
    common: bool = typer.Option(False, help="Only common vocabulary"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON lines"),
    debug: bool = typer.Option(False, help="Verbose request diagnostics"),
):
    """Search restricted to kanji entries."""
    _run(JishoPack(debug=debug).lookup_kanji, term, common, as_json=as_json)


def main() -> None:
    app()


if __name__ == "__main__":
    app()
