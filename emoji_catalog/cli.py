"""
cli.py - command line front end for the emoji catalog
Features:
- lookup a shortcode (optionally with a skin tone)
- fuzzy search over emoji names
- replace :shortcodes: in a piece of text
- list the picker categories
- Uses Rich for tables and formatting
"""

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich import box

from emoji_catalog.core.catalog import EmojiCatalog
from emoji_catalog.core.models import EmojiRecord
from emoji_catalog.utils.config_manager import Config


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="emoji-catalog",
        description="Shortcode lookup, replacement and fuzzy search over an emoji catalog.",
    )
    p.add_argument("--data", help="emoji-datasource style JSON file (default: bundled sample)")
    p.add_argument("--config", help="JSON config file with search/platform options")
    sub = p.add_subparsers(dest="command", required=True)

    lk = sub.add_parser("lookup", help="show one emoji by short name or alias")
    lk.add_argument("name")
    lk.add_argument("--tone", type=int, default=0, choices=range(0, 6), help="skin tone 1-5")

    se = sub.add_parser("search", help="fuzzy search over names")
    se.add_argument("query")
    se.add_argument("--limit", type=int, default=10)

    rp = sub.add_parser("replace", help="replace :shortcodes: in text")
    rp.add_argument("text")

    sub.add_parser("categories", help="list picker categories")
    return p


def _records_table(title: str, records: Sequence[EmojiRecord], cat: EmojiCatalog) -> Table:
    table = Table(title=title, box=box.SIMPLE)
    table.add_column("emoji")
    table.add_column("short name", style="cyan")
    table.add_column("aliases")
    table.add_column("name", style="dim")
    for rec in records:
        aliases = ", ".join(a for a in rec.short_names if a != rec.short_name)
        table.add_row(cat.to_literal(rec), rec.short_name, aliases, rec.name.lower())
    return table


def _lookup(cat: EmojiCatalog, args, console: Console) -> int:
    rec = cat.lookup(args.name)
    if rec is None:
        console.print(f"[red]Unknown emoji:[/red] {args.name}")
        return 1
    tone_note = ""
    if args.tone and not cat.has_variant(args.name, args.tone):
        tone_note = " (no skin tone variant, showing base)"
    shown = cat.resolve(rec, args.tone)
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_row("emoji", cat.to_literal(shown) + tone_note)
    table.add_row("short name", rec.short_name)
    table.add_row("aliases", ", ".join(rec.short_names))
    table.add_row("name", rec.name)
    table.add_row("unified", shown.unified)
    table.add_row("category", rec.category or "-")
    table.add_row("image", cat.image_path(args.name, args.tone) or "-")
    console.print(table)
    return 0


def _search(cat: EmojiCatalog, args, console: Console) -> int:
    found = cat.search(args.query, limit=args.limit)
    if not found:
        console.print(f"[yellow]No matches for[/yellow] {args.query!r}")
        return 0
    console.print(_records_table(f"search: {args.query}", found, cat))
    return 0


def _categories(cat: EmojiCatalog, console: Console) -> int:
    table = Table(title="categories", box=box.SIMPLE)
    table.add_column("tag", style="cyan")
    table.add_column("count", justify="right")
    table.add_column("emoji")
    for tag, recs in cat.categories().items():
        table.add_row(tag, str(len(recs)), "".join(cat.to_literal(r) for r in recs))
    console.print(table)
    return 0


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = _parser().parse_args(argv)
    console = console or Console()
    catalog_config = Config(args.config).catalog_config()
    if args.data:
        cat = EmojiCatalog.from_file(args.data, catalog_config)
    else:
        cat = EmojiCatalog.bundled(catalog_config)

    if args.command == "lookup":
        return _lookup(cat, args, console)
    if args.command == "search":
        return _search(cat, args, console)
    if args.command == "replace":
        # plain print: rich markup and emoji codes would rewrite user text
        console.print(cat.replace(args.text), markup=False, highlight=False, emoji=False)
        return 0
    return _categories(cat, console)
