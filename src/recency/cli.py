"""Click CLI for recency: inspect hashers and exercise the LRU cache."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from recency.errors.exceptions import ConfigError, RecencyError
from recency.types import HasherName

if TYPE_CHECKING:
    from recency.cache.lru import RecencyCache

console = Console()
error_console = Console(stderr=True)

_BYTE_HASHERS = [HasherName.XOR.value, HasherName.BOB_JENKINS.value, HasherName.DJB.value]
_NULLARY_OPS = {"peek-mru", "peek-lru", "evict-mru", "evict-lru", "clear"}
_KEYED_OPS = {"get", "remove"}


def _setup_logging(verbosity: int, default_level: str = "WARNING") -> None:
    """Configure logging based on verbosity level."""
    level = logging.getLevelName(default_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
    )


@click.group()
@click.version_option(package_name="recency")
def cli() -> None:
    """recency: bounded LRU cache over a chained hash table."""


@cli.command("hash")
@click.argument("text")
@click.option(
    "-a",
    "--algorithm",
    "algorithms",
    type=click.Choice(_BYTE_HASHERS),
    multiple=True,
    help="Hasher to run (repeatable). Defaults to all.",
)
def hash_text(text: str, algorithms: tuple[str, ...]) -> None:
    """Hash the UTF-8 bytes of TEXT with the byte hashers."""
    from recency.hashing.hashers import bob_jenkins, djb, xor_fold

    functions = {
        HasherName.XOR.value: xor_fold,
        HasherName.BOB_JENKINS.value: bob_jenkins,
        HasherName.DJB.value: djb,
    }
    data = text.encode("utf-8")

    table = Table(title="Hash Values", show_header=True)
    table.add_column("Algorithm", style="cyan")
    table.add_column("Signed")
    table.add_column("Hex")

    for name in algorithms or _BYTE_HASHERS:
        value = functions[name](data)
        table.add_row(name, str(value), f"{value & 0xFFFFFFFF:08x}")

    console.print(table)


@cli.command()
@click.argument("ops", nargs=-1, required=True)
@click.option("--capacity", type=int, default=None, help="Cache capacity (at least 2).")
@click.option(
    "--hasher",
    type=click.Choice([h.value for h in HasherName]),
    default=None,
    help="Key hasher used by the index.",
)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
def simulate(ops: tuple[str, ...], capacity: int | None, hasher: str | None, verbose: int) -> None:
    """Run cache operations and show the resulting recency order.

    Operations: put:KEY=VALUE, get:KEY, remove:KEY, peek-mru, peek-lru,
    evict-mru, evict-lru, clear.
    """
    from recency.core import build_cache, resolve_config

    parsed = [_parse_op(raw) for raw in ops]

    try:
        config = resolve_config(capacity=capacity, hasher=hasher)
    except ConfigError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    _setup_logging(verbose, config.log_level)
    cache = build_cache(config)

    for raw, (name, key, value) in zip(ops, parsed, strict=True):
        try:
            result = _apply(cache, name, key, value)
        except RecencyError as e:
            error_console.print(
                f"{raw} -> {type(e).__name__}: {e}", markup=False, highlight=False
            )
            continue
        console.print(f"{raw} -> {result}", markup=False, highlight=False)

    console.print(str(cache), markup=False, highlight=False)
    _print_diagnostics(cache)


@cli.command("config")
def show_config() -> None:
    """Show the resolved configuration."""
    from recency.core import resolve_config

    try:
        config = resolve_config()
    except ConfigError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    table = Table(title="Resolved Configuration", show_header=True)
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    for key, value in sorted(config.model_dump(mode="json").items()):
        table.add_row(key, str(value))

    console.print(table)


def _parse_op(raw: str) -> tuple[str, str | None, str | None]:
    name, _, arg = raw.partition(":")
    name = name.strip().lower()
    if name == "put":
        key, sep, value = arg.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"Expected put:KEY=VALUE, got '{raw}'", param_hint="OPS")
        return name, key, value
    if name in _KEYED_OPS:
        if not arg:
            raise click.BadParameter(f"Expected {name}:KEY, got '{raw}'", param_hint="OPS")
        return name, arg, None
    if name in _NULLARY_OPS and not arg:
        return name, None, None
    raise click.BadParameter(f"Unknown operation '{raw}'", param_hint="OPS")


def _apply(
    cache: RecencyCache[Any, Any], name: str, key: str | None, value: str | None
) -> object:
    if name == "put":
        cache.put(key, value)
        return "ok"
    if name == "get":
        return cache.get(key)
    if name == "remove":
        cache.remove(key)
        return "ok"
    if name == "clear":
        cache.clear()
        return "ok"
    actions = {
        "peek-mru": cache.peek_mru,
        "peek-lru": cache.peek_lru,
        "evict-mru": cache.evict_mru,
        "evict-lru": cache.evict_lru,
    }
    return actions[name]()


def _print_diagnostics(cache: RecencyCache[Any, Any]) -> None:
    stats = cache.stats()

    table = Table(title="Cache Diagnostics", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Value")

    table.add_row("Entries", str(stats.entries))
    table.add_row("Capacity", str(stats.capacity))
    table.add_row("Evictions", str(stats.evictions))
    table.add_row("Collision buckets", str(cache.collisions()))
    table.add_row("Max chain depth", str(cache.max_collision()))

    console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    cli()
