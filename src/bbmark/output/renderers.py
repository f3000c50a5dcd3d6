"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.

User markup is always wrapped in :class:`rich.text.Text` so Rich never
interprets ``[b]`` and friends as its own console markup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from bbmark.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from bbmark.services.result import ServiceResult

# Ops whose payload is a transformed text, printed as-is.
_TEXT_OPS = frozenset({"render", "strip", "excerpt"})


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a string.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    if result.ok and result.op in _TEXT_OPS:
        return str(result.data.get("output", ""))

    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op in _TEXT_OPS:
        return str(result.data.get("output", ""))

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(_extract_key(item) for item in items if _extract_key(item))

    return f"OK: {result.op}"


def render_text_meta(result: ServiceResult) -> str:
    """Render the meta block of a text op for stderr.

    Text ops print their output verbatim on stdout, so in verbose mode the
    span tree goes to a separate stream. Returns "" when there is no meta.
    """
    if not result.ok or result.op not in _TEXT_OPS or not result.meta:
        return ""
    console = create_console()
    _render_meta(console, result)
    return get_output(console).strip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _extract_key(item: Any) -> str:
    """Extract the identifying value from a list item (rule id or tag title)."""
    if isinstance(item, dict):
        for key in ("id", "title"):
            val = item.get(key)
            if val is not None:
                return str(val)
    return ""


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="bb.ok")
    op = Text(f"  {result.op}", style="bb.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="bb.key")
    v = Text(str(value), style="bb.id" if key == "id" else "")
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    duration = span_data.get("duration_ms", 0.0)
    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = Text(prefix)
    line.append(f"{duration:>8.2f}ms", style=style)
    line.append(f"  {span_data.get('name', '?')}")
    annotations = span_data.get("annotations") or {}
    if annotations:
        line.append(f"  ({', '.join(f'{k}={v}' for k, v in annotations.items())})")
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="bb.error")
    op = Text(f"  {result.op}", style="bb.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Registry / catalog renderers ──────────────────────────────────────


def _render_rules(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_rules as an ordered table."""
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("ID", style="bb.id", no_wrap=True)
    table.add_column("Pattern", style="bb.markup")
    if verbose:
        table.add_column("Multiline")

    for position, item in enumerate(items, start=1):
        row: list[Any] = [
            str(position),
            Text(str(item.get("id", ""))),
            Text(str(item.get("pattern", ""))),
        ]
        if verbose:
            row.append("yes" if item.get("multiline") else "no")
        table.add_row(*row)

    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} rules")
    if verbose:
        _render_meta(console, result)


def _render_tags(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_tags as a help-page style table."""
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=True, pad_edge=False, expand=False)
    table.add_column("Tag", style="bb.title")
    table.add_column("Description")
    table.add_column("Example", style="bb.markup")
    for item in items:
        table.add_row(
            Text(str(item.get("title", ""))),
            Text(str(item.get("description", ""))),
            Text(str(item.get("example", ""))),
        )
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_check_examples(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Render check_examples: markup next to its rendered hypertext."""
    items = result.data.get("items", [])
    _status_line(console, result)
    changed = sum(1 for item in items if item.get("changed"))
    _field(console, "examples", len(items))
    _field(console, "rendered", changed)

    table = Table(show_header=True, show_lines=True, pad_edge=False, expand=False)
    table.add_column("Tag", style="bb.title")
    table.add_column("Example", style="bb.markup")
    table.add_column("Rendered", style="bb.html")
    table.add_column("OK", justify="center")
    for item in items:
        mark = Text("yes", style="bb.ok") if item.get("changed") else Text("no", style="bb.error")
        table.add_row(
            Text(str(item.get("title", ""))),
            Text(str(item.get("example", ""))),
            Text(str(item.get("rendered", ""))),
            mark,
        )
    console.print(table)
    if verbose:
        _render_meta(console, result)


# ── Fallback renderer ─────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Status line plus every data field."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    "list_rules": _render_rules,
    "list_tags": _render_tags,
    "check_examples": _render_check_examples,
}
