"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from pdvkit.output.console import create_console, get_output, style_for_validity

if TYPE_CHECKING:
    from rich.console import Console

    from pdvkit.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Prints just the value a shell script would want to capture.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if result.op == "validate":
        return "VALID" if data.get("valid") else "INVALID"
    if result.op == "mask":
        return str(data.get("masked", ""))
    if result.op == "sanitize":
        return str(data.get("sanitized", ""))
    if result.op == "check_customer":
        if data.get("valid"):
            return "VALID"
        return "\n".join(f"{i['field']}: {i['code']}" for i in data.get("issues", []))
    if result.op == "scan":
        return "\n".join(data.get("matches", [])) or "CLEAN"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="pdv.ok")
    op = Text(f"  {result.op}", style="pdv.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="pdv.key")
    v = Text(str(value), style=style)
    console.print(k, v, end="")
    console.print()


def _verdict(console: Console, valid: bool) -> None:
    _field(console, "valid", "yes" if valid else "no", style=style_for_validity(valid))


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
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)
    style = "yellow" if duration > 100 else "dim"

    line = f"{prefix}[{style}]{duration:>8.3f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations")
    if annotations:
        line += "  (" + ", ".join(f"{ak}={av}" for ak, av in annotations.items()) + ")"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="pdv.error")
    op = Text(f"  {result.op}", style="pdv.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "kind", d.get("kind", ""), style="pdv.field")
    _field(console, "value", d.get("value", ""))
    _verdict(console, bool(d.get("valid")))
    if d.get("normalized") not in (None, d.get("value")):
        _field(console, "normalized", d["normalized"])
    if verbose:
        _render_meta(console, result)


def _render_mask(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "kind", result.data.get("kind", ""), style="pdv.field")
    _field(console, "masked", result.data.get("masked", ""))
    if verbose:
        _render_meta(console, result)


def _render_sanitize(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "sanitized", result.data.get("sanitized", ""))


def _render_customer(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render customer record checks with one table row per failed rule."""
    d = result.data
    issues = d.get("issues", [])
    _status_line(console, result)
    _verdict(console, bool(d.get("valid")))

    if issues:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("Field", style="pdv.field", no_wrap=True)
        table.add_column("Rule", style="pdv.invalid")
        table.add_column("Message")
        if verbose:
            table.add_column("Value", style="dim")
        for issue in issues:
            row = [
                str(issue.get("field", "")),
                str(issue.get("code", "")),
                str(issue.get("message", "")),
            ]
            if verbose:
                row.append(str(issue.get("value", "")))
            table.add_row(*row)
        console.print(table)
        console.print(f"\n{len(issues)} issues")

    if verbose:
        _render_meta(console, result)


def _render_scan(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    suspicious = bool(d.get("suspicious"))
    _field(
        console,
        "suspicious",
        "yes" if suspicious else "no",
        style=style_for_validity(not suspicious),
    )
    for name in d.get("matches", []):
        console.print(f"  [pdv.error]match[/pdv.error]: {name}")
    if verbose:
        _field(console, "sanitized", _json.dumps(d.get("sanitized"), ensure_ascii=False))
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "validate": _render_validate,
    "mask": _render_mask,
    "sanitize": _render_sanitize,
    "check_customer": _render_customer,
    "scan": _render_scan,
}
