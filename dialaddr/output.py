"""Output renderer: rich table formatter, JSON formatter, format dispatch."""

import dataclasses
import json
import sys
from io import StringIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dialaddr.models import Classification, Resolution

FORMATS = ("table", "json")


def render_resolutions(
    results: list[Resolution],
    fmt: str,
    *,
    file: object | None = None,
    width: int | None = None,
) -> None:
    """Render resolution outcomes in the requested format.

    Args:
        results: One ``Resolution`` per input address.
        fmt: Output format — ``"table"`` or ``"json"``.
        file: Writable file object for output (default: ``sys.stdout``).
        width: Explicit console width (default: auto-detect).

    Raises:
        ValueError: If *fmt* is not ``"table"`` or ``"json"``.
    """
    _check_format(fmt)
    if fmt == "json":
        _dump_json([dataclasses.asdict(r) for r in results], file)
        return

    table = Table(title=f"{len(results)} address(es)")
    table.add_column("Address")
    table.add_column("Resolved")
    table.add_column("Error")
    for r in results:
        table.add_row(escape(r.address), _fmt(r.resolved), _fmt(r.error))

    console = _console(file, width)
    console.print(table)

    failed = sum(1 for r in results if not r.ok)
    if failed:
        console.print(f"  {failed} of {len(results)} failed")


def render_classification(
    result: Classification,
    fmt: str,
    *,
    file: object | None = None,
    width: int | None = None,
) -> None:
    """Render family predicates in the requested format.

    Raises:
        ValueError: If *fmt* is not ``"table"`` or ``"json"``.
    """
    _check_format(fmt)
    if fmt == "json":
        _dump_json(dataclasses.asdict(result), file)
        return

    table = Table(title=f"{len(result.addresses)} address(es)")
    table.add_column("Check")
    table.add_column("Result")
    table.add_row("All IPv4", _fmt(result.all_ipv4))
    table.add_row("All IPv6", _fmt(result.all_ipv6))
    table.add_row("Global unicast", _fmt(result.global_unicast or None))

    _console(file, width).print(table)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _check_format(fmt: str) -> None:
    if fmt not in FORMATS:
        raise ValueError(f"Unknown output format: {fmt!r}")


def _console(file: object | None, width: int | None) -> Console:
    return Console(file=file or sys.stdout, highlight=False, width=width)


def _dump_json(payload: object, file: object | None) -> None:
    out = file or sys.stdout
    json.dump(payload, out, indent=2)
    out.write("\n")  # type: ignore[union-attr]


def _fmt(value: object) -> str:
    """Format a field value for table display.

    ``None`` becomes ``"—"``, booleans become ``"yes"``/``"no"``, everything
    else is stringified with rich markup escaped.
    """
    if value is None:
        return "—"
    if isinstance(value, bool):
        return "yes" if value else "no"
    return escape(str(value))


def render_to_string(
    result: list[Resolution] | Classification,
    fmt: str,
    *,
    width: int = 200,
) -> str:
    """Render to a string instead of stdout — useful for testing.

    Args:
        result: Resolution list or a ``Classification``.
        fmt: Output format — ``"table"`` or ``"json"``.
        width: Console width for table rendering (default: 200).

    Returns:
        The rendered output as a string.
    """
    buf = StringIO()
    if isinstance(result, Classification):
        render_classification(result, fmt, file=buf, width=width)
    else:
        render_resolutions(result, fmt, file=buf, width=width)
    return buf.getvalue()
