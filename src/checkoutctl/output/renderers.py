"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from checkoutctl.domain.money import amount_text
from checkoutctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from checkoutctl.services.result import ServiceResult

# Column gap between a name and its amount, as on the printed receipt.
_GAP = "    "


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
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        return error_line(result)

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item.get("name", "")) for item in items)

    if "total" in result.data:
        return f"OK: {result.op} {amount_text(result.data['total'])}"
    return f"OK: {result.op}"


def error_line(result: ServiceResult) -> str:
    msg = result.error.message if result.error else "Unknown error"
    return f"Error: {msg}"


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    label = Text("Error:", style="co.error")
    console.print(label, Text(err.message if err else "Unknown error"), soft_wrap=True)

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="co.key"))
        for k, v in err.detail.items():
            console.print(Text(f"  {k}: {v}", style="co.key"))


# ── Checkout ──────────────────────────────────────────────────────────


def render_shipment_notice(notice: dict[str, Any] | None, console: Console) -> None:
    """Print the shipment notice block; nothing when there is no shipment."""
    if not notice:
        return
    console.print(Text("** Shipment notice **", style="co.header"), soft_wrap=True)
    for entry in notice["entries"]:
        line = Text(f"{entry['quantity']}x ")
        line.append(entry["name"], style="co.name")
        line.append(_GAP)
        line.append(f"{amount_text(entry['weight_grams'])}g", style="co.weight")
        console.print(line, soft_wrap=True)
    total = Text("Total package weight ")
    total.append(f"{amount_text(notice['total_weight_kg'])}kg", style="co.weight")
    console.print(total, soft_wrap=True)
    console.print()


def render_receipt(data: dict[str, Any], console: Console) -> None:
    """Print the checkout receipt block."""
    console.print(Text("** Checkout receipt **", style="co.header"), soft_wrap=True)
    for line in data["lines"]:
        row = Text(f"{line['quantity']}x ")
        row.append(line["name"], style="co.name")
        row.append(_GAP)
        row.append(amount_text(line["line_total"]), style="co.amount")
        console.print(row, soft_wrap=True)
    console.print("---")
    for label, key in (("Subtotal", "subtotal"), ("Shipping", "shipping"), ("Amount", "total")):
        row = Text(f"{label}{_GAP}")
        row.append(amount_text(data[key]), style="co.total" if key == "total" else "co.amount")
        console.print(row, soft_wrap=True)
    balance = Text("Remaining balance: ")
    balance.append(amount_text(data["balance"]), style="co.amount")
    console.print(balance, soft_wrap=True)


def _render_checkout(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    render_shipment_notice(d.get("shipment"), console)
    render_receipt(d, console)
    if verbose:
        console.print(Text(f"  holder: {d['holder']}", style="co.key"))
        console.print(
            Text(f"  shipping_weight_grams: {d['shipping_weight_grams']}", style="co.key")
        )


# ── Catalog ───────────────────────────────────────────────────────────


def _render_catalog(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="co.name")
    table.add_column("Price", style="co.amount", justify="right")
    table.add_column("Stock", justify="right")
    table.add_column("Ships")
    table.add_column("Weight (g)", style="co.weight", justify="right")
    table.add_column("Expires")

    for item in items:
        expires_at = item.get("expires_at")
        if expires_at is None:
            expires = Text("-")
        else:
            expires = Text(expires_at.strftime("%Y-%m-%d"))
            if item.get("expired"):
                expires.append(" (expired)", style="co.expired")
        table.add_row(
            Text(str(item["name"])),
            amount_text(item["price"]),
            str(item["stock"]),
            "yes" if item["shippable"] else "no",
            amount_text(item["weight_grams"]) if item["weight_grams"] else "-",
            expires,
        )

    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} items")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    console.print(Text("OK", style="co.ok"), Text(result.op))
    for key, value in result.data.items():
        console.print(Text(f"  {key}: ", style="co.key"), Text(str(value)), sep="")


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "checkout": _render_checkout,
    "catalog": _render_catalog,
}
