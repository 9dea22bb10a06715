"""Plain-text rendering of product tables and the inventory report.

Pure functions: they take rows and return a string, so the same output is
produced by the menu and by the one-shot commands.
"""

from __future__ import annotations

from collections.abc import Iterable

from ims.application.dto import InventorySummaryDTO, ProductDTO

ID_WIDTH = 5
NAME_WIDTH = 25
QUANTITY_WIDTH = 10
PRICE_WIDTH = 10  # includes the currency marker

BORDER = (
    f"+{'-' * (ID_WIDTH + 2)}+{'-' * (NAME_WIDTH + 2)}"
    f"+{'-' * (QUANTITY_WIDTH + 2)}+{'-' * (PRICE_WIDTH + 2)}+"
)
HEADER = (
    f"| {'ID':<{ID_WIDTH}} | {'Name':<{NAME_WIDTH}} "
    f"| {'Quantity':<{QUANTITY_WIDTH}} | {'Price':<{PRICE_WIDTH}} |"
)


def format_price(amount: float, width: int = 0) -> str:
    """``$`` followed by the amount with exactly two decimals.

    With ``width`` the digits are right-aligned after the marker, e.g.
    ``$    12.50``.
    """
    digits = width - 1 if width > 1 else 0
    return f"${amount:>{digits}.2f}"


def render_row(row: ProductDTO) -> str:
    # Long names widen the row instead of being cut.
    return (
        f"| {row.id:<{ID_WIDTH}} | {row.name:<{NAME_WIDTH}} "
        f"| {row.quantity:>{QUANTITY_WIDTH}} | {format_price(row.price, PRICE_WIDTH)} |"
    )


def render_table(
    rows: Iterable[ProductDTO],
    title: str | None = None,
    empty_message: str = "No records found.",
) -> str:
    lines: list[str] = []
    if title:
        lines.append(f"--- {title} ---")
    lines.extend([BORDER, HEADER, BORDER])

    count = 0
    for row in rows:
        lines.append(render_row(row))
        count += 1

    lines.append(BORDER)
    if count == 0:
        lines.append(empty_message)
    return "\n".join(lines)


def render_report(summary: InventorySummaryDTO) -> str:
    return "\n".join(
        [
            "--- Inventory Report ---",
            f"Total unique products: {summary.total_products}",
            f"Total inventory value: {format_price(summary.total_value)}",
            "-" * 24,
        ]
    )
