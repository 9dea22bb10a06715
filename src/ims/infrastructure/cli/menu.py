"""Interactive numbered menu.

Prompts re-ask until the input is acceptable, so handlers only ever see
well-typed values. Every outcome is printed and the loop continues; only
choice 8 leaves it.
"""

from __future__ import annotations

from collections.abc import Callable

import click

from ims.application.add_product import AddProductHandler
from ims.application.delete_product import DeleteProductHandler
from ims.application.filter_products import FilterProductsHandler
from ims.application.inventory_report import InventoryReportHandler
from ims.application.list_products import ListProductsHandler
from ims.application.outcome import Outcome, OutcomeStatus
from ims.application.search_products import SearchProductsHandler
from ims.application.update_product import UpdateProductHandler
from ims.domain.repository.product_repository import ProductRepository
from ims.infrastructure.cli.formatting import render_report, render_table
from ims.infrastructure.cli.params import PRICE

EXIT_CHOICE = 8

MENU_TEXT = """
--- Inventory Management Menu ---
1. Add Product
2. View All Products
3. Update Product
4. Delete Product
5. Search Products by Name
6. Filter Products by Quantity
7. Generate Report
8. Exit"""


# --- Prompts ------------------------------------------------------------------


def _non_empty(value: str) -> str:
    if not value.strip():
        raise click.BadParameter("Product name cannot be empty. Please try again.")
    return value


def _prompt_id(action: str) -> int:
    return click.prompt(f"Enter Product ID to {action}", type=click.IntRange(min=1))


def _prompt_details() -> tuple[str, int, float]:
    name = click.prompt("Enter Product Name", value_proc=_non_empty)
    quantity = click.prompt("Enter Quantity", type=click.IntRange(min=0))
    price = click.prompt("Enter Price", type=PRICE)
    return name, quantity, price


# --- Output -------------------------------------------------------------------


def _echo_status(outcome: Outcome) -> None:
    """Print the message of a non-tabular outcome."""
    if outcome.status is OutcomeStatus.ERROR:
        click.echo(outcome.message, err=True)
    else:
        click.echo(outcome.message)


def _echo_rows(outcome: Outcome, title: str) -> None:
    if outcome.ok:
        click.echo()
        click.echo(render_table(outcome.value, title, outcome.message))
    else:
        _echo_status(outcome)


# --- Actions ------------------------------------------------------------------


def _add(repo: ProductRepository) -> None:
    click.echo("\n--- Add New Product ---")
    name, quantity, price = _prompt_details()
    _echo_status(AddProductHandler(product_repo=repo).handle(name, quantity, price))


def _view(repo: ProductRepository) -> None:
    _echo_rows(ListProductsHandler(product_repo=repo).handle(), "Current Inventory")


def _update(repo: ProductRepository) -> None:
    click.echo("\n--- Update Product ---")
    _view(repo)
    product_id = _prompt_id("update")
    name, quantity, price = _prompt_details()
    outcome = UpdateProductHandler(product_repo=repo).handle(
        product_id, name, quantity, price
    )
    _echo_status(outcome)


def _delete(repo: ProductRepository) -> None:
    click.echo("\n--- Delete Product ---")
    _view(repo)
    product_id = _prompt_id("delete")
    _echo_status(DeleteProductHandler(product_repo=repo).handle(product_id))


def _search(repo: ProductRepository) -> None:
    click.echo("\n--- Search Products by Name ---")
    term = click.prompt("Enter search term", default="", show_default=False)
    if not term.strip():
        click.echo("Search term cannot be empty.")
        return
    outcome = SearchProductsHandler(product_repo=repo).handle(term)
    _echo_rows(outcome, f'Search Results for "{term}"')


def _filter(repo: ProductRepository) -> None:
    click.echo("\n--- Filter Products by Quantity ---")
    threshold = click.prompt(
        "Enter maximum quantity threshold", type=click.IntRange(min=0)
    )
    outcome = FilterProductsHandler(product_repo=repo).handle(threshold)
    _echo_rows(outcome, f"Products with Quantity Less Than {threshold}")


def _report(repo: ProductRepository) -> None:
    outcome = InventoryReportHandler(product_repo=repo).handle()
    if outcome.ok:
        click.echo()
        click.echo(render_report(outcome.value))
    else:
        _echo_status(outcome)


ACTIONS: dict[int, Callable[[ProductRepository], None]] = {
    1: _add,
    2: _view,
    3: _update,
    4: _delete,
    5: _search,
    6: _filter,
    7: _report,
}


def run_menu(repo: ProductRepository) -> None:
    """Loop until the user picks Exit."""
    while True:
        click.echo(MENU_TEXT)
        choice = click.prompt("Enter your choice", type=click.IntRange(1, EXIT_CHOICE))
        if choice == EXIT_CHOICE:
            click.echo("Exiting program.")
            return
        ACTIONS[choice](repo)
