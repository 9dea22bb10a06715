"""One-shot CLI commands for the product inventory.

Each command runs the same handler as the matching menu entry; any outcome
other than SUCCESS or EMPTY exits with status 1.
"""

from __future__ import annotations

import click

from ims.application.add_product import AddProductHandler
from ims.application.delete_product import DeleteProductHandler
from ims.application.filter_products import FilterProductsHandler
from ims.application.inventory_report import InventoryReportHandler
from ims.application.list_products import ListProductsHandler
from ims.application.outcome import Outcome
from ims.application.search_products import SearchProductsHandler
from ims.application.show_product import ShowProductHandler
from ims.application.update_product import UpdateProductHandler
from ims.domain.repository.product_repository import ProductRepository
from ims.infrastructure.cli.formatting import render_report, render_table
from ims.infrastructure.cli.params import PRICE


def _unwrap(outcome: Outcome):
    if not outcome.ok:
        raise click.ClickException(outcome.message)
    return outcome.value


def _product_options(func):
    func = click.option(
        "--price", required=True, type=PRICE, help="Unit price."
    )(func)
    func = click.option(
        "--quantity", required=True, type=click.IntRange(min=0), help="Units in stock."
    )(func)
    func = click.option("--name", required=True, help="Product name.")(func)
    return func


@click.command("add")
@_product_options
@click.pass_obj
def product_add(repo: ProductRepository, name: str, quantity: int, price: float) -> None:
    """Add a new product to the inventory."""
    outcome = AddProductHandler(product_repo=repo).handle(name, quantity, price)
    product = _unwrap(outcome)
    click.echo(f"Product #{product.id} '{product.name}' added successfully.")


@click.command("list")
@click.pass_obj
def product_list(repo: ProductRepository) -> None:
    """List all products."""
    outcome = ListProductsHandler(product_repo=repo).handle()
    rows = _unwrap(outcome)
    click.echo(render_table(rows, "Current Inventory", outcome.message))


@click.command("show")
@click.option("--id", "product_id", required=True, type=click.IntRange(min=1), help="Product ID.")
@click.pass_obj
def product_show(repo: ProductRepository, product_id: int) -> None:
    """Show a single product."""
    product = _unwrap(ShowProductHandler(product_repo=repo).handle(product_id))
    click.echo(render_table([product], f"Product #{product_id}"))


@click.command("update")
@click.option("--id", "product_id", required=True, type=click.IntRange(min=1), help="Product ID.")
@_product_options
@click.pass_obj
def product_update(
    repo: ProductRepository, product_id: int, name: str, quantity: int, price: float
) -> None:
    """Replace the name, quantity and price of a product."""
    outcome = UpdateProductHandler(product_repo=repo).handle(
        product_id, name, quantity, price
    )
    _unwrap(outcome)
    click.echo(outcome.message)


@click.command("delete")
@click.option("--id", "product_id", required=True, type=click.IntRange(min=1), help="Product ID.")
@click.pass_obj
def product_delete(repo: ProductRepository, product_id: int) -> None:
    """Delete a product permanently."""
    outcome = DeleteProductHandler(product_repo=repo).handle(product_id)
    _unwrap(outcome)
    click.echo(outcome.message)


@click.command("search")
@click.argument("term")
@click.pass_obj
def product_search(repo: ProductRepository, term: str) -> None:
    """Find products whose name contains TERM (case-insensitive)."""
    if not term.strip():
        raise click.BadParameter("Search term cannot be empty.", param_hint="TERM")
    outcome = SearchProductsHandler(product_repo=repo).handle(term)
    rows = _unwrap(outcome)
    click.echo(render_table(rows, f'Search Results for "{term}"', outcome.message))


@click.command("low-stock")
@click.option(
    "--below",
    "threshold",
    required=True,
    type=click.IntRange(min=0),
    help="List products with quantity less than this.",
)
@click.pass_obj
def product_low_stock(repo: ProductRepository, threshold: int) -> None:
    """List products whose quantity is below a threshold."""
    outcome = FilterProductsHandler(product_repo=repo).handle(threshold)
    rows = _unwrap(outcome)
    click.echo(
        render_table(rows, f"Products with Quantity Less Than {threshold}", outcome.message)
    )


@click.command("report")
@click.pass_obj
def report(repo: ProductRepository) -> None:
    """Show product count and total inventory value."""
    summary = _unwrap(InventoryReportHandler(product_repo=repo).handle())
    click.echo(render_report(summary))
