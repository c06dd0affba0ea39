"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.domain.exceptions import ValidationError
from storefront.infrastructure.cli.context import fail, get_client
from storefront.infrastructure.client.api_client import ApiError, ApiUnavailable
from storefront.infrastructure.client.draft import (
    DiscountDraft,
    ModifierDraft,
    OptionDraft,
    ProductDraft,
)


def _parse_modifier(raw: str) -> ModifierDraft:
    """Parse 'Size:Small=0,Large=1.5' into a ModifierDraft."""
    if ":" not in raw:
        raise click.BadParameter(
            f"Invalid modifier '{raw}'. Expected 'Name:Option=Price,Option=Price'."
        )
    name, options_str = raw.split(":", 1)
    options: list[OptionDraft] = []
    for pair in options_str.split(","):
        pair = pair.strip()
        if "=" not in pair:
            raise click.BadParameter(
                f"Invalid option '{pair}' in modifier '{name}'. Expected 'Option=Price'."
            )
        option_name, price = pair.rsplit("=", 1)
        options.append(OptionDraft(option_name.strip(), price.strip()))
    return ModifierDraft(name=name.strip(), options=options)


def _parse_discount(raw: str) -> DiscountDraft:
    """Parse 'Summer:percentage:10:2024-01-01:2024-01-31' into a DiscountDraft."""
    parts = raw.split(":")
    if len(parts) != 5:
        raise click.BadParameter(
            f"Invalid discount '{raw}'. Expected 'Name:type:value:start:end'."
        )
    name, kind, value, start, end = (p.strip() for p in parts)
    return DiscountDraft(name=name, type=kind, value=value, start_date=start, end_date=end)


def _submit(ctx: click.Context, draft: ProductDraft) -> dict:
    try:
        return get_client(ctx).submit_draft(draft)
    except ValidationError as exc:
        raise click.ClickException(str(exc))
    except (ApiError, ApiUnavailable) as exc:
        raise fail(exc)


@click.command("list")
@click.option("--store", "store_id", required=True, help="Store ID.")
@click.pass_context
def product_list(ctx: click.Context, store_id: str) -> None:
    """List the products of a store."""
    try:
        products = get_client(ctx).list_products(store_id)
    except (ApiError, ApiUnavailable) as exc:
        raise fail(exc)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<26} {'Name':<20} {'Price':>10} {'Today':>10} {'Stock':>6}")
    click.echo("-" * 76)
    for p in products:
        click.echo(
            f"{p['_id']:<26} {p['name']:<20} {p['price']:>10.2f} "
            f"{p['effectivePrice']:>10.2f} {p['stock']:>6}"
        )
        for m in p.get("modifiers", []):
            opts = ", ".join(f"{o['name']} +{o['price']:.2f}" for o in m["options"])
            click.echo(f"  modifier {m['name']}: {opts}")
        for d in p.get("discounts", []):
            click.echo(
                f"  discount {d['name'] or '-'}: {d['type']} {d['value']} "
                f"({d['startDate']} to {d['endDate']})"
            )


@click.command("add")
@click.option("--store", "store_id", required=True, help="Store ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 4.50).")
@click.option("--category", required=True, help="Category ID.")
@click.option("--stock", required=True, type=int, help="Units in stock.")
@click.option("--description", default="", help="Description.")
@click.option("--image", default="", help="Image URL.")
@click.option("--modifier", "modifiers", multiple=True, help="'Name:Option=Price,...' (repeatable).")
@click.option("--discount", "discounts", multiple=True, help="'Name:type:value:start:end' (repeatable).")
@click.pass_context
def product_add(
    ctx: click.Context,
    store_id: str,
    name: str,
    price: str,
    category: str,
    stock: int,
    description: str,
    image: str,
    modifiers: tuple[str, ...],
    discounts: tuple[str, ...],
) -> None:
    """Add a product to a store."""
    draft = ProductDraft.new(store_id)
    draft.name = name
    draft.price = price
    draft.category = category
    draft.stock = stock
    draft.description = description
    draft.image = image
    draft.modifiers = [_parse_modifier(m) for m in modifiers]
    draft.discounts = [_parse_discount(d) for d in discounts]

    product = _submit(ctx, draft)
    click.echo(f"Product {product['_id']} '{product['name']}' added at ${product['price']:.2f}")


@click.command("update")
@click.option("--store", "store_id", required=True, help="Store ID.")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price.")
@click.option("--category", default=None, help="New category ID.")
@click.option("--stock", default=None, type=int, help="New stock level.")
@click.option("--description", default=None, help="New description.")
@click.option("--image", default=None, help="New image URL.")
@click.option("--modifier", "modifiers", multiple=True, help="Replaces all modifiers (repeatable).")
@click.option("--discount", "discounts", multiple=True, help="Replaces all discounts (repeatable).")
@click.option("--clear-modifiers", is_flag=True, default=False, help="Remove every modifier.")
@click.option("--clear-discounts", is_flag=True, default=False, help="Remove every discount.")
@click.pass_context
def product_update(
    ctx: click.Context,
    store_id: str,
    product_id: str,
    name: str | None,
    price: str | None,
    category: str | None,
    stock: int | None,
    description: str | None,
    image: str | None,
    modifiers: tuple[str, ...],
    discounts: tuple[str, ...],
    clear_modifiers: bool,
    clear_discounts: bool,
) -> None:
    """Update a product.

    Modifiers and discounts given here replace the existing ones; leave
    them out to keep the current lists.
    """
    try:
        products = get_client(ctx).list_products(store_id)
    except (ApiError, ApiUnavailable) as exc:
        raise fail(exc)

    current = next((p for p in products if p["_id"] == product_id), None)
    if current is None:
        raise click.ClickException("Product not found")

    draft = ProductDraft.from_product(current)
    for field_name, value in (
        ("name", name),
        ("price", price),
        ("category", category),
        ("stock", stock),
        ("description", description),
        ("image", image),
    ):
        if value is not None:
            setattr(draft, field_name, value)
    if modifiers or clear_modifiers:
        draft.modifiers = [_parse_modifier(m) for m in modifiers]
    if discounts or clear_discounts:
        draft.discounts = [_parse_discount(d) for d in discounts]

    product = _submit(ctx, draft)
    click.echo(f"Product {product['_id']} updated")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_context
def product_delete(ctx: click.Context, product_id: str) -> None:
    """Delete a product."""
    try:
        message = get_client(ctx).delete_product(product_id)
    except (ApiError, ApiUnavailable) as exc:
        raise fail(exc)

    click.echo(message)
