"""CLI commands for the Store aggregate."""

from __future__ import annotations

import click

from storefront.infrastructure.cli.context import fail, get_client
from storefront.infrastructure.client.api_client import ApiError, ApiUnavailable


def _display_store(store: dict) -> None:
    click.echo(f"Store {store['_id']}  {store['name']}")
    click.echo(f"Address: {store.get('address') or '-'}")
    click.echo(f"Phone:   {store.get('phone') or '-'}")
    click.echo(f"Created: {store.get('createdAt') or '-'}")


@click.command("create")
@click.option("--name", required=True, help="Store name.")
@click.option("--address", default="", help="Street address.")
@click.option("--phone", default="", help="Contact phone.")
@click.pass_context
def store_create(ctx: click.Context, name: str, address: str, phone: str) -> None:
    """Create a store owned by you."""
    try:
        store = get_client(ctx).create_store(name=name, address=address, phone=phone)
    except (ApiError, ApiUnavailable) as exc:
        raise fail(exc)

    click.echo(f"Store {store['_id']} '{store['name']}' created")


@click.command("list")
@click.pass_context
def store_list(ctx: click.Context) -> None:
    """List your stores, newest first."""
    try:
        stores = get_client(ctx).list_stores()
    except (ApiError, ApiUnavailable) as exc:
        raise fail(exc)

    if not stores:
        click.echo("No stores found.")
        return

    click.echo(f"{'ID':<26} {'Name':<24} {'Phone':<16}")
    click.echo("-" * 68)
    for s in stores:
        click.echo(f"{s['_id']:<26} {s['name']:<24} {s.get('phone', ''):<16}")


@click.command("show")
@click.option("--id", "store_id", required=True, help="Store ID.")
@click.pass_context
def store_show(ctx: click.Context, store_id: str) -> None:
    """Show one of your stores."""
    try:
        store = get_client(ctx).get_store(store_id)
    except (ApiError, ApiUnavailable) as exc:
        raise fail(exc)

    _display_store(store)


@click.command("update")
@click.option("--id", "store_id", required=True, help="Store ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--address", default=None, help="New address.")
@click.option("--phone", default=None, help="New phone.")
@click.pass_context
def store_update(
    ctx: click.Context,
    store_id: str,
    name: str | None,
    address: str | None,
    phone: str | None,
) -> None:
    """Update a store. Omitted or empty values are left unchanged."""
    client = get_client(ctx)
    try:
        current = client.get_store(store_id)
        store = client.update_store(current, name=name, address=address, phone=phone)
    except (ApiError, ApiUnavailable) as exc:
        raise fail(exc)

    click.echo(f"Store {store['_id']} updated")
    _display_store(store)


@click.command("delete")
@click.option("--id", "store_id", required=True, help="Store ID.")
@click.confirmation_option(prompt="Delete this store and all of its products?")
@click.pass_context
def store_delete(ctx: click.Context, store_id: str) -> None:
    """Delete a store together with its products."""
    try:
        message = get_client(ctx).delete_store(store_id)
    except (ApiError, ApiUnavailable) as exc:
        raise fail(exc)

    click.echo(message)
