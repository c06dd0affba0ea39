import click
import uvicorn

from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)
from storefront.infrastructure.cli.store_commands import (
    store_create,
    store_delete,
    store_list,
    store_show,
    store_update,
)
from storefront.infrastructure.config import settings
from storefront.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--user", default=None, help="Identity to act as (defaults to USER_ID).")
@click.pass_context
def cli(ctx: click.Context, user: str | None) -> None:
    """Storefront: store and product administration"""
    configure_logging(settings.LOG_LEVEL)
    ctx.ensure_object(dict)
    if user:
        ctx.obj["user"] = user


@cli.command()
@click.option("--host", default=None, help="Bind address (defaults to HOST).")
@click.option("--port", default=None, type=int, help="Port (defaults to PORT).")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    uvicorn.run(
        "storefront.infrastructure.api.app:app",
        host=host or settings.HOST,
        port=port or settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


@cli.group()
def store() -> None:
    """Manage stores."""


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
store.add_command(store_create)
store.add_command(store_delete)
store.add_command(store_list)
store.add_command(store_show)
store.add_command(store_update)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
