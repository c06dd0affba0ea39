"""Shared helpers for CLI commands."""

from __future__ import annotations

import click

from storefront.infrastructure.client.api_client import (
    ApiError,
    ApiUnavailable,
    StorefrontClient,
)
from storefront.infrastructure.config import settings


def get_client(ctx: click.Context) -> StorefrontClient:
    """Return the client for this invocation, building it on first use."""
    obj = ctx.ensure_object(dict)
    if "client" not in obj:
        user = obj.get("user") or settings.USER_ID
        if not user:
            raise click.ClickException("No identity: pass --user or set USER_ID")
        obj["client"] = StorefrontClient(
            base_url=settings.API_URL,
            user_id=user,
            timeout=settings.API_TIMEOUT,
        )
        ctx.call_on_close(obj["client"].close)
    return obj["client"]


def fail(exc: ApiError | ApiUnavailable) -> click.ClickException:
    if isinstance(exc, ApiUnavailable):
        return click.ClickException(f"API unavailable: {exc}")
    if exc.kind == "unauthorized":
        return click.ClickException(f"{exc.message}: pass --user or set USER_ID")
    if exc.kind == "server":
        return click.ClickException(
            f"Server error, try again later: {exc.message} (HTTP {exc.status_code})"
        )
    return click.ClickException(f"{exc.message} (HTTP {exc.status_code})")
