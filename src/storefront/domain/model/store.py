"""Store aggregate.

A Store belongs to exactly one owner. Ownership is fixed at creation and
is the only thing that decides who may see or change the store.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from storefront.domain.exceptions import ValidationError


@dataclass
class Store:
    """A merchant location.

    Use ``Store.create()`` for new stores. The ``__init__`` stays simple
    so the repository can reconstitute persisted stores without
    re-validating.
    """

    id: str | None
    name: str
    address: str
    phone: str
    owner: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @staticmethod
    def create(owner: str, name: str, address: str = "", phone: str = "") -> Store:
        if not owner:
            raise ValidationError("Store owner is required")
        if not name or not name.strip():
            raise ValidationError("Store name is required")
        return Store(
            id=None,
            name=name.strip(),
            address=address or "",
            phone=phone or "",
            owner=owner,
        )

    def apply_changes(
        self,
        name: str | None = None,
        address: str | None = None,
        phone: str | None = None,
    ) -> None:
        """Apply the provided, non-empty overrides.

        An omitted or empty value keeps the current one: updating the
        name to ``""`` does not clear it.
        """
        if name and name.strip():
            self.name = name.strip()
        if address:
            self.address = address
        if phone:
            self.phone = phone
