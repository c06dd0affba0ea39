"""Request and response bodies of the HTTP API.

Field names on the wire follow the admin client's contract: ``_id``,
``createdAt``, ``startDate`` and so on.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from storefront.application.dto import (
    DiscountDTO,
    DiscountSpec,
    ModifierOptionSpec,
    ModifierSpec,
    ProductDTO,
    StoreDTO,
)


# ---------- Stores ----------

class StoreIn(BaseModel):
    name: str
    address: str = ""
    phone: str = ""


class StoreUpdate(BaseModel):
    name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None


class StoreOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    name: str
    address: str
    phone: str
    owner: str
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    @classmethod
    def from_dto(cls, dto: StoreDTO) -> "StoreOut":
        return cls(
            id=dto.id,
            name=dto.name,
            address=dto.address,
            phone=dto.phone,
            owner=dto.owner,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class MessageOut(BaseModel):
    message: str


# ---------- Products ----------

class ModifierOptionIn(BaseModel):
    name: str = ""
    price: Decimal = Field(..., ge=0)


class ModifierIn(BaseModel):
    name: str = ""
    options: List[ModifierOptionIn] = Field(default_factory=list)

    def to_spec(self) -> ModifierSpec:
        return ModifierSpec(
            name=self.name,
            options=[ModifierOptionSpec(o.name, str(o.price)) for o in self.options],
        )


class DiscountIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    type: Literal["percentage", "fixed"]
    value: Decimal
    start_date: date = Field(..., alias="startDate")
    end_date: date = Field(..., alias="endDate")

    def to_spec(self) -> DiscountSpec:
        return DiscountSpec(
            name=self.name,
            type=self.type,
            value=str(self.value),
            start_date=self.start_date,
            end_date=self.end_date,
        )


class ProductIn(BaseModel):
    name: str
    description: Optional[str] = None
    price: Decimal = Field(..., ge=0)
    category: str
    store: str
    stock: int = Field(..., ge=0)
    image: Optional[str] = None
    modifiers: List[ModifierIn] = Field(default_factory=list)
    discounts: List[DiscountIn] = Field(default_factory=list)


class ProductUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0)
    category: Optional[str] = None
    store: Optional[str] = None
    stock: Optional[int] = Field(None, ge=0)
    image: Optional[str] = None
    modifiers: Optional[List[ModifierIn]] = None
    discounts: Optional[List[DiscountIn]] = None


class ModifierOptionOut(BaseModel):
    name: str
    price: float


class ModifierOut(BaseModel):
    name: str
    options: List[ModifierOptionOut]


class DiscountOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    type: str
    value: float
    start_date: date = Field(..., alias="startDate")
    end_date: date = Field(..., alias="endDate")

    @classmethod
    def from_dto(cls, dto: DiscountDTO) -> "DiscountOut":
        return cls(
            name=dto.name,
            type=dto.type,
            value=float(dto.value),
            start_date=dto.start_date,
            end_date=dto.end_date,
        )


class ProductOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    name: str
    description: str = ""
    price: float
    category: str
    store: str
    stock: int
    image: Optional[str] = None
    modifiers: List[ModifierOut] = Field(default_factory=list)
    discounts: List[DiscountOut] = Field(default_factory=list)
    effective_price: float = Field(..., alias="effectivePrice")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    @classmethod
    def from_dto(cls, dto: ProductDTO) -> "ProductOut":
        return cls(
            id=dto.id,
            name=dto.name,
            description=dto.description,
            price=float(dto.price),
            category=dto.category,
            store=dto.store,
            stock=dto.stock,
            image=dto.image,
            modifiers=[
                ModifierOut(
                    name=m.name,
                    options=[ModifierOptionOut(name=o.name, price=float(o.price)) for o in m.options],
                )
                for m in dto.modifiers
            ],
            discounts=[DiscountOut.from_dto(d) for d in dto.discounts],
            effective_price=float(dto.effective_price),
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )
