"""Pydantic request schemas for the storefront API.

Field names follow the existing web client (``productId``,
``totalAmount``); snake_case names are accepted as well.  Range checks
are left to the domain so every invalid payload gets the same error
shape.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class CartItemRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(alias="productId")
    quantity: int = 1


class RemoveCartItemRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(alias="productId")
    quantity: int | None = None


class FavoriteRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(alias="productId")


class OrderProductSchema(BaseModel):
    product: str
    quantity: int


class PlaceOrderRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    products: list[OrderProductSchema] = Field(default_factory=list)
    address: str = ""
    total_amount: Decimal | None = Field(default=None, alias="totalAmount")
