"""
Pydantic schemas for request/response validation
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from catalog.application.dto import CategoryDTO, ProductDTO, StockDTO
from catalog.domain.model.text import is_blank


class ProductCreateSchema(BaseModel):
    """Request body for registering a product"""

    model_config = ConfigDict(strict=True, populate_by_name=True)

    name: str = Field(..., min_length=1, description="Product name", examples=["万年筆"])
    price: int = Field(..., ge=50, le=10_000, description="Unit price in yen (50-10000)")
    category_id: str = Field(
        ...,
        alias="categoryId",
        min_length=1,
        description="Category UUID",
        examples=["2d8e2b0d-49ef-4b36-a4f3-1c6a2e0b84c4"],
    )
    stock_quantity: int = Field(
        ..., alias="stockQuantity", ge=0, le=100, description="Initial stock (0-100)"
    )

    @field_validator("name", "category_id")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if is_blank(value):
            raise ValueError("must not be blank")
        return value

    def to_dto(self) -> ProductDTO:
        """New product: no ids yet, category known by id only."""
        return ProductDTO(
            id=None,
            name=self.name,
            price=self.price,
            category=CategoryDTO(id=self.category_id, name=None),
            stock=StockDTO(id=None, quantity=self.stock_quantity),
        )


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str


class StockResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    quantity: int


class ProductResponse(BaseModel):
    """A product with its category and stock"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    price: int
    category: CategoryResponse
    stock: StockResponse


class ErrorResponse(BaseModel):
    detail: str


class HealthResponse(BaseModel):
    status: str
    service: str
