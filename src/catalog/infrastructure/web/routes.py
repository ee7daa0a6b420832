"""FastAPI routes for the product catalog"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from catalog.application.category_queries import (
    CheckProductNameHandler,
    ListCategoriesHandler,
    ShowCategoryHandler,
)
from catalog.application.register_product import RegisterProductHandler
from catalog.application.search_product import (
    SearchProductByNameHandler,
    ShowProductHandler,
)
from catalog.application.unit_of_work import UnitOfWorkFactory
from catalog.domain.model.text import is_blank
from catalog.infrastructure.web.errors import InputValidationError
from catalog.infrastructure.web.schemas import (
    CategoryResponse,
    ErrorResponse,
    ProductCreateSchema,
    ProductResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/products", tags=["products"])

_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def get_uow_factory(request: Request) -> UnitOfWorkFactory:
    return request.app.state.uow_factory


def _require_text(field: str, value: str) -> str:
    if is_blank(value):
        raise InputValidationError(field, "must not be blank")
    return value


@router.get("/categories", response_model=list[CategoryResponse])
def list_categories(uow_factory: UnitOfWorkFactory = Depends(get_uow_factory)):
    """List every category, e.g. for the registration form"""
    return ListCategoriesHandler(uow_factory).handle()


@router.get(
    "/categories/{category_id}",
    response_model=CategoryResponse,
    responses={k: _ERRORS[k] for k in (400, 404)},
)
def get_category(
    category_id: str, uow_factory: UnitOfWorkFactory = Depends(get_uow_factory)
):
    """Get a category by its UUID (any letter case)"""
    return ShowCategoryHandler(uow_factory).handle(category_id)


@router.get(
    "/exists",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={k: _ERRORS[k] for k in (400, 409)},
)
def check_name(
    name: str = Query(..., description="Product name"),
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
):
    """204 if the name is free, 409 if a product already uses it"""
    CheckProductNameHandler(uow_factory).handle(_require_text("name", name))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/search",
    response_model=ProductResponse,
    responses={k: _ERRORS[k] for k in (400, 404)},
)
def search_by_name(
    name: str = Query(..., description="Exact product name"),
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
):
    """Find a product by its exact name"""
    return SearchProductByNameHandler(uow_factory).handle(_require_text("name", name))


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ERRORS,
)
@router.post("/", include_in_schema=False)
def register_product(
    body: ProductCreateSchema,
    uow_factory: UnitOfWorkFactory = Depends(get_uow_factory),
):
    """Register a new product with its initial stock"""
    logger.info(f"Registering product: name={body.name!r}, category={body.category_id}")
    created = RegisterProductHandler(uow_factory).handle(body.to_dto())
    payload = ProductResponse.model_validate(created).model_dump()
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=payload,
        headers={"Location": f"/api/products/{created.id}"},
    )


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={k: _ERRORS[k] for k in (400, 404)},
)
def get_product(
    product_id: str, uow_factory: UnitOfWorkFactory = Depends(get_uow_factory)
):
    """Get a product by its UUID"""
    return ShowProductHandler(uow_factory).handle(product_id)
