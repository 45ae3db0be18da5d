"""Product API views.

Exposes the ``ProductService`` via HTTP using DRF ``APIView`` classes.
Domain exceptions are caught by type and translated into HTTP status
codes; every failure body is ``{"description": "<message>"}``.

    ProductNotFound          -> 404
    InvalidRequest           -> 400
    ProductValidationError   -> 400
    ProductPersistenceError  -> 400 on writes, 503 on reads
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Optional

import structlog
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.exceptions import ParseError, UnsupportedMediaType
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.products.dtos import CreateProductDTO
from modules.products.exceptions import (
    InvalidRequest,
    ProductNotFound,
    ProductPersistenceError,
    ProductValidationError,
)
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ErrorSerializer, ProductSerializer
from modules.products.services import ProductService

logger = structlog.get_logger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_ID_MIN, _ID_MAX = -(2**63), 2**63 - 1

_ERROR_RESPONSE = OpenApiResponse(ErrorSerializer)


def _error(exc: Exception, status_code: int) -> Response:
    return Response({"description": str(exc)}, status=status_code)


# ----------------------------------------------------------------------
# Input parsing
# ----------------------------------------------------------------------


def parse_id(raw: Optional[str]) -> int:
    if not raw:
        raise InvalidRequest("Id parameter is required")
    if not _INTEGER.fullmatch(raw):
        raise InvalidRequest(f"Invalid id parameter {raw!r}: not an integer")
    value = int(raw)
    if not _ID_MIN <= value <= _ID_MAX:
        raise InvalidRequest(f"Invalid id parameter {raw!r}: out of range")
    return value


def parse_price(raw: str) -> float:
    try:
        price = float(raw)
    except ValueError:
        raise InvalidRequest(f"Invalid price parameter {raw!r}: not a number") from None
    if not math.isfinite(price):
        raise InvalidRequest(f"Invalid price parameter {raw!r}: must be finite")
    return price


def parse_create_body(request: Request) -> CreateProductDTO:
    """Build a ``CreateProductDTO`` from the JSON body.

    Absent fields fall back to empty/zero values; fields of the wrong
    type are rejected.
    """
    try:
        data = request.data
    except (ParseError, UnsupportedMediaType) as exc:
        raise InvalidRequest(str(exc.detail)) from exc

    if not isinstance(data, Mapping):
        raise InvalidRequest("Request body must be a JSON object")

    try:
        return CreateProductDTO(
            name=data.get("name", ""),
            price=data.get("price", 0),
            discount=data.get("discount", 0),
            store=data.get("store", ""),
        )
    except PydanticValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        raise InvalidRequest(f"Invalid request body: {problems}") from exc


# ----------------------------------------------------------------------
# Views
# ----------------------------------------------------------------------


class ProductServiceMixin:
    """Give a view its ``ProductService``.

    Defaults to the ORM-backed stack; tests inject another one through
    ``View.as_view(service=...)``.
    """

    service: Optional[ProductService] = None

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        if self.service is None:
            self.service = ProductService(repository=ProductDjangoRepository())


class ProductListView(ProductServiceMixin, APIView):
    """/api/v1/products"""

    @extend_schema(
        parameters=[OpenApiParameter("store", str, description="Exact store name")],
        responses={200: ProductSerializer(many=True), 503: _ERROR_RESPONSE},
    )
    def get(self, request: Request) -> Response:
        """GET /api/v1/products[?store=<name>]"""
        store = request.query_params.get("store", "")
        try:
            if store:
                products = self.service.get_all_by_store(store)
            else:
                products = self.service.get_all()
        except ProductPersistenceError as exc:
            return _error(exc, status.HTTP_503_SERVICE_UNAVAILABLE)

        return Response(ProductSerializer(products, many=True).data)

    @extend_schema(
        request=ProductSerializer,
        responses={201: None, 400: _ERROR_RESPONSE},
    )
    def post(self, request: Request) -> Response:
        """POST /api/v1/products"""
        try:
            dto = parse_create_body(request)
            product = self.service.add(dto)
        except (InvalidRequest, ProductValidationError, ProductPersistenceError) as exc:
            logger.info("product.create_rejected", reason=str(exc))
            return _error(exc, status.HTTP_400_BAD_REQUEST)

        logger.info("product.created", product_id=product.id)
        return Response(status=status.HTTP_201_CREATED)


class ProductDetailView(ProductServiceMixin, APIView):
    """/api/v1/products/{id}"""

    @extend_schema(
        responses={
            200: ProductSerializer,
            400: _ERROR_RESPONSE,
            404: _ERROR_RESPONSE,
            503: _ERROR_RESPONSE,
        },
    )
    def get(self, request: Request, pk: Optional[str] = None) -> Response:
        """GET /api/v1/products/{id}"""
        try:
            product = self.service.get_by_id(parse_id(pk))
        except InvalidRequest as exc:
            return _error(exc, status.HTTP_400_BAD_REQUEST)
        except ProductNotFound as exc:
            return _error(exc, status.HTTP_404_NOT_FOUND)
        except ProductPersistenceError as exc:
            return _error(exc, status.HTTP_503_SERVICE_UNAVAILABLE)

        return Response(ProductSerializer(product).data)

    @extend_schema(
        request=None,
        parameters=[OpenApiParameter("price", float, required=True)],
        responses={200: None, 400: _ERROR_RESPONSE, 404: _ERROR_RESPONSE},
    )
    def put(self, request: Request, pk: Optional[str] = None) -> Response:
        """PUT /api/v1/products/{id}?price=<float>"""
        raw_price = request.query_params.get("price", "")
        try:
            if not pk or not raw_price:
                raise InvalidRequest("Id and price parameters are required")
            self.service.update_price(parse_id(pk), parse_price(raw_price))
        except (InvalidRequest, ProductPersistenceError) as exc:
            return _error(exc, status.HTTP_400_BAD_REQUEST)
        except ProductNotFound as exc:
            return _error(exc, status.HTTP_404_NOT_FOUND)

        return Response(status=status.HTTP_200_OK)

    @extend_schema(
        responses={200: None, 400: _ERROR_RESPONSE, 404: _ERROR_RESPONSE},
    )
    def delete(self, request: Request, pk: Optional[str] = None) -> Response:
        """DELETE /api/v1/products/{id}"""
        try:
            self.service.delete_by_id(parse_id(pk))
        except (InvalidRequest, ProductPersistenceError) as exc:
            return _error(exc, status.HTTP_400_BAD_REQUEST)
        except ProductNotFound as exc:
            return _error(exc, status.HTTP_404_NOT_FOUND)

        return Response(status=status.HTTP_200_OK)
