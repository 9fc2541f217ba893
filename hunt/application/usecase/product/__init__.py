"""Product use cases."""

from .common import (
    ProductListResponse,
    ProductResponse,
    ProductWithVotesResponse,
    RankedProductListResponse,
)
from .create_product import CreateProductRequest, CreateProductUseCase
from .get_product import GetProductRequest, GetProductResponse, GetProductUseCase
from .list_products import (
    ListProductsByAuthorRequest,
    ListProductsByAuthorUseCase,
    ListProductsByLocationRequest,
    ListProductsByLocationUseCase,
    ListProductsByTagsRequest,
    ListProductsByTagsUseCase,
    ListProductsRequest,
    ListProductsUseCase,
)
from .rank_products import (
    GetProductsWithVotesRequest,
    GetProductsWithVotesUseCase,
    GetTrendingProductsRequest,
    GetTrendingProductsUseCase,
)
from .update_product import UpdateProductRequest, UpdateProductUseCase

__all__ = [
    "ProductResponse",
    "ProductWithVotesResponse",
    "ProductListResponse",
    "RankedProductListResponse",
    "CreateProductRequest",
    "CreateProductUseCase",
    "GetProductRequest",
    "GetProductResponse",
    "GetProductUseCase",
    "ListProductsRequest",
    "ListProductsUseCase",
    "ListProductsByLocationRequest",
    "ListProductsByLocationUseCase",
    "ListProductsByTagsRequest",
    "ListProductsByTagsUseCase",
    "ListProductsByAuthorRequest",
    "ListProductsByAuthorUseCase",
    "GetProductsWithVotesRequest",
    "GetProductsWithVotesUseCase",
    "GetTrendingProductsRequest",
    "GetTrendingProductsUseCase",
    "UpdateProductRequest",
    "UpdateProductUseCase",
]
