"""Product procedures."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from hunt.application.usecase.product import (
    CreateProductRequest,
    CreateProductUseCase,
    GetProductRequest,
    GetProductsWithVotesRequest,
    GetProductsWithVotesUseCase,
    GetProductUseCase,
    GetTrendingProductsRequest,
    GetTrendingProductsUseCase,
    ListProductsByAuthorRequest,
    ListProductsByAuthorUseCase,
    ListProductsByLocationRequest,
    ListProductsByLocationUseCase,
    ListProductsByTagsRequest,
    ListProductsByTagsUseCase,
    ListProductsRequest,
    ListProductsUseCase,
    ProductResponse,
    ProductWithVotesResponse,
    UpdateProductRequest,
    UpdateProductUseCase,
)
from hunt.domain.value import Timeframe

router = APIRouter(tags=["products"], route_class=DishkaRoute)


@router.post("/createProduct", response_model=ProductResponse)
async def create_product(
    request: CreateProductRequest,
    create_product_use_case: FromDishka[CreateProductUseCase],
) -> ProductResponse:
    """Submit a product. Fails with 404 if the author doesn't exist."""
    return await create_product_use_case.execute(request)


@router.get("/getProducts", response_model=list[ProductResponse])
async def get_products(
    list_products_use_case: FromDishka[ListProductsUseCase],
) -> list[ProductResponse]:
    """List locally made products, newest first."""
    response = await list_products_use_case.execute(ListProductsRequest())
    return response.products


@router.get("/getProductById", response_model=ProductResponse | None)
async def get_product_by_id(
    id: UUID,
    get_product_use_case: FromDishka[GetProductUseCase],
) -> ProductResponse | None:
    """Look up a product; null if there is none."""
    response = await get_product_use_case.execute(GetProductRequest(id=id))
    return response.product


@router.get("/getProductsByLocation", response_model=list[ProductResponse])
async def get_products_by_location(
    location: str,
    list_products_by_location_use_case: FromDishka[ListProductsByLocationUseCase],
) -> list[ProductResponse]:
    """List locally made products at exactly this location."""
    response = await list_products_by_location_use_case.execute(
        ListProductsByLocationRequest(location=location)
    )
    return response.products


@router.get("/getProductsByTags", response_model=list[ProductResponse])
async def get_products_by_tags(
    list_products_by_tags_use_case: FromDishka[ListProductsByTagsUseCase],
    tags: list[str] = Query(default=[]),
) -> list[ProductResponse]:
    """List locally made products sharing any of the tags.

    Tags are passed as repeated query parameters (``?tags=a&tags=b``);
    none at all means no tag filter.
    """
    response = await list_products_by_tags_use_case.execute(
        ListProductsByTagsRequest(tags=tags)
    )
    return response.products


@router.get("/getProductsByAuthor", response_model=list[ProductResponse])
async def get_products_by_author(
    author_id: UUID,
    list_products_by_author_use_case: FromDishka[ListProductsByAuthorUseCase],
) -> list[ProductResponse]:
    """List every product by an author, locally made or not."""
    response = await list_products_by_author_use_case.execute(
        ListProductsByAuthorRequest(author_id=author_id)
    )
    return response.products


@router.post("/updateProduct", response_model=ProductResponse)
async def update_product(
    request: UpdateProductRequest,
    update_product_use_case: FromDishka[UpdateProductUseCase],
) -> ProductResponse:
    """Edit a product; only the fields present in the body change."""
    return await update_product_use_case.execute(request)


@router.get("/getProductsWithVotes", response_model=list[ProductWithVotesResponse])
async def get_products_with_votes(
    get_products_with_votes_use_case: FromDishka[GetProductsWithVotesUseCase],
    user_id: UUID | None = None,
) -> list[ProductWithVotesResponse]:
    """Rank products by all-time votes.

    With ``user_id`` each product reports whether that user voted on it.
    """
    response = await get_products_with_votes_use_case.execute(
        GetProductsWithVotesRequest(user_id=user_id)
    )
    return response.products


@router.get("/getTrendingProducts", response_model=list[ProductWithVotesResponse])
async def get_trending_products(
    get_trending_products_use_case: FromDishka[GetTrendingProductsUseCase],
    timeframe: Timeframe = Timeframe.DAILY,
) -> list[ProductWithVotesResponse]:
    """Rank products by votes in the last day or week."""
    response = await get_trending_products_use_case.execute(
        GetTrendingProductsRequest(timeframe=timeframe)
    )
    return response.products
