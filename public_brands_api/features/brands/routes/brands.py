"""Brand read route handler."""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic_core import PydanticSerializationError

from public_brands_api.core.settings import Settings, get_settings
from public_brands_api.db.concepts import get_concepts_client
from public_brands_api.db.postgres import get_graph_db_pool
from public_brands_api.features.brands.repositories import (
    AgeRepository,
    BrandRepository,
    ConceptsRepository,
)
from public_brands_api.features.brands.services import (
    AuthorityPrecedence,
    BrandTransformer,
    TypeHierarchyError,
    is_brand,
)
from public_brands_api.features.brands.usecases import (
    BrandLookupError,
    GetBrandUseCaseImpl,
    InvalidBrandIdError,
)
from public_brands_api.features.brands.usecases.protocols import GetBrandUseCase

JSON_MEDIA_TYPE = "application/json; charset=UTF-8"
BRAND_NOT_FOUND = "brand not found"
BRAND_FAILED = "failed to return brand"
UUID_REQUIRED = "uuid required"

logger = logging.getLogger(__name__)


async def get_brand_repository(
    settings: Settings = Depends(get_settings),
) -> BrandRepository:
    """Dependency injection for the configured backing store."""
    if settings.brands_backend == "graph":
        pool = await get_graph_db_pool()
        return AgeRepository(
            pool,
            graph_name=settings.age_graph_name,
            precedence=AuthorityPrecedence(
                settings.authority_precedence, accept=is_brand
            ),
        )

    client = await get_concepts_client()
    return ConceptsRepository(client)


async def get_get_brand_use_case(
    settings: Settings = Depends(get_settings),
    repository: BrandRepository = Depends(get_brand_repository),
) -> GetBrandUseCase:
    """Dependency injection for the get brand use case."""
    return GetBrandUseCaseImpl(
        repository=repository,
        transformer=BrandTransformer(env=settings.env),
    )


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


router = APIRouter()


@router.get("/brands/", response_model=None)
async def get_brand_without_id() -> Response:
    """Reject a brand request whose id segment is empty."""
    return _message(status.HTTP_400_BAD_REQUEST, UUID_REQUIRED)


@router.get("/brands/{uuid}", response_model=None)
async def get_brand(
    uuid: str,
    request: Request,
    settings: Settings = Depends(get_settings),
    use_case: GetBrandUseCase = Depends(get_get_brand_use_case),
) -> Response:
    """Retrieve a brand with its parent and child brands.

    Aliases of a brand are redirected to the canonical brand's URL. Unknown
    ids and concepts that are not brands are reported as not found.
    """
    try:
        result = await use_case.get_brand(uuid)
    except InvalidBrandIdError as e:
        return _message(status.HTTP_400_BAD_REQUEST, str(e))
    except (BrandLookupError, TypeHierarchyError) as e:
        logger.error("Failed to read brand %s: %s", uuid, e)
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, BRAND_FAILED)

    if result.canonical_id and result.canonical_id != uuid:
        location = str(request.url).replace(uuid, result.canonical_id, 1)
        return RedirectResponse(
            url=location, status_code=status.HTTP_301_MOVED_PERMANENTLY
        )
    if not result.found or result.brand is None:
        return _message(status.HTTP_404_NOT_FOUND, BRAND_NOT_FOUND)

    try:
        body = result.brand.to_json()
    except (PydanticSerializationError, ValueError) as e:
        logger.error("Brand %s could not be encoded: %s", uuid, e)
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, BRAND_FAILED)

    return Response(
        content=body,
        status_code=status.HTTP_200_OK,
        media_type=JSON_MEDIA_TYPE,
        headers={"Cache-Control": settings.cache_control_header},
    )
