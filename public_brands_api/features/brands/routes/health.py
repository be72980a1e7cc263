"""Health, good-to-go, ping and build-info route handlers."""

import logging
from datetime import UTC, datetime

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, Field

from public_brands_api.core.settings import Settings, get_settings
from public_brands_api.features.brands.repositories import BrandRepository
from public_brands_api.features.brands.routes.brands import get_brand_repository
from public_brands_api.features.brands.usecases import BrandLookupError

logger = logging.getLogger(__name__)


class HealthCheckDto(BaseModel):
    """A single health check result."""

    name: str
    ok: bool
    severity: int = 1
    business_impact: str = Field(..., serialization_alias="businessImpact")
    technical_summary: str = Field(..., serialization_alias="technicalSummary")
    panic_guide: str = Field(..., serialization_alias="panicGuide")
    check_output: str = Field(..., serialization_alias="checkOutput")
    last_updated: datetime = Field(..., serialization_alias="lastUpdated")


class HealthDto(BaseModel):
    """Health document aggregating all checks."""

    schema_version: int = Field(default=1, serialization_alias="schemaVersion")
    name: str
    description: str
    checks: list[HealthCheckDto]
    ok: bool


async def _check_backing_store(
    repository: BrandRepository, backend: str
) -> HealthCheckDto:
    try:
        await repository.check_connectivity()
        ok, output = True, f"Connectivity to {backend} is ok"
    except BrandLookupError as e:
        logger.warning("Connectivity check against %s failed: %s", backend, e)
        ok, output = False, f"Error connecting to {backend}"

    return HealthCheckDto(
        name=f"Check connectivity to {backend}",
        ok=ok,
        business_impact="Unable to respond to Public Brands API requests",
        technical_summary=f"Cannot connect to the {backend} backing store",
        panic_guide=f"Check that the {backend} backing store is up and reachable",
        check_output=output,
        last_updated=datetime.now(UTC),
    )


router = APIRouter()


@router.get("/__health")
async def health(
    settings: Settings = Depends(get_settings),
    repository: BrandRepository = Depends(get_brand_repository),
) -> JSONResponse:
    """Report the result of every health check. Always answers 200."""
    check = await _check_backing_store(repository, settings.brands_backend)
    document = HealthDto(
        name=f"{settings.app_name} healthchecks",
        description=(
            f"Checks for accessing the {settings.brands_backend} backing store"
        ),
        checks=[check],
        ok=check.ok,
    )
    return JSONResponse(content=document.model_dump(mode="json", by_alias=True))


@router.get("/__gtg", response_class=PlainTextResponse)
async def good_to_go(
    settings: Settings = Depends(get_settings),
    repository: BrandRepository = Depends(get_brand_repository),
) -> PlainTextResponse:
    """Answer 200 only when the backing store is reachable."""
    check = await _check_backing_store(repository, settings.brands_backend)
    if not check.ok:
        return PlainTextResponse(
            check.check_output, status_code=status.HTTP_503_SERVICE_UNAVAILABLE
        )
    return PlainTextResponse("OK")


@router.get("/__ping", response_class=PlainTextResponse)
@router.get("/ping", response_class=PlainTextResponse)
async def ping() -> str:
    return "pong"


@router.get("/__build-info")
@router.get("/build-info")
async def build_info(settings: Settings = Depends(get_settings)) -> dict[str, str]:
    """Name and version of the running build."""
    return {"name": settings.app_name, "version": settings.app_version}
