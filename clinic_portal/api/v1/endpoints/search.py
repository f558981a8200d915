"""Global search API: grouped search across procedures, training media and people."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from clinic_portal.api.v1.dependencies import get_current_caller, get_global_search_service
from clinic_portal.application.dtos.caller import AuthorizationContext
from clinic_portal.application.use_cases.search import GlobalSearchService
from clinic_portal.core.config import get_settings
from clinic_portal.core.limiter import limit_search
from clinic_portal.schemas.search import GlobalSearchResponse
from clinic_portal.shared.utils import clamp_int

router = APIRouter()


@router.get("/global", response_model=GlobalSearchResponse)
@limit_search
async def global_search(
    request: Request,
    caller: Annotated[AuthorizationContext, Depends(get_current_caller)],
    search_svc: Annotated[GlobalSearchService, Depends(get_global_search_service)],
    q: str | None = Query(None, description="Free-text query; blank returns empty groups"),
    limit: str | None = Query(
        None, description="Hits per group, 1..20 (default 6); out of range is clamped"
    ),
) -> GlobalSearchResponse:
    """Search everything the caller may see; one ranked, truncated group per entity type."""
    settings = get_settings()
    per_group = clamp_int(
        limit, 1, settings.search_max_limit, settings.search_default_limit
    )
    result = await search_svc.search(q, caller, per_group)
    return GlobalSearchResponse.from_result(result)
