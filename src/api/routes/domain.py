"""
Domain API Routes

Custom hostnames of an organization.
"""

from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from src.api.utils.crud_router import register_crud_routes
from src.app.use_cases.common import ParentRef
from src.app.use_cases.organizations import DomainResponse
from src.domain.entities import Domain

router = APIRouter(prefix="/domains", tags=["Domain"])


class CreateDomainRequest(BaseModel):
    organization_id: int
    domain: str = Field(..., min_length=1, max_length=253, description="Hostname")


class UpdateDomainRequest(BaseModel):
    domain: Optional[str] = Field(None, min_length=1, max_length=253)
    verified: Optional[bool] = None


register_crud_routes(
    router,
    repository="domains",
    entity_type=Domain,
    response_model=DomainResponse,
    not_found_code="DOMAIN_NOT_FOUND",
    create_model=CreateDomainRequest,
    update_model=UpdateDomainRequest,
    parents=(ParentRef("organization_id", "organizations", "ORGANIZATION_NOT_FOUND"),),
    scope_field="organization_id",
)
