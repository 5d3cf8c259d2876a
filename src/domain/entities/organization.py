"""
Organization Entity

The tenancy root: billing, audit, seat, domain and workflow records are
scoped beneath an organization.
"""

from typing import Optional, TYPE_CHECKING

from pydantic import BaseModel
from sqlmodel import JSON, Column, Field, Relationship

from src.domain.base import BaseRecord
from .links import UserOrganizationLink

if TYPE_CHECKING:
    from .api_key import APIKey
    from .domain import Domain
    from .seat import Seat
    from .subscription import Subscription
    from .user import User
    from .workflow import Workflow


class OrganizationSettings(BaseModel):
    """Branding settings stored with the organization"""

    logo_url: Optional[str] = None
    theme_color: Optional[str] = None


class Organization(BaseRecord, table=True):
    """
    Organization entity - tenant boundary.

    Business Rules:
    - Users join through the user_organizations relation, never exclusively
    - settings holds an OrganizationSettings document
    - Deleting an organization is a soft delete; scoped rows stay in place
    """

    __tablename__ = "organizations"

    name: str = Field(max_length=255)
    subscription_plan_id: Optional[int] = Field(
        default=None, foreign_key="subscription_plans.id"
    )
    settings: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Relationships
    users: list["User"] = Relationship(
        back_populates="organizations", link_model=UserOrganizationLink
    )
    domains: list["Domain"] = Relationship()
    seats: list["Seat"] = Relationship()
    subscriptions: list["Subscription"] = Relationship()
    api_keys: list["APIKey"] = Relationship()
    workflows: list["Workflow"] = Relationship()

    def get_settings(self) -> OrganizationSettings:
        return OrganizationSettings.model_validate(self.settings or {})
