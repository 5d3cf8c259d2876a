"""
Role Entity

Named bundle of permissions.
"""

from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship

from src.domain.base import BaseRecord
from .links import RolePermissionLink

if TYPE_CHECKING:
    from .permission import Permission


class Role(BaseRecord, table=True):
    """
    Role entity - named set of permissions, attached to users and seats.

    Business Rules:
    - "admin" and "user" are reserved names compared by the request gate
    - A user holding the "admin" role is issued admin tokens at login
    """

    __tablename__ = "roles"

    name: str = Field(unique=True, index=True, max_length=100)

    permissions: list["Permission"] = Relationship(link_model=RolePermissionLink)
