"""
Access resolution: folds a user's Role/Permission graph into the role string
and permission set that bearer tokens carry.
"""

from typing import List, Optional, Tuple

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ADMIN_ROLE, USER_ROLE, Role, User

RESERVED_ROLES = (ADMIN_ROLE, USER_ROLE)


def resolve_access(user: User) -> Tuple[str, List[str], List[str]]:
    """
    Resolve (token role, role names, permission names) for a user whose
    roles, role permissions and direct permissions are loaded.

    Soft-deleted roles and permissions grant nothing.
    """
    roles = [role for role in user.roles if role.deleted_at is None]
    names = sorted(role.name for role in roles)

    permissions = {p.name for p in user.permissions if p.deleted_at is None}
    for role in roles:
        permissions.update(p.name for p in role.permissions if p.deleted_at is None)

    token_role = ADMIN_ROLE if ADMIN_ROLE in names else USER_ROLE
    return token_role, names, sorted(permissions)


async def ensure_role(uow: UnitOfWork, name: str) -> Optional[Role]:
    """
    Get a live role by name. Reserved roles are created on first use;
    any other missing role yields None.
    """
    role = await uow.roles.get_by_name(name)
    if role is None and name in RESERVED_ROLES:
        role = await uow.roles.create(Role(name=name))
    return role
