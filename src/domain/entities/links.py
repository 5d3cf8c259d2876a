"""
Join tables for the many-to-many relations of the data model.
"""

from sqlmodel import Field, SQLModel


class UserRoleLink(SQLModel, table=True):
    __tablename__ = "user_roles"

    user_id: int = Field(foreign_key="users.id", primary_key=True)
    role_id: int = Field(foreign_key="roles.id", primary_key=True)


class UserOrganizationLink(SQLModel, table=True):
    __tablename__ = "user_organizations"

    user_id: int = Field(foreign_key="users.id", primary_key=True)
    organization_id: int = Field(foreign_key="organizations.id", primary_key=True)


class UserPermissionLink(SQLModel, table=True):
    __tablename__ = "user_permissions"

    user_id: int = Field(foreign_key="users.id", primary_key=True)
    permission_id: int = Field(foreign_key="permissions.id", primary_key=True)


class RolePermissionLink(SQLModel, table=True):
    __tablename__ = "role_permissions"

    role_id: int = Field(foreign_key="roles.id", primary_key=True)
    permission_id: int = Field(foreign_key="permissions.id", primary_key=True)


class SeatRoleLink(SQLModel, table=True):
    __tablename__ = "seat_roles"

    seat_id: int = Field(foreign_key="seats.id", primary_key=True)
    role_id: int = Field(foreign_key="roles.id", primary_key=True)


class PlanFeatureLink(SQLModel, table=True):
    __tablename__ = "subscription_plan_features"

    subscription_plan_id: int = Field(
        foreign_key="subscription_plans.id", primary_key=True
    )
    feature_id: int = Field(foreign_key="features.id", primary_key=True)
