"""
Domain Entities

All persisted entities of the SaaS data model, one module per entity.
Importing this package registers every table on SQLModel.metadata.
"""

# Export all enums
from .enums import (
    ADMIN_ROLE,
    SEAT_TRANSITIONS,
    USER_ROLE,
    SeatStatus,
    SubscriptionStatus,
)

# Export join tables
from .links import (
    PlanFeatureLink,
    RolePermissionLink,
    SeatRoleLink,
    UserOrganizationLink,
    UserPermissionLink,
    UserRoleLink,
)

# Export all entities
from .user import User
from .role import Role
from .permission import Permission
from .organization import Organization, OrganizationSettings
from .domain import Domain
from .seat import Seat
from .subscription import Subscription
from .subscription_plan import Feature, SubscriptionPlan
from .payment_transaction import PaymentTransaction
from .notification_preference import NotificationPreference
from .audit_log import AuditLog, FieldChange
from .activity_log import ActivityLog
from .api_key import APIKey
from .workflow import Workflow, WorkflowStep
from .report import Report

__all__ = [
    # Enums and reserved names
    "ADMIN_ROLE",
    "USER_ROLE",
    "SEAT_TRANSITIONS",
    "SeatStatus",
    "SubscriptionStatus",
    # Join tables
    "PlanFeatureLink",
    "RolePermissionLink",
    "SeatRoleLink",
    "UserOrganizationLink",
    "UserPermissionLink",
    "UserRoleLink",
    # Entities
    "User",
    "Role",
    "Permission",
    "Organization",
    "OrganizationSettings",
    "Domain",
    "Seat",
    "Subscription",
    "SubscriptionPlan",
    "Feature",
    "PaymentTransaction",
    "NotificationPreference",
    "AuditLog",
    "FieldChange",
    "ActivityLog",
    "APIKey",
    "Workflow",
    "WorkflowStep",
    "Report",
]
