"""
Use Cases

Organized into domain folders:
- common/: Generic CRUD and the audit trail
- auth/: Login, verification and admin bootstrap
- users/: User management and access grants
- organizations/: Organizations, seats and domains
- access/: Roles, permissions, API keys and notification preferences
- billing/: Subscriptions, plans and payment transactions
- audit/: Audit and activity logs
- workflows/: Workflows and reports

Import from subdirectories for better organization.
"""

from .auth import BootstrapAdminUseCase, LoginUseCase, VerifyUserUseCase
from .users import (
    AssignUserRoleUseCase,
    CreateUserUseCase,
    GetUserAccessUseCase,
    GrantUserPermissionUseCase,
    UpdateUserUseCase,
)
from .organizations import (
    AssignSeatRoleUseCase,
    ChangeSeatStatusUseCase,
    CreateOrganizationUseCase,
    CreateSeatUseCase,
)
from .access import (
    AddRolePermissionUseCase,
    CreateNotificationPreferenceUseCase,
    IssueAPIKeyUseCase,
    TouchAPIKeyUseCase,
)
from .billing import (
    AddPlanFeatureUseCase,
    CreateSubscriptionUseCase,
    ListPaymentsUseCase,
    RecordPaymentUseCase,
)
from .audit import (
    ListActivityLogsUseCase,
    ListAuditLogsUseCase,
    RecordActivityUseCase,
    RecordAuditLogUseCase,
)
from .workflows import CreateWorkflowUseCase

__all__ = [
    # Auth
    "LoginUseCase",
    "VerifyUserUseCase",
    "BootstrapAdminUseCase",
    # Users
    "CreateUserUseCase",
    "UpdateUserUseCase",
    "AssignUserRoleUseCase",
    "GrantUserPermissionUseCase",
    "GetUserAccessUseCase",
    # Organizations
    "CreateOrganizationUseCase",
    "CreateSeatUseCase",
    "ChangeSeatStatusUseCase",
    "AssignSeatRoleUseCase",
    # Access
    "AddRolePermissionUseCase",
    "IssueAPIKeyUseCase",
    "TouchAPIKeyUseCase",
    "CreateNotificationPreferenceUseCase",
    # Billing
    "CreateSubscriptionUseCase",
    "AddPlanFeatureUseCase",
    "RecordPaymentUseCase",
    "ListPaymentsUseCase",
    # Audit
    "RecordAuditLogUseCase",
    "ListAuditLogsUseCase",
    "RecordActivityUseCase",
    "ListActivityLogsUseCase",
    # Workflows
    "CreateWorkflowUseCase",
]
