from abc import ABC, abstractmethod

from src.app.repositories.access_repository import (
    IAPIKeyRepository,
    INotificationPreferenceRepository,
)
from src.app.repositories.billing_repository import (
    IFeatureRepository,
    IPaymentTransactionRepository,
    ISubscriptionPlanRepository,
    ISubscriptionRepository,
)
from src.app.repositories.log_repository import IActivityLogRepository, IAuditLogRepository
from src.app.repositories.organization_repository import (
    IDomainRepository,
    IOrganizationRepository,
    ISeatRepository,
)
from src.app.repositories.role_repository import IPermissionRepository, IRoleRepository
from src.app.repositories.user_repository import IUserRepository
from src.app.repositories.workflow_repository import IReportRepository, IWorkflowRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    roles: IRoleRepository
    permissions: IPermissionRepository
    organizations: IOrganizationRepository
    domains: IDomainRepository
    seats: ISeatRepository
    subscriptions: ISubscriptionRepository
    subscription_plans: ISubscriptionPlanRepository
    features: IFeatureRepository
    payment_transactions: IPaymentTransactionRepository
    notification_preferences: INotificationPreferenceRepository
    api_keys: IAPIKeyRepository
    workflows: IWorkflowRepository
    reports: IReportRepository
    audit_logs: IAuditLogRepository
    activity_logs: IActivityLogRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
