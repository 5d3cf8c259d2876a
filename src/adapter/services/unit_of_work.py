from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.access_repository import (
    APIKeyRepository,
    NotificationPreferenceRepository,
)
from src.adapter.repositories.billing_repository import (
    FeatureRepository,
    PaymentTransactionRepository,
    SubscriptionPlanRepository,
    SubscriptionRepository,
)
from src.adapter.repositories.log_repository import ActivityLogRepository, AuditLogRepository
from src.adapter.repositories.organization_repository import (
    DomainRepository,
    OrganizationRepository,
    SeatRepository,
)
from src.adapter.repositories.role_repository import PermissionRepository, RoleRepository
from src.adapter.repositories.user_repository import UserRepository
from src.adapter.repositories.workflow_repository import ReportRepository, WorkflowRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.roles = RoleRepository(self.session)
        self.permissions = PermissionRepository(self.session)
        self.organizations = OrganizationRepository(self.session)
        self.domains = DomainRepository(self.session)
        self.seats = SeatRepository(self.session)
        self.subscriptions = SubscriptionRepository(self.session)
        self.subscription_plans = SubscriptionPlanRepository(self.session)
        self.features = FeatureRepository(self.session)
        self.payment_transactions = PaymentTransactionRepository(self.session)
        self.notification_preferences = NotificationPreferenceRepository(self.session)
        self.api_keys = APIKeyRepository(self.session)
        self.workflows = WorkflowRepository(self.session)
        self.reports = ReportRepository(self.session)
        self.audit_logs = AuditLogRepository(self.session)
        self.activity_logs = ActivityLogRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
