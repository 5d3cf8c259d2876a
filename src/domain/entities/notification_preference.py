"""
NotificationPreference Entity

Per-user notification channel switches.
"""

from sqlmodel import Field

from src.domain.base import BaseRecord


class NotificationPreference(BaseRecord, table=True):
    __tablename__ = "notification_preferences"

    user_id: int = Field(foreign_key="users.id", unique=True)
    email_enabled: bool = Field(default=True)
    sms_enabled: bool = Field(default=False)
    in_app_enabled: bool = Field(default=True)
    billing_emails: bool = Field(default=True)
    product_emails: bool = Field(default=True)
    marketing_emails: bool = Field(default=False)
