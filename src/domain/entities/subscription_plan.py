"""
SubscriptionPlan and Feature Entities

Pricing catalog: plans bundle features.
"""

from typing import Optional

from sqlmodel import Field, Relationship

from src.domain.base import BaseRecord
from .links import PlanFeatureLink


class Feature(BaseRecord, table=True):
    __tablename__ = "features"

    name: str = Field(max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)


class SubscriptionPlan(BaseRecord, table=True):
    __tablename__ = "subscription_plans"

    name: str = Field(max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    price: float = Field(default=0.0)
    currency: str = Field(default="USD", max_length=3)
    interval: str = Field(default="month", max_length=20)  # month, year

    features: list[Feature] = Relationship(link_model=PlanFeatureLink)
