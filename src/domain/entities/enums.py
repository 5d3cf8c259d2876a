"""
Domain Enums

Enumeration types and reserved names used across domain entities.
"""

from enum import Enum

# Reserved role names the request gate compares token roles against
ADMIN_ROLE = "admin"
USER_ROLE = "user"


class SubscriptionStatus(str, Enum):
    """Subscription status"""

    active = "active"
    inactive = "inactive"
    trialing = "trialing"
    canceled = "canceled"


class SeatStatus(str, Enum):
    """Seat status within an organization"""

    invited = "invited"
    active = "active"
    inactive = "inactive"


# invited -> active -> inactive, with reactivation of an inactive seat
SEAT_TRANSITIONS = {
    SeatStatus.invited: {SeatStatus.active, SeatStatus.inactive},
    SeatStatus.active: {SeatStatus.inactive},
    SeatStatus.inactive: {SeatStatus.active},
}
