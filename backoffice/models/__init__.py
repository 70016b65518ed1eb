# Import all models so they are registered on Base.metadata
from backoffice.models.base import Base
from backoffice.models.tenant import Tenant
from backoffice.models.agency import Agency
from backoffice.models.age_range import AgeRange
from backoffice.models.agency_phone import AgencyPhone, PhoneType
from backoffice.models.agency_email import AgencyEmail
from backoffice.models.agency_address import AgencyAddress, AddressType
from backoffice.models.agency_social import AgencySocial, SocialPlatform
from backoffice.models.category import Category
from backoffice.models.boarding_location import BoardingLocation
from backoffice.models.cancellation_policy import CancellationPolicy, CancellationPolicyRule
from backoffice.models.trip import Trip, TripStatus
from backoffice.models.trip_image import TripImage
from backoffice.models.trip_item import TripItem
from backoffice.models.trip_price_group import TripAgePriceGroup
from backoffice.models.trip_general_info import TripGeneralInfo

__all__ = [
    "Base",
    "Tenant",
    "Agency",
    "AgeRange",
    "AgencyPhone",
    "PhoneType",
    "AgencyEmail",
    "AgencyAddress",
    "AddressType",
    "AgencySocial",
    "SocialPlatform",
    "Category",
    "BoardingLocation",
    "CancellationPolicy",
    "CancellationPolicyRule",
    "Trip",
    "TripStatus",
    "TripImage",
    "TripItem",
    "TripAgePriceGroup",
    "TripGeneralInfo",
]
