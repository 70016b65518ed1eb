"""User role enum for role-based access control."""

from enum import Enum as PyEnum


class UserRole(str, PyEnum):
    """
    Roles carried in the access token.

    - SUPERADMIN: Platform operator; manages tenants and may act on any agency
    - AGENCY_ADMIN: Manages the catalogue of the agency bound to the token
    - AGENT: Read-only access to the bound agency's trips
    - CUSTOMER: End customer; no back-office access
    """

    SUPERADMIN = "superadmin"
    AGENCY_ADMIN = "agency_admin"
    AGENT = "agent"
    CUSTOMER = "customer"
