from backoffice.models.role import UserRole
from backoffice.services.authorization import RoleRule

# Shared role rules for back-office endpoints
SUPERADMIN_ONLY = RoleRule.exact(UserRole.SUPERADMIN)
PLATFORM_ADMIN = RoleRule.exact(UserRole.SUPERADMIN, check_ownership=False)
AGENCY_ADMINS = RoleRule.any_of(UserRole.SUPERADMIN, UserRole.AGENCY_ADMIN)
AGENCY_STAFF = RoleRule.any_of(UserRole.SUPERADMIN, UserRole.AGENCY_ADMIN, UserRole.AGENT)
