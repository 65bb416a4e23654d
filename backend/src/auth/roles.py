"""User roles and permission hierarchy.

Role Hierarchy (descending permissions):
- ADMIN: User management (create, list, block, delete) plus everything USER can do
- USER: Own profile, orders
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles.

    Values are stored as TEXT in the database and must match exactly.
    """
    ADMIN = "ADMIN"
    USER = "USER"


# Role hierarchy: Each role includes permissions of all roles below it
ROLE_HIERARCHY = {
    UserRole.ADMIN: {UserRole.ADMIN, UserRole.USER},
    UserRole.USER: {UserRole.USER},
}


def has_permission(user_role: UserRole, required_role: UserRole) -> bool:
    """Check if a user role satisfies a required role.

    Examples:
        >>> has_permission(UserRole.ADMIN, UserRole.USER)
        True
        >>> has_permission(UserRole.USER, UserRole.ADMIN)
        False
    """
    return required_role in ROLE_HIERARCHY.get(user_role, set())
