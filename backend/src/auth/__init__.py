"""Authentication and authorization: JWT, password hashing, RBAC."""
