# Security module
from hotel_manager.security.auth import (
    get_password_hash, verify_password, create_access_token,
    get_current_user, require_role, require_admin
)

__all__ = [
    'get_password_hash', 'verify_password', 'create_access_token',
    'get_current_user', 'require_role', 'require_admin'
]
