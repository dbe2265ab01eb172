"""
Table names and enumerations shared by services, schemas and the SQLAlchemy mirror.

See: supabase/migrations/20251107154643_create_initial_schema.sql
"""

USERS_TABLE = "catalog_users"
PARTS_TABLE = "catalog_parts"
CART_TABLE = "cart"
VERIFICATION_CODES_TABLE = "verification_codes"

USER_STATUSES = (
    # Newly registered, waiting for an administrator
    'pending',
    'approved',
    'rejected',
)

DEFAULT_USER_STATUS = 'pending'

VERIFICATION_CODE_LENGTH = 6

# Postgres SQLSTATE codes surfaced by postgrest APIError.code
UNIQUE_VIOLATION = "23505"
CHECK_VIOLATION = "23514"
FOREIGN_KEY_VIOLATION = "23503"
