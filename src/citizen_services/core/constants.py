"""Application-wide constants.

This module defines constants used throughout the application
to avoid magic numbers and ensure consistency.
"""

# String field lengths
MAX_EMAIL_LENGTH = 255
MAX_NAME_LENGTH = 100
MAX_LABEL_LENGTH = 100
MAX_CODE_LENGTH = 100
MAX_ENTITY_CODE_LENGTH = 100
MAX_ACTION_LENGTH = 50
MAX_DESCRIPTION_LENGTH = 255
MAX_STATUS_LENGTH = 20
COUNTRY_CODE_LENGTH = 3  # ISO 3166-1 alpha-3

# Password requirements
MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 72  # bcrypt ignores anything past 72 bytes
BCRYPT_ROUNDS = 12

# Admin identity
DEFAULT_ADMIN_ID_HEADER = "x-admin-id"

# Gate messages
ADMIN_AUTH_REQUIRED_MESSAGE = "Admin authentication required"
PERMISSION_DENIED_MESSAGE = "You do not have permission to perform this action"
PERMISSION_CHECK_FAILED_MESSAGE = "Error checking permissions"
