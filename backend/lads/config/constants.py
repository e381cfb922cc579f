from enum import Enum as PyEnum

# Default storage location for waitlist entries
DEFAULT_DB_NAME = "lads"
DEFAULT_WAITLIST_COLLECTION = "waitlist"

DEFAULT_CORS_ORIGINS = ["http://localhost:3000"]

# Enum class representing waitlist entry states
class WaitlistStatus(str, PyEnum):
    PENDING = "pending"  # Set on signup, nothing moves it further yet

# Client-facing messages returned by the waitlist API
MSG_JOINED = "Successfully joined waitlist!"
MSG_INVALID_EMAIL = "Valid email is required"
MSG_ALREADY_REGISTERED = "Email already registered"
MSG_JOIN_FAILED = "Failed to join waitlist. Please try again."
MSG_COUNT_FAILED = "Failed to fetch waitlist count"
