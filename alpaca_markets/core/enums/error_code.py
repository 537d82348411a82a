"""Error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Resource errors (*_NOT_FOUND)
- Authentication errors (API_AUTHENTICATION_FAILED)
- Availability errors (API_UNAVAILABLE, API_RATE_LIMITED)
- Contract errors (API_INVALID_RESPONSE, API_REQUEST_REJECTED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Resource errors
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Authentication errors
    API_AUTHENTICATION_FAILED = "api_authentication_failed"

    # Availability errors
    API_UNAVAILABLE = "api_unavailable"
    API_RATE_LIMITED = "api_rate_limited"

    # Contract errors
    API_INVALID_RESPONSE = "api_invalid_response"
    API_REQUEST_REJECTED = "api_request_rejected"
