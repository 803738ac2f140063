"""Common mock envelopes: scopes, errors, malformed bodies."""

SCOPES_ENVELOPE = {
    "code": 200,
    "result": {
        "client_id": "app-123",
        "expires_at": 1893456000,
        "scopes": [
            {"name": "View store products", "value": "sync_products/read"},
            {"name": "View and manage orders", "value": "orders"},
        ],
    },
}

ERROR_UNAUTHORIZED_401 = {
    "code": 401,
    "result": "Malformed Authorization header.",
    "error": {"reason": "Unauthorized", "message": "Malformed Authorization header."},
}

ERROR_NOT_FOUND_404 = {
    "code": 404,
    "result": "Not found",
    "error": {"message": "not found"},
}

ERROR_RATE_LIMIT_429 = {
    "code": 429,
    "result": "This endpoint is rate limited.",
    "error": {"reason": "TooManyRequests", "message": "Try again after 60 seconds"},
}

ERROR_WITHOUT_ERROR_OBJECT_500 = {
    "code": 500,
    "result": "Internal server error",
}
