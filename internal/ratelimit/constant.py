DEFAULT_MAX_REQUESTS = 5
DEFAULT_WINDOW_SECONDS = 900

ERROR_MAX_REQUESTS_POSITIVE = "max_requests must be positive"
ERROR_WINDOW_POSITIVE = "window_seconds must be positive"
ERROR_IDENTITY_EMPTY = "identity cannot be empty"
