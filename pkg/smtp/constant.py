DEFAULT_PORT = 587
DEFAULT_TIMEOUT = 30
DEFAULT_FROM_ADDRESS = "noreply@example.com"
DEFAULT_FROM_NAME = "Portfolio"

# Implicit TLS port; STARTTLS is used on every other port
IMPLICIT_TLS_PORT = 465

MIME_ALTERNATIVE = "alternative"
CHARSET = "utf-8"

# Errors
ERROR_INVALID_PORT = "port must be between 1 and 65535"
ERROR_TIMEOUT_POSITIVE = "timeout must be positive"
ERROR_RECIPIENT_EMPTY = "recipient cannot be empty"
ERROR_NO_BODY = "message needs an html or text body"
