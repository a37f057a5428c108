from typing import Final

# Logger configuration
LOGGER_SERVICE_NAME: Final[str] = "portfolio-ingest"
LOGGER_ENABLE_CONSOLE: Final[bool] = True
LOGGER_COLORIZE: Final[bool] = True

# Cache key namespaces
KEY_GITHUB_USER: Final[str] = "github:user"
KEY_GITHUB_REPOS: Final[str] = "github:repos"
KEY_SYSTEM_STATUS: Final[str] = "system:status"
KEY_CONTACT_RATE: Final[str] = "rate:contact"
KEY_ANALYTICS: Final[str] = "analytics"

# Queue policy
QUEUE_MESSAGE_TTL_MS: Final[int] = 86400000
QUEUE_MAX_RETRIES: Final[int] = 3

# Submitter identity when no address can be derived
ANONYMOUS_IDENTITY: Final[str] = "anonymous"
