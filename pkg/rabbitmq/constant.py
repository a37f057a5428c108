DEFAULT_PREFETCH_COUNT = 1
DEFAULT_DURABLE = True

# Queue policy (24 hours, advisory retry budget)
DEFAULT_MESSAGE_TTL_MS = 24 * 60 * 60 * 1000
DEFAULT_MAX_RETRIES = 3

# Dead-letter topology
DEAD_LETTER_EXCHANGE = "dlx"
DEAD_LETTER_QUEUE = "dead_letter_queue"
DEAD_LETTER_ROUTING_KEY = "failed"

# Queue arguments
ARG_MESSAGE_TTL = "x-message-ttl"
ARG_MAX_RETRIES = "x-max-retries"
ARG_DEAD_LETTER_EXCHANGE = "x-dead-letter-exchange"
ARG_DEAD_LETTER_ROUTING_KEY = "x-dead-letter-routing-key"

CONTENT_TYPE_JSON = "application/json"

# Errors
ERROR_QUEUE_NAME_EMPTY = "queue name cannot be empty"
ERROR_PREFETCH_COUNT_POSITIVE = "prefetch_count must be positive, got {count}"
ERROR_MESSAGE_TTL_POSITIVE = "message_ttl_ms must be positive, got {ttl}"
ERROR_MAX_RETRIES_NEGATIVE = "max_retries cannot be negative, got {retries}"
ERROR_NOT_CONNECTED = "Not connected to RabbitMQ. Call connect() first."
ERROR_QUEUE_NOT_DECLARED = "Queue '{queue}' is not declared"
