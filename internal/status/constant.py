STATUS_HEALTHY = "healthy"
STATUS_UNHEALTHY = "unhealthy"

MSG_STATUS_FAILED = "System status check failed"

BYTES_PER_MB = 1024 * 1024
