# Daily summary lifetime in seconds
DEFAULT_SUMMARY_TTL = 86400
DEFAULT_COUNT_ON_CONSUME = True

ERROR_SUMMARY_TTL_POSITIVE = "summary_ttl must be positive"
