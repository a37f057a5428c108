DEFAULT_HOST = "localhost"
DEFAULT_PORT = 6379
DEFAULT_DB = 0
DEFAULT_ENCODING = "utf-8"
DEFAULT_DECODE_RESPONSES = True
DEFAULT_MAX_CONNECTIONS = 20
DEFAULT_SOCKET_TIMEOUT = 5
DEFAULT_SOCKET_CONNECT_TIMEOUT = 5
DEFAULT_TTL_SECONDS = 3600

# Redis INFO fields surfaced in stats
INFO_USED_MEMORY = "used_memory"
INFO_UPTIME = "uptime_in_seconds"

# Returned by the limit script when the counter is already at the limit
LIMIT_REACHED = -1

# KEYS[1] = counter key, ARGV[1] = limit, ARGV[2] = ttl seconds
INCR_WITHIN_LIMIT_SCRIPT = """
local current = tonumber(redis.call('GET', KEYS[1]) or '0')
if current >= tonumber(ARGV[1]) then
    return -1
end
local updated = redis.call('INCR', KEYS[1])
redis.call('EXPIRE', KEYS[1], tonumber(ARGV[2]))
return updated
"""

# Errors
ERROR_INVALID_PORT = "port must be between 1 and 65535"
ERROR_INVALID_DB = "db must be non-negative"
ERROR_INVALID_MAX_CONNECTIONS = "max_connections must be positive"
ERROR_INVALID_SOCKET_TIMEOUT = "socket_timeout must be positive"
