API_TITLE = "Portfolio Ingest API"
API_DESCRIPTION = "Contact submissions, analytics tracking and system status"
API_VERSION = "1.0.0"

HEADER_FORWARDED_FOR = "x-forwarded-for"
HEADER_REAL_IP = "x-real-ip"
HEADER_USER_AGENT = "user-agent"
HEADER_REQUEST_ID = "X-Request-ID"
