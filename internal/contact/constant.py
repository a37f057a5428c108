DEFAULT_RECIPIENT = "alex@example.com"
DEFAULT_SUBJECT_PREFIX = "Portfolio Contact"
DEFAULT_SYNC_FALLBACK = False

# Form field bounds
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
NAME_PATTERN = r"^[a-zA-Z\s'-]+$"
EMAIL_MAX_LENGTH = 255
SUBJECT_MIN_LENGTH = 5
SUBJECT_MAX_LENGTH = 200
MESSAGE_MIN_LENGTH = 10
MESSAGE_MAX_LENGTH = 2000

REQUIRED_FIELDS = ("name", "email", "subject", "message")

# User-facing messages
MSG_MESSAGE_SENT = "Message sent successfully!"
MSG_RATE_LIMITED = "Too many requests. Please wait a moment before trying again."
MSG_SUBMISSION_FAILED = "Failed to send message. Please try again or contact me directly."
MSG_VALIDATION_ERROR = "Invalid data provided. Please check your input."
MSG_REQUIRED_FIELDS = "All fields are required. Please fill out the complete form."
MSG_INVALID_EMAIL = "Please enter a valid email address."
