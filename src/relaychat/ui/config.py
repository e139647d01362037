"""UI configuration constants.

Centralizes magic numbers and display strings for the UI module.
"""


class LogLevel:
    """Log level constants with numeric values for comparison.

    Standard logging hierarchy: DEBUG < INFO < WARNING < ERROR
    Lower numeric value = more verbose (shows more messages).
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls._from_string.get(level_str.lower(), cls.DEBUG)


APP_TITLE = "AI Chat Assistant"

# Welcome panel
WELCOME_GREETING = "Welcome! How can I help you today?"
WELCOME_HINT = "Ask me anything - I'm here to assist you!"
SUGGESTED_PROMPTS = (
    "What can you help me with?",
    "Tell me a joke",
    "Explain quantum computing",
    "Write a haiku about AI",
)

# Message display
USER_LABEL = "You"
ASSISTANT_LABEL = "AI Assistant"
MESSAGE_TIMESTAMP_FORMAT = "%H:%M:%S"
THINKING_TEXT = "AI is thinking..."
INPUT_PLACEHOLDER = "Type your message..."

# Copy feedback
COPIED_FEEDBACK_SECONDS = 2.0

# Input history configuration
INPUT_HISTORY_MAX_SIZE = 100

# Notification toasts
NOTIFY_TIMEOUT_SECONDS = 3.0
NOTIFY_ERROR_TIMEOUT_SECONDS = 5.0

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 500
