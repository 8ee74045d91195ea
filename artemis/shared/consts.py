from enum import Enum

SERVICE_NAME = "artemis"
REQUEST_ID_HEADER = "X-Request-ID"


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class EnumUpstream(str, Enum):
    """Back ends the gateway talks to."""

    GOVEE = "govee"
    FIRETV = "firetv"
    WYZE_BRIDGE = "wyze_bridge"
