"""Constants for usage-analytics extraction and delivery."""

# Configuration keys naming the language runtime versions to build against
LANGUAGE_VERSION_KEYS = (
    "ghc",
    "go",
    "jdk",
    "node_js",
    "otp_release",
    "perl",
    "php",
    "python",
    "ruby",
    "rvm",
    "scala",
)

# Phases whose values are shell commands, in execution order
COMMAND_PHASES = (
    "before_install",
    "install",
    "before_script",
    "script",
    "after_success",
    "after_failure",
    "before_deploy",
    "after_deploy",
)

LANGUAGE_KEY = "language"
DEFAULT_LANGUAGE = "default"
INVALID_VALUE = "invalid"

# Payload fields
FIELD_REPOSITORY_ID = "repository_id"
FIELD_LANGUAGE = "language"
FIELD_GITHUB_LANGUAGE = "github_language"
FIELD_LANGUAGE_VERSION = "language_version"
FIELD_USES_SUDO = "uses_sudo"
FIELD_USES_APT_GET = "uses_apt_get"

# Delivery
ANALYTICS_QUEUE = "analytics_events"
ANALYTICS_EVENT_STREAM = "requests"
DEFAULT_ANALYTICS_URL = "https://api.keen.io/3.0"
DEFAULT_DELIVERY_TIMEOUT_SECONDS = 10.0
