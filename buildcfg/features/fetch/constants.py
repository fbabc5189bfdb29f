"""Constants for build configuration retrieval.

Centralizes provider, decoding, and reserved-key constants to avoid
duplication across modules.
"""

# Provider defaults
DEFAULT_GITHUB_API_URL = "https://api.github.com"
DEFAULT_CONFIG_PATH = ".travis.yml"
DEFAULT_FETCH_TIMEOUT_SECONDS = 5.0
DEFAULT_USER_AGENT = "buildcfg/0.1.0"
GITHUB_ACCEPT_HEADER = "application/vnd.github+json"

# HTTP Status Code Ranges
HTTP_STATUS_OK_MIN = 200
HTTP_STATUS_OK_MAX = 300
HTTP_STATUS_NOT_FOUND = 404

# Response body field carrying the base64 payload
CONTENT_FIELD = "content"

# Editors sometimes leave U+00A0 in indentation, which YAML rejects
NON_BREAKING_SPACE = "\u00a0"

# Reserved keys merged into every normalized document
RESULT_KEY = ".result"
RESULT_MESSAGE_KEY = ".result_message"

# Top-level keys passed through only with the template_selection gate
GATED_KEYS = ("group", "dist")

# Instrumentation
FETCH_CONFIG_EVENT = "buildcfg.fetch_config.run"
FETCH_CONFIG_SOURCE = "FetchConfigService#run"
FETCH_CONFIG_PARAMS_KEY = "fetch_config_params"
