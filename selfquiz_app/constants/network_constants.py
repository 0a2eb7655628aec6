"""Network configuration constants for the self-quiz application."""

DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 8000
DEFAULT_DATA_DIR: str = "data"
DATA_URL_PREFIX: str = "/data"
KNOWLEDGE_INDEX_FILE: str = "index.json"
REQUEST_TIMEOUT_SECONDS: float = 10.0
