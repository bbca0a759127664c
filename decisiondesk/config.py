import os


ANTHROPIC_API_KEY = os.environ.get("ANTHROPIC_API_KEY", "")
ANTHROPIC_MODEL = os.environ.get("ANTHROPIC_MODEL", "claude-sonnet-4-5-20250929")
MAX_TOKENS = int(os.environ.get("MAX_TOKENS", "1024"))
DEFAULT_TONE = os.environ.get("DEFAULT_TONE", "Chill")
DRY_RUN = os.environ.get("DRY_RUN", "false").lower() in ("true", "1", "yes")

# Optional delivery of the rendered briefing
WEBHOOK_URL = os.environ.get("WEBHOOK_URL", "")
WEBHOOK_API_KEY = os.environ.get("WEBHOOK_API_KEY", "")

DATA_DIR = os.environ.get("DATA_DIR", os.path.expanduser("~/.decisiondesk"))
HISTORY_PATH = os.environ.get("HISTORY_PATH", os.path.join(DATA_DIR, "history.json"))
HISTORY_KEY = "decisiondesk_history"
HISTORY_LIMIT = int(os.environ.get("HISTORY_LIMIT", "30"))
HISTORY_DAYS = int(os.environ.get("HISTORY_DAYS", "7"))  # trailing context window
