import os
_TRUTHY = {"1", "true", "yes", "on"}
def env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
# PUT requires title and description when set, like POST does
TASKS_STRICT_UPDATE = env_flag("TASKS_STRICT_UPDATE")
