import os


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


AUDIT_ENABLED = _env_flag("AUDIT_ENABLED", "true")
AUDIT_LOGGER = os.getenv("AUDIT_LOGGER", "ticket_service.audit")
