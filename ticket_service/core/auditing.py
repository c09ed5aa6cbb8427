import logging
import time
from datetime import timezone, datetime
from typing import Any, Mapping
from ticket_service.core import config
from ticket_service.core.ctx import get_request_id
from ticket_service.core.utils.serialization import normalize_ctx


class AuditStatus:
    SUCCESS = "SUCCESS"
    FAIL = "FAIL"


def audit_emit(
    *,
    scope: str,
    action: str,
    status: str,
    account_id: int | None = None,
    reason: str | None = None,
    meta: Mapping[str, Any] | None = None
) -> dict[str, Any] | None:
    if not config.AUDIT_ENABLED:
        return None

    payload = {
        "request_id": get_request_id(),
        "scope": scope,
        "action": action,
        "status": status,
        "account_id": account_id,
        "reason": reason,
        "meta": normalize_ctx(dict(meta or {})),
    }
    level = logging.INFO if status == AuditStatus.SUCCESS else logging.WARNING
    logging.getLogger(config.AUDIT_LOGGER).log(
        level, "%s.%s %s", scope, action, status, extra={"audit": payload}
    )
    return payload


def _reason_from_exception(exception: BaseException | None) -> str | None:
    if exception is None:
        return None
    return str(exception) or exception.__class__.__name__


class AuditSpan:
    def __init__(self, *, scope: str, action: str, account_id: int | None = None,
                 meta: Mapping[str, Any] | None = None):
        self.scope = scope
        self.action = action
        self.account_id = account_id
        self.meta = dict(meta or {})
        self._t0 = 0.0

    def __enter__(self):
        self._t0 = time.perf_counter()
        started = datetime.now(timezone.utc)
        self.meta.setdefault("occurred_at", started.isoformat(timespec="milliseconds").replace("+00:00", "Z"))
        return self

    def __exit__(self, exc_type, exc, tb):
        self.meta["duration_ms"] = int((time.perf_counter() - self._t0) * 1000)
        status = AuditStatus.FAIL if exc else AuditStatus.SUCCESS
        audit_emit(
            scope=self.scope, action=self.action, status=status,
            account_id=self.account_id, reason=_reason_from_exception(exc), meta=self.meta
        )
        return False
