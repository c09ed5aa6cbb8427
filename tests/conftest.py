import pytest
import importlib


SERVICE_MODULES = [
    "ticket_service.services.ticket_service",
]

class _StubSpan:
    def __init__(
        self,
        *,
        scope: str,
        action: str,
        account_id: int | None = None,
        meta: dict | None = None,
        **_ignored
    ):
        self.scope = scope
        self.action = action
        self.account_id = account_id
        self.meta = dict(meta or {})
        self.entered = False
        self.exited = False
        self.exit_args = None

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, exc_type, exc, tb):
        self.exited = True
        self.exit_args = (exc_type, exc, tb)
        return False


@pytest.fixture(autouse=True)
def auditspan_stub(mocker, request):
    instances = []

    def factory(*a, **k):
        s = _StubSpan(*a, **k)
        instances.append(s)
        return s

    for mod in SERVICE_MODULES:
        importlib.import_module(mod)
        mocker.patch(f"{mod}.AuditSpan", side_effect=factory)

    return instances
