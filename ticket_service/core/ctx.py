from contextvars import ContextVar

REQUEST_ID_CTX: ContextVar[str | None] = ContextVar("request_id", default=None)


def get_request_id() -> str | None:
    return REQUEST_ID_CTX.get()
