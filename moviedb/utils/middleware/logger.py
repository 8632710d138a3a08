import logging
import time
import uuid
import contextvars
from typing import Optional, Union

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

REQUEST_ID_HEADER = "X-Request-ID"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"

request_id_ctx: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("request_id", default=None)

logger = logging.getLogger("moviedb.requests")


class RequestIdFilter(logging.Filter):
    """Stamp each record with the id of the request being served, or "-"."""
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_ctx.get() or "-"
        return True


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    root = logging.getLogger()
    root.setLevel(level)
    if root.handlers:
        # already configured (reload, or a test runner's capture handler)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestIdFilter())
    root.addHandler(handler)


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    One line when a request arrives and one when it is answered, both tagged
    with a fresh request id. The id is returned in the X-Request-ID header.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = uuid.uuid4().hex
        token = request_id_ctx.set(request_id)
        started = time.perf_counter()
        method, path = request.method, request.url.path

        try:
            logger.info(
                "-> %s %s from %s",
                method,
                path,
                request.client.host if request.client else "unknown",
            )
            response = await call_next(request)
        except Exception:
            logger.exception("!! %s %s failed after %dms", method, path, _elapsed_ms(started))
            raise
        else:
            logger.info("<- %s %s %s in %dms", method, path, response.status_code, _elapsed_ms(started))
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            request_id_ctx.reset(token)
