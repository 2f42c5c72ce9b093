import logging
import time
from collections import defaultdict
from typing import Dict, List

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


def client_ip(request: Request, trust_proxy: bool = False) -> str:
    """IP клиента; X-Forwarded-For учитывается только за доверенным прокси"""
    if trust_proxy:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Добавление заголовков безопасности ко всем ответам"""

    security_headers = {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "X-XSS-Protection": "0",
        "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
        "Referrer-Policy": "strict-origin-when-cross-origin",
        "Cross-Origin-Opener-Policy": "same-origin",
        "Cross-Origin-Resource-Policy": "cross-origin",
        "X-DNS-Prefetch-Control": "off",
    }

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        for header, value in self.security_headers.items():
            response.headers.setdefault(header, value)
        return response


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Ограничение числа запросов с одного IP в скользящем окне"""

    def __init__(self, app, limit: int, window: int, path_prefix: str = "/api", trust_proxy: bool = False):
        super().__init__(app)
        self.limit = limit
        self.window = window
        self.path_prefix = path_prefix
        self.trust_proxy = trust_proxy
        self.requests: Dict[str, List[float]] = defaultdict(list)
        self.last_sweep = time.time()

    def sweep(self, now: float) -> None:
        """Удаление клиентов без запросов в текущем окне"""
        stale = [key for key, stamps in self.requests.items() if not stamps or now - stamps[-1] >= self.window]
        for key in stale:
            del self.requests[key]
        self.last_sweep = now

    def is_limited(self, identifier: str) -> bool:
        now = time.time()
        if now - self.last_sweep >= self.window:
            self.sweep(now)

        recent = [ts for ts in self.requests[identifier] if now - ts < self.window]
        if len(recent) >= self.limit:
            self.requests[identifier] = recent
            return True
        recent.append(now)
        self.requests[identifier] = recent
        return False

    async def dispatch(self, request: Request, call_next):
        if request.url.path.startswith(self.path_prefix):
            ip = client_ip(request, self.trust_proxy)
            if self.is_limited(ip):
                logger.warning("Rate limit exceeded", extra={"client_ip": ip, "path": request.url.path})
                return JSONResponse(
                    status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                    content={"success": False, "message": "Too many requests, please try again later."},
                    headers={"Retry-After": str(self.window)},
                )
        return await call_next(request)


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Отклонение запросов с телом больше допустимого"""

    def __init__(self, app, max_size: int):
        super().__init__(app)
        self.max_size = max_size

    async def dispatch(self, request: Request, call_next):
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self.max_size:
            return JSONResponse(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                content={"success": False, "message": "Request entity too large"},
            )
        return await call_next(request)
