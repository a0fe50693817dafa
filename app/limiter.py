# app/limiter.py

import asyncio
import time
from collections import defaultdict, deque
from datetime import datetime, timezone
from typing import Deque, Dict

from fastapi import Request
from fastapi.responses import JSONResponse

from app.logger import get_logger

log = get_logger(__name__)


class RateLimiter:
  """In-memory rolling window limiter keyed by client address."""

  def __init__(self, max_requests: int, window_seconds: float):
    self.max_requests = max_requests
    self.window_seconds = window_seconds
    self._hits: Dict[str, Deque[float]] = defaultdict(deque)
    self._lock = asyncio.Lock()
    self._last_cleanup = time.monotonic()

  async def allow(self, key: str) -> bool:
    """Records a hit for key. False when key already used up its window."""
    now = time.monotonic()
    window_start = now - self.window_seconds
    async with self._lock:
      hits = self._hits[key]
      while hits and hits[0] <= window_start:
        hits.popleft()
      if len(hits) >= self.max_requests:
        return False
      hits.append(now)
      self._cleanup_idle_keys(now)
      return True

  def _cleanup_idle_keys(self, now: float):
    """Drops clients with no hit inside the window, at most once per window."""
    if now - self._last_cleanup < self.window_seconds:
      return
    self._last_cleanup = now
    window_start = now - self.window_seconds
    idle = [key for key, hits in self._hits.items() if not hits or hits[-1] <= window_start]
    for key in idle:
      del self._hits[key]

  def reset(self):
    self._hits.clear()


def client_identity(request: Request) -> str:
  return request.client.host if request.client else "anonymous"


async def rate_limit_middleware(request: Request, call_next):
  limiter: RateLimiter = request.app.state.limiter
  ip = client_identity(request)

  if not await limiter.allow(ip):
    message = f"Rate limit exceeded for IP: {ip} at {datetime.now(timezone.utc).isoformat()}"
    log.warning(message, extra={"method": request.method, "path": request.url.path, "client": ip})
    return JSONResponse(
      status_code=429,
      content={"error": "Too Many Requests", "message": message},
    )

  return await call_next(request)
