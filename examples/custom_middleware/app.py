"""Custom Middleware: function and class middleware.

Demonstrates:
- Function middleware (timing, adds X-Response-Time to every response)
- Class middleware (rate limiter, 5 req/min per IP, short-circuits with 429)
- Route middleware that hands data to the handler through ``event.locals``

Run:
    cd examples/custom_middleware && python app.py
"""

import asyncio
import threading
import time

from lizard import App, RequestEvent, Response
from lizard.middleware import Next

app = App()


# ---------------------------------------------------------------------------
# Function middleware: timing
# ---------------------------------------------------------------------------


async def timing(event: RequestEvent, next: Next) -> Response:
    """Add X-Response-Time header to every response."""
    start = time.monotonic()
    response = await next()
    elapsed = time.monotonic() - start
    return response.with_header("X-Response-Time", f"{elapsed:.3f}s")


# ---------------------------------------------------------------------------
# Class middleware: rate limiter
# ---------------------------------------------------------------------------


class RateLimiter:
    """Per-IP rate limiter. Returns 429 when the limit is exceeded."""

    def __init__(self, max_requests: int, window: float) -> None:
        self.max_requests = max_requests
        self.window = window
        self._counts: dict[str, list[float]] = {}
        self._last_sweep = time.monotonic()
        self._lock = threading.Lock()

    def _sweep(self, now: float) -> None:
        """Forget clients with no hits inside the window."""
        for ip, hits in list(self._counts.items()):
            hits[:] = [t for t in hits if now - t < self.window]
            if not hits:
                del self._counts[ip]
        self._last_sweep = now

    async def __call__(self, event: RequestEvent, next: Next) -> Response:
        client_ip = event.headers.get("x-forwarded-for") or event.client_ip or "unknown"
        client_ip = client_ip.split(",")[0].strip()

        with self._lock:
            now = time.monotonic()
            if now - self._last_sweep >= self.window:
                self._sweep(now)

            hits = [t for t in self._counts.get(client_ip, ()) if now - t < self.window]
            if len(hits) >= self.max_requests:
                self._counts[client_ip] = hits
                return event.response.status(429).text("Too Many Requests")
            hits.append(now)
            self._counts[client_ip] = hits

        return await next()


# ---------------------------------------------------------------------------
# Route middleware: API key
# ---------------------------------------------------------------------------


async def api_key(event: RequestEvent, next: Next) -> Response:
    key = event.headers.get("x-api-key")
    if key != event.config["API_KEY"]:
        return event.response.status(403).json({"error": "bad api key"})
    event.locals["client"] = key
    return await next()


# ---------------------------------------------------------------------------
# Middleware stack (global middleware runs in registration order)
# ---------------------------------------------------------------------------

app.use(timing)
app.use(RateLimiter(max_requests=5, window=60.0))
app.config({"API_KEY": "letmein"})


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@app.get("/")
def index(event):
    return event.response.text("OK")


@app.get("/slow")
async def slow(event):
    """Delayed response, verifies the timing header."""
    await asyncio.sleep(0.1)
    return event.response.text("OK")


@app.get("/keyed", middleware=[api_key])
def keyed(event):
    return event.response.json({"client": event.locals["client"]})


if __name__ == "__main__":
    app.listen(3000)
