from __future__ import annotations

from datetime import datetime, timezone

from fastapi.responses import HTMLResponse, JSONResponse, Response

from .routes import Route
from .schemas import ApiMessage

CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}


HOME_PAGE = """
<h1>Welcome to Simple Server</h1>
<p>Server is running successfully!</p>
<p>Time: {time}</p>
<p>Try visiting:</p>
<ul>
  <li><a href="/about">/about</a></li>
  <li><a href="/api">/api</a></li>
</ul>
"""

ABOUT_PAGE = """
<h1>About</h1>
<p>This is a simple Python server example.</p>
<a href="/">&larr; Back to Home</a>
"""

NOT_FOUND_PAGE = """
<h1>404 - Page Not Found</h1>
<p>The page you're looking for doesn't exist.</p>
<a href="/">&larr; Back to Home</a>
"""


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. ``2026-10-19T08:30:00.123Z``."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def display_time(moment: datetime) -> str:
    """Local wall-clock time such as ``10/19/2026, 3:04:05 PM``."""
    local = moment.astimezone()
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return f"{local.month}/{local.day}/{local.year}, {hour}:{local:%M:%S} {meridiem}"


def render(route: Route, now: datetime) -> Response:
    if route is Route.HOME:
        return HTMLResponse(HOME_PAGE.format(time=display_time(now)), headers=CORS_HEADERS)
    if route is Route.ABOUT:
        return HTMLResponse(ABOUT_PAGE, headers=CORS_HEADERS)
    if route is Route.API:
        payload = ApiMessage(timestamp=iso_timestamp(now))
        return JSONResponse(payload.model_dump(), headers=CORS_HEADERS)
    return HTMLResponse(NOT_FOUND_PAGE, status_code=404, headers=CORS_HEADERS)
