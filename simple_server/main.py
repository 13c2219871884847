from datetime import datetime

from fastapi import Depends, FastAPI, Request, Response

from .pages import now_utc, render
from .routes import classify

# Every path goes through classify(), so the generated docs endpoints are
# switched off and slashes are never redirected.
app = FastAPI(
    title="Simple Server",
    version="1.0.0",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    redirect_slashes=False,
)

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_clock():
    return now_utc


def request_target(request: Request) -> str:
    """The request target as sent on the wire: undecoded path plus query."""
    raw_path = request.scope.get("raw_path")
    target = raw_path.decode("latin-1").split("?", 1)[0] if raw_path else request.url.path
    query = request.scope.get("query_string", b"")
    if query:
        target += "?" + query.decode("latin-1")
    return target


@app.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
def dispatch(request: Request, clock=Depends(get_clock)) -> Response:
    now: datetime = clock()
    return render(classify(request_target(request)), now)
