from __future__ import annotations

from enum import Enum


class Route(str, Enum):
    HOME = "home"
    ABOUT = "about"
    API = "api"
    NOT_FOUND = "not_found"


# Exact path matches, checked in order. Anything else is NOT_FOUND.
ROUTES: tuple[tuple[str, Route], ...] = (
    ("/", Route.HOME),
    ("/about", Route.ABOUT),
    ("/api", Route.API),
)


def classify(path: str) -> Route:
    """Map a request path to the route that answers it.

    Matching is plain string equality: no trailing-slash folding, no case
    folding and no prefix matching.
    """
    for candidate, route in ROUTES:
        if path == candidate:
            return route
    return Route.NOT_FOUND
