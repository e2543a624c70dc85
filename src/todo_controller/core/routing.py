# src/todo_controller/core/routing.py

from __future__ import annotations

import logging
from dataclasses import dataclass

from .models import Filter, TaskQuery

logger = logging.getLogger(__name__)

ROUTE_PREFIX = "#/"


@dataclass(slots=True, frozen=True)
class Route:
    """
    Resolved navigation state.

    `token` is the raw filter word taken from the fragment ("", "active",
    "completed"); the view highlights its filter link by this token.
    """

    filter: Filter
    token: str
    query: TaskQuery


_ROUTES: dict[str, Route] = {
    "": Route(Filter.ALL, "", TaskQuery()),
    "active": Route(Filter.ACTIVE, "active", TaskQuery(completed=False)),
    "completed": Route(Filter.COMPLETED, "completed", TaskQuery(completed=True)),
}

DEFAULT_ROUTE = _ROUTES[""]


def route_token(fragment: str | None) -> str:
    """Extract the filter word from a hash fragment: "#/active" -> "active"."""
    raw = (fragment or "").strip()
    if raw.startswith(ROUTE_PREFIX):
        raw = raw[len(ROUTE_PREFIX):]
    elif raw.startswith("#"):
        raw = raw[1:]
    return raw.strip("/")


def resolve_route(fragment: str | None) -> Route:
    """
    Map a route fragment to exactly one filter.

    Unknown fragments are not an error: they behave like the "all" view.
    """
    token = route_token(fragment)
    route = _ROUTES.get(token)
    if route is None:
        logger.debug("Unknown route fragment %r, falling back to all", fragment)
        return DEFAULT_ROUTE
    return route
