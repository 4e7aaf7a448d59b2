"""Navigable surface of the shell.

Maps URL-style paths to page identifiers. Unknown paths resolve to the
not-found page; the chat widget is independent of the active route.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Route:
    """A navigable page."""

    path: str
    page_id: str
    title: str


HOME = Route("/", "home", "Home")
DASHBOARD = Route("/dashboard", "dashboard", "Dashboard")
COURSES = Route("/courses", "courses", "Courses")
BTECH_RESOURCES = Route("/btech-resources", "btech-resources", "BTech Resources")
NOT_FOUND = Route("*", "not-found", "Not Found")

ROUTES: tuple[Route, ...] = (HOME, DASHBOARD, COURSES, BTECH_RESOURCES)

_BY_PATH = {route.path: route for route in ROUTES}


def normalize_path(path: str) -> str:
    """Strip query, fragment and trailing slashes; ensure a leading slash."""
    # Only "?" and "#" delimit; a leading "//" is not an authority here
    clean = path.strip().split("#", 1)[0].split("?", 1)[0].rstrip("/")
    if not clean.startswith("/"):
        clean = "/" + clean
    return clean


def resolve_route(path: str) -> Route:
    """Find the route for `path`, falling back to the not-found page."""
    return _BY_PATH.get(normalize_path(path), NOT_FOUND)
