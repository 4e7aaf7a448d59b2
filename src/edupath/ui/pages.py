"""Static pages and navigation bar.

Page content is presentational only; each page knows its route so the
app can switch between them.
"""

from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.message import Message
from textual.widgets import Button, Static

from .routes import BTECH_RESOURCES, COURSES, DASHBOARD, HOME, NOT_FOUND, Route


class Navigate(Message):
    """Posted when a link asks the app to change route."""

    def __init__(self, path: str) -> None:
        super().__init__()
        self.path = path


class LinkButton(Button):
    """Button that navigates to a path when pressed."""

    def __init__(self, label: str, path: str, **kwargs) -> None:
        super().__init__(label, **kwargs)
        self.path = path

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(Navigate(self.path))


class NavBar(Horizontal):
    """Top navigation bar: brand link plus main sections."""

    def compose(self) -> ComposeResult:
        yield LinkButton("EduPath", HOME.path, id="nav-brand", variant="primary")
        yield LinkButton("Dashboard", DASHBOARD.path, id="nav-dashboard")
        yield LinkButton("Courses", COURSES.path, id="nav-courses")
        yield LinkButton("BTech Resources", BTECH_RESOURCES.path, id="nav-btech-resources")


class Page(VerticalScroll):
    """Base class for a routed page."""

    ROUTE: Route = NOT_FOUND
    HEADING = ""
    BODY: tuple[str, ...] = ()

    def __init__(self, **kwargs) -> None:
        super().__init__(id=self.ROUTE.page_id, classes="page", **kwargs)

    def compose(self) -> ComposeResult:
        yield Static(self.HEADING, classes="page-heading")
        for paragraph in self.BODY:
            yield Static(paragraph, classes="page-body")
        yield from self.compose_extra()

    def compose_extra(self) -> ComposeResult:
        yield from ()


class HomePage(Page):
    ROUTE = HOME
    HEADING = "Your path to JEE, NEET and BTech success"
    BODY = (
        "Structured courses, practice tests and a study assistant that is always one click away.",
        "Open the assistant with the Chat button or press ctrl+t.",
    )

    def compose_extra(self) -> ComposeResult:
        yield LinkButton("Start learning", DASHBOARD.path, classes="page-link")


class DashboardPage(Page):
    ROUTE = DASHBOARD
    HEADING = "Dashboard"
    BODY = (
        "Track your study streak, upcoming mock tests and recent topics.",
    )


class CoursesPage(Page):
    ROUTE = COURSES
    HEADING = "Courses"
    BODY = (
        "JEE: Physics, Chemistry and Mathematics.",
        "NEET: Physics, Chemistry and Biology.",
        "BTech: core engineering subjects by semester.",
    )

    def compose_extra(self) -> ComposeResult:
        yield LinkButton("BTech Resources", BTECH_RESOURCES.path, classes="page-link")


class BtechResourcesPage(Page):
    ROUTE = BTECH_RESOURCES
    HEADING = "BTech Resources"
    BODY = (
        "Notes, previous year papers and lab manuals for undergraduate engineering.",
    )


class NotFoundPage(Page):
    ROUTE = NOT_FOUND
    HEADING = "404"
    BODY = ("Oops! Page not found",)

    def compose_extra(self) -> ComposeResult:
        yield LinkButton("Return to Home", HOME.path, classes="page-link")


PAGES: tuple[type[Page], ...] = (
    HomePage,
    DashboardPage,
    CoursesPage,
    BtechResourcesPage,
    NotFoundPage,
)
