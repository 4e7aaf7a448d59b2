"""Unit tests for routing and display formatting."""
from datetime import datetime

import pytest
from hypothesis import given
from hypothesis import strategies as st

from edupath.ui.formatting import clean_latex, format_timestamp, truncate
from edupath.ui.routes import NOT_FOUND, ROUTES, normalize_path, resolve_route


class TestResolveRoute:
    """Tests for path resolution."""

    @pytest.mark.parametrize(
        "path, page_id",
        [
            ("/", "home"),
            ("", "home"),
            ("/dashboard", "dashboard"),
            ("/dashboard/", "dashboard"),
            ("dashboard", "dashboard"),
            ("/courses?track=jee", "courses"),
            ("/btech-resources#sem-3", "btech-resources"),
            ("/missing", "not-found"),
            ("/courses/jee", "not-found"),
            ("/Dashboard", "not-found"),
            ("//courses", "not-found"),
            ("//", "home"),
            ("/courses?next=//dashboard", "courses"),
        ],
    )
    def test_resolve(self, path, page_id):
        assert resolve_route(path).page_id == page_id

    def test_route_table(self):
        assert [route.path for route in ROUTES] == ["/", "/dashboard", "/courses", "/btech-resources"]

    def test_normalize_path(self):
        assert normalize_path("  /courses///  ") == "/courses"

    @given(st.text(alphabet="abcxyz/-", max_size=20))
    def test_unknown_paths_fall_back(self, path):
        """Property test: every path resolves to a known route or the not-found page."""
        route = resolve_route(path)
        assert route in ROUTES or route is NOT_FOUND


class TestFormatting:
    """Tests for display helpers."""

    def test_timestamp_is_hour_minute(self):
        assert format_timestamp(datetime(2024, 5, 1, 9, 5, 59)) == "09:05"

    def test_clean_latex_inline(self):
        assert clean_latex(r"Force is \(F = m \times a\)") == "Force is F = m x a"

    def test_clean_latex_fraction(self):
        assert clean_latex(r"$\frac{1}{2} m v^2$") == "(1)/(2) m v^2"

    def test_plain_text_untouched(self):
        text = "Practice regularly with mock tests"
        assert clean_latex(text) == text

    def test_truncate(self):
        assert truncate("short", 10) == "short"
        assert truncate("a" * 20, 10) == "aaaaaaa..."
