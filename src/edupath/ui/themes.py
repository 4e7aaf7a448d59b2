"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Indigo-on-slate palette matching the EduPath web brand
EDUPATH_DARK = Theme(
    name="edupath-dark",
    primary="#6366f1",      # Indigo - brand accent, user bubbles
    secondary="#a78bfa",    # Violet - assistant bubbles
    accent="#facc15",       # Amber - highlights
    foreground="#e2e8f0",   # Slate 200
    background="#0f172a",   # Slate 900
    success="#22c55e",      # Send button
    warning="#f59e0b",      # Log panel
    error="#ef4444",
    surface="#1e293b",      # Slate 800 - pages
    panel="#111827",        # Gray 900 - navbar, chat panel
    dark=True,
    variables={
        "border": "#334155",
        "border-blurred": "#1e293b",

        "scrollbar": "#334155",
        "scrollbar-hover": "#475569",
        "scrollbar-active": "#6366f1",
        "scrollbar-background": "#111827",

        "text-muted": "#94a3b8",
        "text-disabled": "#475569",

        "input-cursor-background": "#e2e8f0",
        "input-cursor-foreground": "#0f172a",
        "input-selection-background": "#6366f1 30%",

        "footer-key-foreground": "#facc15",
    },
)
