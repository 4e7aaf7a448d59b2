"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables, layers.

Design Philosophy:
- Pages fill the screen; the assistant floats bottom-right above them
- User messages right-aligned, assistant messages left-aligned
- Consistent border treatments and rounded corners
"""

APP_CSS = """
/* ============================================
   Main Screen Layout
   ============================================ */
Screen {
    layout: vertical;
    layers: base chat;
    background: $background;
}

/* ============================================
   Navigation Bar
   ============================================ */
NavBar {
    height: 3;
    background: $panel;
    border-bottom: solid $border;
    padding: 0 1;

    & Button {
        margin: 0 1 0 0;
    }
}

/* ============================================
   Pages
   ============================================ */
#pages {
    height: 1fr;
}

.page {
    height: 100%;
    padding: 1 4;
    background: $surface;
}

.page-heading {
    text-style: bold;
    color: $primary;
    margin-bottom: 1;
}

.page-body {
    color: $foreground;
    margin-bottom: 1;
}

.page-link {
    margin-top: 1;
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    display: none;
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus {
        border: round $warning;
    }
}

/* ============================================
   Chat Widget - Floating Assistant
   ============================================ */
ChatWidget {
    layer: chat;
    dock: bottom;
    width: 100%;
    height: auto;
    align-horizontal: right;
    background: transparent;
    padding: 0 2 1 0;
}

#chat-launcher {
    width: 12;
}

#chat-panel {
    width: 52;
    height: 32;
    background: $panel;
    border: round $primary;
}

#chat-header {
    height: 4;
    padding: 0 1;
    background: $primary 10%;
    border-bottom: solid $border;
}

#chat-header-text {
    width: 1fr;
}

#chat-title {
    text-style: bold;
    color: $foreground;
}

#chat-subtitle {
    color: $text-muted;
}

#chat-close-btn {
    min-width: 5;
    width: 5;
}

#chat-history {
    height: 1fr;
    padding: 0 1;
    scrollbar-gutter: stable;
}

#chat-loading {
    height: 1;
    color: $primary;
}

/* ============================================
   Chat Input Bar - Text Entry + Send
   ============================================ */
ChatInputBar {
    height: 3;

    &:focus-within #chat-input {
        border: tall $primary;
    }
}

#chat-input {
    width: 1fr;
}

#send-btn {
    width: 8;
    min-width: 8;
    margin: 0 0 0 1;
}

/* ============================================
   Chat Messages - Conversation Display
   ============================================ */
.chat-message {
    width: 80%;
    height: auto;
    margin: 0 0 1 0;
    padding: 0 1;
}

/* User messages - right-aligned, primary background */
.user-message {
    margin-left: 10;
    background: $primary 25%;
    border-right: tall $primary;
}

/* Assistant messages - left-aligned, muted background */
.assistant-message {
    background: $secondary 10%;
    border-left: tall $secondary;
}

.message-content {
    height: auto;
    padding: 0;
    margin: 0;
}

.message-time {
    height: 1;
    color: $text-muted;
}

/* ============================================
   Global Button Variants
   ============================================ */
Button.-primary {
    background: $primary;
    color: $background;

    &:hover {
        background: $primary-lighten-1;
    }
}

Button.-success {
    background: $success;
    color: $background;

    &:hover {
        background: $success-lighten-1;
    }
}
"""
