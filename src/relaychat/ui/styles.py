"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.

Layout: a single chat column with the log panel docked below it and the
input bar at the bottom. Message accents follow the message kind: indigo for
the user, slate for replies, red for failures, orange for stopped responses.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout
   ============================================ */
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Chat History Panel
   ============================================ */
#chat-history {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

/* ============================================
   Welcome Panel - Empty Transcript
   ============================================ */
#welcome {
    width: 100%;
    height: auto;
    align: center middle;
    padding: 2 4;
}

#welcome Static {
    width: 100%;
    text-align: center;
}

.welcome-wave {
    margin-bottom: 1;
}

.welcome-title {
    color: $foreground;
    text-style: bold;
}

.welcome-hint {
    color: $text-muted;
    margin-top: 1;
}

.suggested-prompts {
    width: 100%;
    height: auto;
    align: center middle;
    margin-top: 1;
}

.suggested-prompt {
    margin: 0 1;
    background: $surface;
    border: tall $border;

    &:hover {
        background: $primary 15%;
        border: tall $primary 60%;
    }
}

/* ============================================
   Chat Messages
   ============================================ */
.chat-message {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
    padding: 0 2;
    background: transparent;
}

.message-header-row {
    width: 100%;
    height: auto;
}

.message-header {
    width: 1fr;
    height: auto;
    text-style: bold;
}

.message-content {
    height: auto;
    color: $foreground;
}

.copy-btn {
    min-width: 8;
    height: 1;
    border: none;
    background: transparent;
    color: $text-muted;

    &:hover {
        color: $foreground;
        background: $surface;
    }

    &.-copied {
        color: $success;
        text-style: bold;
    }
}

.user-message {
    border-left: tall $primary;
    background: $primary 12%;

    & .message-header {
        color: $primary;
    }
}

.assistant-message {
    border-left: tall $secondary;
    background: $secondary 8%;

    & .message-header {
        color: $secondary;
    }
}

.error-message {
    border-left: tall $error;
    background: $error 10%;

    & .message-content {
        color: $error;
    }
}

.stopped-message {
    border-left: tall $warning;
    background: $warning 10%;

    & .message-content {
        color: $warning;
    }
}

#thinking {
    width: auto;
    height: auto;
    padding: 0 2;
    margin-bottom: 1;
    color: $text-muted;
    text-style: italic;
    border-left: tall $primary 60%;
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
    scrollbar-gutter: stable;
}

/* ============================================
   Input Bar - Text Entry + Send/Stop/Clear
   ============================================ */
ChatInputBar {
    height: auto;
    padding: 1 1 0 1;
    background: $panel;
    border-top: solid $border;
}

#chat-input {
    width: 1fr;
    border: tall $border;
    background: $surface;

    &:focus {
        border: tall $primary;
    }

    &:disabled {
        opacity: 60%;
    }
}

#send-btn, #stop-btn, #clear-btn {
    width: auto;
    min-width: 8;
    margin: 0 0 0 1;
}

#clear-btn {
    background: transparent;
    color: $text-muted;
}

/* ============================================
   Notification Toasts
   ============================================ */
Toast {
    background: $surface;
    border: tall $border;
    padding: 0 1;

    &.-information {
        border: tall $primary;
        background: $primary 12%;
    }

    &.-error {
        border: tall $error;
        background: $error 12%;
    }

    &.-warning {
        border: tall $warning;
        background: $warning 12%;
    }
}

Header {
    background: $panel;
    color: $foreground;
    dock: top;
    height: 1;
}

Footer {
    background: $panel;
}
"""
