"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, footer)

To add a new theme, define it here and register it in the app.
"""

from textual.theme import Theme

# Indigo on slate, dark
INDIGO_NIGHT = Theme(
    name="indigo-night",
    primary="#6366f1",      # Indigo 500 - user bubbles, focus
    secondary="#94a3b8",    # Slate 400 - assistant accents
    accent="#a5b4fc",       # Indigo 300 - highlights
    foreground="#e2e8f0",   # Slate 200
    background="#0f172a",   # Slate 900
    success="#4ade80",      # Green 400 - copy feedback
    warning="#fb923c",      # Orange 400 - stopped responses
    error="#f87171",        # Red 400 - failed responses
    surface="#1e293b",      # Slate 800
    panel="#111827",        # Gray 900
    dark=True,
    variables={
        "block-cursor-foreground": "#0f172a",
        "block-cursor-background": "#a5b4fc",
        "block-cursor-text-style": "bold",
        "block-hover-background": "#334155 20%",

        "input-cursor-background": "#e2e8f0",
        "input-cursor-foreground": "#0f172a",
        "input-selection-background": "#6366f1 30%",

        "border": "#334155",
        "border-blurred": "#1e293b",

        "scrollbar": "#334155",
        "scrollbar-hover": "#475569",
        "scrollbar-active": "#6366f1",
        "scrollbar-background": "#111827",
        "scrollbar-corner-color": "#111827",

        "footer-foreground": "#cbd5e1",
        "footer-background": "#0f172a",
        "footer-key-foreground": "#a5b4fc",
        "footer-key-background": "#1e293b",
        "footer-description-foreground": "#94a3b8",

        "text-muted": "#64748b",
        "text-disabled": "#475569",

        "button-foreground": "#e2e8f0",
        "button-color-foreground": "#0f172a",
        "button-focus-text-style": "bold reverse",
    },
)
