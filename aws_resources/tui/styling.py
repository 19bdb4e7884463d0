"""Textual CSS for the console."""

CONSOLE_CSS = """
Screen {
    layout: vertical;
}

#screen-panel {
    height: 3fr;
    padding: 1 2;
    border: round $primary;
}

#screen {
    width: 100%;
}

#log-panel {
    height: 1fr;
    border: round $secondary;
}

Log {
    height: 100%;
}
"""
