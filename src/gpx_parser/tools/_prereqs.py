"""Prerequisite checking helpers for MCP tools."""


def require_state(state, *, document: bool = False) -> None:
    """Raise ValueError with a descriptive message if required state is not set.

    Usage in a tool:
        try:
            require_state(state, document=True)
        except ValueError as e:
            return f"Error: {e}"
    """
    if document and not state.is_loaded:
        raise ValueError(
            "Load a GPX document first with load_gpx or load_gpx_text."
        )
