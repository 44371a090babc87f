"""Error types for tool lookup and argument extraction."""


class ToolError(Exception):
    """Base error for all tool-layer failures."""


class ToolNotFoundError(ToolError):
    """Requested tool does not exist in the catalog."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class MissingParameterError(ToolError):
    """A required tool argument is absent or null."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Parameter '{key}' is required")
