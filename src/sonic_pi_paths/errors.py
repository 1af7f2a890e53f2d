"""Errors raised while resolving Sonic Pi paths."""


class PathsError(Exception):
    """Base class for path resolution failures."""


class UnsupportedPlatformError(PathsError):
    """The platform identifier matches none of the supported OS families."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Unsupported platform {identifier}")


class ToolNotFoundError(PathsError, FileNotFoundError):
    """A bundled native binary is missing from the installation tree."""

    def __init__(self, path: str, tool: str = "SuperCollider"):
        self.path = path
        self.tool = tool
        super().__init__(
            f"Unable to find {tool}. Is it installed? I looked here: {path!r}"
        )
