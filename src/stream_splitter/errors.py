"""Error types raised by the splitter."""


class SplitterError(Exception):
    """Base class for all errors that abort a split or combine run."""


class ArgumentError(SplitterError):
    """Invalid or missing configuration value."""

    def __init__(self, name: str, description: str):
        super().__init__(f"{name} {description}")
        self.name = name
        self.description = description


class SplitIOError(SplitterError):
    """Filesystem or stream failure, wrapped with the operation that failed."""

    def __init__(self, context: str, underlying: OSError):
        super().__init__(f"{context}: {underlying}")
        self.context = context
        self.underlying = underlying


class PatternError(SplitterError):
    """Combine input pattern that could not be expanded."""

    def __init__(self, pattern: str, description: str):
        super().__init__(f"{pattern}: {description}")
        self.pattern = pattern
        self.description = description
