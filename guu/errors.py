from typing import Optional


class GuuError(Exception):
    """Base class for errors raised while loading or running Guu programs."""


class LoadError(GuuError):
    """Raised when source text cannot be turned into a runnable Program."""
    def __init__(self, message: str, line: Optional[int] = None):
        text = f"on line {line}: {message}" if line is not None else message
        super().__init__(text)
        self.message = message
        self.line = line


class GuuRuntimeError(GuuError):
    """Raised when a value chain bottoms out at an unset variable slot."""
    def __init__(self, variable: str, message: Optional[str] = None):
        super().__init__(message or f"undefined variable {variable}")
        self.message = message or f"undefined variable {variable}"
        self.variable = variable
