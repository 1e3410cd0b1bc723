"""Gherkin Builder errors."""


class GherkinBuilderError(Exception):
    """Base exception for Gherkin Builder errors."""


class MalformedGlueCode(GherkinBuilderError):
    """Raised when a line of glue code cannot be parsed.

    The offending source text is kept on ``text`` so callers can report
    it without re-deriving it from the message.
    """

    def __init__(self, message: str, text: str) -> None:
        super().__init__(message)
        self.text = text


class MalformedPattern(MalformedGlueCode):
    """Raised when a step annotation has no usable ``^...$`` expression."""


class MalformedParameterList(MalformedGlueCode):
    """Raised when a method declaration has no ``(...)`` parameter list."""


class GlueSourceError(GherkinBuilderError):
    """Raised when glue code files cannot be located or read."""


class ConfigError(GherkinBuilderError):
    """Raised when the configuration file is invalid."""
