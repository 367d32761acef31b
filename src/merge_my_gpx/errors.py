"""Error types raised by merge-my-gpx."""


class MergeMyGpxError(Exception):
    """Base class for all errors surfaced to the CLI and MCP tools."""


class EmptyInput(MergeMyGpxError, ValueError):
    """No documents, or no points at all, were given to a transform that needs some."""


class InvalidPolicy(MergeMyGpxError, ValueError):
    """Decimation policy parameters are missing or out of range."""


class ParseError(MergeMyGpxError):
    """GPX content could not be decoded or parsed."""


class InputFileError(MergeMyGpxError):
    """An input path is missing, is not a GPX file, or is listed twice."""
