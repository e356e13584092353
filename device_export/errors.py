"""
Failure taxonomy for the export pipeline. Each stage raises its own kind and
nothing is recovered locally.
"""


class ExportError(Exception):
    """Base class for every pipeline failure."""


class FetchFailed(ExportError):
    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Fetching {url} failed: {reason}")


class ParseFailed(ExportError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Could not parse response body: {reason}")


class WriteFailed(ExportError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Writing {path} failed: {reason}")


class ConfigError(ExportError):
    pass
