from __future__ import annotations


class TupmError(Exception):
    """Base class for failures reported to the user."""


class ConfigError(TupmError):
    pass


class ParseError(TupmError):
    pass


class NoSourcesError(ParseError):
    def __init__(self, message: str = "No valid sources found in config file") -> None:
        super().__init__(message)


class FetchError(TupmError):
    """A single source manifest could not be retrieved."""


class DecodeError(TupmError):
    """A single source manifest was not a JSON object."""


class PackageNotFoundError(TupmError):
    def __init__(self, package: str) -> None:
        super().__init__(f"Package '{package}' not found in any sources.")
        self.package = package


class PermissionDeniedError(TupmError):
    pass


class TransferError(TupmError):
    pass


class RemovalError(TupmError):
    pass


class InvalidPackageNameError(TupmError):
    pass
