# spatialclust/core/exceptions/data/loaders.py
"""
Exceptions for the data loaders.

Classes:
    LoaderError: Base exception for the loader modules.
    UnsupportedFormatError: Raised when a file extension is not recognized.
    XYZFormatError: Raised when an xyz file is malformed.
"""


class LoaderError(Exception):
    """Base exception for the loader modules."""

    pass


class UnsupportedFormatError(LoaderError):
    """Exception raised when a file extension is not supported."""

    def __init__(self, filename: str, supported: str) -> None:
        self.filename = filename
        self.supported = supported
        super().__init__(
            f"Unsupported file {filename}: only {supported} files are accepted."
        )


class XYZFormatError(LoaderError):
    """Raised when the content of an xyz file cannot be parsed."""

    pass
