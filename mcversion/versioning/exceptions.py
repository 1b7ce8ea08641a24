"""
Exception classes for the versioning module.
"""


class VersioningError(Exception):
    """Base exception for all versioning-related errors."""

    pass


class VersionFormatError(VersioningError, ValueError):
    """Raised when a version string has an invalid format."""

    def __init__(self, version_string: str, expected_format: str = "x.y[.z...]"):
        self.version_string = version_string
        self.expected_format = expected_format
        super().__init__(
            f"Invalid version format: '{version_string}'. "
            f"Expected format: {expected_format}"
        )


class RuntimeVersionError(VersioningError):
    """Raised when the server reports a version string that cannot be parsed."""

    def __init__(self, reported: str):
        self.reported = reported
        super().__init__(
            f"Server reported an unparseable Minecraft version: '{reported}'"
        )


class RuntimeAlreadyResolvedError(VersioningError):
    """Raised when reconfiguring the runtime after it has been resolved."""

    def __init__(self):
        super().__init__(
            "The runtime version has already been resolved and cannot be reconfigured"
        )


class GenerationComparisonError(VersioningError, ValueError):
    """Raised when ordering a generation against NONE or another catalog."""

    pass


class DuplicateVersionError(VersioningError):
    """Raised when a version is claimed by more than one generation."""

    def __init__(self, key, first, second):
        self.key = key
        self.first = first
        self.second = second
        super().__init__(
            f"Version {key} is claimed by both {first!r} and {second!r}"
        )
