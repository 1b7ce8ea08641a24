"""
Minecraft version values.

Versions are dotted sequences of non-negative integers ("1.21", "1.20.4").
Comparison is delegated to packaging.version, whose release-segment ordering
treats missing trailing components as zero, so "1.21" and "1.21.0" compare
and hash identically.
"""

import re
from typing import Tuple, Optional, Union

from packaging.version import Version as PackagingVersion, InvalidVersion

from .exceptions import VersionFormatError

VERSION_PATTERN = re.compile(r"^[0-9]+(?:\.[0-9]+)*$")


class MinecraftVersion:
    """
    An immutable Minecraft version.

    The components supplied at parse time are kept as-is for rendering,
    while equality, hashing and ordering are padding-aware.
    """

    __slots__ = ("_components", "_version")

    def __init__(self, version_string: str):
        """
        Initialize a MinecraftVersion from a string.

        Args:
            version_string: Dotted version string such as "1.21.4"

        Raises:
            VersionFormatError: If the string is not a dotted sequence of
                non-negative integers
        """
        if isinstance(version_string, int) and not isinstance(version_string, bool):
            version_string = str(version_string)
        if not isinstance(version_string, str):
            raise VersionFormatError(repr(version_string))

        text = version_string.strip()
        if not VERSION_PATTERN.match(text):
            raise VersionFormatError(text)

        try:
            version = PackagingVersion(text)
        except InvalidVersion as e:
            raise VersionFormatError(text) from e

        object.__setattr__(self, "_components", tuple(int(p) for p in text.split(".")))
        object.__setattr__(self, "_version", version)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def runtime(cls) -> "MinecraftVersion":
        """Return the Minecraft version of the running server."""
        from .runtime import runtime_version

        return runtime_version()

    @property
    def components(self) -> Tuple[int, ...]:
        """The integer components exactly as supplied."""
        return self._components

    @property
    def major(self) -> int:
        return self._components[0]

    @property
    def minor(self) -> int:
        return self._components[1] if len(self._components) > 1 else 0

    @property
    def patch(self) -> Optional[int]:
        """Patch component (None if not specified in the original string)."""
        return self._components[2] if len(self._components) > 2 else None

    def __str__(self) -> str:
        return ".".join(str(c) for c in self._components)

    def __repr__(self) -> str:
        return f"MinecraftVersion('{self}')"

    def __eq__(self, other) -> bool:
        if not isinstance(other, MinecraftVersion):
            return NotImplemented
        return self._version == other._version

    def __lt__(self, other) -> bool:
        if not isinstance(other, MinecraftVersion):
            return NotImplemented
        return self._version < other._version

    def __le__(self, other) -> bool:
        if not isinstance(other, MinecraftVersion):
            return NotImplemented
        return self._version <= other._version

    def __gt__(self, other) -> bool:
        if not isinstance(other, MinecraftVersion):
            return NotImplemented
        return self._version > other._version

    def __ge__(self, other) -> bool:
        if not isinstance(other, MinecraftVersion):
            return NotImplemented
        return self._version >= other._version

    def __hash__(self) -> int:
        return hash(self._version)

    def __reduce__(self):
        return (MinecraftVersion, (str(self),))

    def is_before(self, other: "MinecraftVersion") -> bool:
        return self < other

    def is_after(self, other: "MinecraftVersion") -> bool:
        return self > other

    def is_before_or_eq(self, other: "MinecraftVersion") -> bool:
        return self <= other

    def is_after_or_eq(self, other: "MinecraftVersion") -> bool:
        return self >= other


VersionLike = Union[str, MinecraftVersion]


def parse_version(version_string: VersionLike) -> MinecraftVersion:
    """
    Parse a version string into a MinecraftVersion.

    Args:
        version_string: Version string to parse, or an already parsed version

    Returns:
        MinecraftVersion object

    Raises:
        VersionFormatError: If version string is invalid
    """
    if isinstance(version_string, MinecraftVersion):
        return version_string
    return MinecraftVersion(version_string)


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """
    Compare two versions.

    Args:
        version1: First version
        version2: Second version

    Returns:
        -1 if version1 < version2
         0 if version1 == version2
         1 if version1 > version2

    Raises:
        VersionFormatError: If either version string is invalid
    """
    v1 = parse_version(version1)
    v2 = parse_version(version2)

    if v1 < v2:
        return -1
    elif v1 > v2:
        return 1
    else:
        return 0
