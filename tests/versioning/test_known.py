"""Tests for the known Minecraft version table."""

import pytest

from mcversion.versioning import known
from mcversion.versioning.known import (
    KNOWN_VERSIONS,
    NEWEST_KNOWN_VERSION,
    NEWEST_MINECRAFT_VERSION,
)
from mcversion.versioning.version import MinecraftVersion


@pytest.mark.short
class TestKnownVersions:
    def test_constants_are_parsed(self):
        assert known.v1_21_4 == MinecraftVersion("1.21.4")
        assert known.v1_21 == MinecraftVersion("1.21.0")
        assert known.v1_17 == MinecraftVersion("1.17")
        assert str(known.v1_20) == "1.20"

    def test_registry_matches_constants(self):
        assert len(KNOWN_VERSIONS) == 16
        for name, version in KNOWN_VERSIONS.items():
            assert getattr(known, name) is version

    def test_registry_is_newest_first(self):
        versions = list(KNOWN_VERSIONS.values())
        assert versions == sorted(versions, reverse=True)

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            KNOWN_VERSIONS["v9_9"] = MinecraftVersion("9.9")

    def test_newest_known_version(self):
        assert NEWEST_MINECRAFT_VERSION == "1.21.4"
        assert NEWEST_KNOWN_VERSION == known.v1_21_4
        assert NEWEST_KNOWN_VERSION == max(KNOWN_VERSIONS.values())
