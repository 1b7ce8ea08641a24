"""Tests for the shipped PackageVersion and NmsVersion catalogs."""

import pytest

from mcversion.versioning import known
from mcversion.versioning.catalogs import CATALOGS, NmsVersion, PackageVersion
from mcversion.versioning.version import MinecraftVersion as V


@pytest.mark.short
class TestPackageVersion:
    def test_entries(self):
        assert PackageVersion.names() == [
            "NONE",
            "v1_17_R1",
            "v1_18_R2",
            "v1_19_R3",
            "v1_20_R3",
            "NO_RELOCATION",
        ]

    @pytest.mark.parametrize(
        "version, expected",
        [
            ("1.17", "v1_17_R1"),
            ("1.17.1", "v1_17_R1"),
            ("1.18.2", "v1_18_R2"),
            ("1.19.4", "v1_19_R3"),
            ("1.20.3", "v1_20_R3"),
            ("1.20.4", "v1_20_R3"),
            ("1.20.5", "NO_RELOCATION"),
            ("1.20.6", "NO_RELOCATION"),
            ("1.18", "NONE"),
            ("1.21", "NONE"),
        ],
    )
    def test_lookup(self, version, expected):
        assert PackageVersion.for_minecraft_version(V(version)).name == expected

    def test_obc_prefixes(self):
        assert PackageVersion.v1_20_R3.obc("CraftServer") == (
            "org.bukkit.craftbukkit.v1_20_R3.CraftServer"
        )
        assert PackageVersion.NO_RELOCATION.obc("CraftServer") == (
            "org.bukkit.craftbukkit.CraftServer"
        )
        assert PackageVersion.NONE.obc_prefix == "org.bukkit.craftbukkit."


@pytest.mark.short
class TestNmsVersion:
    def test_entries(self):
        assert NmsVersion.names() == [
            "NONE",
            "v1_17_R1",
            "v1_18_R2",
            "v1_19_R3",
            "v1_20_R3",
            "v1_20_R4",
            "v1_21_R1",
        ]

    @pytest.mark.parametrize(
        "version, expected",
        [
            ("1.17.1", "v1_17_R1"),
            ("1.18.2", "v1_18_R2"),
            ("1.19.4", "v1_19_R3"),
            ("1.20.4", "v1_20_R3"),
            ("1.20.5", "v1_20_R4"),
            ("1.20.6", "v1_20_R4"),
            ("1.21", "v1_21_R1"),
            ("1.21.0", "v1_21_R1"),
            ("1.21.1", "v1_21_R1"),
            ("1.19", "NONE"),
            ("1.19.2", "NONE"),
            ("1.21.4", "NONE"),
        ],
    )
    def test_lookup(self, version, expected):
        assert NmsVersion.for_minecraft_version(V(version)).name == expected

    def test_relocation_stops_at_1_20_5(self):
        assert NmsVersion.v1_20_R3.relocated
        assert not NmsVersion.v1_20_R4.relocated
        assert NmsVersion.v1_21_R1.obc_prefix == "org.bukkit.craftbukkit."
        assert NmsVersion.v1_19_R3.obc_prefix == "org.bukkit.craftbukkit.v1_19_R3."

    def test_release_order(self):
        assert NmsVersion.v1_17_R1.is_before(NmsVersion.v1_21_R1)
        assert NmsVersion.v1_20_R4.is_after(NmsVersion.v1_20_R3)
        assert NmsVersion.v1_20_R4.is_after_or_eq(NmsVersion.v1_20_R4)


@pytest.mark.short
class TestCatalogInvariants:
    @pytest.mark.parametrize("catalog", list(CATALOGS.values()), ids=list(CATALOGS))
    def test_member_sets_are_disjoint(self, catalog):
        seen = set()
        for generation in catalog.values():
            members = catalog.member_versions(generation)
            assert not (seen & members)
            seen |= members

    @pytest.mark.parametrize("catalog", list(CATALOGS.values()), ids=list(CATALOGS))
    def test_members_are_known_versions(self, catalog):
        known_values = set(known.KNOWN_VERSIONS.values())
        for generation in catalog.values():
            assert catalog.member_versions(generation) <= known_values

    @pytest.mark.parametrize("catalog", list(CATALOGS.values()), ids=list(CATALOGS))
    def test_none_claims_nothing(self, catalog):
        assert catalog.member_versions(catalog.NONE) == frozenset()
        assert catalog.NONE.ordinal == 0

    def test_catalogs_do_not_mix(self):
        assert NmsVersion.v1_17_R1 != PackageVersion.v1_17_R1
        assert PackageVersion.v1_17_R1 not in NmsVersion
