"""Minecraft versions the library has explicit knowledge of.

Every constant is parsed from a literal at import time. A malformed literal
raises VersionFormatError here, so the package refuses to import with a
broken table.
"""

from types import MappingProxyType

from .version import MinecraftVersion

v1_21_4 = MinecraftVersion("1.21.4")
v1_21_3 = MinecraftVersion("1.21.3")
v1_21_2 = MinecraftVersion("1.21.2")
v1_21_1 = MinecraftVersion("1.21.1")
v1_21 = MinecraftVersion("1.21")

v1_20_6 = MinecraftVersion("1.20.6")
v1_20_5 = MinecraftVersion("1.20.5")
v1_20_4 = MinecraftVersion("1.20.4")
v1_20_3 = MinecraftVersion("1.20.3")
v1_20 = MinecraftVersion("1.20")

v1_19_4 = MinecraftVersion("1.19.4")
v1_19 = MinecraftVersion("1.19")

v1_18_2 = MinecraftVersion("1.18.2")
v1_18 = MinecraftVersion("1.18")

v1_17_1 = MinecraftVersion("1.17.1")
v1_17 = MinecraftVersion("1.17")

# Offline fallback when no server is present (tests, tooling)
NEWEST_MINECRAFT_VERSION = "1.21.4"
NEWEST_KNOWN_VERSION = MinecraftVersion(NEWEST_MINECRAFT_VERSION)

# Newest first
KNOWN_VERSIONS = MappingProxyType(
    {
        "v1_21_4": v1_21_4,
        "v1_21_3": v1_21_3,
        "v1_21_2": v1_21_2,
        "v1_21_1": v1_21_1,
        "v1_21": v1_21,
        "v1_20_6": v1_20_6,
        "v1_20_5": v1_20_5,
        "v1_20_4": v1_20_4,
        "v1_20_3": v1_20_3,
        "v1_20": v1_20,
        "v1_19_4": v1_19_4,
        "v1_19": v1_19,
        "v1_18_2": v1_18_2,
        "v1_18": v1_18,
        "v1_17_1": v1_17_1,
        "v1_17": v1_17,
    }
)
