"""
The two generation catalogs.

PackageVersion is a 1:1 representation of the CraftBukkit package version up
to 1.20.4. Starting from Paper 1.20.5 there is no CraftBukkit package
relocation anymore and the server mappings moved from Spigot to Mojang, so
every later release falls under NO_RELOCATION. See
https://forums.papermc.io/threads/important-dev-psa-future-removal-of-cb-package-relocation.1106/

NmsVersion shares the relocated entries, but from v1_20_R4 onwards an entry
represents a significant version of the server internals rather than a
Spigot package name. A new entry is only added when our use of the internals
would otherwise break, not for every Minecraft release.
"""

from . import known
from .generation import GenerationCatalog

PackageVersion = GenerationCatalog(
    "PackageVersion",
    [
        ("v1_17_R1", True, (known.v1_17, known.v1_17_1)),
        ("v1_18_R2", True, (known.v1_18_2,)),
        ("v1_19_R3", True, (known.v1_19_4,)),
        ("v1_20_R3", True, (known.v1_20_3, known.v1_20_4)),
        # Expected to collect every release after 1.20.4
        ("NO_RELOCATION", False, (known.v1_20_5, known.v1_20_6)),
    ],
)

NmsVersion = GenerationCatalog(
    "NmsVersion",
    [
        ("v1_17_R1", True, (known.v1_17, known.v1_17_1)),
        ("v1_18_R2", True, (known.v1_18_2,)),
        ("v1_19_R3", True, (known.v1_19_4,)),
        ("v1_20_R3", True, (known.v1_20_3, known.v1_20_4)),
        ("v1_20_R4", False, (known.v1_20_5, known.v1_20_6)),
        ("v1_21_R1", False, (known.v1_21, known.v1_21_1)),
    ],
)

CATALOGS = {
    "nms": NmsVersion,
    "package": PackageVersion,
}
