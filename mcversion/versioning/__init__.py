"""
Versioning module for mcversion.

Layers:

1. **Version values** (version.py): MinecraftVersion, a dotted sequence of
   non-negative integers whose equality and ordering treat missing trailing
   components as zero ("1.21" == "1.21.0").

2. **Known versions** (known.py): named constants for every Minecraft
   version the library knows about, plus the newest known version used as
   the offline fallback.

3. **Generations** (generation.py, catalogs.py): ordered catalogs mapping
   many Minecraft versions onto few generations of server internals.
   PackageVersion and NmsVersion are two instances of the same
   GenerationCatalog. Lookup is exact; unknown versions resolve to NONE,
   never to a neighbouring generation. Ordering against NONE is an error.

4. **Reverse indexing** (indexing.py): flattens a catalog into a
   version -> generation mapping and rejects versions claimed twice.

5. **Runtime resolution** (runtime.py): the server's version and its
   generations, resolved once per process.

6. **Exceptions** (exceptions.py): one hierarchy rooted at VersioningError.
"""

from . import known
from .catalogs import CATALOGS, NmsVersion, PackageVersion
from .exceptions import (
    VersioningError,
    VersionFormatError,
    RuntimeVersionError,
    RuntimeAlreadyResolvedError,
    GenerationComparisonError,
    DuplicateVersionError,
)
from .generation import Generation, GenerationCatalog
from .indexing import build_multiple
from .known import KNOWN_VERSIONS, NEWEST_KNOWN_VERSION, NEWEST_MINECRAFT_VERSION
from .runtime import (
    RuntimeResolver,
    configure_runtime,
    default_resolver,
    runtime_version,
)
from .version import MinecraftVersion, parse_version, compare_versions

__all__ = [
    # Version values
    "MinecraftVersion",
    "parse_version",
    "compare_versions",
    # Known versions
    "known",
    "KNOWN_VERSIONS",
    "NEWEST_KNOWN_VERSION",
    "NEWEST_MINECRAFT_VERSION",
    # Generations
    "Generation",
    "GenerationCatalog",
    "PackageVersion",
    "NmsVersion",
    "CATALOGS",
    "build_multiple",
    # Runtime
    "RuntimeResolver",
    "configure_runtime",
    "default_resolver",
    "runtime_version",
    # Exceptions
    "VersioningError",
    "VersionFormatError",
    "RuntimeVersionError",
    "RuntimeAlreadyResolvedError",
    "GenerationComparisonError",
    "DuplicateVersionError",
]
