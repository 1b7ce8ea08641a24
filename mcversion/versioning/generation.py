"""
Generations of server internals.

A generation groups the Minecraft versions that share one internal package
layout. Generations live in an ordered catalog: declaration order is release
order, and the NONE sentinel (ordinal 0) stands for "no known layout".
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import (
    Dict,
    FrozenSet,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
)

from .exceptions import GenerationComparisonError
from .indexing import build_multiple
from .version import MinecraftVersion, VersionLike, parse_version

logger = logging.getLogger(__name__)

# The nms prefix for 1.17+ (excludes version component)
NMS = "net.minecraft."

# The obc prefix (without the version component)
OBC = "org.bukkit.craftbukkit"

NONE_NAME = "NONE"

# (name, relocated, versions)
GenerationEntry = Tuple[str, bool, Sequence[MinecraftVersion]]


@dataclass(frozen=True, repr=False, eq=False)
class Generation:
    """
    One entry of a generation catalog.

    Attributes:
        name: Symbolic name, e.g. "v1_20_R3"
        ordinal: Declaration position within the catalog (NONE is 0)
        catalog: Name of the owning catalog
        owner: The owning catalog; generations compare by identity
        relocated: Whether the CraftBukkit package carries a version segment
        minecraft_versions: Versions that belong to this generation
    """

    name: str
    ordinal: int
    catalog: str
    relocated: bool
    minecraft_versions: FrozenSet[MinecraftVersion] = field(default_factory=frozenset)
    owner: Optional["GenerationCatalog"] = None
    nms_prefix: str = field(init=False, compare=False)
    obc_prefix: str = field(init=False, compare=False)

    def __post_init__(self):
        package_component = f".{self.name}." if self.relocated else "."
        object.__setattr__(self, "nms_prefix", NMS)
        object.__setattr__(self, "obc_prefix", OBC + package_component)

    def __repr__(self) -> str:
        return f"{self.catalog}.{self.name}"

    def __str__(self) -> str:
        return self.name

    @property
    def is_none(self) -> bool:
        return self.ordinal == 0

    def nms(self, class_name: str) -> str:
        """Prepend the versioned NMS prefix to the given class name."""
        if not class_name:
            raise ValueError("class_name must not be empty")
        return self.nms_prefix + class_name

    def obc(self, class_name: str) -> str:
        """Prepend the versioned OBC prefix to the given class name."""
        if not class_name:
            raise ValueError("class_name must not be empty")
        return self.obc_prefix + class_name

    def _check_comparable(self, other: "Generation") -> None:
        if not isinstance(other, Generation):
            raise GenerationComparisonError(
                f"Cannot compare {self!r} with {type(other).__name__}"
            )
        if self.is_none:
            raise GenerationComparisonError("this cannot be NONE")
        if other.is_none:
            raise GenerationComparisonError("other cannot be NONE")
        if self.owner is not other.owner:
            raise GenerationComparisonError(
                f"Cannot compare {self!r} with {other!r} from another catalog"
            )

    def is_before(self, other: "Generation") -> bool:
        """Whether this generation comes before ``other``."""
        self._check_comparable(other)
        return self.ordinal < other.ordinal

    def is_after(self, other: "Generation") -> bool:
        """Whether this generation comes after ``other``."""
        self._check_comparable(other)
        return self.ordinal > other.ordinal

    def is_before_or_eq(self, other: "Generation") -> bool:
        """Whether this generation is the same as or comes before ``other``."""
        self._check_comparable(other)
        return self.ordinal <= other.ordinal

    def is_after_or_eq(self, other: "Generation") -> bool:
        """Whether this generation is the same as or comes after ``other``."""
        self._check_comparable(other)
        return self.ordinal >= other.ordinal


class GenerationCatalog:
    """
    An ordered, closed set of generations with a reverse version index.

    Generations are reachable by name (``catalog["v1_20_R3"]``) or as
    attributes (``catalog.v1_20_R3``). The reverse index is built once at
    construction; a version claimed by two generations is rejected with
    DuplicateVersionError.
    """

    def __init__(
        self,
        name: str,
        entries: Iterable[GenerationEntry],
        none_relocated: bool = False,
    ):
        self.name = name
        self.NONE = Generation(NONE_NAME, 0, name, none_relocated, owner=self)

        generations: List[Generation] = [self.NONE]
        by_name: Dict[str, Generation] = {NONE_NAME: self.NONE}
        for entry_name, relocated, versions in entries:
            if entry_name in by_name:
                raise ValueError(f"Duplicate generation name in {name}: {entry_name}")
            generation = Generation(
                entry_name,
                len(generations),
                name,
                relocated,
                frozenset(versions),
                self,
            )
            generations.append(generation)
            by_name[entry_name] = generation

        self._generations = tuple(generations)
        self._by_name = MappingProxyType(by_name)
        self._index = MappingProxyType(
            build_multiple(self._generations, self.member_versions)
        )
        logger.debug(
            f"Catalog {name}: {len(self._generations) - 1} generations, "
            f"{len(self._index)} versions"
        )

    def __getattr__(self, item: str) -> Generation:
        by_name = self.__dict__.get("_by_name")
        if by_name is not None and item in by_name:
            return by_name[item]
        raise AttributeError(f"{type(self).__name__} has no generation {item!r}")

    def __getitem__(self, name: str) -> Generation:
        return self._by_name[name]

    def __iter__(self) -> Iterator[Generation]:
        return iter(self._generations)

    def __len__(self) -> int:
        return len(self._generations)

    def __contains__(self, generation) -> bool:
        return isinstance(generation, Generation) and generation.owner is self

    def __repr__(self) -> str:
        return f"GenerationCatalog({self.name!r})"

    def values(self) -> Tuple[Generation, ...]:
        """All generations in declaration order, NONE first."""
        return self._generations

    def names(self) -> List[str]:
        return list(self._by_name)

    @property
    def index(self) -> Mapping[MinecraftVersion, Generation]:
        """Read-only mapping from MinecraftVersion to its generation."""
        return self._index

    def member_versions(self, generation: Generation) -> FrozenSet[MinecraftVersion]:
        """The versions explicitly declared for ``generation``."""
        return generation.minecraft_versions

    def for_minecraft_version(self, version: VersionLike) -> Generation:
        """
        Get the generation that claims ``version``.

        Only exact (padding-aware) matches count. A version that is not
        registered, even one between two registered versions, resolves
        to NONE.
        """
        return self._index.get(parse_version(version), self.NONE)

    def runtime_version(self) -> Generation:
        """The generation of the running server."""
        from .runtime import default_resolver

        return default_resolver().generation(self)
