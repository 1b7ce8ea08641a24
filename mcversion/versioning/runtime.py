"""
Runtime version resolution.

The running server's Minecraft version and its generations are resolved once
and then cached for the lifetime of the process. Resolution moves from
uninitialized to resolved on first access and never goes back.
"""

import logging
import threading
from typing import Dict, Optional

from mcversion.host import ServerHost

from .exceptions import (
    RuntimeAlreadyResolvedError,
    RuntimeVersionError,
    VersionFormatError,
)
from .generation import Generation, GenerationCatalog
from .known import NEWEST_KNOWN_VERSION
from .version import MinecraftVersion

logger = logging.getLogger(__name__)


class RuntimeResolver:
    """
    Resolves and caches the runtime Minecraft version and generations.

    Args:
        host: Source of the server's reported version. None means no server
            is present (offline or test context).
        fallback: Version used when no server is present
    """

    def __init__(
        self,
        host: Optional[ServerHost] = None,
        fallback: MinecraftVersion = NEWEST_KNOWN_VERSION,
    ):
        self.host = host
        self.fallback = fallback
        self._lock = threading.Lock()
        self._version: Optional[MinecraftVersion] = None
        self._generations: Dict[GenerationCatalog, Generation] = {}

    @property
    def resolved(self) -> bool:
        return self._version is not None

    @property
    def version(self) -> MinecraftVersion:
        """
        The Minecraft version of the runtime.

        Raises:
            RuntimeVersionError: If the server reports an unparseable version
        """
        if self._version is None:
            with self._lock:
                if self._version is None:
                    self._version = self._resolve_version()
        return self._version

    def generation(self, catalog: GenerationCatalog) -> Generation:
        """The generation of ``catalog`` the runtime version belongs to."""
        generation = self._generations.get(catalog)
        if generation is not None:
            return generation

        version = self.version
        with self._lock:
            generation = self._generations.get(catalog)
            if generation is None:
                generation = catalog.for_minecraft_version(version)
                self._generations[catalog] = generation
                if generation.is_none:
                    logger.warning(
                        f"Minecraft {version} has no known {catalog.name}; "
                        "version-specific internals are unavailable"
                    )
                else:
                    logger.debug(f"Resolved {catalog.name} for {version}: {generation}")
        return generation

    def _resolve_version(self) -> MinecraftVersion:
        reported = None
        if self.host is not None:
            reported = self.host.get_minecraft_version()

        if reported is None:
            # in test environment there is no server, we fall back to the
            # latest Minecraft version we know
            logger.info(
                f"No server present, using Minecraft {self.fallback} as runtime version"
            )
            return self.fallback

        try:
            version = MinecraftVersion(reported)
        except VersionFormatError as e:
            raise RuntimeVersionError(reported) from e

        logger.debug(f"Server reports Minecraft {version}")
        return version


_default_lock = threading.Lock()
_host: Optional[ServerHost] = None
_resolver: Optional[RuntimeResolver] = None


def configure_runtime(host: Optional[ServerHost]) -> None:
    """
    Install the host queried by the process-wide resolver.

    Must be called before the runtime version is first read.

    Raises:
        RuntimeAlreadyResolvedError: If the runtime was already resolved
    """
    global _host, _resolver
    with _default_lock:
        if _resolver is not None and _resolver.resolved:
            raise RuntimeAlreadyResolvedError()
        _host = host
        _resolver = None


def default_resolver() -> RuntimeResolver:
    """The process-wide resolver, created on first use."""
    global _resolver
    with _default_lock:
        if _resolver is None:
            _resolver = RuntimeResolver(_host)
        return _resolver


def runtime_version() -> MinecraftVersion:
    """The Minecraft version of the running server."""
    return default_resolver().version
