"""Sources for the Minecraft version reported by the server."""

from typing import Optional, Protocol

from mcversion.config import ConfigAccessor

SERVER_SECTION = "server"
VERSION_KEY = "minecraft_version"


class ServerHost(Protocol):
    """Anything that can report the running server's Minecraft version."""

    def get_minecraft_version(self) -> Optional[str]:
        """Return the reported version string, or None if no server is present."""
        ...


class StaticHost:
    """A host reporting a fixed version string."""

    def __init__(self, minecraft_version: Optional[str]):
        self.minecraft_version = minecraft_version

    def get_minecraft_version(self) -> Optional[str]:
        return self.minecraft_version

    def __repr__(self) -> str:
        return f"StaticHost({self.minecraft_version!r})"


class ConfiguredHost:
    """
    A host reading the version from the configuration file.

    Reads ``minecraft_version`` from the ``[server]`` section; a missing or
    blank value means no server is present.
    """

    def __init__(self, config: Optional[ConfigAccessor] = None):
        self.config = config if config is not None else ConfigAccessor()

    def get_minecraft_version(self) -> Optional[str]:
        value = self.config.get(SERVER_SECTION, VERSION_KEY)
        if value is None or not value.strip():
            return None
        return value
