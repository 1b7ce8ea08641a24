"""Tests for the server host adapters."""

import pytest

from mcversion.config import ConfigAccessor
from mcversion.host import ConfiguredHost, StaticHost


@pytest.mark.short
class TestStaticHost:
    def test_reports_fixed_value(self):
        assert StaticHost("1.20.4").get_minecraft_version() == "1.20.4"
        assert StaticHost(None).get_minecraft_version() is None

    def test_repr(self):
        assert repr(StaticHost("1.20.4")) == "StaticHost('1.20.4')"


@pytest.mark.short
class TestConfiguredHost:
    def test_reads_server_section(self, tmp_path):
        path = tmp_path / "mcversion.cfg"
        path.write_text("[server]\nminecraft_version = 1.19.4\n")

        host = ConfiguredHost(ConfigAccessor(path))
        assert host.get_minecraft_version() == "1.19.4"

    def test_missing_file_means_no_server(self, tmp_path):
        host = ConfiguredHost(ConfigAccessor(tmp_path / "missing.cfg"))
        assert host.get_minecraft_version() is None

    def test_blank_value_means_no_server(self, tmp_path):
        path = tmp_path / "mcversion.cfg"
        path.write_text("[server]\nminecraft_version =\n")

        host = ConfiguredHost(ConfigAccessor(path))
        assert host.get_minecraft_version() is None
