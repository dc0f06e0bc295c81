"""Tests for the AssetDiscovery orchestrator."""

import pytest

from asset_discovery.config.config_loader import DiscoveryConfig
from asset_discovery.core import cidr_expander
from asset_discovery.core import discovery as discovery_module
from asset_discovery.core.cidr_expander import parse_cidr
from asset_discovery.core.data_models import ArpEntry, DiscoveryStatus, OuiRecord, OuiTable
from asset_discovery.core.discovery import AssetDiscovery, resolve_vendors
from asset_discovery.utils.error_handler import AcquisitionError, InvalidFormatError, OuiDatabaseError

from .conftest import LINUX_IP_NEIGH, MACOS_ARP


@pytest.fixture
def discovery(oui_file):
    return AssetDiscovery(config=DiscoveryConfig(oui_database=str(oui_file)), system="Linux")


class TestDiscover:
    """Tests for AssetDiscovery.discover."""

    def test_completed(self, discovery, fake_run):
        """Entries are parsed in order and enriched with vendors."""
        fake_run.outputs = {"ip": LINUX_IP_NEIGH}

        result = discovery.discover()

        assert result.status == DiscoveryStatus.COMPLETED
        assert result.lines_read == 4
        assert [(d.ip_address, d.vendor_display) for d in result.devices] == [
            ("192.168.1.1", "Nokia Shanghai Bell Co., Ltd."),
            ("192.168.1.20", "Raspberry Pi Foundation"),
            ("192.168.1.1", "Nokia Shanghai Bell Co., Ltd."),
        ]
        assert result.metadata == {
            "platform": "linux",
            "parser": "IpNeighParser",
            "command": "ip -4 neigh show",
            "oui_records": 3,
        }
        assert result.errors == []

    def test_other_platform(self, oui_file, fake_run):
        """The parser follows the platform."""
        fake_run.outputs = {"arp": MACOS_ARP}
        discovery = AssetDiscovery(config=DiscoveryConfig(oui_database=str(oui_file)), system="Darwin")

        result = discovery.discover()

        assert [d.mac_address for d in result.devices] == ["28:6f:b9:0:11:22", "0:aa:bb:1:2:3"]
        assert [d.vendor for d in result.devices] == [
            "Nokia Shanghai Bell Co., Ltd.", "Example Networks Inc.",
        ]

    def test_empty_cache(self, discovery, fake_run):
        """No entries is its own outcome, not a failure."""
        fake_run.outputs = {"ip": "192.168.1.5 dev wlan0  FAILED\n"}

        result = discovery.discover()

        assert result.status == DiscoveryStatus.EMPTY
        assert result.devices == []
        assert result.lines_read == 1

    def test_empty_cache_skips_oui_database(self, tmp_path, fake_run):
        """No entries means the vendor database is never opened."""
        fake_run.outputs = {"ip": ""}
        discovery = AssetDiscovery(
            config=DiscoveryConfig(oui_database=str(tmp_path / "missing.txt")), system="linux"
        )

        result = discovery.discover()

        assert result.status == DiscoveryStatus.EMPTY
        assert result.errors == []
        assert "oui_records" not in result.metadata

    def test_acquisition_failure(self, discovery, fake_run):
        """A command that cannot be started fails the run."""
        result = discovery.discover()

        assert result.status == DiscoveryStatus.FAILED
        assert isinstance(result.failure, AcquisitionError)
        assert len(result.errors) == 1

    def test_unsupported_platform(self, fake_run):
        """Platforms without a parser fail the run."""
        result = AssetDiscovery(system="Plan9").discover()

        assert result.status == DiscoveryStatus.FAILED
        assert isinstance(result.failure, AcquisitionError)
        assert fake_run.calls == []

    def test_missing_oui_database_degrades_vendors(self, tmp_path, fake_run):
        """Without a database every vendor is unknown but the run completes."""
        fake_run.outputs = {"ip": LINUX_IP_NEIGH}
        discovery = AssetDiscovery(
            config=DiscoveryConfig(oui_database=str(tmp_path / "missing.txt")), system="linux"
        )

        result = discovery.discover()

        assert result.status == DiscoveryStatus.COMPLETED
        assert {d.vendor_display for d in result.devices} == {"Unknown"}
        assert len(result.errors) == 1

    def test_explicit_table(self, tmp_path, fake_run):
        """A supplied table is used instead of loading the configured file."""
        fake_run.outputs = {"ip": LINUX_IP_NEIGH}
        discovery = AssetDiscovery(
            config=DiscoveryConfig(oui_database=str(tmp_path / "missing.txt")), system="linux"
        )
        table = OuiTable(records=(OuiRecord("B827EB", "Pi"),))

        result = discovery.discover(table=table)

        assert [d.vendor for d in result.devices] == [None, "Pi", None]
        assert result.errors == []

    def test_configured_commands_and_timeout(self, oui_file, fake_run):
        """Command overrides and the timeout come from the configuration."""
        fake_run.outputs = {"cat": LINUX_IP_NEIGH}
        config = DiscoveryConfig(
            oui_database=str(oui_file),
            command_timeout=3,
            commands={"linux": [["cat", "/tmp/neigh.txt"]]},
        )

        result = AssetDiscovery(config=config, system="linux").discover()

        assert result.status == DiscoveryStatus.COMPLETED
        assert fake_run.calls[0][0] == ["cat", "/tmp/neigh.txt"]
        assert fake_run.calls[0][1]["timeout"] == 3


class TestOuiTableLoading:
    """Tests for AssetDiscovery.load_oui_table."""

    def test_loaded_once(self, discovery, oui_file):
        """The table is cached for the lifetime of the instance."""
        first = discovery.load_oui_table()
        oui_file.unlink()
        assert discovery.load_oui_table() is first

    def test_missing_file(self, tmp_path):
        """A missing database raises OuiDatabaseError."""
        discovery = AssetDiscovery(config=DiscoveryConfig(oui_database=str(tmp_path / "x.txt")))
        with pytest.raises(OuiDatabaseError):
            discovery.load_oui_table()


class TestExpand:
    """Tests for AssetDiscovery.expand."""

    def test_returns_addresses(self):
        """Expansion yields the addresses of the block."""
        assert list(AssetDiscovery().expand("10.0.0.8/31")) == ["10.0.0.8", "10.0.0.9"]

    def test_block_parsed_once(self, monkeypatch):
        """The block is parsed a single time per expansion."""
        calls = []

        def counting_parse(text):
            calls.append(text)
            return parse_cidr(text)

        monkeypatch.setattr(discovery_module, "parse_cidr", counting_parse)
        monkeypatch.setattr(cidr_expander, "parse_cidr", counting_parse)

        assert list(AssetDiscovery().expand("10.0.0.0/31")) == ["10.0.0.0", "10.0.0.1"]
        assert calls == ["10.0.0.0/31"]

    def test_invalid_block(self):
        """Malformed blocks raise immediately."""
        with pytest.raises(InvalidFormatError):
            AssetDiscovery().expand("10.0.0.0/33")


def test_resolve_vendors_keeps_order():
    """Devices come back in entry order with their vendors."""
    table = OuiTable(records=(OuiRecord("001122", "Acme"),))
    devices = resolve_vendors(
        [ArpEntry("10.0.0.2", "aa:bb:cc:00:00:01"), ArpEntry("10.0.0.1", "00:11:22:33:44:55")],
        table,
    )
    assert [(d.ip_address, d.vendor) for d in devices] == [("10.0.0.2", None), ("10.0.0.1", "Acme")]
