"""Tests for the file-backed port source."""

import pytest
from pydantic import ValidationError

from procchart.core.port_source import FilePortSource, probe_errors
from procchart.models import PortConfig
from procchart.services import PortSourceError


@pytest.fixture
def port_config():
    return PortConfig.model_validate({
        "kubernetes": {
            "processes": {
                "web": {"ports": [
                    {"name": "http", "port": 80, "targetPort": 8080},
                    {"name": "metrics", "port": 9090},
                ]},
                "worker": {"ports": []},
            }
        },
        "healthcheck": {
            "readiness": {"httpGet": {"path": "/ready", "port": 8080}},
            "liveness": {"tcpSocket": {"port": 8080}},
        },
        "exposedPorts": [3000],
    })


class TestFilePortSource:
    """Test FilePortSource."""

    def test_configured_container_ports(self, port_config):
        source = FilePortSource(port_config)
        ports = source.container_ports_for_process("web")

        assert [port.container_port for port in ports] == [8080, 9090]
        assert [port.name for port in ports] == ["http", "metrics"]

    def test_configured_service_ports(self, port_config):
        source = FilePortSource(port_config)
        ports = source.service_ports_for_process("web")

        assert [(port.port, port.target_port) for port in ports] == [(80, 8080), (9090, 9090)]

    def test_explicitly_empty_process(self, port_config):
        source = FilePortSource(port_config)

        assert source.container_ports_for_process("worker") == []
        assert source.service_ports_for_process("worker") == []

    def test_unknown_process_has_no_ports(self, port_config):
        source = FilePortSource(port_config)

        assert source.container_ports_for_process("cron") == []
        assert source.service_ports_for_process("cron") == []

    def test_default_process_uses_exposed_ports(self):
        source = FilePortSource(PortConfig(exposed_ports=[3000, 3001]))

        container_ports = source.container_ports_for_process("web")
        service_ports = source.service_ports_for_process("web")

        assert [port.container_port for port in container_ports] == [3000, 3001]
        assert [port.name for port in service_ports] == ["http-default-1", "http-default-2"]
        assert [port.port for port in service_ports] == [3000, 3001]
        assert source.container_ports_for_process("worker") == []

    def test_custom_default_process(self):
        source = FilePortSource(PortConfig(exposed_ports=[5000]), default_process="api")

        assert source.container_ports_for_process("web") == []
        assert len(source.container_ports_for_process("api")) == 1

    def test_probes(self, port_config):
        probes = FilePortSource(port_config).probes()

        assert probes.readiness == {"httpGet": {"path": "/ready", "port": 8080}}
        assert probes.liveness == {"tcpSocket": {"port": 8080}}
        assert probes.startup is None

    def test_no_healthcheck(self):
        probes = FilePortSource(PortConfig()).probes()

        assert probes.readiness is None
        assert probes.liveness is None
        assert probes.startup is None

    def test_malformed_probe(self):
        config = PortConfig.model_validate({
            "healthcheck": {"startup": {"httpGet": {"path": "/"}, "exec": {"command": ["true"]}}},
        })

        with pytest.raises(PortSourceError, match="startup probe"):
            FilePortSource(config).probes()


class TestProbeErrors:
    """Test probe handler checks."""

    def test_missing_probe(self):
        assert probe_errors("readiness", None) == []

    def test_one_handler(self):
        assert probe_errors("liveness", {"exec": {"command": ["true"]}, "periodSeconds": 5}) == []

    def test_no_handler(self):
        assert probe_errors("liveness", {"periodSeconds": 5})


class TestPortConfig:
    """Test port configuration validation."""

    @pytest.mark.parametrize("port", [0, 70000])
    def test_exposed_ports_range(self, port):
        with pytest.raises(ValidationError):
            PortConfig.model_validate({"exposedPorts": [port]})

    def test_probes_are_copies(self, port_config):
        probes = FilePortSource(port_config).probes()

        probes.readiness["httpGet"]["path"] = "/changed"

        assert port_config.healthcheck.readiness == {"httpGet": {"path": "/ready", "port": 8080}}
