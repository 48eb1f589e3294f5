import pytest
from click.testing import CliRunner

from procchart.models import ContainerPort, MetadataItem, Probes, ServicePort, Target


class StaticPortSource:
    """Port source returning fixed ports and probes for every process."""

    def __init__(self, container_ports=None, service_ports=None, probes=None, error=None):
        self.container_ports = container_ports or []
        self.service_ports = service_ports or []
        self._probes = probes or Probes()
        self.error = error
        self.probe_calls = 0

    def container_ports_for_process(self, process):
        return list(self.container_ports)

    def service_ports_for_process(self, process):
        return list(self.service_ports)

    def probes(self):
        self.probe_calls += 1
        if self.error:
            raise self.error
        return self._probes


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def web_ports():
    """Provides a port source with one container and one service port."""
    return StaticPortSource(
        container_ports=[ContainerPort(container_port=8080, name="http")],
        service_ports=[ServicePort(port=80, target_port=8080, name="http")],
        probes=Probes(
            readiness={"httpGet": {"path": "/ready", "port": 8080}},
            liveness={"tcpSocket": {"port": 8080}},
        ),
    )


@pytest.fixture
def no_ports():
    """Provides a port source without any ports."""
    return StaticPortSource()


def make_item(kind, apply, process_name="", deployment_version=0, api_version=None):
    """Create a metadata item for a target kind."""
    return MetadataItem(
        target=Target(kind=kind, api_version=api_version),
        apply=apply,
        process_name=process_name,
        deployment_version=deployment_version,
    )


@pytest.fixture
def item_factory():
    return make_item


@pytest.fixture
def temp_project(tmp_path, monkeypatch):
    """Create a temporary project directory and change to it."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()
    monkeypatch.chdir(project_dir)
    return project_dir


@pytest.fixture
def port_source_factory():
    """Provides the StaticPortSource class for tests that need custom ports."""
    return StaticPortSource
