"""Tests for port environment variables."""

from procchart.core.ports import port_env_variables
from procchart.models import ContainerPort, Env, ProcessDescriptor


def _process(name, *ports):
    return ProcessDescriptor(
        name=name,
        container_ports=[ContainerPort(container_port=port) for port in ports],
    )


class TestPortEnvVariables:
    """Test derivation of port environment variables."""

    def test_no_ports(self):
        assert port_env_variables(_process("worker")) == []

    def test_single_port(self):
        envs = port_env_variables(_process("web", 8080))

        assert envs == [
            Env(name="port", value="8080"),
            Env(name="PORT", value="8080"),
            Env(name="PORT_web", value="8080"),
        ]

    def test_multiple_ports(self):
        envs = port_env_variables(_process("web", 80, 443))

        assert envs == [Env(name="PORT_web", value="80,443")]

    def test_keeps_port_order(self):
        envs = port_env_variables(_process("api", 9000, 80, 8443))

        assert envs == [Env(name="PORT_api", value="9000,80,8443")]

    def test_process_name_is_used_verbatim(self):
        envs = port_env_variables(_process("my-worker", 5000))

        assert envs[-1].name == "PORT_my-worker"
