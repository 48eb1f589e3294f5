"""Environment variables that expose container ports to a process."""

from typing import List

from ..models.process import Env, ProcessDescriptor
from .constants import PORT_ENV_NAMES, PROCESS_PORT_ENV_PREFIX


def port_env_variables(process: ProcessDescriptor) -> List[Env]:
    """Derive port environment variables from the container ports of a process.

    A process with a single container port gets ``port`` and ``PORT``. Any
    process with ports gets ``PORT_<name>`` listing every container port,
    comma separated, in order.
    """
    if not process.container_ports:
        return []

    envs = []
    if len(process.container_ports) == 1:
        value = str(process.container_ports[0].container_port)
        envs.extend(Env(name=name, value=value) for name in PORT_ENV_NAMES)

    ports = ",".join(str(port.container_port) for port in process.container_ports)
    envs.append(Env(name=f"{PROCESS_PORT_ENV_PREFIX}{process.name}", value=ports))
    return envs
