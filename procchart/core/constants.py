"""Constants used throughout procchart."""


# Instance count of a process when the configuration does not set one
DEFAULT_NUMBER_OF_UNITS = 1

# Process that receives traffic when routability is not configured
DEFAULT_ROUTABLE_PROCESS = "web"

# Environment variables derived from container ports
PORT_ENV_NAMES = ("port", "PORT")
PROCESS_PORT_ENV_PREFIX = "PORT_"

# Service port names generated for image-exposed ports
DEFAULT_SERVICE_PORT_NAME = "http-default-{index}"

# Probe handlers; a probe must define exactly one
PROBE_HANDLERS = ("httpGet", "tcpSocket", "exec", "grpc")

# Configuration files
APP_CONFIG_FILE_NAME = "procchart.yaml"
PORT_CONFIG_FILE_NAME = "ports.yaml"
YAML_SUFFIXES = (".yaml", ".yml")
