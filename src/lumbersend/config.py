"""Client configuration and logging setup.

Environment variables
---------------------
- LUMBERSEND_ADDRESS (str): collector host:port, default "localhost:5044".
- LUMBERSEND_TIMEOUT (float): socket timeout in seconds, default 30.
- LUMBERSEND_SSL (bool): enable TLS, default false.
- LUMBERSEND_SSL_VERIFY (bool): verify the collector certificate, default true.
- LUMBERSEND_CA_CERTS (str): path to a CA bundle, default unset.
"""

import logging
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_ADDRESS = "localhost:5044"
DEFAULT_TIMEOUT = 30.0

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_TRUE = frozenset({"1", "true", "yes", "on"})


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUE


def split_address(address: str) -> tuple[str, int]:
    """Split "host:port" into its parts.

    Raises:
        ValueError: If the port is missing or not a number in 1-65535.
    """
    host, sep, port = address.rpartition(":")
    if not sep or not host or not port.isdigit():
        raise ValueError(f"invalid collector address {address!r}, want host:port")
    number = int(port)
    if not 0 < number < 65536:
        raise ValueError(f"port out of range in collector address {address!r}")
    return host.strip("[]"), number


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for the collector.

    Attributes:
        address: Collector address as host:port.
        timeout: Socket timeout in seconds.
        ssl_enable: Whether to wrap the connection in TLS.
        ssl_verify: Whether to verify the collector certificate.
        ca_certs: Optional path to a CA bundle.
    """

    address: str = DEFAULT_ADDRESS
    timeout: float = DEFAULT_TIMEOUT
    ssl_enable: bool = False
    ssl_verify: bool = True
    ca_certs: str | None = None

    @property
    def host(self) -> str:
        return split_address(self.address)[0]

    @property
    def port(self) -> int:
        return split_address(self.address)[1]

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ClientConfig":
        """Build a config from LUMBERSEND_* environment variables.

        Raises:
            ValueError: If LUMBERSEND_TIMEOUT is not a number.
        """
        env = os.environ if environ is None else environ
        raw_timeout = env.get("LUMBERSEND_TIMEOUT") or DEFAULT_TIMEOUT
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(
                f"invalid LUMBERSEND_TIMEOUT {raw_timeout!r}, want seconds"
            ) from None
        return cls(
            address=env.get("LUMBERSEND_ADDRESS") or DEFAULT_ADDRESS,
            timeout=timeout,
            ssl_enable=_env_bool(env.get("LUMBERSEND_SSL"), False),
            ssl_verify=_env_bool(env.get("LUMBERSEND_SSL_VERIFY"), True),
            ca_certs=env.get("LUMBERSEND_CA_CERTS") or None,
        )


def configure_logging(level: str | int = logging.INFO) -> None:
    """Send log output to stdout in the lumbersend format."""
    logging.basicConfig(
        stream=sys.stdout,
        level=level,
        format=LOG_FORMAT,
        force=True,
    )
