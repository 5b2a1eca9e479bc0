"""Redis connection configuration entity."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qs, unquote, urlsplit

from crudcache.exceptions import ConfigurationError

if TYPE_CHECKING:
    from redis.asyncio import ConnectionPool, Redis

DEFAULT_PORT = 6379


@dataclass(frozen=True)
class RedisConfig:
    """Connection and pool settings for a Redis backend.

    A pre-built ``client`` or ``connection_pool`` takes precedence over
    every dial and pool option below, which are then ignored.

    Pool settings:
        max_active bounds the number of open connections. When it is
        reached and ``wait`` is True callers block for up to
        ``pool_timeout`` seconds (forever when None); with ``wait`` False
        they fail immediately. A connection idle for longer than
        ``idle_timeout`` is checked with PING before it is reused.
    """

    address: str = f"localhost:{DEFAULT_PORT}"
    username: str | None = None
    password: str | None = None
    db: int = 0

    max_idle: int = 5
    max_active: int = 20
    idle_timeout: timedelta = timedelta(minutes=10)
    wait: bool = True
    pool_timeout: float | None = None

    socket_timeout: float | None = None
    socket_connect_timeout: float | None = None

    tls: bool = False
    ssl_cert_reqs: str = "required"
    ssl_ca_certs: str | None = None

    connection_options: Mapping[str, Any] = field(default_factory=dict)

    client: "Redis | None" = field(default=None, repr=False, compare=False)
    connection_pool: "ConnectionPool | None" = field(
        default=None, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Validate settings."""
        if self.client is not None or self.connection_pool is not None:
            return

        if not self.address:
            raise ConfigurationError("address must not be empty")
        # Raises on a malformed port
        self.host_and_port()

        if self.db < 0:
            raise ConfigurationError(f"db must be >= 0, got {self.db}")
        if self.max_active < 1:
            raise ConfigurationError(
                f"max_active must be >= 1, got {self.max_active}"
            )
        if not 0 <= self.max_idle <= self.max_active:
            raise ConfigurationError(
                f"max_idle must be between 0 and max_active ({self.max_active}), "
                f"got {self.max_idle}"
            )
        if self.idle_timeout < timedelta(0):
            raise ConfigurationError("idle_timeout must not be negative")
        if self.pool_timeout is not None and self.pool_timeout < 0:
            raise ConfigurationError("pool_timeout must not be negative")

    @property
    def uses_prebuilt_connection(self) -> bool:
        """Whether a caller-supplied client or pool overrides dial options."""
        return self.client is not None or self.connection_pool is not None

    def host_and_port(self) -> tuple[str, int]:
        """Split ``address`` into host and port.

        Accepts ``host``, ``host:port`` and ``[ipv6]:port``.

        Returns:
            A (host, port) tuple.

        Raises:
            ConfigurationError: If the port is not a valid integer.
        """
        address = self.address
        if address.startswith("["):
            host, _, rest = address[1:].partition("]")
            port_str = rest[1:] if rest.startswith(":") else ""
        elif address.count(":") == 1:
            host, _, port_str = address.partition(":")
        else:
            host, port_str = address, ""

        if not port_str:
            return host or "localhost", DEFAULT_PORT
        try:
            port = int(port_str)
        except ValueError as e:
            raise ConfigurationError(f"invalid port in address {address!r}") from e
        if not 0 < port < 65536:
            raise ConfigurationError(f"port out of range in address {address!r}")
        return host or "localhost", port

    @classmethod
    def from_url(cls, url: str, **overrides: Any) -> "RedisConfig":
        """Create a config from a ``redis://`` or ``rediss://`` URL.

        The URL form is ``redis[s]://[[user]:password@]host[:port][/db]``;
        a ``db`` query parameter is also accepted. ``rediss`` enables TLS.

        Args:
            url: The Redis URL.
            **overrides: Field values that take precedence over the URL.

        Returns:
            A new RedisConfig instance.

        Raises:
            ConfigurationError: If the URL cannot be parsed.
        """
        parts = urlsplit(url)
        if parts.scheme not in ("redis", "rediss"):
            raise ConfigurationError(
                f"unsupported URL scheme {parts.scheme!r}, expected redis or rediss"
            )

        try:
            port = parts.port or DEFAULT_PORT
        except ValueError as e:
            raise ConfigurationError(f"invalid port in URL {url!r}") from e

        host = parts.hostname or "localhost"
        if ":" in host:
            host = f"[{host}]"

        db = 0
        db_str = parts.path.lstrip("/") or parse_qs(parts.query).get("db", [""])[0]
        if db_str:
            try:
                db = int(db_str)
            except ValueError as e:
                raise ConfigurationError(f"invalid db in URL {url!r}") from e

        values: dict[str, Any] = {
            "address": f"{host}:{port}",
            "username": unquote(parts.username) if parts.username else None,
            "password": unquote(parts.password) if parts.password else None,
            "db": db,
            "tls": parts.scheme == "rediss",
        }
        values.update(overrides)
        return cls(**values)
