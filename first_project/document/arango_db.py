import os
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from arango import ArangoClient
from arango.database import StandardDatabase

from ..utilities.logger import logger
from ..utilities.setup_error import SetupError


DEFAULT_URL = "http://127.0.0.1:8529"
DEFAULT_USERNAME = "root"
DEFAULT_PASSWORD = ""
SYSTEM_DB_NAME = "_system"

@dataclass(frozen=True)
class ArangoConfig:
    """ Where and as whom to connect. Defaults match the driver's own defaults for a local server. """
    url: str = DEFAULT_URL
    username: str = DEFAULT_USERNAME
    password: str = DEFAULT_PASSWORD

    def __post_init__(self) -> None:
        if not self.url.startswith(("http://", "https://")):
            raise SetupError(f"ARANGO_URL must start with http:// or https://, got '{self.url}'.")

    @classmethod
    def from_env(cls) -> 'ArangoConfig':
        """ Read ARANGO_URL, ARANGO_USERNAME and ARANGO_PASSWORD from the environment. Unset variables fall back to the defaults. """
        ARANGO_URL = os.environ.get("ARANGO_URL") or DEFAULT_URL
        ARANGO_USERNAME = os.environ.get("ARANGO_USERNAME") or DEFAULT_USERNAME
        ARANGO_PASSWORD = os.environ.get("ARANGO_PASSWORD", DEFAULT_PASSWORD)
        return cls(url=ARANGO_URL.rstrip("/"), username=ARANGO_USERNAME, password=ARANGO_PASSWORD)

    def __repr__(self) -> str:
        # Keep the password out of logs
        return f"ArangoConfig(url={self.url!r}, username={self.username!r})"

def create_arango_client(config: ArangoConfig) -> ArangoClient:
    """ Build a client. No request is sent until a database is opened with verify=True or used. """
    logger.debug(f"Creating ArangoDB client for {config.url}")
    return ArangoClient(hosts=config.url)

def open_db(client: ArangoClient, config: ArangoConfig, name: str, verify: bool = False) -> StandardDatabase:
    """ Returns the handle for database `name`. With verify=True, the driver checks the connection and raises if the server can't be reached. """
    return client.db(name, username=config.username, password=config.password, verify=verify)

def open_system_db(client: ArangoClient, config: ArangoConfig) -> StandardDatabase:
    return open_db(client, config, SYSTEM_DB_NAME, verify=True)

@contextmanager
def arango_connection(config: ArangoConfig | None = None) -> Iterator[ArangoClient]:
    """ Scoped connection: the client is created on entry and closed on exit, whether or not the body raised. """
    if config is None:
        config = ArangoConfig.from_env()

    client = create_arango_client(config)
    try:
        yield client
    finally:
        client.close()
        logger.debug(f"Closed ArangoDB client for {config.url}")
