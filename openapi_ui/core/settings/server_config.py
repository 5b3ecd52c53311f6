"""Server configuration."""

from pydantic import BaseModel


class ServerConfig(BaseModel, frozen=True):
    """Bind address of the demo host."""

    host: str
    port: int

    @property
    def base_url(self) -> str:
        """URL the server is reachable at from the local machine."""
        host = "127.0.0.1" if self.host == "0.0.0.0" else self.host
        return f"http://{host}:{self.port}"
