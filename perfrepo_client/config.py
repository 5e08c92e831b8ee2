"""Configuration for the PerfRepo client."""

from pathlib import Path

from pydantic import BaseModel, SecretStr


class PerfRepoConfig(BaseModel):
    """Connection settings for a PerfRepo instance.

    ``url`` is the application root; the REST interface lives under
    ``{url}/rest``. TLS verification uses the system trust store unless
    ``ca_file`` points at a CA bundle or ``verify_ssl`` is disabled.
    """

    url: str = "http://localhost:8080/testing-repo"
    username: str
    password: SecretStr
    ca_file: Path | None = None
    verify_ssl: bool = True

    @property
    def rest_url(self) -> str:
        return f"{self.url.rstrip('/')}/rest/"
