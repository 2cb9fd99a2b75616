"""HTTP client configuration settings."""

from pydantic import BaseModel, Field


class HTTPSettings(BaseModel):
    """HTTP client configuration settings.

    Controls how the httpx transport behind ``HTTPXClient`` is built.
    """

    timeout: float = Field(
        default=30.0,
        gt=0,
        description="Request timeout in seconds",
    )

    verify: bool | str = Field(
        default=True,
        description="TLS verification: true/false or a path to a CA bundle",
    )

    follow_redirects: bool = Field(
        default=True,
        description="Follow 3xx redirects inside the transport",
    )

    user_agent: str | None = Field(
        default=None,
        description="User-Agent header sent with every request",
    )
