"""CMCI connection settings."""

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import Protocol


class CMCIConnection(BaseModel):
    """Where and how to reach a CMCI server.

    Owned by the caller and passed explicitly to the client; nothing in the
    library keeps a process-wide connection.
    """

    host: str = Field(..., min_length=1)
    port: int = Field(..., gt=0, le=65535)
    protocol: Protocol = Protocol.HTTPS
    user: str | None = None
    password: str | None = Field(None, repr=False)
    reject_unauthorized: bool = True
    timeout: float = Field(30.0, gt=0)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @property
    def base_url(self) -> str:
        return f"{self.protocol.value}://{self.host}:{self.port}"
