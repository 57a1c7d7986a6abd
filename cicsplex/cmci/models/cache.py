"""Result cache models: cache tokens, windows and result summaries."""

from pydantic import BaseModel, ConfigDict, Field

from ..config import DEFAULT_INCREMENT

NormalizedRecord = dict[str, str]


class CacheToken(BaseModel):
    """Server-held result set handle and the record count valid at issuance."""

    cache_token: str = Field(..., min_length=1)
    record_count: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @property
    def is_empty(self) -> bool:
        return self.record_count == 0


class RecordWindow(BaseModel):
    """A 1-based slice of a cached result set fetched in one request."""

    start: int = Field(1, ge=1)
    increment: int = Field(DEFAULT_INCREMENT, gt=0)
    window_index: int = Field(0, ge=0)

    model_config = ConfigDict(frozen=True)

    def end(self, record_count: int) -> int:
        """Last record number covered by this window, clamped to record_count."""
        return min(self.start + self.increment - 1, record_count)

    def size(self, record_count: int) -> int:
        """Number of records this window is expected to return."""
        return max(self.end(record_count) - self.start + 1, 0)


class ResultSummary(BaseModel):
    """The ``resultsummary`` envelope attributes of a CMCI response.

    Every attribute arrives as a string; counts and codes are coerced to int.
    """

    api_response1: int | None = None
    api_response2: int | None = None
    api_response1_alt: str | None = None
    api_response2_alt: str | None = None
    record_count: int = Field(0, ge=0, alias="recordcount")
    displayed_record_count: int | None = Field(None, ge=0, alias="displayed_recordcount")
    cache_token: str | None = Field(None, alias="cachetoken")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ResourceResponse(BaseModel):
    """A single-shot resource query result."""

    summary: ResultSummary
    records: list[NormalizedRecord] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class RetrievalResult(BaseModel):
    """Every record collected behind one cache token."""

    cache_token: str = Field(..., min_length=1)
    record_count: int = Field(..., ge=0)
    records: list[NormalizedRecord] = Field(default_factory=list)
    windows_used: int = Field(0, ge=0)

    model_config = ConfigDict(frozen=True)
