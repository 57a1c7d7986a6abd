"""Resource query models."""

from pydantic import BaseModel, ConfigDict


class QueryParams(BaseModel):
    """Valueless query terms appended after CRITERIA and PARAMETER."""

    summonly: bool = False
    nodiscard: bool = False
    override_warning_count: bool = False

    model_config = ConfigDict(frozen=True)


class ResourceQuery(BaseModel):
    """Structured parameters for one CMCI resource request.

    ``name`` is typed optional so that the URI builder, not the model, reports
    a missing resource name; an absent name and a blank one get different
    messages.
    """

    name: str | None = None
    cics_plex: str | None = None
    region_name: str | None = None
    criteria: str | None = None
    parameter: str | None = None
    query_params: QueryParams = QueryParams()

    model_config = ConfigDict(frozen=True)
