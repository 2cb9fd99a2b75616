"""Link pagination configuration settings."""

from pydantic import BaseModel, Field


class PaginationSettings(BaseModel):
    """Settings applied to iterators created by ``follow_links``."""

    max_hops: int | None = Field(
        default=None,
        ge=0,
        description=(
            "Maximum number of next links followed per iteration; "
            "unset means unbounded"
        ),
    )

    case_sensitive_headers: bool = Field(
        default=True,
        description="Match the Link header name exactly instead of ignoring case",
    )
