"""Error response schema.

Every error response uses the same flat body:
{"code": "...", "message": "...", "details": {...}, "request_id": "..."}.
``details`` is left out of the JSON when empty.
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body with a machine-readable code and human-readable message."""

    code: str = Field(..., description="Stable error code, e.g. NOT_FOUND")
    message: str = Field(..., description="Message of the underlying error")
    details: dict[str, Any] | None = Field(default=None, description="Attached context")
    request_id: str = Field(default="", description="Trace id, empty when tracing is off")

    def to_content(self) -> dict[str, Any]:
        """Dump for JSONResponse, dropping empty details.

        Only the top-level field is dropped; null values inside details stay.
        """
        if self.details is None:
            return self.model_dump(exclude={"details"})
        return self.model_dump()
