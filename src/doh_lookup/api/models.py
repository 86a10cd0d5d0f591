"""Pydantic models for API responses and the upstream DoH JSON document."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class DoHAnswer(BaseModel):
    """
    One resource record from a DoH JSON ``Answer`` section.

    Only ``type`` and ``data`` are read. Both are kept as sent, without
    coercion, and any other record field is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    type: Any = None
    data: Any = None


class DoHResponse(BaseModel):
    """DoH JSON response body (application/dns-json)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    answer: Optional[List[DoHAnswer]] = Field(default=None, alias="Answer")


class LookupResponse(BaseModel):
    """Successful lookup result."""

    domain: str
    ip_address: str = Field(serialization_alias="ipAddress")
    lookup_time: str = Field(serialization_alias="lookupTime")


class ErrorResponse(BaseModel):
    """Error body. Optional fields are left out when unset."""

    error: str
    usage: Optional[str] = None
    domain: Optional[str] = None
    details: Optional[str] = None
