"""Peer nomination DTOs for the application layer."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class NominationSummary(BaseModel):
    """A stored nomination with the nominee's display name resolved."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    nominee_id: UUID
    nominee_name: Annotated[
        str,
        Field(description="Nominee display name, 'Unknown' if unresolvable"),
    ]
    status: str
    nominated_at: datetime


class NominatePeersResult(BaseModel):
    """Nominations created by one request, in input order."""

    model_config = ConfigDict(frozen=True)

    nominations: list[NominationSummary]


class MyNominationsResult(BaseModel):
    """All nominations a nominator has made in a cycle."""

    model_config = ConfigDict(frozen=True)

    nominations: list[NominationSummary]
    total: Annotated[int, Field(ge=0)]
