from enum import StrEnum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _string_or_empty(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _object_or_empty(value: Any) -> Any:
    if isinstance(value, (dict, BaseModel)):
        return value
    return {}


LenientStr = Annotated[str, BeforeValidator(_string_or_empty)]


class PayloadModel(BaseModel):
    """
    Best-effort view of a GitHub event payload.

    Missing, null or non-string values read as an empty string and missing or
    malformed nested objects read as empty objects, so validation never fails
    on an unexpected payload shape.
    """

    model_config = ConfigDict(extra="ignore")


class Repository(PayloadModel):
    full_name: LenientStr = ""
    default_branch: LenientStr = ""


class HeadRepository(PayloadModel):
    full_name: LenientStr = ""


class PullRequestHead(PayloadModel):
    ref: LenientStr = ""
    sha: LenientStr = ""
    repo: Annotated[HeadRepository, BeforeValidator(_object_or_empty)] = Field(
        default_factory=HeadRepository
    )


class PullRequest(PayloadModel):
    head: Annotated[PullRequestHead, BeforeValidator(_object_or_empty)] = Field(
        default_factory=PullRequestHead
    )


class EventPayload(PayloadModel):
    repository: Annotated[Repository, BeforeValidator(_object_or_empty)] = Field(
        default_factory=Repository
    )
    pull_request: Annotated[PullRequest, BeforeValidator(_object_or_empty)] = Field(
        default_factory=PullRequest
    )


class EventKind(StrEnum):
    pull_request = "pull_request"
    workflow_dispatch = "workflow_dispatch"
    other = "other"

    @classmethod
    def from_event_name(cls, name: str) -> "EventKind":
        try:
            return cls(name)
        except ValueError:
            return cls.other


class Refs(BaseModel):
    model_config = ConfigDict(frozen=True)

    default_branch: str
    checkout_repository: str
    checkout_ref: str
