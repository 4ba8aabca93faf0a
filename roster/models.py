"""
Pydantic models for identity groups, the report tree and API responses.

API responses are validated into these models before any field is read,
so a changed upstream shape fails with UnexpectedResponseError instead of
a KeyError somewhere in the fold.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import UnexpectedResponseError
from .sorting import sorted_mapping

CROWDIN_PROFILE_URL = "https://crowdin.com/profile/{username}"
GITHUB_URL = "https://github.com"

ModelT = TypeVar("ModelT", bound=BaseModel)


class Group(str, Enum):
    """Categories of credited people. Groups never merge."""

    CONTRIBUTOR = "contributor"
    TRANSLATOR = "translator"
    GITHUB_SPONSOR = "github-sponsor"
    PATREON_SPONSOR = "patreon-sponsor"


def parse_response(model: type[ModelT], data: Any, source: str) -> ModelT:
    """Validate decoded JSON against a response model."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise UnexpectedResponseError(f"Unexpected response shape from {source}: {e}") from e


# Crowdin


class CrowdinMember(BaseModel):
    """A member of a Crowdin project."""

    model_config = ConfigDict(populate_by_name=True)

    username: str
    full_name: str | None = Field(default=None, alias="fullName")
    role: str | None = None

    @property
    def is_blocked(self) -> bool:
        return self.role == "blocked"

    @property
    def display_name(self) -> str:
        """Full name when set, username otherwise."""
        return self.full_name if self.full_name else self.username

    @property
    def profile_url(self) -> str:
        return CROWDIN_PROFILE_URL.format(username=self.username)


class CrowdinMemberEntry(BaseModel):
    data: CrowdinMember


class CrowdinMembersPage(BaseModel):
    """One page of ``GET /projects/{id}/members``."""

    data: list[CrowdinMemberEntry]

    @property
    def members(self) -> list[CrowdinMember]:
        return [entry.data for entry in self.data]

    def __len__(self) -> int:
        return len(self.data)


# GitHub Sponsors


class SponsorNode(BaseModel):
    """A sponsoring User or Organization."""

    model_config = ConfigDict(populate_by_name=True)

    typename: str | None = Field(default=None, alias="__typename")
    login: str
    name: str | None = None
    resource_path: str = Field(alias="resourcePath")

    @property
    def display_name(self) -> str:
        """Profile name when set, login otherwise."""
        return self.name if isinstance(self.name, str) else self.login

    @property
    def profile_url(self) -> str:
        return f"{GITHUB_URL}{self.resource_path}"


class PageInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    end_cursor: str | None = Field(default=None, alias="endCursor")
    start_cursor: str | None = Field(default=None, alias="startCursor")


class SponsorConnection(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_count: int | None = Field(default=None, alias="totalCount")
    nodes: list[SponsorNode] = Field(default_factory=list)
    page_info: PageInfo = Field(default_factory=PageInfo, alias="pageInfo")


class Viewer(BaseModel):
    sponsors: SponsorConnection


class ViewerData(BaseModel):
    viewer: Viewer


class SponsorsResponse(BaseModel):
    """Body of a ``viewer { sponsors }`` GraphQL query."""

    data: ViewerData | None = None
    errors: list[dict[str, Any]] = Field(default_factory=list)

    @property
    def sponsors(self) -> SponsorConnection:
        if self.data is None:
            messages = "; ".join(str(e.get("message", e)) for e in self.errors)
            raise UnexpectedResponseError(
                f"GitHub GraphQL returned no data: {messages or 'no errors given'}"
            )
        return self.data.viewer.sponsors


# Report


class SupporterSection(BaseModel):
    github: dict[str, str] = Field(default_factory=dict)
    patreon: dict[str, str] = Field(default_factory=dict)


class Report(BaseModel):
    """Structured report: every mapping already sorted by name."""

    contributor: dict[str, str] = Field(default_factory=dict)
    translator: dict[str, str] = Field(default_factory=dict)
    supporter: SupporterSection = Field(default_factory=SupporterSection)

    @classmethod
    def from_groups(cls, groups: Mapping[Group, Mapping[str, str]]) -> "Report":
        """Build a report from merged group mappings.

        Groups missing from ``groups`` are reported empty.
        """
        return cls(
            contributor=sorted_mapping(groups.get(Group.CONTRIBUTOR, {})),
            translator=sorted_mapping(groups.get(Group.TRANSLATOR, {})),
            supporter=SupporterSection(
                github=sorted_mapping(groups.get(Group.GITHUB_SPONSOR, {})),
                patreon=sorted_mapping(groups.get(Group.PATREON_SPONSOR, {})),
            ),
        )

    def group(self, group: Group) -> dict[str, str]:
        """Get the sorted mapping for a group."""
        if group is Group.CONTRIBUTOR:
            return self.contributor
        if group is Group.TRANSLATOR:
            return self.translator
        if group is Group.GITHUB_SPONSOR:
            return self.supporter.github
        return self.supporter.patreon

    @property
    def counts(self) -> dict[Group, int]:
        return {group: len(self.group(group)) for group in Group}
