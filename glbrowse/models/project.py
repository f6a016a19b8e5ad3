"""Project record and the GraphQL response schema it is parsed from."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

NAME_PLACEHOLDER = "N/A"
DESCRIPTION_PLACEHOLDER = "No description"
WEB_URL_PLACEHOLDER = "N/A"


class Project(BaseModel):
    """A GitLab project as shown in the browser."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    web_url: str


class _LenientModel(BaseModel):
    """Response level that collapses to its defaults when the payload is not an object."""

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _coerce_non_object(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return {}
        return data


class ProjectNode(_LenientModel):
    """Single entry of `data.projects.nodes`.

    Missing or non-string fields fall back to the display placeholders.
    """

    name: str = NAME_PLACEHOLDER
    description: str = DESCRIPTION_PLACEHOLDER
    web_url: str = Field(WEB_URL_PLACEHOLDER, alias="webUrl")

    @model_validator(mode="before")
    @classmethod
    def _drop_non_strings(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return {}
        return {key: value for key, value in data.items() if isinstance(value, str)}

    def to_project(self) -> Project:
        return Project(name=self.name, description=self.description, web_url=self.web_url)


class ProjectConnection(_LenientModel):
    nodes: list[ProjectNode] = Field(default_factory=list)

    @field_validator("nodes", mode="before")
    @classmethod
    def _nodes_must_be_array(cls, value: Any) -> Any:
        return value if isinstance(value, list) else []


class ProjectsData(_LenientModel):
    projects: ProjectConnection = Field(default_factory=ProjectConnection)


class GraphQLResponse(_LenientModel):
    """Top-level body of a `/api/graphql` response."""

    data: ProjectsData = Field(default_factory=ProjectsData)
    errors: list[Any] = Field(default_factory=list)

    @field_validator("errors", mode="before")
    @classmethod
    def _errors_must_be_array(cls, value: Any) -> Any:
        return value if isinstance(value, list) else []

    def projects(self) -> list[Project]:
        """Return the parsed projects in server order."""
        return [node.to_project() for node in self.data.projects.nodes]

    def error_messages(self) -> list[str]:
        """Return the `message` of each GraphQL error entry."""
        messages: list[str] = []
        for error in self.errors:
            if isinstance(error, dict) and isinstance(error.get("message"), str):
                messages.append(error["message"])
            else:
                messages.append(str(error))
        return messages
