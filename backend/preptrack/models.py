"""Learner progress, preference and curriculum models."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, FrozenSet, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Domain(str, Enum):
    """Specialization areas a learner can activate."""

    WEB = "Web"
    ML = "ML"
    APP = "App"
    DSA = "DSA"
    CLOUD = "Cloud"


class LanguageDomainConfig(BaseModel):
    """Preference for domains that follow a single language or technology."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["language"] = "language"
    level: str = ""
    language: str = ""


class MLDomainConfig(BaseModel):
    """Preference for the ML domain, where several frameworks can be selected."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["ml"] = "ml"
    level: str = ""
    libraries: Tuple[str, ...] = ()


DomainConfig = Annotated[Union[LanguageDomainConfig, MLDomainConfig], Field(discriminator="kind")]


_CONFIG_FIELDS = {
    "ml": ("level", "libraries"),
    "language": ("level", "language"),
}


def _infer_config_kind(domain: Any, raw: Any) -> Any:
    """Tag an untyped config by its domain key; the field the domain does not use is dropped."""
    if not isinstance(raw, dict) or "kind" in raw:
        return raw
    kind = "ml" if domain == Domain.ML else "language"
    tagged = {key: raw[key] for key in _CONFIG_FIELDS[kind] if key in raw}
    tagged["kind"] = kind
    return tagged


class Preferences(BaseModel):
    model_config = ConfigDict(frozen=True)

    configs: Dict[Domain, DomainConfig] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _tag_untyped_configs(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("configs"), dict):
            configs = {key: _infer_config_kind(key, value) for key, value in data["configs"].items()}
            return {**data, "configs": configs}
        return data


class UserProgress(BaseModel):
    """Snapshot of a learner's stored progress. Never mutated by the dashboard."""

    model_config = ConfigDict(frozen=True)

    active_domains: FrozenSet[Domain] = Field(default_factory=frozenset)
    preferences: Optional[Preferences] = None
    completed_topic_ids: FrozenSet[str] = Field(default_factory=frozenset)


class Topic(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str = ""


class CurriculumTrack(BaseModel):
    """Catalogue entry for a domain, level and technology specific learning path."""

    model_config = ConfigDict(frozen=True)

    id: str
    domain: Domain
    level: str
    language_or_tech: str
    title: str = ""
    topics: Tuple[Topic, ...] = ()


class DomainInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    icon: str
    title: str
    description: str = ""


class ChatMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"]
    text: str


class TrackProgress(BaseModel):
    track: CurriculumTrack
    completed_topics: int = Field(ge=0)
    total_topics: int = Field(ge=0)
    completion_rate: int = Field(ge=0, le=100)
    summary: str


class TrackSelection(BaseModel):
    """Payload forwarded to navigation when the learner opens a track."""

    model_config = ConfigDict(frozen=True)

    domain: Domain
    language_or_tech: str
    level: str


class DashboardSnapshot(BaseModel):
    tracks: List[TrackProgress] = Field(default_factory=list)
    global_completion_rate: int = Field(default=0, ge=0, le=100)
    total_topics: int = Field(default=0, ge=0)
    total_completed: int = Field(default=0, ge=0)
    domains: Dict[Domain, DomainInfo] = Field(default_factory=dict)


__all__ = [
    "ChatMessage",
    "CurriculumTrack",
    "DashboardSnapshot",
    "Domain",
    "DomainConfig",
    "DomainInfo",
    "LanguageDomainConfig",
    "MLDomainConfig",
    "Preferences",
    "TrackProgress",
    "TrackSelection",
    "Topic",
    "UserProgress",
]
