"""Derive a learner's active curriculum tracks from stored preferences."""

from __future__ import annotations

import logging
from typing import List, Mapping, Protocol, Sequence

from .constants import DEFAULT_LEVEL
from .models import (
    CurriculumTrack,
    Domain,
    DomainInfo,
    LanguageDomainConfig,
    MLDomainConfig,
    UserProgress,
)

logger = logging.getLogger(__name__)


class TrackCatalogue(Protocol):
    def get_tracks_by_domain(self) -> Mapping[Domain, Sequence[CurriculumTrack]]: ...

    def get_domain_info(self, domain: Domain) -> DomainInfo: ...


def _level_matches(track: CurriculumTrack, configured_level: str) -> bool:
    level = configured_level or DEFAULT_LEVEL
    return track.level.lower() == level.lower()


def _technology_matches(track: CurriculumTrack, config: LanguageDomainConfig | MLDomainConfig) -> bool:
    if track.domain is Domain.ML:
        if not isinstance(config, MLDomainConfig):
            return False
        return track.language_or_tech in config.libraries
    if not isinstance(config, LanguageDomainConfig):
        return False
    language = config.language or ""
    if not language:
        return False
    return track.language_or_tech.lower() == language.lower()


def match_tracks(progress: UserProgress, catalogue: TrackCatalogue) -> List[CurriculumTrack]:
    """Return the catalogue tracks that fit the learner's active domains and preferences.

    Missing preferences or a missing per-domain config yield no tracks rather than an
    error. Catalogue order is preserved. Only `Domain` members can reach this point:
    unknown domain names are rejected when `UserProgress` is validated.
    """
    preferences = progress.preferences
    if preferences is None:
        return []

    matched: List[CurriculumTrack] = []
    for tracks in catalogue.get_tracks_by_domain().values():
        for track in tracks:
            if track.domain not in progress.active_domains:
                continue
            config = preferences.configs.get(track.domain)
            if config is None:
                continue
            if not _level_matches(track, config.level):
                continue
            if _technology_matches(track, config):
                matched.append(track)

    unconfigured = {domain for domain in progress.active_domains if domain not in preferences.configs}
    if unconfigured:
        logger.debug("Active domains without preferences: %s", sorted(domain.value for domain in unconfigured))
    return matched


__all__ = ["TrackCatalogue", "match_tracks"]
