"""Tests for completion aggregation and the dashboard snapshot."""

from __future__ import annotations

from typing import Iterable, List, Tuple

import pytest

from preptrack.curriculum import CurriculumCatalogue, default_catalogue
from preptrack.models import (
    CurriculumTrack,
    Domain,
    LanguageDomainConfig,
    Preferences,
    Topic,
    UserProgress,
)
from preptrack.progress import build_dashboard, global_completion, select_track, track_completion


def _track(track_id: str, topic_ids: Iterable[str], domain: Domain = Domain.WEB, tech: str = "JavaScript") -> CurriculumTrack:
    return CurriculumTrack(
        id=track_id,
        domain=domain,
        level="Beginner",
        language_or_tech=tech,
        topics=tuple(Topic(id=topic_id) for topic_id in topic_ids),
    )


def test_track_completion_is_zero_for_empty_track() -> None:
    assert track_completion(_track("empty", []), frozenset({"t1"})) == 0


def test_track_completion_is_full_when_every_topic_done() -> None:
    track = _track("web", ["t1", "t2", "t3"])

    assert track_completion(track, frozenset({"t1", "t2", "t3", "other"})) == 100


def test_track_completion_half() -> None:
    assert track_completion(_track("web", ["t1", "t2"]), frozenset({"t1"})) == 50


@pytest.mark.parametrize(
    "completed, total, expected",
    [(1, 3, 33), (2, 3, 67), (1, 8, 13), (3, 8, 38), (5, 8, 63), (1, 200, 1)],
)
def test_track_completion_rounds_half_up(completed: int, total: int, expected: int) -> None:
    topic_ids = [f"t{index}" for index in range(total)]
    track = _track("web", topic_ids)

    assert track_completion(track, frozenset(topic_ids[:completed])) == expected


def test_global_completion_over_no_tracks_is_zero() -> None:
    assert global_completion([], frozenset({"t1"})) == 0


def test_global_completion_over_tracks_without_topics_is_zero() -> None:
    assert global_completion([_track("a", []), _track("b", [])], frozenset()) == 0


def test_global_completion_counts_only_matched_topics() -> None:
    tracks = [_track("a", ["a1", "a2"]), _track("b", ["b1", "b2", "b3"])]
    completed = frozenset({"a1", "b1", "b2", "unrelated-1", "unrelated-2"})

    # 3 of 5 matched topics are done; unrelated completions are ignored.
    assert global_completion(tracks, completed) == 60


def test_build_dashboard_snapshot() -> None:
    progress = UserProgress(
        active_domains=frozenset({Domain.WEB}),
        preferences=Preferences(configs={Domain.WEB: LanguageDomainConfig(level="Beginner", language="JavaScript")}),
        completed_topic_ids=frozenset({"web-js-syntax", "web-js-dom", "ml-sk-trees"}),
    )

    snapshot = build_dashboard(progress, default_catalogue)

    assert [entry.track.id for entry in snapshot.tracks] == ["web-js-beginner"]
    entry = snapshot.tracks[0]
    assert entry.completed_topics == 2
    assert entry.total_topics == 4
    assert entry.completion_rate == 50
    assert entry.summary == "Master 4 modules for Beginner level."
    assert snapshot.global_completion_rate == 50
    assert snapshot.total_completed == 2
    assert snapshot.domains[Domain.WEB].title == "Web Development"


def test_build_dashboard_without_preferences_is_empty() -> None:
    snapshot = build_dashboard(UserProgress(active_domains=frozenset({Domain.WEB})), default_catalogue)

    assert snapshot.tracks == []
    assert snapshot.global_completion_rate == 0
    assert snapshot.domains == {}


def test_build_dashboard_does_not_mutate_progress() -> None:
    progress = UserProgress(
        active_domains=frozenset({Domain.DSA}),
        preferences=Preferences(configs={Domain.DSA: LanguageDomainConfig(language="Java")}),
        completed_topic_ids=frozenset({"dsa-java-dp"}),
    )
    before = progress.model_dump()

    build_dashboard(progress, default_catalogue)

    assert progress.model_dump() == before


def test_unknown_domain_info_falls_back_to_label() -> None:
    catalogue = CurriculumCatalogue.from_tracks([_track("cloud", ["c1"], domain=Domain.CLOUD, tech="AWS")])

    assert catalogue.get_domain_info(Domain.CLOUD).title == "Cloud"


def test_select_track_forwards_to_callback() -> None:
    calls: List[Tuple[Domain, str, str]] = []
    track = _track("web", ["t1"])

    selection = select_track(track, lambda domain, tech, level: calls.append((domain, tech, level)))

    assert calls == [(Domain.WEB, "JavaScript", "Beginner")]
    assert selection.domain is Domain.WEB
    assert selection.language_or_tech == "JavaScript"
