"""Completion aggregation for the learner's matched tracks."""

from __future__ import annotations

from typing import AbstractSet, Callable, Dict, Iterable, Optional, Sequence

from .models import (
    CurriculumTrack,
    DashboardSnapshot,
    Domain,
    DomainInfo,
    TrackProgress,
    TrackSelection,
    UserProgress,
)
from .track_matcher import TrackCatalogue, match_tracks

SelectTrackCallback = Callable[[Domain, str, str], None]


def _round_percent(numerator: int, denominator: int) -> int:
    if denominator <= 0:
        return 0
    # Half-up integer rounding; round() would send 0.5 to the even neighbour.
    return (200 * numerator + denominator) // (2 * denominator)


def completed_topic_count(track: CurriculumTrack, completed_topic_ids: AbstractSet[str]) -> int:
    return sum(1 for topic in track.topics if topic.id in completed_topic_ids)


def track_completion(track: CurriculumTrack, completed_topic_ids: AbstractSet[str]) -> int:
    """Percentage of the track's topics that are completed, 0 for an empty track."""
    return _round_percent(completed_topic_count(track, completed_topic_ids), len(track.topics))


def global_completion(tracks: Iterable[CurriculumTrack], completed_topic_ids: AbstractSet[str]) -> int:
    """Completion across the given tracks only; topics outside them are ignored."""
    total = 0
    completed = 0
    for track in tracks:
        total += len(track.topics)
        completed += completed_topic_count(track, completed_topic_ids)
    return _round_percent(completed, total)


def track_progress(track: CurriculumTrack, completed_topic_ids: AbstractSet[str]) -> TrackProgress:
    return TrackProgress(
        track=track,
        completed_topics=completed_topic_count(track, completed_topic_ids),
        total_topics=len(track.topics),
        completion_rate=track_completion(track, completed_topic_ids),
        summary=f"Master {len(track.topics)} modules for {track.level} level.",
    )


def build_dashboard(progress: UserProgress, catalogue: TrackCatalogue) -> DashboardSnapshot:
    """Assemble the dashboard view state for a learner's stored progress."""
    tracks = match_tracks(progress, catalogue)
    completed_ids = progress.completed_topic_ids
    entries = [track_progress(track, completed_ids) for track in tracks]
    domains: Dict[Domain, DomainInfo] = {}
    for track in tracks:
        if track.domain not in domains:
            domains[track.domain] = catalogue.get_domain_info(track.domain)
    return DashboardSnapshot(
        tracks=entries,
        global_completion_rate=global_completion(tracks, completed_ids),
        total_topics=sum(entry.total_topics for entry in entries),
        total_completed=sum(entry.completed_topics for entry in entries),
        domains=domains,
    )


def select_track(
    track: CurriculumTrack,
    on_select_track: Optional[SelectTrackCallback] = None,
) -> TrackSelection:
    """Build the navigation payload for a track and forward it to the callback if given."""
    selection = TrackSelection(domain=track.domain, language_or_tech=track.language_or_tech, level=track.level)
    if on_select_track is not None:
        on_select_track(selection.domain, selection.language_or_tech, selection.level)
    return selection


def find_track(tracks: Sequence[CurriculumTrack], track_id: str) -> Optional[CurriculumTrack]:
    for track in tracks:
        if track.id == track_id:
            return track
    return None


__all__ = [
    "SelectTrackCallback",
    "build_dashboard",
    "completed_topic_count",
    "find_track",
    "global_completion",
    "select_track",
    "track_completion",
    "track_progress",
]
