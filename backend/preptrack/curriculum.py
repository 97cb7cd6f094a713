"""Static curriculum catalogue for the placement-preparation tracks."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Sequence, Tuple

from .models import CurriculumTrack, Domain, DomainInfo, Topic


@dataclass(frozen=True)
class _TrackTemplate:
    slug: str
    level: str
    language_or_tech: str
    title: str
    topics: Tuple[Tuple[str, str], ...]


_DOMAIN_INFO: Dict[Domain, DomainInfo] = {
    Domain.WEB: DomainInfo(
        icon="🌐",
        title="Web Development",
        description="Frontend and backend engineering for the modern web.",
    ),
    Domain.ML: DomainInfo(
        icon="🤖",
        title="Machine Learning",
        description="Modelling, training and deploying learning systems.",
    ),
    Domain.APP: DomainInfo(
        icon="📱",
        title="App Development",
        description="Native and cross-platform mobile applications.",
    ),
    Domain.DSA: DomainInfo(
        icon="🧩",
        title="Data Structures & Algorithms",
        description="Problem solving patterns for coding rounds.",
    ),
    Domain.CLOUD: DomainInfo(
        icon="☁️",
        title="Cloud & DevOps",
        description="Shipping and operating services in the cloud.",
    ),
}


_TRACK_LIBRARY: Dict[Domain, Tuple[_TrackTemplate, ...]] = {
    Domain.WEB: (
        _TrackTemplate(
            slug="web-js-beginner",
            level="Beginner",
            language_or_tech="JavaScript",
            title="JavaScript Foundations",
            topics=(
                ("web-js-syntax", "Syntax, types and control flow"),
                ("web-js-dom", "DOM manipulation and events"),
                ("web-js-async", "Promises and async/await"),
                ("web-js-fetch", "Calling REST APIs with fetch"),
            ),
        ),
        _TrackTemplate(
            slug="web-js-intermediate",
            level="Intermediate",
            language_or_tech="JavaScript",
            title="React Applications",
            topics=(
                ("web-react-components", "Components and props"),
                ("web-react-state", "State and hooks"),
                ("web-react-routing", "Client-side routing"),
            ),
        ),
        _TrackTemplate(
            slug="web-python-beginner",
            level="Beginner",
            language_or_tech="Python",
            title="Backend with Python",
            topics=(
                ("web-py-http", "HTTP fundamentals"),
                ("web-py-flask", "Routing and templates"),
                ("web-py-orm", "Persistence with an ORM"),
            ),
        ),
    ),
    Domain.ML: (
        _TrackTemplate(
            slug="ml-sklearn-beginner",
            level="Beginner",
            language_or_tech="Scikit-learn",
            title="Classical ML with scikit-learn",
            topics=(
                ("ml-sk-regression", "Linear and logistic regression"),
                ("ml-sk-trees", "Decision trees and ensembles"),
                ("ml-sk-validation", "Cross-validation and metrics"),
            ),
        ),
        _TrackTemplate(
            slug="ml-tensorflow-beginner",
            level="Beginner",
            language_or_tech="TensorFlow",
            title="Deep Learning with TensorFlow",
            topics=(
                ("ml-tf-tensors", "Tensors and graphs"),
                ("ml-tf-keras", "Keras sequential models"),
                ("ml-tf-training", "Training loops and callbacks"),
            ),
        ),
        _TrackTemplate(
            slug="ml-pytorch-intermediate",
            level="Intermediate",
            language_or_tech="PyTorch",
            title="PyTorch Modelling",
            topics=(
                ("ml-pt-autograd", "Autograd"),
                ("ml-pt-modules", "nn.Module design"),
                ("ml-pt-data", "Datasets and DataLoaders"),
                ("ml-pt-deploy", "TorchScript export"),
            ),
        ),
    ),
    Domain.APP: (
        _TrackTemplate(
            slug="app-kotlin-beginner",
            level="Beginner",
            language_or_tech="Kotlin",
            title="Android with Kotlin",
            topics=(
                ("app-kt-basics", "Kotlin language basics"),
                ("app-kt-activities", "Activities and lifecycle"),
                ("app-kt-compose", "Jetpack Compose layouts"),
            ),
        ),
        _TrackTemplate(
            slug="app-flutter-beginner",
            level="Beginner",
            language_or_tech="Flutter",
            title="Cross-platform with Flutter",
            topics=(
                ("app-fl-widgets", "Widgets and layout"),
                ("app-fl-state", "State management"),
            ),
        ),
    ),
    Domain.DSA: (
        _TrackTemplate(
            slug="dsa-cpp-beginner",
            level="Beginner",
            language_or_tech="C++",
            title="DSA in C++",
            topics=(
                ("dsa-cpp-arrays", "Arrays and strings"),
                ("dsa-cpp-stl", "STL containers"),
                ("dsa-cpp-recursion", "Recursion and backtracking"),
                ("dsa-cpp-graphs", "Graph traversal"),
            ),
        ),
        _TrackTemplate(
            slug="dsa-java-beginner",
            level="Beginner",
            language_or_tech="Java",
            title="DSA in Java",
            topics=(
                ("dsa-java-arrays", "Arrays and strings"),
                ("dsa-java-collections", "Collections framework"),
                ("dsa-java-dp", "Dynamic programming"),
            ),
        ),
        _TrackTemplate(
            slug="dsa-python-advanced",
            level="Advanced",
            language_or_tech="Python",
            title="Advanced Problem Solving in Python",
            topics=(
                ("dsa-py-segment-trees", "Segment trees"),
                ("dsa-py-flows", "Network flows"),
            ),
        ),
    ),
    Domain.CLOUD: (
        _TrackTemplate(
            slug="cloud-aws-beginner",
            level="Beginner",
            language_or_tech="AWS",
            title="AWS Essentials",
            topics=(
                ("cloud-aws-iam", "IAM and accounts"),
                ("cloud-aws-compute", "EC2 and Lambda"),
                ("cloud-aws-storage", "S3 and databases"),
            ),
        ),
        _TrackTemplate(
            slug="cloud-docker-beginner",
            level="Beginner",
            language_or_tech="Docker",
            title="Containers with Docker",
            topics=(
                ("cloud-docker-images", "Images and Dockerfiles"),
                ("cloud-docker-compose", "Compose stacks"),
            ),
        ),
    ),
}


def _build_track(domain: Domain, template: _TrackTemplate) -> CurriculumTrack:
    return CurriculumTrack(
        id=template.slug,
        domain=domain,
        level=template.level,
        language_or_tech=template.language_or_tech,
        title=template.title,
        topics=tuple(Topic(id=topic_id, title=title) for topic_id, title in template.topics),
    )


class CurriculumCatalogue:
    """Immutable lookup of curriculum tracks grouped by domain."""

    def __init__(
        self,
        tracks_by_domain: Mapping[Domain, Sequence[CurriculumTrack]],
        domain_info: Optional[Mapping[Domain, DomainInfo]] = None,
    ) -> None:
        self._tracks = MappingProxyType({domain: tuple(tracks) for domain, tracks in tracks_by_domain.items()})
        self._domain_info = MappingProxyType(dict(domain_info or {}))

    def get_tracks_by_domain(self) -> Mapping[Domain, Tuple[CurriculumTrack, ...]]:
        return self._tracks

    def get_domain_info(self, domain: Domain) -> DomainInfo:
        info = self._domain_info.get(domain)
        if info is None:
            label = domain.value if isinstance(domain, Domain) else str(domain)
            return DomainInfo(icon="📘", title=label)
        return info

    @classmethod
    def from_tracks(
        cls,
        tracks: Iterable[CurriculumTrack],
        domain_info: Optional[Mapping[Domain, DomainInfo]] = None,
    ) -> "CurriculumCatalogue":
        grouped: Dict[Domain, list[CurriculumTrack]] = {}
        for track in tracks:
            grouped.setdefault(track.domain, []).append(track)
        return cls(grouped, domain_info)


def _default_catalogue() -> CurriculumCatalogue:
    tracks = {
        domain: [_build_track(domain, template) for template in templates]
        for domain, templates in _TRACK_LIBRARY.items()
    }
    return CurriculumCatalogue(tracks, _DOMAIN_INFO)


default_catalogue = _default_catalogue()

__all__ = ["CurriculumCatalogue", "default_catalogue"]
