"""Dashboard REST endpoints: track matching, motivation feed and site assistant."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from .cache import LearnerSession, SessionRegistry, session_registry
from .chat_assistant import ChatAssistantController
from .chat_client import OpenAIChatClient
from .config import Settings, get_settings
from .curriculum import CurriculumCatalogue, default_catalogue
from .models import ChatMessage, DashboardSnapshot, TrackSelection, UserProgress
from .motivation import MotivationOrchestrator
from .on_demand import OnDemandClient
from .progress import build_dashboard, find_track, select_track
from .track_matcher import match_tracks

router = APIRouter(prefix="/api", tags=["dashboard"])
logger = logging.getLogger(__name__)


class MotivationState(BaseModel):
    text: str
    is_loading: bool


class ChatState(BaseModel):
    history: List[ChatMessage] = Field(default_factory=list)
    is_sending: bool = False
    is_open: bool = False


class ChatMessageRequest(BaseModel):
    text: str = Field(default="", max_length=4000)


class ChatSendResult(ChatState):
    accepted: bool


class ChatToggleResult(BaseModel):
    is_open: bool


def build_learner_session(display_name: str, settings: Optional[Settings] = None) -> LearnerSession:
    resolved = settings or get_settings()
    motivation = MotivationOrchestrator.from_settings(
        OnDemandClient(resolved),
        resolved,
        display_name=display_name,
    )
    chat = ChatAssistantController(OpenAIChatClient(resolved).generate_chat_reply)
    return LearnerSession(display_name=display_name, motivation=motivation, chat=chat)


def get_catalogue() -> CurriculumCatalogue:
    return default_catalogue


def get_session_registry() -> SessionRegistry:
    registry = session_registry
    if not registry.configured:
        registry.configure(build_learner_session)
    return registry


def _resolve_session(registry: SessionRegistry, learner: str) -> LearnerSession:
    try:
        return registry.get_or_create(learner)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc


def _motivation_state(motivation: MotivationOrchestrator) -> MotivationState:
    return MotivationState(text=motivation.motivation_text, is_loading=motivation.is_loading)


def _chat_state(chat: ChatAssistantController) -> ChatState:
    return ChatState(history=list(chat.history), is_sending=chat.is_sending, is_open=chat.is_open)


@router.post("/dashboard", response_model=DashboardSnapshot)
def dashboard(progress: UserProgress, catalogue: CurriculumCatalogue = Depends(get_catalogue)) -> DashboardSnapshot:
    """Build the learner's dashboard snapshot.

    Domain names outside the closed `Domain` set fail request validation with 422. Known
    domains with no catalogue entries or no config simply contribute no tracks.
    """
    snapshot = build_dashboard(progress, catalogue)
    logger.debug(
        "Dashboard built with %s tracks (global completion %s%%)",
        len(snapshot.tracks),
        snapshot.global_completion_rate,
    )
    return snapshot


@router.post("/dashboard/tracks/{track_id}/select", response_model=TrackSelection)
def select_dashboard_track(
    track_id: str,
    progress: UserProgress,
    catalogue: CurriculumCatalogue = Depends(get_catalogue),
) -> TrackSelection:
    track = find_track(match_tracks(progress, catalogue), track_id)
    if track is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Track '{track_id}' is not active for this learner.")
    return select_track(track)


@router.get("/learners/{learner}/motivation", response_model=MotivationState)
async def get_motivation(
    learner: str,
    registry: SessionRegistry = Depends(get_session_registry),
) -> MotivationState:
    session = _resolve_session(registry, learner)
    await session.motivation.set_learner(session.display_name)
    return _motivation_state(session.motivation)


@router.post("/learners/{learner}/motivation/refresh", response_model=MotivationState)
async def refresh_motivation(
    learner: str,
    registry: SessionRegistry = Depends(get_session_registry),
) -> MotivationState:
    session = _resolve_session(registry, learner)
    await session.motivation.refresh()
    return _motivation_state(session.motivation)


@router.get("/learners/{learner}/chat", response_model=ChatState)
def get_chat(learner: str, registry: SessionRegistry = Depends(get_session_registry)) -> ChatState:
    session = _resolve_session(registry, learner)
    return _chat_state(session.chat)


@router.post("/learners/{learner}/chat/messages", response_model=ChatSendResult)
async def send_chat_message(
    learner: str,
    request: ChatMessageRequest,
    registry: SessionRegistry = Depends(get_session_registry),
) -> ChatSendResult:
    session = _resolve_session(registry, learner)
    accepted = await session.chat.send_message(request.text)
    state = _chat_state(session.chat)
    return ChatSendResult(accepted=accepted, **state.model_dump())


@router.post("/learners/{learner}/chat/toggle", response_model=ChatToggleResult)
def toggle_chat(learner: str, registry: SessionRegistry = Depends(get_session_registry)) -> ChatToggleResult:
    session = _resolve_session(registry, learner)
    return ChatToggleResult(is_open=session.chat.toggle())


__all__ = ["build_learner_session", "get_catalogue", "get_session_registry", "router"]
