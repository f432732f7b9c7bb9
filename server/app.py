"""FastAPI server for ipormac application."""

import logging
import os
import random
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import Optional, Union

logger = logging.getLogger(__name__)

from core.config import (
    FAMILIES, TYPE_WEIGHTS,
    STATE_DIR_ENV, CONFIG_FILE_ENV, SEED_ENV
)
from core.feedback import QUIZ_ANSWERS, answer_to_type, is_correct_answer, build_feedback
from core.generator import AddressGenerator
from core.models import GeneratedAddress, Level
from core.scoring import ScoreManager
from core.sites import SITE_CONFIGS, NETWORK_ADDRESS_HINTS, get_site_config
from core.validator import classify, find_defect, describe_defect

from server.file_storage import FileStorage

# Questions waiting for an answer; dropped once answered
MAX_PENDING_QUESTIONS = 1000


# Pydantic models for API
class AnswerRequest(BaseModel):
    question_id: str
    answer: Union[int, str]
    site_key: Optional[str] = None


class CheckRequest(BaseModel):
    address: str


class QuestionResponse(BaseModel):
    question_id: str
    site_key: str
    address: str
    answers: list[dict]


class AnswerResponse(BaseModel):
    correct: bool
    message: str
    explanation: str
    address: str
    type: str
    invalid_type: Optional[str]
    invalid_reason: Optional[str]
    corrected_address: Optional[str]
    score: int
    max_score: int
    streak: int
    streak_emojis: str
    stats: dict


class StatsResponse(BaseModel):
    site_key: str
    overall: dict
    by_type: dict
    streak: int
    streak_emojis: str


class CheckResponse(BaseModel):
    address: str
    type: str
    defects: dict  # {family: {defect, reason} or None}


# Global state (in production, use proper DI). Handlers are async and never
# await, so they run one at a time on the event loop thread.
storage: FileStorage = None
generator: AddressGenerator = None
score_managers: dict[str, ScoreManager] = {}
pending_questions: dict[str, dict] = {}  # question_id -> {site_key, question}
config: dict = {}


def resolve_site_key(site_key: str | None) -> str:
    """Known site key, or the default site."""
    return get_site_config(site_key).site_key


def get_score_manager(site_key: str) -> ScoreManager:
    """Get or create the score manager for a site."""
    if site_key not in score_managers:
        custom = config.get('custom_levels', {}).get(site_key)
        if custom:
            levels = [Level.from_dict(data) for data in custom]
        else:
            levels = get_site_config(site_key).get_levels()
        score_managers[site_key] = ScoreManager(storage, site_key, levels=levels)
    return score_managers[site_key]


def stats_payload(manager: ScoreManager) -> dict:
    streak = manager.get_streak()
    return {
        'site_key': manager.site_key,
        'overall': manager.get_overall_stats().to_dict(),
        'by_type': manager.get_scores_by_type(),
        'streak': streak,
        'streak_emojis': manager.format_streak_emojis(streak)
    }


def startup():
    """Initialize storage and the address generator on startup."""
    global storage, generator, config

    storage = FileStorage(
        config_file=os.environ.get(CONFIG_FILE_ENV),
        state_dir=os.environ.get(STATE_DIR_ENV)
    )
    logger.info(f"Using file storage in {storage.state_dir}")
    config = storage.load_config()

    seed = os.environ.get(SEED_ENV)
    rng = random.Random(int(seed)) if seed else random.Random()
    generator = AddressGenerator(rng, weights=config.get('type_weights', TYPE_WEIGHTS))
    score_managers.clear()
    pending_questions.clear()
    logger.info("Address generator initialized" + (f" with seed {seed}" if seed else ""))


@asynccontextmanager
async def lifespan(app: FastAPI):
    startup()
    yield


app = FastAPI(
    title="ipormac API",
    description="IPv4 / IPv6 / MAC address identification practice",
    lifespan=lifespan
)


@app.get("/")
async def root():
    """Health check."""
    return {"service": "ipormac", "status": "ok"}


@app.get("/api/sites")
async def list_sites():
    """List configured sites and whether each has saved scores."""
    saved = set(storage.list_sites())
    sites = []
    for site in SITE_CONFIGS.values():
        entry = site.to_dict()
        entry['has_history'] = site.site_key in saved
        sites.append(entry)
    return {"sites": sites}


@app.get("/api/question", response_model=QuestionResponse)
async def get_question(site_key: str = None):
    """Generate a new question for a site."""
    site_key = resolve_site_key(site_key)
    question = generator.generate()
    question_id = str(uuid.uuid4())[:8]

    if len(pending_questions) >= MAX_PENDING_QUESTIONS:
        oldest = next(iter(pending_questions))
        del pending_questions[oldest]
    pending_questions[question_id] = {'site_key': site_key, 'question': question}

    return QuestionResponse(
        question_id=question_id,
        site_key=site_key,
        address=question.address,
        answers=QUIZ_ANSWERS
    )


@app.post("/api/answer", response_model=AnswerResponse)
async def submit_answer(request: AnswerRequest):
    """Check an answer, record the score and update the streak."""
    pending = pending_questions.get(request.question_id)
    if pending is None:
        raise HTTPException(status_code=404, detail="Unknown or already answered question")
    site_key = pending['site_key']
    if request.site_key and resolve_site_key(request.site_key) != site_key:
        raise HTTPException(status_code=400, detail="Question belongs to a different site")

    try:
        answer_type = answer_to_type(request.answer)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    question: GeneratedAddress = pending_questions.pop(request.question_id)['question']
    site = get_site_config(site_key)
    manager = get_score_manager(site_key)

    correct = is_correct_answer(answer_type, question)
    score = site.correct_points if correct else 0
    try:
        manager.record_score(request.question_id, score, site.max_points,
                             question.type, question.address)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    streak = manager.update_streak(correct)
    logger.info(f"{site_key}: {question.address!r} answered {answer_type} "
                f"({'correct' if correct else 'incorrect'}, streak {streak})")

    feedback = build_feedback(correct, question)
    return AnswerResponse(
        correct=correct,
        message=feedback['message'],
        explanation=feedback['explanation'],
        address=question.address,
        type=question.type,
        invalid_type=question.invalid_type,
        invalid_reason=question.invalid_reason,
        corrected_address=question.corrected_address,
        score=score,
        max_score=site.max_points,
        streak=streak,
        streak_emojis=manager.format_streak_emojis(streak),
        stats=manager.get_overall_stats().to_dict()
    )


@app.get("/api/stats", response_model=StatsResponse)
async def get_stats(site_key: str = None):
    """Overall stats, per-type stats and streak for a site."""
    manager = get_score_manager(resolve_site_key(site_key))
    return stats_payload(manager)


@app.post("/api/reset", response_model=StatsResponse)
async def reset_scores(site_key: str = None):
    """Reset all scores for a site. Cannot be undone."""
    manager = get_score_manager(resolve_site_key(site_key))
    manager.reset_all_scores()
    return stats_payload(manager)


@app.get("/api/hints")
async def get_hints():
    """Address format rules."""
    return {"hints": NETWORK_ADDRESS_HINTS}


@app.post("/api/check", response_model=CheckResponse)
async def check_address(request: CheckRequest):
    """Classify an arbitrary token and explain why it fails each family."""
    defects = {}
    for family in FAMILIES:
        defect = find_defect(request.address, family)
        if defect:
            defects[family] = {'defect': defect, 'reason': describe_defect(defect, family)}
        else:
            defects[family] = None
    return CheckResponse(
        address=request.address,
        type=classify(request.address),
        defects=defects
    )


def create_app():
    """Factory function for creating the app (useful for testing)."""
    return app
