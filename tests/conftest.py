"""Pytest configuration and fixtures."""

import json
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from nvc_exercises.application.identity.use_cases.api_key_use_case import IssuedApiKey
from nvc_exercises.config import Settings
from nvc_exercises.core import Container, build_container
from nvc_exercises.database import Database, get_db
from nvc_exercises.domain.content.entities import Exercise
from nvc_exercises.infrastructure.content.repositories import ExerciseRepository
from nvc_exercises.infrastructure.content.schemas import ExerciseSeed
from nvc_exercises.main import create_app

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"


def _text(en: str, zh: str) -> dict[str, str]:
    return {"en": en, "zh": zh}


# Ten exercises, stored with ids 1..10; exactly one is in the gratitude category
SAMPLE_EXERCISES: list[dict[str, Any]] = [
    {
        "category": "observation-evaluation",
        "name": _text("Observation or Evaluation?", "观察还是评论？"),
        "description": _text("Spot the evaluation in each statement.", "找出每句话中的评论。"),
        "difficulty": "beginner",
        "audience": "individual",
        "relatedIds": [2],
        "example": _text("John is lazy.", "约翰很懒。"),
        "alternative": _text("John did not do the dishes today.", "约翰今天没有洗碗。"),
    },
    {
        "category": "observation-evaluation",
        "name": _text("Group Observation Round", "小组观察练习"),
        "description": _text("Describe a shared event without judgment.", "不带评判地描述共同经历。"),
        "difficulty": "intermediate",
        "audience": "group",
    },
    {
        "category": "feelings-thoughts",
        "name": _text("Feelings versus Thoughts", "感受与想法"),
        "description": _text("Separate feelings from thoughts.", "区分感受与想法。"),
        "difficulty": "beginner",
        "audience": "individual",
        "steps": [
            _text("Write the sentence.", "写下这句话。"),
            _text("Underline words about others.", "划出描述他人的词语。"),
            _text("Rewrite with your own feeling.", "用自己的感受重写。"),
        ],
    },
    {
        "category": "feelings-thoughts",
        "name": _text("Feelings Vocabulary", "感受词汇"),
        "description": _text("Build a shared list of feeling words.", "共同整理感受词汇表。"),
        "difficulty": "advanced",
        "audience": "group",
    },
    {
        "category": "needs-demands",
        "name": _text("Needs Behind Demands", "命令背后的需要"),
        "description": _text("Find the need under a demand.", "找出命令背后的需要。"),
        "difficulty": "intermediate",
    },
    {
        "category": "listening-barriers",
        "name": _text("Barriers to Listening", "倾听的障碍"),
        "description": _text("Notice habits that block empathy.", "觉察阻碍同理的习惯。"),
        "difficulty": "beginner",
        "audience": "group",
        "scenario": _text("A friend tells you about a bad day.", "朋友向你讲述糟糕的一天。"),
    },
    {
        "category": "requests",
        "name": _text("From Demand to Request", "从命令到请求"),
        "description": _text("Make a request concrete and doable.", "让请求具体可行。"),
        "difficulty": "intermediate",
        "audience": "individual",
        "requestTemplate": _text("Would you be willing to ...?", "你愿意……吗？"),
    },
    {
        "category": "requests",
        "name": _text("Team Requests", "团队请求"),
        "description": _text("Agree on requests within a team.", "在团队中达成请求。"),
        "difficulty": "advanced",
        "audience": "group",
    },
    {
        "category": "gratitude",
        "name": _text("Expressing Gratitude", "表达感激"),
        "description": _text("Name the action and the need it met.", "说出行为及其满足的需要。"),
        "difficulty": "beginner",
        "audience": "individual",
        "gratitudeExpression": _text(
            "When you helped me, my need for support was met.", "你帮助我时，我对支持的需要得到了满足。"
        ),
    },
    {
        "category": "conflict-resolution",
        "name": _text("Mediating a Conflict", "调解冲突"),
        "description": _text("Guide two parties to hear each other.", "引导双方相互倾听。"),
        "difficulty": "advanced",
        "audience": "group",
        "relatedIds": [3, 7],
        "scenario": _text("Two colleagues disagree on a deadline.", "两位同事对截止日期有分歧。"),
        "steps": [
            _text("Reflect each side's feelings.", "复述双方的感受。"),
            _text("Name each side's needs.", "说出双方的需要。"),
        ],
    },
]


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at an in-memory database."""
    return Settings(DATABASE_URL=TEST_DATABASE_URL, ENVIRONMENT="test")


@pytest.fixture
def database() -> Generator[Database, None, None]:
    """Open a fresh in-memory database with all tables created."""
    db = Database(TEST_DATABASE_URL)
    db.open()
    db.create_schema()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def db_session(database: Database) -> Generator[Session, None, None]:
    """Create a database session for each test."""
    with database.session() as session:
        yield session


@pytest.fixture
def container(db_session: Session) -> Container:
    """Dependency container bound to the test session."""
    return build_container(db_session)


@pytest.fixture
def app(test_settings: Settings, db_session: Session) -> FastAPI:
    """Application whose requests use the test session."""
    application = create_app(test_settings)

    def override_get_db() -> Generator[Session, None, None]:
        yield db_session

    application.dependency_overrides[get_db] = override_get_db
    return application


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, Any, None]:
    """Create a test client."""
    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def api_key(container: Container) -> IssuedApiKey:
    """An active API key."""
    return container.api_key_use_case().issue("Test Client")


@pytest.fixture
def auth_headers(api_key: IssuedApiKey) -> dict[str, str]:
    """Authorization header for the active test key."""
    return {"Authorization": f"Bearer {api_key.key}"}


@pytest.fixture
def exercises(db_session: Session) -> list[Exercise]:
    """The ten-exercise sample catalog, stored with ids 1..10."""
    seeds = [ExerciseSeed.model_validate(item) for item in SAMPLE_EXERCISES]
    return ExerciseRepository(db_session).add_all([seed.to_domain() for seed in seeds])


@pytest.fixture
def seed_file(tmp_path: Path) -> Path:
    """The sample catalog written as a seed file."""
    path = tmp_path / "exercises.json"
    path.write_text(json.dumps(SAMPLE_EXERCISES, ensure_ascii=False), encoding="utf-8")
    return path
