import os

# ✅ 앱 모듈 import 전에 DB URL 지정 (MySQL 대신 메모리 SQLite)
os.environ.setdefault("SQLALCHEMY_DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.db import Base, get_db
from models.classrooms import Classroom, ClassroomType
from models.users import User
from models.reservations import Reservation

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def seed(tables):
    """강의실 1(활성), 2(활성), 3(비활성) / 사용자 7, 8"""
    db = TestingSessionLocal()
    db.add_all([
        Classroom(id=1, name="301호", type=ClassroomType.LECTURE, is_active=True),
        Classroom(id=2, name="자습실 A", type=ClassroomType.STUDY, is_active=True),
        Classroom(id=3, name="회의실", type=ClassroomType.MEETING, is_active=False),
        User(id=7, name_kor="김철수", email="kim@example.com"),
        User(id=8, name_kor="이영희", email="lee@example.com"),
    ])
    db.commit()
    db.close()


@pytest.fixture
def db(seed):
    session = TestingSessionLocal()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def add_reservation(db):
    """이미 저장된 예약을 만드는 헬퍼"""
    def _add(classroom_id, user_id, start_at, end_at):
        reservation = Reservation(
            classroom_id=classroom_id,
            user_id=user_id,
            start_at=start_at,
            end_at=end_at,
        )
        db.add(reservation)
        db.commit()
        return reservation.id
    return _add


@pytest.fixture
def client(seed):
    from main import app

    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def session_factory(tables):
    """빈 테이블에 직접 세션을 열어야 하는 테스트용"""
    return TestingSessionLocal
