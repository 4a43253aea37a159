import enum

from sqlalchemy import Column, Integer, String, Boolean, Enum
from database.db import Base


class ClassroomType(str, enum.Enum):
    """강의실 종류"""
    LECTURE = "LECTURE"      # 일반 강의실
    STUDY = "STUDY"          # 자습실
    MEETING = "MEETING"      # 회의실
    LAB = "LAB"              # 실습실


class Classroom(Base):
    __tablename__ = "classrooms"  # 강의실 정보 테이블

    id = Column(Integer, primary_key=True, index=True)                  # 강의실 고유 ID (PK)
    name = Column(String(100), nullable=False)                          # 강의실 이름 (예: 301호)
    type = Column(Enum(ClassroomType), nullable=False, default=ClassroomType.LECTURE)  # 강의실 종류
    is_active = Column(Boolean, nullable=False, default=True)           # 사용 가능 여부
