from sqlalchemy import Column, Integer, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from database.db import Base

# ✅ 외래키 관계 대상 모델 import
from models.classrooms import Classroom as ClassroomModel
from models.users import User as UserModel

# ✅ 강의실 예약 테이블 정의
class Reservation(Base):
    __tablename__ = "reservations"  # 테이블명: reservations

    id = Column(Integer, primary_key=True, index=True)                          # 예약 고유 ID (PK)
    classroom_id = Column(Integer, ForeignKey("classrooms.id"), nullable=False) # 예약 강의실 ID (FK)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)           # 예약자 ID (FK)
    start_at = Column(DateTime, nullable=False)                                 # 시작 일시 (로컬 시간)
    end_at = Column(DateTime, nullable=False)                                   # 종료 일시 (로컬 시간)

    # ✅ 관계 설정: 강의실/예약자 객체와의 ORM 관계
    classroom = relationship(ClassroomModel, backref="reservations", lazy="joined")
    user = relationship(UserModel, backref="reservations", lazy="joined")

    # ✅ 날짜 범위/중복 조회용 인덱스
    __table_args__ = (
        Index("ix_resv_classroom_start", "classroom_id", "start_at"),
        Index("ix_resv_user_start", "user_id", "start_at"),
    )
