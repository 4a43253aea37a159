from fastapi import Depends
from sqlalchemy.orm import Session

from database.db import get_db
from repositories.classrooms import ClassroomRepository
from repositories.reservations import ReservationRepository
from services.reservation_service import ReservationService


def get_reservation_service(db: Session = Depends(get_db)) -> ReservationService:
    """요청 세션에 묶인 예약 서비스 (저장소를 명시적으로 주입)"""
    return ReservationService(ReservationRepository(db), ClassroomRepository(db))
