from datetime import date as date_type
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.services import get_reservation_service
from repositories.classrooms import ClassroomRepository
from schemas.classrooms import Classroom
from services.exceptions import NotFound
from services.reservation_service import ReservationService

router = APIRouter(prefix="/classrooms", tags=["강의실"])


# ✅ [READ] 전체 강의실 조회
# - active_only=true 이면 사용 가능한 강의실만
@router.get("/")
def read_classrooms(active_only: bool = False, db: Session = Depends(get_db)):
    records = ClassroomRepository(db).find_all(active_only=active_only)
    return {
        "success": True,
        "data": [
            Classroom(classroom_id=c.id, name=c.name, type=c.type, is_active=c.is_active).model_dump()
            for c in records
        ]
    }


# ✅ [READ] 특정 강의실 + 해당 날짜 예약 현황
# - date 생략 시 오늘
@router.get("/{classroom_id}")
def read_classroom(
    classroom_id: int,
    date: Optional[date_type] = Query(None, description="조회 날짜 (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
    service: ReservationService = Depends(get_reservation_service),
):
    classroom = ClassroomRepository(db).find_by_id(classroom_id)
    if classroom is None:
        raise NotFound("존재하지 않는 강의실입니다.")

    target = date or date_type.today()
    dto = Classroom(
        classroom_id=classroom.id,
        name=classroom.name,
        type=classroom.type,
        is_active=classroom.is_active,
        reservations=service.get_reservations_for_classroom_by_date(classroom.id, target),
    )
    return {"success": True, "data": dto.model_dump()}
