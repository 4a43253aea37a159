from datetime import date as date_type

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import get_current_user
from dependencies.services import get_reservation_service
from models.users import User as UserModel
from schemas.reservations import ReservationCreate
from services.reservation_service import ReservationService

router = APIRouter(prefix="/reservations", tags=["강의실 예약"])

# ==========================================================
# [공통] 세션/서비스는 dependencies 에서 주입
# - 서비스 메서드 한 번 = commit 한 번 (예외 시 세션 종료와 함께 롤백)
# ==========================================================


# ✅ [READ] 강의실 날짜별 예약 목록 조회
# - 예: /reservations?classroom_id=1&date=2024-05-01
@router.get("/")
def read_reservations(
    classroom_id: int = Query(..., description="강의실 ID"),
    date: date_type = Query(..., description="조회 날짜 (YYYY-MM-DD)"),
    service: ReservationService = Depends(get_reservation_service),
):
    items = service.get_reservations_for_classroom_by_date(classroom_id, date)
    return {
        "success": True,
        "data": [r.model_dump() for r in items],
        "message": f"{date} 강의실 {classroom_id} 예약 {len(items)}건 조회 완료"
    }


# ✅ [CREATE] 예약 생성
# - 하루 1회, 같은 강의실 시간 중복 불가
@router.post("/", status_code=201)
def create_reservation(
    request: ReservationCreate,
    user: UserModel = Depends(get_current_user),
    service: ReservationService = Depends(get_reservation_service),
    db: Session = Depends(get_db),
):
    created = service.create_reservation(user, request)
    db.commit()
    return {
        "success": True,
        "data": created.model_dump(),
        "message": "예약이 완료되었습니다"
    }


# ✅ [DELETE] 예약 취소
# - 본인 예약만 취소 가능
@router.delete("/{reservation_id}")
def delete_reservation(
    reservation_id: int,
    user: UserModel = Depends(get_current_user),
    service: ReservationService = Depends(get_reservation_service),
    db: Session = Depends(get_db),
):
    service.delete_reservation(user, reservation_id)
    db.commit()
    return {
        "success": True,
        "data": {"reservation_id": reservation_id},
        "message": "예약이 취소되었습니다"
    }
