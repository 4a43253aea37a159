from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from models.reservations import Reservation as ReservationModel


class ReservationRepository:
    """예약 저장소. commit은 호출자(라우터)가 한 번만 수행"""

    def __init__(self, db: Session):
        self.db = db

    # ✅ 기간 내 시작하는 예약 전체 (start ≤ start_at ≤ end)
    def find_by_date_range(self, start: datetime, end: datetime) -> List[ReservationModel]:
        return (
            self.db.query(ReservationModel)
            .filter(ReservationModel.start_at >= start, ReservationModel.start_at <= end)
            .order_by(ReservationModel.start_at, ReservationModel.id)
            .all()
        )

    # ✅ 특정 사용자의 기간 내 예약 (start ≤ start_at < end)
    def find_by_user_and_date(self, user_id: int, start: datetime, end: datetime) -> List[ReservationModel]:
        return (
            self.db.query(ReservationModel)
            .filter(
                ReservationModel.user_id == user_id,
                ReservationModel.start_at >= start,
                ReservationModel.start_at < end,
            )
            .all()
        )

    # ✅ 같은 강의실에서 [start, end)와 겹치는 예약
    def find_conflicting_reservations(self, classroom_id: int, start: datetime, end: datetime) -> List[ReservationModel]:
        return (
            self.db.query(ReservationModel)
            .filter(
                ReservationModel.classroom_id == classroom_id,
                ReservationModel.start_at < end,
                ReservationModel.end_at > start,
            )
            .all()
        )

    def find_by_id(self, reservation_id: int) -> Optional[ReservationModel]:
        return self.db.query(ReservationModel).filter(ReservationModel.id == reservation_id).first()

    def save(self, reservation: ReservationModel) -> ReservationModel:
        self.db.add(reservation)
        self.db.flush()              # PK 발급
        self.db.refresh(reservation)
        return reservation

    def delete(self, reservation: ReservationModel) -> None:
        self.db.delete(reservation)
        self.db.flush()
