"""
services/reservation_service.py

강의실 예약 생성/조회/취소 규칙을 담당하는 서비스 계층.
- 예약 엔티티를 쓰는 유일한 곳 (라우터는 이 서비스를 통해서만 예약을 변경)
- 검증이 모두 끝난 뒤에만 저장/삭제하므로 실패 시 부작용 없음
- commit은 호출자가 수행 (메서드 하나 = 트랜잭션 하나)
"""

import logging
from datetime import date, datetime, time, timedelta
from typing import List, Optional

from models.reservations import Reservation as ReservationModel
from models.users import User as UserModel
from repositories.classrooms import ClassroomRepository
from repositories.reservations import ReservationRepository
from schemas.reservations import Reservation, ReservationCreate
from services.exceptions import InvalidRequest, NotFound, PermissionDenied

logger = logging.getLogger(__name__)

UNKNOWN_USER_NAME = "알 수 없음"


class ReservationService:
    def __init__(self, reservations: ReservationRepository, classrooms: ClassroomRepository):
        self.reservations = reservations
        self.classrooms = classrooms

    def get_reservations_for_classroom_by_date(self, classroom_id: int, target_date: date) -> List[Reservation]:
        """
        특정 강의실의 날짜별 예약 목록 조회
        - 해당 날짜 00:00 ~ 23:59:59.999999 사이에 시작하는 예약 중 강의실이 일치하는 것만
        - 없으면 빈 리스트
        """
        start_of_day = datetime.combine(target_date, time.min)
        end_of_day = datetime.combine(target_date, time.max)
        reservations = [
            r for r in self.reservations.find_by_date_range(start_of_day, end_of_day)
            if r.classroom is not None and r.classroom.id == classroom_id
        ]
        return [self.to_dto(r) for r in reservations]

    def create_reservation(self, user: UserModel, request: ReservationCreate) -> Reservation:
        """
        새로운 예약 생성. 첫 번째로 위반한 규칙에서 바로 실패한다.
        1) 강의실 존재 여부  2) 시작 < 종료  3) 하루 1회  4) 시간 중복
        """
        # 1. 강의실 존재 여부 확인 (행 잠금으로 같은 강의실 동시 예약 직렬화)
        classroom = self.classrooms.find_by_id(request.classroom_id, for_update=True)
        if classroom is None:
            logger.warning(f"예약 거부(강의실 없음): classroom_id={request.classroom_id}, user_id={user.id}")
            raise NotFound("존재하지 않는 강의실입니다.")

        # 2. 시간 순서 확인
        if request.start_at >= request.end_at:
            logger.warning(f"예약 거부(시간 순서 오류): start={request.start_at}, end={request.end_at}")
            raise InvalidRequest("예약 종료 시간은 시작 시간보다 늦어야 합니다.")

        # 3. 하루에 한 번만 예약 가능 (시작 일시 기준 날짜)
        start_of_day = datetime.combine(request.start_at.date(), time.min)
        end_of_day = start_of_day + timedelta(days=1)
        if self.reservations.find_by_user_and_date(user.id, start_of_day, end_of_day):
            logger.warning(f"예약 거부(하루 1회 초과): user_id={user.id}, date={start_of_day.date()}")
            raise InvalidRequest("하루에 한 번만 예약할 수 있습니다.")

        # 4. 예약 시간 중복 확인
        conflicts = self.reservations.find_conflicting_reservations(
            request.classroom_id, request.start_at, request.end_at
        )
        if conflicts:
            logger.warning(
                f"예약 거부(시간 중복): classroom_id={request.classroom_id}, "
                f"conflicts={[r.id for r in conflicts]}"
            )
            raise InvalidRequest("이미 예약된 시간입니다.")

        # 5. 예약 엔티티 생성 및 저장
        saved = self.reservations.save(
            ReservationModel(
                classroom=classroom,
                user=user,
                start_at=request.start_at,
                end_at=request.end_at,
            )
        )
        logger.info(
            f"예약 생성: reservation_id={saved.id}, classroom_id={classroom.id}, "
            f"user_id={user.id}, {saved.start_at} ~ {saved.end_at}"
        )
        return self.to_dto(saved)

    def delete_reservation(self, user: UserModel, reservation_id: int) -> None:
        """예약 삭제. 본인 예약만 삭제 가능"""
        reservation = self.reservations.find_by_id(reservation_id)
        if reservation is None:
            raise NotFound("존재하지 않는 예약입니다.")

        owner_id = reservation.user.id if reservation.user is not None else None
        if owner_id != user.id:
            logger.warning(f"예약 취소 거부(권한 없음): reservation_id={reservation_id}, user_id={user.id}")
            raise PermissionDenied("예약을 취소할 권한이 없습니다.")

        self.reservations.delete(reservation)
        logger.info(f"예약 취소: reservation_id={reservation_id}, user_id={user.id}")

    @staticmethod
    def to_dto(entity: Optional[ReservationModel]) -> Optional[Reservation]:
        """Reservation 엔티티 → 예약 DTO (부작용 없음)"""
        if entity is None:
            return None
        user = entity.user
        classroom = entity.classroom
        return Reservation(
            reservation_id=entity.id,
            classroom_id=classroom.id if classroom is not None else None,
            user_id=user.id if user is not None else None,
            user_name_kor=user.name_kor if user is not None else UNKNOWN_USER_NAME,
            start_at=entity.start_at,
            end_at=entity.end_at,
        )
