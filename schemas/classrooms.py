from pydantic import BaseModel
from typing import List

from models.classrooms import ClassroomType
from schemas.reservations import Reservation

# ✅ 응답(Response) / 조회(Read) 용 스키마
# 강의실 정보 + (상세 조회 시) 해당 날짜의 예약 목록
class Classroom(BaseModel):
    classroom_id: int                        # 강의실 고유 ID (PK)
    name: str                                # 강의실 이름
    type: ClassroomType                      # 강의실 종류
    is_active: bool                          # 사용 가능 여부
    reservations: List[Reservation] = []     # 예약 목록 (상세 조회 시에만 채움)
