from pydantic import BaseModel, ConfigDict, NaiveDatetime
from datetime import datetime
from typing import Optional

# ==========================================================
# [입력용 스키마]
# ==========================================================
class ReservationCreate(BaseModel):
    classroom_id: int              # 예약할 강의실 ID
    start_at: NaiveDatetime        # 시작 일시 (로컬 시간, 오프셋 불가)
    end_at: NaiveDatetime          # 종료 일시 (로컬 시간, 오프셋 불가)

# ==========================================================
# [출력용 스키마] 예약 DTO
# - 조회 시점마다 새로 만들어지는 비정규화 표현 (DB에 저장하지 않음)
# - 예약자 정보가 없으면 user_id=None, user_name_kor="알 수 없음"
# ==========================================================
class Reservation(BaseModel):
    reservation_id: Optional[int] = None   # 예약 고유 ID
    classroom_id: Optional[int] = None     # 강의실 ID
    user_id: Optional[int] = None          # 예약자 ID
    user_name_kor: str                     # 예약자 한글 이름
    start_at: datetime                     # 시작 일시
    end_at: datetime                       # 종료 일시

    model_config = ConfigDict(frozen=True)
