from typing import List, Optional

from sqlalchemy.orm import Session

from models.classrooms import Classroom as ClassroomModel


class ClassroomRepository:
    """강의실 조회 전용 (예약 서비스 입장에서는 읽기만 함)"""

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, classroom_id: int, for_update: bool = False) -> Optional[ClassroomModel]:
        query = self.db.query(ClassroomModel).filter(ClassroomModel.id == classroom_id)
        if for_update:
            # ✅ 같은 강의실 예약 생성은 트랜잭션 끝까지 직렬화 (SELECT ... FOR UPDATE)
            query = query.with_for_update()
        return query.first()

    def find_all(self, active_only: bool = False) -> List[ClassroomModel]:
        query = self.db.query(ClassroomModel)
        if active_only:
            query = query.filter(ClassroomModel.is_active.is_(True))
        return query.order_by(ClassroomModel.id).all()
