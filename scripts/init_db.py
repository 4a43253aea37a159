from database.db import Base, engine

# ✅ 모든 모델을 import 해야 metadata 에 테이블이 등록됨
from models.classrooms import Classroom  # noqa: F401
from models.users import User  # noqa: F401
from models.reservations import Reservation  # noqa: F401

def init_db():
    Base.metadata.create_all(bind=engine)
    print("✅ 테이블 생성 완료")

if __name__ == "__main__":
    init_db()
