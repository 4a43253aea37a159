import csv
from typing import Optional
from sqlalchemy.orm import Session
from database.db import SessionLocal
from models.classrooms import Classroom as ClassroomModel, ClassroomType  # ✅ 모델 import

CSV_PATH = "data/classrooms.csv"  # ✅ 파일 경로

def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "y", "yes")

def migrate_classrooms(csv_path: str = CSV_PATH, db: Optional[Session] = None):
    own_session = db is None
    db = db or SessionLocal()

    try:
        with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
            reader = csv.DictReader(csvfile)
            for row in reader:
                classroom = ClassroomModel(
                    id=int(row["id"]),                               # 강의실 고유 ID (Primary Key)
                    name=row["name"],                                # 강의실 이름
                    type=ClassroomType(row["type"].strip().upper()), # 강의실 종류
                    is_active=_parse_bool(row.get("is_active") or "true"),  # 사용 여부 (기본 true)
                )
                db.add(classroom)
        db.commit()
    finally:
        if own_session:
            db.close()
    print("✅ 강의실 CSV → DB 마이그레이션 완료")

if __name__ == "__main__":
    migrate_classrooms()
