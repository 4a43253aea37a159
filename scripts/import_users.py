import csv
from typing import Optional
from sqlalchemy.orm import Session
from database.db import SessionLocal
from models.users import User as UserModel  # ✅ 모델 import

CSV_PATH = "data/users.csv"  # ✅ 파일 경로

def migrate_users(csv_path: str = CSV_PATH, db: Optional[Session] = None):
    own_session = db is None
    db = db or SessionLocal()

    try:
        with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
            reader = csv.DictReader(csvfile)
            for row in reader:
                user = UserModel(
                    id=int(row["id"]),                 # 사용자 고유 ID (Primary Key)
                    name_kor=row["name_kor"],          # 한글 이름
                    email=row.get("email") or None,    # 이메일 (선택)
                )
                db.add(user)
        db.commit()
    finally:
        if own_session:
            db.close()
    print("✅ 사용자 CSV → DB 마이그레이션 완료")

if __name__ == "__main__":
    migrate_users()
