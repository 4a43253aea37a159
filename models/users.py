from sqlalchemy import Column, Integer, String
from database.db import Base

class User(Base):
    __tablename__ = "users"  # 사용자(수강생/강사) 테이블

    id = Column(Integer, primary_key=True, index=True)          # 사용자 고유 ID (PK)
    name_kor = Column(String(50), nullable=False)               # 한글 이름 (예약 목록에 표시)
    email = Column(String(100), unique=True)                    # 이메일
