from typing import Optional, Annotated
from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from database.db import get_db
from models.users import User as UserModel
from repositories.users import UserRepository

UserIdHeader = Annotated[Optional[str], Header(alias="X-User-Id")]

def get_current_user(x_user_id: UserIdHeader = None, db: Session = Depends(get_db)) -> UserModel:
    # 인증은 앞단(게이트웨이)에서 처리되고, 확인된 사용자 ID만 헤더로 전달된다고 가정
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Missing X-User-Id header")

    try:
        user_id = int(x_user_id.strip())
    except ValueError:
        raise HTTPException(status_code=401, detail="Invalid X-User-Id header")

    user = UserRepository(db).find_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=401, detail="Unknown user")
    return user
