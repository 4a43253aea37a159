"""
services/exceptions.py

예약 도메인 예외. 서비스 계층에서 발생시키고 middlewares/error_handler.py에서
status_code / code 값으로 JSON 에러 응답을 만든다.
"""


class ReservationError(Exception):
    """예약 도메인 예외의 기본 클래스"""

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFound(ReservationError):
    """강의실 또는 예약이 존재하지 않음"""

    status_code = 404
    code = "NOT_FOUND"


class InvalidRequest(ReservationError):
    """업무 규칙 위반 (하루 1회 초과, 시간 중복, 시간 순서 오류)"""

    status_code = 400
    code = "INVALID_REQUEST"


class PermissionDenied(ReservationError):
    """본인 예약이 아닌 예약을 취소하려 함"""

    status_code = 403
    code = "PERMISSION_DENIED"
