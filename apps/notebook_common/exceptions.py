# apps/notebook_common/exceptions.py


class NotebookError(Exception):
    """사용자에게 그대로 보여줘도 되는 오류의 공통 부모"""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(NotebookError):
    """API 키 등 서버 설정 누락"""


class AuthorizationError(NotebookError):
    """로그인 사용자 없음 / 인증 실패"""

    status_code = 401


class InputError(NotebookError):
    """필수 입력(파일, URL, 이메일 등) 누락 또는 형식 오류"""

    status_code = 400


class UpstreamError(NotebookError):
    """외부 서비스가 실패 응답을 돌려줌"""

    status_code = 502

    def __init__(self, message: str, status_code=None, status_text: str = "", body: str = ""):
        self.upstream_status = status_code
        self.status_text = status_text
        self.body = body
        super().__init__(message)

    @classmethod
    def from_response(cls, status_code, status_text: str, body: str) -> "UpstreamError":
        msg = f"API Error: {status_code} {status_text} - {body}"
        return cls(msg, status_code=status_code, status_text=status_text, body=body)


class InferenceError(UpstreamError):
    """모델이 텍스트를 만들지 못함"""


class StoreError(UpstreamError):
    """DB 저장/삭제 실패 (원본 예외는 __cause__ 로 남음)"""
