"""
Error taxonomy.

Three kinds of failure reach the API surface:

- configuration errors: the backend cannot be reached or configured,
- authentication errors: mapped to a small fixed set of user-facing messages,
- data errors: read/write failures against the store (logged, never retried).

Every message shown to users is Korean, as in the rest of the UI text.
"""

from fastapi import status

CONFIGURATION_MESSAGE = "서버가 연결되지 않았습니다. 설정을 확인해주세요."

GENERIC_AUTH_MESSAGE = "오류가 발생했습니다. 잠시 후 다시 시도해주세요."

# code -> (HTTP status, message)
AUTH_ERROR_MESSAGES: dict[str, tuple[int, str]] = {
    "invalid-credential": (status.HTTP_401_UNAUTHORIZED, "이메일 또는 비밀번호가 올바르지 않습니다."),
    "email-already-in-use": (status.HTTP_400_BAD_REQUEST, "이미 가입된 이메일입니다."),
    "operation-not-allowed": (status.HTTP_403_FORBIDDEN,
                              "오류: 이메일 로그인이 활성화되지 않았습니다. 서버 설정을 확인하세요."),
}

READ_FAILED_MESSAGE = "기록을 불러오는 중 오류가 발생했습니다."
WRITE_FAILED_MESSAGE = "기록 저장 중 오류가 발생했습니다."
DELETE_FAILED_MESSAGE = "삭제 중 오류가 발생했습니다."


class ConfigurationError(Exception):
    """Backend credentials or connection settings are missing or unusable."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason
        self.message = CONFIGURATION_MESSAGE


class AuthError(Exception):
    """Identity-service failure identified by a short code.

    Unknown codes collapse to the generic "try again" message.
    """

    def __init__(self, code: str):
        super().__init__(code)
        self.code = code
        self.status_code, self.message = AUTH_ERROR_MESSAGES.get(
            code, (status.HTTP_400_BAD_REQUEST, GENERIC_AUTH_MESSAGE))


class DataError(Exception):
    """A read or write against the document store failed."""

    def __init__(self, message: str = READ_FAILED_MESSAGE):
        super().__init__(message)
        self.message = message
