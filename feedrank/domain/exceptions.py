"""도메인 레이어 예외 정의."""


class DomainError(Exception):
    """도메인 레이어 최상위 예외."""


class StoreUnavailableError(DomainError):
    """콘텐츠 저장소(Firestore) 읽기/쓰기 실패.

    네트워크, 권한, 쿼터 오류를 모두 포함한다. 엔진은 재시도하지 않고
    호출자에게 그대로 전파한다.
    """

    def __init__(self, operation: str, detail: str = ""):
        self.operation = operation
        message = f"저장소 작업 실패: {operation}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
