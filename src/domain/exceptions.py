"""도메인 레이어 예외 정의."""


class DomainError(Exception):
    """도메인 레이어 최상위 예외."""


class ConfigurationError(DomainError):
    """설정 파일 내용이 잘못되었을 때 (예: 좌표 없는 장소)."""


class UpstreamFetchError(DomainError):
    """후보 항목 집합을 가져오지 못함. 호출 전체가 실패한다.

    "결과 없음"(빈 리스트)과 구분하기 위해 반드시 호출자에게 전파된다.
    """

    def __init__(self, operation: str, detail: str = ""):
        self.operation = operation
        message = f"{operation}: 콘텐츠 저장소 조회 실패"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class EngagementFetchError(DomainError):
    """개별 항목의 좋아요/댓글 조회 실패. 해당 항목만 참여 0으로 처리한다."""

    def __init__(self, content_id: str, kind: str):
        self.content_id = content_id
        self.kind = kind
        super().__init__(f"{content_id}의 {kind} 조회 실패")
