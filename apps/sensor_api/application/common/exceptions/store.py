"""저장소 관련 예외."""

from sensor_api.application.common.exceptions.base import ApplicationError


class SensorStoreError(ApplicationError):
    """저장소 백엔드 오류 (연결, 제약조건, 쿼리 실패 등).

    The driver exception is kept as ``__cause__``; the message itself is
    safe to log but is not meant for API clients.
    """

    def __init__(self, message: str = "Sensor store operation failed") -> None:
        super().__init__(message)


class ProximitySearchUnavailableError(ApplicationError):
    """현재 저장소 백엔드가 근접 검색을 지원하지 않음."""

    def __init__(self, backend: str) -> None:
        self.backend = backend
        super().__init__(f"proximity search is not supported by the {backend} store")
