"""지오코딩 관련 예외."""

from sensor_api.application.common.exceptions.base import ApplicationError


class LocationNotFoundError(ApplicationError):
    """장소 이름으로 좌표를 찾을 수 없음."""

    def __init__(self, place: str) -> None:
        self.place = place
        super().__init__(f"no location found at {place}")


class GeocodingError(ApplicationError):
    """지오코딩 서비스 호출 실패."""

    def __init__(self, message: str = "Geocoding service failed") -> None:
        super().__init__(message)
