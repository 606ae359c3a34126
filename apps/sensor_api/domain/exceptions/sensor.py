"""Sensor 도메인 예외."""

from sensor_api.domain.exceptions.base import DomainError

SENSOR_RESOURCE = "sensor"


class ResourceNotFoundError(DomainError):
    """이름으로 지정한 리소스가 존재하지 않음.

    Carries the resource type and identifier so callers can branch on the
    error and build their own messages.
    """

    def __init__(self, identifier: str, resource_type: str = SENSOR_RESOURCE) -> None:
        self.identifier = identifier
        self.resource_type = resource_type
        super().__init__(f"no {resource_type} resource exists: {identifier}")


class SensorAlreadyExistsError(DomainError):
    """같은 이름의 센서가 이미 존재함."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"sensor already exists: {name}")
