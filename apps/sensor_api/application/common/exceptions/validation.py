"""검증 관련 예외."""

from sensor_api.application.common.exceptions.base import ApplicationError


class InvalidQueryParameterError(ApplicationError):
    """쿼리 파라미터 형식이 올바르지 않음."""

    def __init__(self, param: str, expected: str) -> None:
        self.param = param
        self.expected = expected
        super().__init__(f'invalid value for "{param}": must be formatted like {expected}')


class QueryParserInvariantError(RuntimeError):
    """Parser grammar matched but produced an unexpected group layout.

    This is a bug in the parser itself, never a user input problem.
    """

    def __init__(self, param: str, raw: str) -> None:
        self.param = param
        self.raw = raw
        super().__init__(f'unexpected number of match groups for "{param}": {raw!r}')
