"""
Application Layer Types - 应用层类型定义

定义应用服务层使用的基础类型，包括查询结果、错误码和应用层异常。
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar
from enum import Enum, auto

T = TypeVar('T')

# 摊牌输入校验错误码
NO_PLAYERS = "NO_PLAYERS"
INVALID_CARD = "INVALID_CARD"

# 配置查询错误码
CONFIG_TYPE_NOT_FOUND = "CONFIG_TYPE_NOT_FOUND"
CONFIG_PROFILE_NOT_FOUND = "CONFIG_PROFILE_NOT_FOUND"


class ResultStatus(Enum):
    """操作结果状态"""
    SUCCESS = auto()
    FAILURE = auto()
    VALIDATION_ERROR = auto()


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """查询结果"""
    success: bool
    status: ResultStatus
    data: Optional[T] = None
    message: str = ""
    error_code: Optional[str] = None

    @classmethod
    def success_result(cls, data: T, message: str = "查询成功") -> 'QueryResult[T]':
        """创建成功结果"""
        return cls(
            success=True,
            status=ResultStatus.SUCCESS,
            data=data,
            message=message
        )

    @classmethod
    def failure_result(cls, message: str, error_code: Optional[str] = None,
                       status: ResultStatus = ResultStatus.FAILURE) -> 'QueryResult[T]':
        """创建失败结果"""
        return cls(
            success=False,
            status=status,
            message=message,
            error_code=error_code
        )

    @classmethod
    def validation_error(cls, message: str, error_code: Optional[str] = None) -> 'QueryResult[T]':
        """创建验证错误结果"""
        return cls.failure_result(message, error_code, ResultStatus.VALIDATION_ERROR)


class ApplicationError(Exception):
    """应用层异常基类"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ValidationError(ApplicationError):
    """验证错误"""
    pass


class InvalidCardError(ValidationError):
    """摊牌输入中包含不是Card的对象"""

    def __init__(self, message: str, player_id: Optional[str] = None):
        super().__init__(message, INVALID_CARD)
        self.player_id = player_id
