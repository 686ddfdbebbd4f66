"""
Application Layer - 应用服务层

在核心评估逻辑之上提供配置管理和摊牌结算服务。
"""

from .types import ApplicationError, InvalidCardError, QueryResult, ResultStatus, ValidationError
from .config_service import ConfigService, ConfigType, EvaluatorConfig, LoggingConfig
from .showdown_service import ShowdownResult, ShowdownService

__all__ = [
    'ApplicationError', 'InvalidCardError', 'QueryResult', 'ResultStatus', 'ValidationError',
    'ConfigService', 'ConfigType', 'EvaluatorConfig', 'LoggingConfig',
    'ShowdownResult', 'ShowdownService',
]
