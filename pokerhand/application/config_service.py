"""
ConfigService - 配置管理服务

负责集中化管理评估引擎的配置，包括：
- 评估器配置
- 日志配置

每类配置按名称保存多个配置文件（profile），查询结果统一以QueryResult返回。
"""

import logging
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, List

from .types import CONFIG_PROFILE_NOT_FOUND, CONFIG_TYPE_NOT_FOUND, QueryResult

ROOT_LOGGER_NAME = "pokerhand"


class ConfigType(Enum):
    """配置类型枚举"""
    EVALUATOR = "evaluator"
    LOGGING = "logging"


@dataclass
class EvaluatorConfig:
    """评估器配置"""
    trace_evaluations: bool = False


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'INFO'
    enable_console_logging: bool = True
    enable_file_logging: bool = False
    log_file_path: str = "pokerhand.log"
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ConfigService:
    """配置管理服务"""

    def __init__(self):
        """初始化配置服务"""
        self.logger = logging.getLogger(__name__)
        self._configs: Dict[ConfigType, Dict[str, Any]] = {}
        self._load_default_configs()

    def _load_default_configs(self) -> None:
        """加载默认配置"""
        self._configs[ConfigType.EVALUATOR] = {
            'default': EvaluatorConfig(),
            'debug': EvaluatorConfig(trace_evaluations=True),
        }

        self._configs[ConfigType.LOGGING] = {
            'default': LoggingConfig(),
            'debug': LoggingConfig(
                log_level='DEBUG',
                enable_file_logging=True
            ),
            'production': LoggingConfig(
                log_level='WARNING',
                enable_console_logging=False
            )
        }

        self.logger.debug("默认配置加载完成")

    def _get_profile(self, config_type: ConfigType, profile: str) -> Any:
        """按名称取配置，不存在时回退到default"""
        config_profiles = self._configs[config_type]
        if profile not in config_profiles:
            self.logger.warning(f"未找到{config_type.value}配置 '{profile}'，使用默认配置")
            profile = "default"
        return config_profiles[profile]

    def get_evaluator_config(self, profile: str = "default") -> QueryResult[EvaluatorConfig]:
        """
        获取评估器配置

        Args:
            profile: 配置文件名 (default, debug)

        Returns:
            查询结果，包含评估器配置
        """
        return QueryResult.success_result(self._get_profile(ConfigType.EVALUATOR, profile))

    def get_logging_config(self, profile: str = "default") -> QueryResult[LoggingConfig]:
        """
        获取日志配置

        Args:
            profile: 配置文件名 (default, debug, production)

        Returns:
            查询结果，包含日志配置
        """
        return QueryResult.success_result(self._get_profile(ConfigType.LOGGING, profile))

    def get_merged_config(self, config_type: ConfigType, profile: str = "default") -> QueryResult[Dict[str, Any]]:
        """
        获取配置字典

        Args:
            config_type: 配置类型
            profile: 配置文件名

        Returns:
            查询结果，包含配置字典
        """
        if config_type not in self._configs:
            return QueryResult.failure_result(
                f"配置类型 {config_type} 不存在",
                error_code=CONFIG_TYPE_NOT_FOUND
            )
        return QueryResult.success_result(asdict(self._get_profile(config_type, profile)))

    def update_config(self, config_type: ConfigType, profile: str, updates: Dict[str, Any]) -> QueryResult[bool]:
        """
        更新配置

        Args:
            config_type: 配置类型
            profile: 配置文件名
            updates: 更新的配置项

        Returns:
            查询结果，包含更新是否成功
        """
        if config_type not in self._configs:
            return QueryResult.failure_result(
                f"配置类型 {config_type} 不存在",
                error_code=CONFIG_TYPE_NOT_FOUND
            )

        config_profiles = self._configs[config_type]
        if profile not in config_profiles:
            return QueryResult.failure_result(
                f"配置文件 {profile} 不存在",
                error_code=CONFIG_PROFILE_NOT_FOUND
            )

        current_config = config_profiles[profile]
        for key, value in updates.items():
            if hasattr(current_config, key):
                setattr(current_config, key, value)
            else:
                self.logger.warning(f"配置项 {key} 不存在于 {config_type.value}.{profile} 中")

        self.logger.info(f"配置 {config_type.value}.{profile} 更新成功")
        return QueryResult.success_result(True)

    def list_available_profiles(self, config_type: ConfigType) -> QueryResult[List[str]]:
        """
        列出可用的配置文件

        Args:
            config_type: 配置类型

        Returns:
            查询结果，包含可用配置文件列表
        """
        if config_type not in self._configs:
            return QueryResult.failure_result(
                f"配置类型 {config_type} 不存在",
                error_code=CONFIG_TYPE_NOT_FOUND
            )
        return QueryResult.success_result(list(self._configs[config_type].keys()))

    def configure_logging(self, profile: str = "default") -> logging.Logger:
        """
        按日志配置为pokerhand根logger安装处理器

        重复调用会先移除之前安装的处理器。

        Args:
            profile: 日志配置文件名

        Returns:
            logging.Logger: 配置好的pokerhand根logger
        """
        config = self._get_profile(ConfigType.LOGGING, profile)
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)

        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()

        root_logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))
        formatter = logging.Formatter(config.log_format)

        if config.enable_console_logging:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            root_logger.addHandler(console_handler)

        if config.enable_file_logging:
            file_handler = logging.FileHandler(config.log_file_path, mode='a', encoding='utf-8')
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

        if not root_logger.handlers:
            root_logger.addHandler(logging.NullHandler())

        self.logger.debug(f"日志配置 '{profile}' 已应用")
        return root_logger
