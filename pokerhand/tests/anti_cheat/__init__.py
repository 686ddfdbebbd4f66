"""
Anti-Cheat System - 反作弊系统

确保测试真正使用核心模块而非mock数据。

Modules:
    core_usage_checker.py: 核心模块使用检查器
"""

from .core_usage_checker import CoreUsageChecker

__all__ = ['CoreUsageChecker']
