"""
控制台输出模块。
以loguru的logger作为控制台，提供信息与警告两个输出通道。
"""
import sys
from typing import Any, Optional

from loguru import logger

from baseobject import config


# 输出通道与loguru日志级别的对应关系
CHANNELS = {
    'log': 'INFO',
    'warn': 'WARNING',
}


def print_message(level: str, message: str) -> None:
    """
    输出消息到控制台。
    未知的通道或控制台被禁用时静默忽略。

    Args:
        level: 输出通道，"log"或"warn"
        message: 消息
    """
    if not config.CONSOLE_ENABLED or level not in CHANNELS:
        return
    logger.log(CHANNELS[level], message)


def configure_logging(level: Optional[str] = None, sink: Any = None) -> int:
    """
    配置控制台。
    移除loguru已有的处理器，只保留一个使用简单格式的输出。

    Args:
        level: 日志级别，默认使用配置中的LOG_LEVEL
        sink: 输出目标，默认为标准错误

    Returns:
        新处理器的ID，可用于logger.remove()
    """
    logger.remove()
    return logger.add(
        sink if sink is not None else sys.stderr,
        level=(level or config.LOG_LEVEL).upper(),
        format=config.LOG_FORMAT,
    )
