"""
配置模块。
负责加载.env文件并以环境变量提供本库的配置。
"""
import os
import warnings
from typing import Any, Callable, Optional

from dotenv import load_dotenv
from loguru import logger


# 环境变量前缀
ENV_PREFIX = 'BASEOBJECT_'

# 包目录
PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


def load_env_file(env_path: Optional[str] = None) -> bool:
    """
    加载.env文件。

    未指定路径时依次使用环境变量BASEOBJECT_ENV_FILE和包目录下的.env。
    已存在的环境变量不会被覆盖。

    Args:
        env_path: .env文件路径

    Returns:
        是否成功加载
    """
    env_path = env_path or os.environ.get('BASEOBJECT_ENV_FILE') or os.path.join(PACKAGE_DIR, '.env')

    if not os.path.exists(env_path):
        logger.debug(f"环境变量文件不存在: {env_path}，将使用默认值")
        return False

    try:
        load_dotenv(dotenv_path=env_path, encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"加载环境变量文件失败: {e}，将使用默认值")
        return False
    logger.debug(f"成功加载环境变量文件: {env_path}")
    return True


# 尝试加载环境变量
load_env_file()


def get_env(name: str, default: Any = None, cast_type: Optional[Callable[[Any], Any]] = None) -> Any:
    """
    获取本库的配置项。

    配置项从带有BASEOBJECT_前缀的环境变量读取，例如LOG_LEVEL对应
    BASEOBJECT_LOG_LEVEL。布尔值接受true、yes、1、y（不区分大小写）。

    Args:
        name: 配置项名称，不含前缀
        default: 环境变量不存在或无法转换时的默认值
        cast_type: 类型转换函数，如bool、int、str.upper

    Returns:
        配置项的值
    """
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None:
        return default
    if cast_type is None:
        return raw
    if cast_type is bool:
        return raw.strip().lower() in ('true', 'yes', '1', 'y')
    try:
        return cast_type(raw)
    except (ValueError, TypeError):
        warnings.warn(f"无法转换环境变量{ENV_PREFIX}{name}的值'{raw}'，使用默认值{default!r}")
        return default


# 控制台输出开关，关闭后log/warn不再输出
CONSOLE_ENABLED = get_env('CONSOLE_ENABLED', default=True, cast_type=bool)

# configure_logging使用的日志级别与格式
LOG_LEVEL = get_env('LOG_LEVEL', default='INFO', cast_type=str.upper)
LOG_FORMAT = get_env('LOG_FORMAT', default='{level} {message}')
