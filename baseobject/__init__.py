"""
baseobject包。
提供BaseObject基类及其依赖的工具函数：属性管理、唯一标识、日志、结构哈希和混入。
"""

# 基础类
from baseobject.base import BaseObject
from baseobject.descriptors import PropertyDescriptor, PROPERTY_DEFAULTS

# 工具函数
from baseobject.util import (
    has_own_property,
    merge,
    uid,
    format_message,
    print_message,
    hash_code,
)
from baseobject.console import configure_logging

# 异常
from baseobject.exceptions import (
    BaseObjectException,
    InstanceError,
    PropertyDefinitionException,
)

__version__ = '0.1.0'

__all__ = [
    # 基础类
    'BaseObject',
    'PropertyDescriptor',
    'PROPERTY_DEFAULTS',

    # 工具函数
    'has_own_property',
    'merge',
    'uid',
    'format_message',
    'print_message',
    'hash_code',
    'configure_logging',

    # 异常
    'BaseObjectException',
    'InstanceError',
    'PropertyDefinitionException',
]
