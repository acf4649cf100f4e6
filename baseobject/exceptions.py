"""
异常模块。
包含BaseObject及其工具函数使用的异常类。
"""
from typing import Any, Optional


class BaseObjectException(Exception):
    """
    异常基类。
    本库抛出的所有异常都应继承自此类。
    """

    def __init__(self, message: str):
        """
        初始化异常。

        Args:
            message: 异常消息
        """
        self.message = message
        super().__init__(self.message)


class InstanceError(BaseObjectException):
    """
    实例错误。
    由BaseObject.error()抛出，消息中带有类名与实例标识，便于定位来源。
    """

    def __init__(self, class_name: str, instance_id: Any, message: str):
        """
        初始化实例错误。

        Args:
            class_name: 抛出错误的实例的类名
            instance_id: 抛出错误的实例的标识
            message: 已格式化的完整消息
        """
        super().__init__(message)
        self.class_name = class_name
        self.instance_id = instance_id


class PropertyDefinitionException(BaseObjectException):
    """
    属性定义异常。
    当属性无法被定义或重新定义时抛出，例如重新定义不可配置的属性。
    """

    def __init__(self, name: str, reason: Optional[str] = None):
        """
        初始化属性定义异常。

        Args:
            name: 属性名称
            reason: 失败原因
        """
        if reason:
            message = f"无法定义属性'{name}': {reason}"
        else:
            message = f"无法定义属性'{name}'"
        super().__init__(message)
        self.name = name
        self.reason = reason
