"""
属性描述符模块。
包含PropertyDescriptor，描述实例属性的值及其可见性、可变性标志。
"""
from typing import Any, Dict, Mapping, Optional

from baseobject.exceptions import PropertyDefinitionException


# 默认描述符标志
PROPERTY_DEFAULTS: Dict[str, bool] = {
    'enumerable': True,
    'configurable': True,
    'writable': True,
}


class PropertyDescriptor:
    """
    属性描述符。
    通过属性值而非标识判断相等，两个值与标志都相同的描述符被视为相等。
    """

    __slots__ = ('value', 'enumerable', 'configurable', 'writable')

    def __init__(
        self,
        value: Any = None,
        enumerable: bool = True,
        configurable: bool = True,
        writable: bool = True
    ):
        """
        初始化属性描述符。

        Args:
            value: 属性值
            enumerable: 是否在属性枚举中可见
            configurable: 是否可被移除或重新定义
            writable: 是否可直接赋值
        """
        self.value = value
        self.enumerable = enumerable
        self.configurable = configurable
        self.writable = writable

    @classmethod
    def create(
        cls,
        value: Any,
        descriptor: Optional[Mapping[str, Any]] = None,
        name: str = ''
    ) -> 'PropertyDescriptor':
        """
        以默认标志为基础创建描述符，descriptor中的标志覆盖默认值。

        Args:
            value: 属性值
            descriptor: 标志覆盖，键只能是enumerable、configurable、writable
            name: 属性名称，仅用于异常消息

        Returns:
            新的属性描述符

        Raises:
            PropertyDefinitionException: 当descriptor包含未知标志时抛出
        """
        flags = dict(PROPERTY_DEFAULTS)
        if descriptor:
            unknown = [key for key in descriptor if key not in PROPERTY_DEFAULTS]
            if unknown:
                raise PropertyDefinitionException(
                    name,
                    f"未知的描述符标志: {', '.join(map(str, unknown))}"
                )
            flags.update((key, bool(flag)) for key, flag in descriptor.items())
        return cls(value, **flags)

    def same_flags(self, other: 'PropertyDescriptor') -> bool:
        """判断两个描述符的标志是否完全相同"""
        return (
            self.enumerable == other.enumerable
            and self.configurable == other.configurable
            and self.writable == other.writable
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.value == other.value and self.same_flags(other)

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"PropertyDescriptor(value={self.value!r}, enumerable={self.enumerable}, "
            f"configurable={self.configurable}, writable={self.writable})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        将描述符转换为字典表示。

        Returns:
            包含值与三个标志的字典
        """
        return {
            'value': self.value,
            'enumerable': self.enumerable,
            'configurable': self.configurable,
            'writable': self.writable,
        }
