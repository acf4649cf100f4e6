"""
BaseObject基类模块。
为其他类提供属性管理、唯一标识、日志、结构哈希以及混入/继承等辅助功能。
"""
import json
from collections.abc import Mapping
from typing import Any, Dict, Iterator, Mapping as MappingType, Optional, Tuple

from baseobject.descriptors import PropertyDescriptor
from baseobject.exceptions import InstanceError, PropertyDefinitionException
from baseobject.util import format_message, hash_code, merge, print_message, uid


class BaseObject:
    """
    BaseObject基类。

    实例属性保存在属性表中，每个属性带有enumerable、configurable、writable
    三个标志。每个类拥有一张共享表，mixin()向其中复制条目，实例在访问时
    沿类继承链查找共享表，离实例越近的定义优先。

    唯一标识保存在属性表之外，不参与属性枚举、相等判断与哈希。
    """

    # 类共享表，每个子类在创建时获得自己的共享表
    _shared: Dict[str, Any] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._shared = {}

    def __init__(self, properties: Optional[MappingType[str, Any]] = None):
        """
        初始化实例。

        子类应重写initialize()而非构造函数。

        Args:
            properties: 初始属性，键为属性名称，值为属性值
        """
        self._id = uid()
        self._properties: Dict[str, PropertyDescriptor] = {}
        self._destroyed = False
        if properties:
            self.define_properties(properties)
        self.initialize()

    def initialize(self) -> None:
        """初始化钩子，供子类重写"""

    def destroy(self) -> 'BaseObject':
        """
        销毁实例，移除所有自有属性。
        只有第一次调用生效，之后的调用只输出一条警告。

        Returns:
            实例本身
        """
        if self._destroyed:
            return self.warn("实例已被销毁")
        self._properties.clear()
        self._destroyed = True
        return self

    @property
    def id(self) -> str:
        """实例的唯一标识"""
        return self._id

    @property
    def destroyed(self) -> bool:
        """实例是否已被销毁"""
        return self._destroyed

    # 属性管理

    def define_properties(self, properties: MappingType[str, Any]) -> 'BaseObject':
        """
        使用默认描述符批量定义属性。

        Args:
            properties: 键为属性名称，值为属性值的映射

        Returns:
            实例本身
        """
        for name, value in properties.items():
            self.define_property(name, value)
        return self

    def define_property(
        self,
        name: str,
        value: Any,
        descriptor: Optional[MappingType[str, Any]] = None
    ) -> 'BaseObject':
        """
        定义或重新定义一个自有属性。

        descriptor中的标志覆盖默认值（全部为True）。不可配置的属性不能被
        重新定义，只有在原属性可写且标志完全相同时允许修改其值。

        Args:
            name: 属性名称
            value: 属性值
            descriptor: 描述符标志，如{'enumerable': False}

        Returns:
            实例本身

        Raises:
            PropertyDefinitionException: 当属性不可配置或描述符包含未知标志时抛出
        """
        new = PropertyDescriptor.create(value, descriptor, name)
        existing = self._properties.get(name)
        if existing is not None and not existing.configurable:
            if not (existing.writable and existing.same_flags(new)):
                raise PropertyDefinitionException(name, "属性不可配置")
        self._properties[name] = new
        return self

    def get_property_descriptor(self, name: str) -> Optional[PropertyDescriptor]:
        """
        获取自有属性的描述符。

        Args:
            name: 属性名称

        Returns:
            属性描述符，属性不存在时返回None
        """
        return self._properties.get(name)

    def has_property(self, name: str, inherited: bool = False) -> bool:
        """
        判断属性是否存在。

        默认只检查自有属性；inherited为True时同时检查类继承链上的共享表。

        Args:
            name: 属性名称
            inherited: 是否检查继承的共享属性

        Returns:
            属性存在则返回True
        """
        if name in self._properties:
            return True
        if inherited:
            return any(name in table for table in self._shared_tables())
        return False

    def get_property(self, name: str, default: Any = None) -> Any:
        """
        获取属性值，先查找自有属性，再沿类继承链查找共享表。

        Args:
            name: 属性名称
            default: 属性不存在时的返回值

        Returns:
            属性值，不存在时返回default
        """
        found, value, _ = self._lookup(name)
        return value if found else default

    def set_property(self, name: str, value: Any) -> 'BaseObject':
        """
        直接为属性赋值，与define_property不同，不涉及描述符。

        属性不存在时以默认标志创建；属性不可写时赋值被静默忽略。

        Args:
            name: 属性名称
            value: 属性值

        Returns:
            实例本身
        """
        existing = self._properties.get(name)
        if existing is None:
            self._properties[name] = PropertyDescriptor(value)
        elif existing.writable:
            existing.value = value
        return self

    def remove_property(self, name: str) -> 'BaseObject':
        """
        移除自有属性。
        属性不存在或不可配置时输出警告，属性表保持不变。

        Args:
            name: 属性名称

        Returns:
            实例本身
        """
        descriptor = self._properties.get(name)
        if descriptor is None:
            return self.warn(f'"{name}"属性不存在')
        if not descriptor.configurable:
            return self.warn(f'"{name}"属性不可配置，无法移除')
        del self._properties[name]
        return self

    def get_properties(self) -> Dict[str, Any]:
        """
        获取实例的全部属性，包括类继承链上共享表中的属性。
        名称冲突时离实例最近的定义优先，唯一标识不包含在内。

        Returns:
            属性名称到属性值的字典
        """
        properties: Dict[str, Any] = {}
        for table in reversed(list(self._shared_tables())):
            properties.update(table)
        for name, descriptor in self._properties.items():
            properties[name] = descriptor.value
        return properties

    def get_own_properties(self) -> Dict[str, Any]:
        """
        获取自有的可枚举属性。

        Returns:
            属性名称到属性值的字典
        """
        return {
            name: descriptor.value
            for name, descriptor in self._properties.items()
            if descriptor.enumerable
        }

    def hash_code(self) -> int:
        """
        根据属性计算实例的结构哈希。

        Returns:
            32位有符号整数哈希值
        """
        return hash_code(self.get_properties())

    # 日志

    def log(self, msg: Any) -> 'BaseObject':
        """输出带有类名与实例标识的信息"""
        print_message('log', format_message(self, msg))
        return self

    def warn(self, msg: Any) -> 'BaseObject':
        """输出带有类名与实例标识的警告"""
        print_message('warn', format_message(self, msg))
        return self

    def error(self, msg: Any) -> None:
        """
        抛出可追溯到来源类和实例的错误。

        Args:
            msg: 错误消息

        Raises:
            InstanceError: 总是抛出
        """
        raise InstanceError(self.get_class_name(), self.id, format_message(self, msg))

    # 转换

    def get_class_name(self) -> str:
        return type(self).__name__

    def to_string(self) -> str:
        return f"[object {self.get_class_name()}]"

    def to_dict(self) -> Dict[str, Any]:
        """
        将自有的可枚举属性（不包括函数）转换为字典。

        Returns:
            可被JSON序列化的字典
        """
        return {
            name: value
            for name, value in self.get_own_properties().items()
            if not callable(value)
        }

    def to_json(self, **kwargs) -> str:
        """
        将to_dict()的结果序列化为JSON字符串。

        Args:
            **kwargs: 传递给json.dumps的参数

        Returns:
            JSON字符串
        """
        kwargs.setdefault('default', _json_default)
        return json.dumps(self.to_dict(), **kwargs)

    def value_of(self) -> int:
        return self.hash_code()

    # 类方法

    @classmethod
    def mixin(cls, *sources: Any) -> None:
        """
        将来源的属性复制到类的共享表，对该类及其子类的现有实例和新实例都生效。

        Args:
            *sources: 映射、类或普通对象
        """
        merge(vars(cls)['_shared'], *sources)

    @classmethod
    def extend(cls, subclass: type) -> type:
        """
        使一个类继承自当前类。

        返回以subclass的类体创建的新类，其基类为subclass原有的基类加上当前类。
        已经是当前类子类的subclass直接返回。

        Args:
            subclass: 要继承当前类的类

        Returns:
            继承自当前类的类
        """
        if issubclass(subclass, cls):
            return subclass
        namespace = {
            name: value
            for name, value in vars(subclass).items()
            if name not in ('__dict__', '__weakref__', '_shared')
        }
        bases = tuple(base for base in subclass.__bases__ if base is not object) + (cls,)
        return type(cls)(subclass.__name__, bases, namespace)

    # 内部方法

    def _shared_tables(self) -> Iterator[Dict[str, Any]]:
        """按从近到远的顺序遍历类继承链上的共享表"""
        for klass in type(self).__mro__:
            table = vars(klass).get('_shared')
            if table is not None:
                yield table

    def _lookup(self, name: str) -> Tuple[bool, Any, bool]:
        """查找属性，返回(是否找到, 值, 是否来自共享表)"""
        descriptor = self._properties.get(name)
        if descriptor is not None:
            return True, descriptor.value, False
        for table in self._shared_tables():
            if name in table:
                return True, table[name], True
        return False, None, False

    # Python协议

    def __getattr__(self, name: str) -> Any:
        if name.startswith('_'):
            raise AttributeError(name)
        found, value, shared = self._lookup(name)
        if not found:
            raise AttributeError(f"'{self.get_class_name()}' object has no property '{name}'")
        if shared and hasattr(type(value), '__get__'):
            # 函数、classmethod、staticmethod与property按描述符协议绑定到实例
            return value.__get__(self, type(self))
        return value

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith('_') or hasattr(type(self), name):
            object.__setattr__(self, name, value)
        else:
            self.set_property(name, value)

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return False
        return self.get_properties() == other.get_properties()

    def __hash__(self) -> int:
        return self.hash_code()

    def __int__(self) -> int:
        return self.value_of()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"<{self.get_class_name()}(#{self._id}) {self.get_own_properties()!r}>"


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseObject):
        return value.to_dict()
    if isinstance(value, Mapping):
        return dict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
