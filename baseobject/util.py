"""
工具函数模块。
包含自有属性判断、浅合并、唯一ID生成、消息格式化、控制台输出和结构哈希。
"""
import itertools
import math
import struct
import time
from collections.abc import Mapping, MutableMapping
from typing import Any, Iterator, Tuple

from baseobject.console import print_message


__all__ = [
    'has_own_property',
    'merge',
    'uid',
    'format_message',
    'print_message',
    'hash_code',
]


# 进程内递增计数器，进程重启后从0开始
_counter = itertools.count()

_BASE36_DIGITS = '0123456789abcdefghijklmnopqrstuvwxyz'


def _is_dunder(name: Any) -> bool:
    return isinstance(name, str) and name.startswith('__') and name.endswith('__')


def _own_items(obj: Any) -> Iterator[Tuple[Any, Any]]:
    """遍历对象的自有可枚举属性"""
    if isinstance(obj, Mapping):
        yield from obj.items()
        return

    if isinstance(obj, type):
        # 类的共享表不随类体复制
        for name, value in vars(obj).items():
            if not _is_dunder(name) and name != '_shared':
                yield name, value
        return

    own_properties = getattr(obj, 'get_own_properties', None)
    if callable(own_properties):
        yield from own_properties().items()
        return

    for name, value in vars(obj).items():
        if not _is_dunder(name):
            yield name, value


def has_own_property(obj: Any, name: str) -> bool:
    """
    判断名称是否为对象的自有属性（而非继承的属性）。

    Args:
        obj: 映射、BaseObject实例或普通对象
        name: 属性名称

    Returns:
        是自有属性则返回True
    """
    if isinstance(obj, Mapping):
        return name in obj

    describe = getattr(obj, 'get_property_descriptor', None)
    if callable(describe) and not isinstance(obj, type):
        return describe(name) is not None

    return name in getattr(obj, '__dict__', {})


def merge(target: Any, *sources: Any) -> Any:
    """
    将一个或多个来源的自有属性复制到目标对象。
    按从左到右的顺序复制，后面的来源覆盖前面的值。只做浅复制。

    Args:
        target: 目标对象
        *sources: 来源对象

    Returns:
        被修改后的目标对象
    """
    if isinstance(target, MutableMapping):
        assign = target.__setitem__
    elif callable(getattr(target, 'set_property', None)):
        assign = target.set_property
    else:
        def assign(name, value):
            setattr(target, name, value)

    for source in sources:
        if source is None:
            continue
        for name, value in _own_items(source):
            assign(name, value)
    return target


def _to_base36(number: int) -> str:
    if number == 0:
        return '0'
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return ''.join(reversed(digits))


def uid() -> str:
    """
    生成进程内唯一的ID。
    由当前毫秒时间戳和递增计数器的36进制表示拼接而成，不保证跨进程唯一。

    Returns:
        唯一ID字符串
    """
    return _to_base36(int(time.time() * 1000)) + _to_base36(next(_counter))


def format_message(obj: Any, msg: Any) -> str:
    """
    格式化消息，使其可以追溯到来源类和实例。

    Args:
        obj: BaseObject实例
        msg: 消息

    Returns:
        形如"ClassName(#id): msg"的字符串
    """
    return f"{obj.get_class_name()}(#{obj.id}): {msg}"


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _to_string(value: Any) -> str:
    """将标量转换为字符串表示，布尔值与整数值的浮点数采用JavaScript的写法"""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        if math.isnan(value):
            return 'NaN'
        if math.isinf(value):
            return 'Infinity' if value > 0 else '-Infinity'
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if callable(value):
        return getattr(value, '__qualname__', None) or repr(value)
    return str(value)


def _string_hash(text: str) -> int:
    # 按UTF-16码元计算，h = h * 31 + unit
    data = text.encode('utf-16-le', 'surrogatepass')
    result = 0
    for unit in struct.unpack(f'<{len(data) // 2}H', data):
        result = _int32((result << 5) - result + unit)
    return result


def hash_code(value: Any) -> int:
    """
    计算值的结构哈希。

    - None返回0
    - 列表或元组：对每个下标i累加hash_code(i + hash_code(元素))
    - 映射、BaseObject实例或带有__dict__的普通对象：对每个键k累加
      hash_code(k + str(hash_code(值)))，普通对象按其实例属性计算
    - 其他值：对其字符串表示计算多项式滚动哈希

    结果为32位有符号整数。该哈希不抗碰撞，也不检测循环引用，
    对自引用的结构计算会抛出RecursionError。

    Args:
        value: 任意值

    Returns:
        32位有符号整数哈希值
    """
    if value is None:
        return 0

    if isinstance(value, (list, tuple)):
        total = 0
        for index, item in enumerate(value):
            total = _int32(total + hash_code(index + hash_code(item)))
        return total

    properties = getattr(value, 'get_properties', None)
    if callable(properties) and not isinstance(value, type):
        value = properties()

    if isinstance(value, Mapping):
        items = value.items()
    elif hasattr(value, '__dict__') and not isinstance(value, type) and not callable(value):
        items = _own_items(value)
    else:
        return _string_hash(_to_string(value))

    total = 0
    for key, item in items:
        total = _int32(total + hash_code(_to_string(key) + str(hash_code(item))))
    return total

