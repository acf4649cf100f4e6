"""
测试配置与公共fixture。
"""

import pytest
from loguru import logger

from baseobject import config


@pytest.fixture(autouse=True)
def console_enabled(monkeypatch):
    """无论本地.env如何配置，测试中始终开启控制台输出"""
    monkeypatch.setattr(config, 'CONSOLE_ENABLED', True)


@pytest.fixture
def console_messages():
    """捕获写入loguru控制台的所有消息"""
    messages = []
    handler_id = logger.add(messages.append, level='DEBUG', format='{message}')
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def warnings_of(console_messages):
    """返回一个函数，用于列出捕获到的WARNING消息"""
    def collect():
        return [
            m.record['message'] for m in console_messages
            if m.record['level'].name == 'WARNING'
        ]
    return collect
