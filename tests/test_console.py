"""
控制台输出与配置单元测试。
"""

import io
import os
import sys

import pytest
from loguru import logger

from baseobject import config
from baseobject.config import get_env, load_env_file
from baseobject.console import configure_logging, print_message


class TestPrintMessage:
    """测试print_message函数"""

    def test_log_channel_is_info(self, console_messages):
        print_message('log', 'hello')
        record = console_messages[-1].record
        assert record['level'].name == 'INFO'
        assert record['message'] == 'hello'

    def test_warn_channel_is_warning(self, console_messages):
        print_message('warn', 'careful')
        assert console_messages[-1].record['level'].name == 'WARNING'

    def test_unknown_channel_is_ignored(self, console_messages):
        print_message('shout', 'nobody hears')
        assert console_messages == []

    def test_disabled_console_is_silent(self, console_messages, monkeypatch):
        monkeypatch.setattr(config, 'CONSOLE_ENABLED', False)
        print_message('warn', 'hidden')
        assert console_messages == []


class TestConfigureLogging:
    """测试configure_logging函数"""

    @pytest.fixture(autouse=True)
    def restore_logger(self):
        yield
        logger.remove()
        logger.add(sys.stderr)

    def test_uses_simple_format_and_level(self, monkeypatch):
        monkeypatch.setattr(config, 'LOG_FORMAT', '{level} {message}')
        stream = io.StringIO()
        configure_logging(level='warning', sink=stream)
        print_message('log', 'dropped')
        print_message('warn', 'kept')
        assert stream.getvalue() == 'WARNING kept\n'


class TestGetEnv:
    """测试get_env函数"""

    def test_default_when_missing(self, monkeypatch):
        monkeypatch.delenv('BASEOBJECT_TEST_VALUE', raising=False)
        assert get_env('TEST_VALUE', default='x') == 'x'
        assert get_env('TEST_VALUE') is None

    def test_reads_prefixed_variable(self, monkeypatch):
        monkeypatch.setenv('BASEOBJECT_TEST_VALUE', 'debug')
        monkeypatch.setenv('TEST_VALUE', 'ignored')
        assert get_env('TEST_VALUE') == 'debug'
        assert get_env('TEST_VALUE', cast_type=str.upper) == 'DEBUG'

    @pytest.mark.parametrize('raw, expected', [('true', True), ('1', True), ('no', False)])
    def test_bool_cast(self, monkeypatch, raw, expected):
        monkeypatch.setenv('BASEOBJECT_TEST_VALUE', raw)
        assert get_env('TEST_VALUE', cast_type=bool) is expected

    def test_failed_cast_warns_and_returns_default(self, monkeypatch):
        monkeypatch.setenv('BASEOBJECT_TEST_VALUE', 'abc')
        with pytest.warns(UserWarning):
            assert get_env('TEST_VALUE', default=3, cast_type=int) == 3


class TestLoadEnvFile:
    """测试load_env_file函数"""

    def test_missing_file(self, tmp_path):
        assert load_env_file(str(tmp_path / 'missing.env')) is False

    def test_loads_without_overriding(self, tmp_path, monkeypatch):
        env_file = tmp_path / '.env'
        env_file.write_text('BASEOBJECT_TEST_VALUE=from-file\nBASEOBJECT_TEST_KEEP=from-file\n')
        # 先由monkeypatch登记，测试结束后撤销加载的值
        monkeypatch.setenv('BASEOBJECT_TEST_VALUE', 'placeholder')
        monkeypatch.delenv('BASEOBJECT_TEST_VALUE')
        monkeypatch.setenv('BASEOBJECT_TEST_KEEP', 'from-env')

        assert load_env_file(str(env_file)) is True
        assert os.environ['BASEOBJECT_TEST_VALUE'] == 'from-file'
        assert os.environ['BASEOBJECT_TEST_KEEP'] == 'from-env'
