"""
配置加载
"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import logging
from logging.handlers import RotatingFileHandler

import pytest

from dicetab.core.config import Settings, get_settings
from dicetab.core.logger import configure_logging, get_logger


def test_defaults_when_file_missing(tmp_path):
    settings = Settings.load_config(tmp_path / "missing.yaml")
    assert settings.PROJECT_NAME == "dicetab"
    assert settings.DEBUG is False
    assert settings.logging.level == "INFO"


def test_reads_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "project:\n  name: table\n  debug: true\nlogging:\n  level: debug\n  to_file: true\n",
        encoding="utf-8",
    )
    settings = Settings.load_config(path)
    assert settings.PROJECT_NAME == "table"
    assert settings.DEBUG is True
    assert settings.logging.level == "DEBUG"
    assert settings.logging.to_file is True


def test_invalid_yaml_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("project: [unclosed\n", encoding="utf-8")
    assert Settings.load_config(path) == Settings()


def test_invalid_values_fall_back_to_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("logging:\n  level: LOUD\n", encoding="utf-8")
    assert Settings.load_config(path) == Settings()


def test_global_settings_loaded():
    assert isinstance(get_settings(), Settings)


@pytest.mark.parametrize("body", ["logging: [INFO, to_file]\n", "logging: loud\n", "- just\n- a list\n", "42\n"])
def test_malformed_sections_fall_back_to_defaults(tmp_path, body):
    path = tmp_path / "config.yaml"
    path.write_text(body, encoding="utf-8")
    assert Settings.load_config(path) == Settings()


@pytest.fixture
def reset_logging():
    yield
    configure_logging()


def test_debug_raises_level_of_existing_loggers(reset_logging):
    """已经创建的 logger 也跟着配置调整级别"""
    existing = get_logger("dicetab.test.existing")
    Settings(project={"debug": True}).apply_logging()
    assert existing.level == logging.DEBUG
    assert get_logger("dicetab.test.created_later").level == logging.DEBUG

    Settings().apply_logging()
    assert existing.level == logging.INFO


def test_debug_ignored_when_logging_section_invalid(tmp_path, reset_logging):
    """logging 校验失败时整份配置回退，debug 也不生效"""
    path = tmp_path / "config.yaml"
    path.write_text("project:\n  debug: true\nlogging:\n  level: LOUD\n", encoding="utf-8")
    settings = Settings.load_config(path)
    settings.apply_logging()
    assert settings.DEBUG is False
    assert get_logger("dicetab.test.invalid").level == logging.INFO


def test_level_from_config(reset_logging):
    Settings(logging={"level": "warning"}).apply_logging()
    assert get_logger("dicetab.test.level").level == logging.WARNING


def test_file_handler_added_and_removed(tmp_path, reset_logging):
    existing = get_logger("dicetab.test.file")
    configure_logging(to_file=True, log_dir=tmp_path / "logs")
    file_handlers = [h for h in existing.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1

    existing.warning("写入文件")
    file_handlers[0].flush()
    (log_file,) = (tmp_path / "logs").iterdir()
    assert "写入文件" in log_file.read_text(encoding="utf-8")

    configure_logging()
    assert not any(isinstance(h, RotatingFileHandler) for h in existing.handlers)
