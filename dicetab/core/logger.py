"""
日志模块
标准输出留给掷骰结果表格，日志统一写到标准错误
级别与日志文件由 configure_logging 按 config.yaml 中校验过的配置设置
"""

import sys
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from datetime import datetime
from typing import Dict, Optional

# 字符串到级别的映射
LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}

# configure_logging 之前创建的 logger 也需要跟着调整，所以记下来
_loggers: Dict[str, logging.Logger] = {}
_default_level = logging.INFO
_file_handler: Optional[RotatingFileHandler] = None


# WARNING+ 显示行号
class ConditionalFormatter(logging.Formatter):
    def format(self, record):
        if record.levelno >= logging.WARNING:
            self._style._fmt = "[%(asctime)s] [%(levelname)s] [%(name)s] [%(module)s:%(lineno)d] - %(message)s"
        else:
            self._style._fmt = "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s"
        return super().format(record)


def setup_logger(name="dicetab", log_level=logging.INFO):
    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    _loggers[name] = logger

    # 防止重复添加 handler
    if logger.handlers:
        return logger

    formatter = ConditionalFormatter(datefmt="%Y-%m-%d %H:%M:%S")
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if _file_handler is not None:
        logger.addHandler(_file_handler)

    return logger


def get_logger(module_name: str, log_level: Optional[str] = None):
    if log_level is None:
        actual_level = _default_level
    else:
        # 如果不存在则默认为 INFO
        actual_level = LEVEL_MAP.get(log_level.upper(), logging.INFO)

    return setup_logger(name=module_name, log_level=actual_level)


def configure_logging(level: str = "INFO", debug: bool = False, to_file: bool = False, log_dir: Optional[Path] = None):
    """
    应用日志配置到所有已创建的 logger
    debug: 开启调试模式时，INFO 提升为 DEBUG
    to_file: 同时写入 log_dir/<日期>.log；关闭时移除已有的文件 handler
    """
    global _default_level, _file_handler

    if debug and level.upper() == "INFO":
        level = "DEBUG"
    _default_level = LEVEL_MAP.get(level.upper(), logging.INFO)

    old_handler = _file_handler
    if to_file and log_dir is not None:
        if old_handler is None:
            log_dir.mkdir(parents=True, exist_ok=True)
            # 使用日期作为文件名
            today = datetime.now().strftime("%Y-%m-%d")
            _file_handler = RotatingFileHandler(
                log_dir / f"{today}.log",
                maxBytes=10*1024*1024, # 最大10MB
                encoding="utf-8"
            )
            _file_handler.setFormatter(ConditionalFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
    else:
        _file_handler = None

    for logger in _loggers.values():
        logger.setLevel(_default_level)
        if old_handler is not None and old_handler is not _file_handler:
            logger.removeHandler(old_handler)
        if _file_handler is not None and _file_handler not in logger.handlers:
            logger.addHandler(_file_handler)

    if old_handler is not None and old_handler is not _file_handler:
        old_handler.close()
