from .logger import get_logger, configure_logging
from .config import get_settings, reload_config, Settings, PROJECT_ROOT
from .models import DieKind, ThrowGroup, Throw, CONSTANT

__all__ = [
    # 日志
    'get_logger',
    'configure_logging',
    # 配置
    'get_settings',
    'reload_config',
    'Settings',
    'PROJECT_ROOT',
    # 数据结构
    'DieKind',
    'ThrowGroup',
    'Throw',
    'CONSTANT',
]
