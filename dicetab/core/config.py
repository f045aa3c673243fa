"""
配置读取模块
"""

import yaml
from pathlib import Path
from typing import Literal
from pydantic import BaseModel, Field, ValidationError, field_validator
from .logger import get_logger, configure_logging

# 初始化日志记录器
logger = get_logger(__name__)

# 项目根目录
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class ProjectConfig(BaseModel):
    """项目基础配置"""
    name: str = Field("dicetab", description="项目名称")
    debug: bool = Field(False, description="调试模式")


class LoggingConfig(BaseModel):
    """日志配置"""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field("INFO", description="日志级别")
    to_file: bool = Field(False, description="是否同时写入日志文件")
    log_dir: str = Field("logs", description="日志目录，相对于项目根目录")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value):
        return value.upper() if isinstance(value, str) else value


# ============================================
# 主配置类
# ============================================

class Settings(BaseModel):
    """
    应用总配置
    """

    project: ProjectConfig = Field(default_factory=ProjectConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def PROJECT_NAME(self) -> str:
        """项目名称"""
        return self.project.name

    @property
    def DEBUG(self) -> bool:
        """调试模式"""
        return self.project.debug

    @classmethod
    def load_config(cls, yaml_path: Path = None) -> "Settings":
        """
        读取 config.yaml 并实例化 Settings 对象
        文件缺失或格式错误时使用默认配置
        """
        yaml_path = yaml_path or PROJECT_ROOT / "config.yaml"
        yaml_config = {}

        if yaml_path.exists():
            try:
                with open(yaml_path, "r", encoding="utf-8") as f:
                    yaml_config = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"无法读取 {yaml_path}: {e}，将使用默认配置")
        else:
            logger.debug(f"未找到 {yaml_path}，将使用默认配置")

        try:
            return cls(**yaml_config)
        except (TypeError, ValidationError) as e:
            logger.warning(f"配置校验失败: {e}，将使用默认配置")
            return cls()

    def apply_logging(self):
        """
        按 logging 配置调整日志级别与日志文件
        """
        configure_logging(
            level=self.logging.level,
            debug=self.DEBUG,
            to_file=self.logging.to_file,
            log_dir=PROJECT_ROOT / self.logging.log_dir,
        )


# 实例化配置 (应用启动时自动加载)
settings = Settings.load_config()


# ============================================
# 便捷函数
# ============================================

def get_settings() -> Settings:
    """
    获取全局配置实例
    """
    return settings


def reload_config() -> Settings:
    """
    重新加载配置
    """
    global settings
    settings = Settings.load_config()
    return settings
