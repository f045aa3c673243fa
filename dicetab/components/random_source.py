"""
随机数来源
掷骰只依赖 draw(n)，测试时可以替换成固定序列
"""
import secrets
from abc import ABC, abstractmethod


class RandomSourceError(RuntimeError):
    """随机数来源失效，不重试，直接终止"""


class RandomSource(ABC):
    """随机数来源基类"""

    @abstractmethod
    def draw(self, n: int) -> int:
        """返回 [0, n) 内均匀分布的整数，失败时抛出 RandomSourceError"""


class SystemRandomSource(RandomSource):
    """使用操作系统提供的密码学安全随机数"""

    def draw(self, n: int) -> int:
        try:
            return secrets.randbelow(n)
        except (OSError, ValueError) as e:
            raise RandomSourceError(f"无法获取 [0, {n}) 范围内的随机数: {e}") from e
