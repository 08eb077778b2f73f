"""值对象基类"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BaseValueObject:
    """值对象基类

    值对象不可变，创建后自动调用 validate() 校验。
    子类按需覆盖 validate()。
    """

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """校验值对象（默认不做任何校验）"""
