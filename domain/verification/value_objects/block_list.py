"""客户端地址黑名单值对象"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from domain.common.base_value_object import BaseValueObject


@dataclass(frozen=True)
class BlockList(BaseValueObject):
    """客户端地址黑名单

    地址到原因的只读映射，原因会展示给被拦截的客户端。

    Attributes:
        entries: 地址 -> 原因
    """

    entries: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # 冻结为只读视图，运行期间不可修改
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))
        super().__post_init__()

    def validate(self) -> None:
        """验证黑名单有效性"""
        for address, reason in self.entries.items():
            if not address or not address.strip():
                raise ValueError("Blocked address cannot be empty")
            if not isinstance(reason, str):
                raise ValueError(f"Reason for {address} must be a string")

    def reason_for(self, address: Optional[str]) -> Optional[str]:
        """获取地址的拦截原因

        Args:
            address: 客户端地址

        Returns:
            拦截原因，不在黑名单中返回 None
        """
        if address is None:
            return None
        return self.entries.get(address)

    def __contains__(self, address: object) -> bool:
        return address in self.entries

    def __len__(self) -> int:
        return len(self.entries)
