# petclinic/business_logic/entities/named_entity.py
from dataclasses import dataclass, field
from typing import Optional
from .base_entity import BaseEntity

@dataclass
class NamedEntity(BaseEntity):
    name: Optional[str] = field(default=None)

    def get_name(self) -> Optional[str]:
        return self.name

    def set_name(self, value: Optional[str]) -> None:
        self.name = value

    def __str__(self) -> str:
        return self.name if self.name is not None else ""
