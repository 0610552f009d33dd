# petclinic/business_logic/entities/person_entity.py
from dataclasses import dataclass, field
from typing import Optional
from .base_entity import BaseEntity

@dataclass
class PersonEntity(BaseEntity):
    first_name: Optional[str] = field(default=None)
    last_name: Optional[str] = field(default=None)

    def get_first_name(self) -> Optional[str]:
        return self.first_name

    def set_first_name(self, value: Optional[str]) -> None:
        self.first_name = value

    def get_last_name(self) -> Optional[str]:
        return self.last_name

    def set_last_name(self, value: Optional[str]) -> None:
        self.last_name = value

    @property
    def full_name(self) -> str:
        """First and last name separated by a space; unset parts are skipped."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)
