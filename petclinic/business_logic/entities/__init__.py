# petclinic/business_logic/entities/__init__.py
from .base_entity import BaseEntity
from .named_entity import NamedEntity
from .person_entity import PersonEntity

__all__ = [
    "BaseEntity", "NamedEntity", "PersonEntity",
]
