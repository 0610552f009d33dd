# petclinic/__init__.py
from .business_logic.entities import BaseEntity, NamedEntity, PersonEntity

__version__ = "0.1.0"

__all__ = ["BaseEntity", "NamedEntity", "PersonEntity", "__version__"]
