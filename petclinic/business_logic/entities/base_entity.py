# petclinic/business_logic/entities/base_entity.py
from dataclasses import dataclass, field
from typing import Optional
import logging

logger = logging.getLogger(__name__)


def _check_id(owner: str, value: object) -> None:
    # bool is a subclass of int but never a valid identifier
    if value is not None and (not isinstance(value, int) or isinstance(value, bool)):
        logger.error(f"Invalid id for {owner}: {value!r}")
        raise TypeError(f"id must be an int or None, not {type(value).__name__}")


@dataclass
class BaseEntity:
    """
    Base class for domain objects identified by an optional integer id.
    The id is keyword-only; an entity without an id has not been persisted yet.
    """
    id: Optional[int] = field(default=None, kw_only=True)

    def __post_init__(self):
        _check_id(type(self).__name__, self.id)

    def get_id(self) -> Optional[int]:
        return self.id

    def set_id(self, value: Optional[int]) -> None:
        _check_id(type(self).__name__, value)
        logger.debug(f"{type(self).__name__} id changed: {self.id} -> {value}")
        self.id = value

    def is_new(self) -> bool:
        """True while the entity has no identifier."""
        return self.id is None
