from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Update(Generic[T]):
    """Outcome of a follow-up for one piece of held state: keep it, or replace it."""

    is_replaced = False

    def apply(self, current: T) -> T:
        raise NotImplementedError


@dataclass(frozen=True)
class Unchanged(Update[T]):

    def apply(self, current: T) -> T:
        return current


@dataclass(frozen=True)
class Replaced(Update[T]):
    value: T

    is_replaced = True

    def apply(self, current: T) -> T:
        return self.value


def update_from_optional(value: Optional[T]) -> Update[T]:
    return Unchanged() if value is None else Replaced(value)
