"""Shared construction helpers for the calculation value objects."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import fields
from typing import Any, TypeVar

from timevalue.errors import InvalidDomainError

T = TypeVar("T", bound="CalculationModel")


class CalculationModel(ABC):
    """
    Mixin for frozen dataclasses that wrap one financial function.

    Subclasses validate their fields in ``__post_init__`` and answer
    through ``get()``. Instances can be built from positional arguments,
    a tuple in field order, or a mapping keyed by field name.
    """

    @classmethod
    def from_tuple(cls: type[T], values: tuple[Any, ...]) -> T:
        """Build an instance from a tuple given in field order."""
        names = [f.name for f in fields(cls)]  # type: ignore[arg-type]
        if len(values) != len(names):
            raise InvalidDomainError(
                f"{cls.__name__} expects {len(names)} values {tuple(names)}, "
                f"got {len(values)}"
            )
        return cls(*values)

    @classmethod
    def from_dict(cls: type[T], params: Mapping[str, Any]) -> T:
        """
        Build an instance from a mapping of field name to value.

        Fields with defaults may be omitted.

        Raises:
            InvalidDomainError: If a required field is missing or an unknown key is given.
        """
        known = {f.name for f in fields(cls)}  # type: ignore[arg-type]
        unknown = sorted(set(params) - known)
        if unknown:
            raise InvalidDomainError(
                f"Failed to construct {cls.__name__} from {dict(params)!r}: "
                f"unknown parameters {unknown}"
            )
        try:
            return cls(**params)
        except TypeError as e:
            raise InvalidDomainError(
                f"Failed to construct {cls.__name__} from {dict(params)!r}: {e}"
            ) from e

    @abstractmethod
    def get(self) -> float:
        """Evaluate the wrapped financial function on the stored fields."""
