r"""Named, independently optional output slots.

A slot is a write target owned by the host. Slots that were not bound
are ``None`` and writing to them does nothing.

Example:
    ```pycon
    >>> from apioptions.slots import OutputSlots, Slot
    >>> outputs = OutputSlots(status_code=Slot())
    >>> outputs.write("status_code", 200)
    >>> outputs.write("response_body", "ignored")
    >>> outputs.status_code.value
    200
    >>> outputs.snapshot()
    {'status_code': 200}

    ```
"""

from __future__ import annotations

__all__ = ["SLOT_NAMES", "OutputSlots", "Slot"]

from dataclasses import dataclass, fields
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Slot(Generic[T]):
    r"""A host-owned value cell.

    Args:
        value: The initial value.
    """

    __slots__ = ("value",)

    def __init__(self, value: T | None = None) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.value!r})"


@dataclass
class OutputSlots:
    """The nine output slots of an OPTIONS invocation.

    Attributes:
        status_code: HTTP status code of the response.
        status_message: Human-readable text of the status code.
        response_body: Raw response body.
        response_headers: Response headers, one ``Name: Value`` per line.
        error_message: Description of the failure, if any.
        response_time: Elapsed milliseconds since activation.
        allowed_methods: Value of the ``Allow`` header.
        allowed_headers: Value of ``Access-Control-Allow-Headers``.
        max_age: Value of ``Access-Control-Max-Age``.
    """

    status_code: Slot[int] | None = None
    status_message: Slot[str] | None = None
    response_body: Slot[str] | None = None
    response_headers: Slot[str] | None = None
    error_message: Slot[str] | None = None
    response_time: Slot[float] | None = None
    allowed_methods: Slot[str] | None = None
    allowed_headers: Slot[str] | None = None
    max_age: Slot[str] | None = None

    @classmethod
    def bind_all(cls) -> OutputSlots:
        """Return an instance with every slot bound to an empty cell."""
        return cls(**{name: Slot() for name in SLOT_NAMES})

    def write(self, name: str, value: Any) -> None:
        """Write ``value`` to the slot ``name`` if it is bound.

        Raises:
            AttributeError: If ``name`` is not a slot name.
        """
        slot = getattr(self, name)
        if slot is not None:
            slot.value = value

    def snapshot(self) -> dict[str, Any]:
        """Return the current value of every bound slot."""
        return {
            name: slot.value for name in SLOT_NAMES if (slot := getattr(self, name)) is not None
        }


SLOT_NAMES: tuple[str, ...] = tuple(field.name for field in fields(OutputSlots))
