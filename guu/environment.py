from typing import Iterator, List, Sequence, Tuple

from guu.errors import GuuRuntimeError
from guu.types import EMPTY, Empty, Value, VariableRef, is_terminal


class Environment:
    """Variable slots for one run of a program, indexed by variable id."""
    def __init__(self, names: Sequence[str]):
        self.names = tuple(names)
        self.slots: List[Value] = [EMPTY] * len(self.names)

    def __len__(self) -> int:
        return len(self.slots)

    def get(self, variable_id: int) -> Value:
        return self.slots[variable_id]

    def set(self, variable_id: int, value: Value):
        if isinstance(value, Empty):
            raise TypeError(f"cannot clear slot {self.names[variable_id]}")
        self.slots[variable_id] = value

    def resolve(self, value: Value) -> Value:
        """Follow a value chain down to a Number or Text.

        Raises GuuRuntimeError naming the variable whose slot is empty.
        """
        while isinstance(value, VariableRef):
            slot = self.slots[value.id]
            if isinstance(slot, Empty):
                raise GuuRuntimeError(self.names[value.id])
            value = slot
        if not is_terminal(value):
            raise TypeError(f"cannot resolve {value!r}")
        return value

    def defined(self) -> Iterator[Tuple[str, Value]]:
        """Yield (name, resolved value) for every assigned slot, in id order."""
        for variable_id, slot in enumerate(self.slots):
            if not isinstance(slot, Empty):
                yield self.names[variable_id], self.resolve(slot)
