from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple


class SymbolTable:
    """Name to identifier mapping used while a program is being loaded.

    Identifiers are allocated densely in order of first appearance.
    A name that has been referenced but not yet defined is tracked in
    `undefined` until a definition for it is seen.
    """
    def __init__(self, kind: str):
        self.kind = kind
        self.names: List[str] = []
        self.ids: Dict[str, int] = {}
        # insertion ordered so diagnostics list names by first reference
        self.undefined: Dict[str, None] = {}

    def __len__(self) -> int:
        return len(self.names)

    def lookup(self, name: str, definition: bool = False) -> int:
        if name in self.ids:
            if definition:
                self.undefined.pop(name, None)
            return self.ids[name]
        symbol_id = len(self.names)
        self.names.append(name)
        self.ids[name] = symbol_id
        if not definition:
            self.undefined[name] = None
        return symbol_id

    def define(self, name: str) -> int:
        return self.lookup(name, definition=True)

    def is_defined(self, name: str) -> bool:
        return name in self.ids and name not in self.undefined

    def undefined_names(self) -> List[str]:
        return list(self.undefined)

    def freeze(self) -> Tuple[Tuple[str, ...], Mapping[str, int]]:
        return tuple(self.names), MappingProxyType(dict(self.ids))
