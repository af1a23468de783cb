from dataclasses import dataclass, field
from typing import FrozenSet


@dataclass(frozen=True)
class Bank:
    id: str
    name: str
    persian_name: str
    codes: FrozenSet[str] = field(default_factory=frozenset)
    bins: FrozenSet[str] = field(default_factory=frozenset)

    def has_bin(self, bin_: str) -> bool:
        return bin_ in self.bins

    def has_code(self, code: str) -> bool:
        return code in self.codes

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'persian_name': self.persian_name,
            'codes': sorted(self.codes),
            'bins': sorted(self.bins),
        }
