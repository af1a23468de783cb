from dataclasses import dataclass, field
from typing import FrozenSet


@dataclass(frozen=True)
class Hometown:
    province: str
    city: str
    codes: FrozenSet[str] = field(default_factory=frozenset)

    def has_code(self, code: str) -> bool:
        return code in self.codes

    def to_dict(self) -> dict:
        return {
            'province': self.province,
            'city': self.city,
            'codes': sorted(self.codes),
        }
