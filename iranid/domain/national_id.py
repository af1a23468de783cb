from dataclasses import dataclass, field
from typing import Tuple

from iranid.domain.hometown import Hometown


@dataclass(frozen=True)
class NationalId:
    """A parsed national ID. Two instances are equal when their ids are equal."""

    id: str
    hometown_code: str = field(compare=False)
    personal_code: str = field(compare=False)
    control_digit: int = field(compare=False)
    hometowns: Tuple[Hometown, ...] = field(compare=False)

    @property
    def hometown(self) -> Hometown:
        """First matching hometown."""
        return self.hometowns[0]

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'hometown_code': self.hometown_code,
            'personal_code': self.personal_code,
            'control_digit': self.control_digit,
            'hometowns': [h.to_dict() for h in self.hometowns],
        }
