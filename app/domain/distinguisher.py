from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass(frozen=True)
class Distinguisher:
    code: str
    label: str
    deprecated: bool = False
    special: bool = False


class DistinguisherLookup(Protocol):
    def find_by_code(self, code: str) -> Optional[Distinguisher]:
        ...
