import dataclasses
from typing import Optional


@dataclasses.dataclass(frozen=True)
class ParsedQuantity:
    value: Optional[float] = None
    matched: Optional[str] = None  # exact leading text consumed from the input

    def __bool__(self) -> bool:
        return self.value is not None
