from pydantic import BaseModel, ConfigDict, model_validator
from typing import Optional

from netgame.models.enums import MoveKind

class Move(BaseModel):
    """
    A move in Network.
    ADD places a new piece at (x1, y1).
    STEP relocates the piece at (x2, y2) to (x1, y1).
    QUIT is the 'no move' sentinel and carries no coordinates.
    """
    # Frozen so moves compare and hash by value
    model_config = ConfigDict(frozen=True)

    kind: MoveKind
    x1: Optional[int] = None
    y1: Optional[int] = None
    x2: Optional[int] = None
    y2: Optional[int] = None

    @model_validator(mode="after")
    def check_coordinates(self):
        if self.kind in (MoveKind.ADD, MoveKind.STEP):
            if self.x1 is None or self.y1 is None:
                raise ValueError(f"{self.kind} move needs a destination")
        if self.kind == MoveKind.STEP:
            if self.x2 is None or self.y2 is None:
                raise ValueError("step move needs a source")
        return self

    @classmethod
    def add(cls, x: int, y: int) -> "Move":
        return cls(kind=MoveKind.ADD, x1=x, y1=y)

    @classmethod
    def step(cls, x1: int, y1: int, x2: int, y2: int) -> "Move":
        return cls(kind=MoveKind.STEP, x1=x1, y1=y1, x2=x2, y2=y2)

    @classmethod
    def quit(cls) -> "Move":
        return cls(kind=MoveKind.QUIT)

    def is_quit(self) -> bool:
        return self.kind == MoveKind.QUIT

    def __str__(self) -> str:
        if self.kind == MoveKind.ADD:
            return f"[add to ({self.x1},{self.y1})]"
        if self.kind == MoveKind.STEP:
            return f"[step from ({self.x2},{self.y2}) to ({self.x1},{self.y1})]"
        return "[quit]"
