"""Registry of the moves made in a game. Used as an undo stack."""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from chessrules.chess.moves import Move


@dataclass
class MoveHistory:
    moves: list[Move] = field(default_factory=list)

    def push(self, move: Move) -> None:
        self.moves.append(move)

    def pop(self) -> Optional[Move]:
        """Take the most recent move off the stack. Nothing to take? Return None."""
        if not self.moves:
            return None
        return self.moves.pop()

    def last(self) -> Optional[Move]:
        return self.moves[-1] if self.moves else None

    def is_empty(self) -> bool:
        return not self.moves

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self.moves)
