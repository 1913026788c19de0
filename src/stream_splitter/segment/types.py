"""Value types passed between the segmenter and the text driver."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class PendingLine:
    """One logical line, terminator included verbatim when present."""

    text: str
    terminated: bool


@dataclass(frozen=True, slots=True)
class CarryState:
    """
    Segmenter state carried from one decoded chunk to the next.

    pieces holds the text of the line being accumulated, one entry per
    chunk it spans; it is joined only when the line is emitted. pending_cr
    is set when the last piece ends with a bare CR that a following LF
    could still turn into a CR+LF terminator.

    The state is handed over to the next segment_lines call, which may
    extend pieces in place; a CarryState is not reused after that call.
    """

    pieces: list[str] = field(default_factory=list)
    pending_cr: bool = False

    @property
    def partial(self) -> str:
        return "".join(self.pieces)
