"""Data records used by DAO governance."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from .curve import Curve


class Opinion(IntEnum):
    """A vote for or against."""

    YES = 0
    NO = 1


@dataclass
class VoteInfo:
    """A single vote cast on a proposal."""

    pledge: int
    opinion: Opinion
    vote_weight: int
    unlock_block: int
    call_id: int
    caller: str
    vote_block: int
    deleted: bool = False


@dataclass
class Track:
    """Parameters governing how proposals on a track are decided."""

    name: bytes
    prepare_period: int
    decision_deposit: int
    max_deciding: int
    confirm_period: int
    decision_period: int
    min_enactment_period: int
    max_balance: int
    min_approval: Curve
    min_support: Curve


class PropStatusKind(Enum):
    PENDING = "pending"
    ONGOING = "ongoing"
    CONFIRMING = "confirming"
    APPROVED = "approved"
    REJECTED = "rejected"
    CANCELED = "canceled"


_WITH_BLOCK = {PropStatusKind.APPROVED, PropStatusKind.REJECTED}


@dataclass(frozen=True)
class PropStatus:
    """The state of a proposal; approved and rejected carry a block number."""

    kind: PropStatusKind
    block: int | None = None

    def __post_init__(self) -> None:
        if (self.kind in _WITH_BLOCK) != (self.block is not None):
            raise ValueError(f"invalid block for status {self.kind.value}: {self.block!r}")

    @classmethod
    def pending(cls) -> PropStatus:
        return cls(PropStatusKind.PENDING)

    @classmethod
    def ongoing(cls) -> PropStatus:
        return cls(PropStatusKind.ONGOING)

    @classmethod
    def confirming(cls) -> PropStatus:
        return cls(PropStatusKind.CONFIRMING)

    @classmethod
    def approved(cls, block: int) -> PropStatus:
        return cls(PropStatusKind.APPROVED, block)

    @classmethod
    def rejected(cls, block: int) -> PropStatus:
        return cls(PropStatusKind.REJECTED, block)

    @classmethod
    def canceled(cls) -> PropStatus:
        return cls(PropStatusKind.CANCELED)


@dataclass
class Tally:
    """Counts of yes and no votes."""

    yes: int = 0
    no: int = 0


@dataclass
class Call:
    """A contract call carried by a proposal or a sudo request."""

    contract: str | None
    selector: bytes
    input: bytes = b""
    amount: int = 0
    ref_time_limit: int = 0
    allow_reentry: bool = False

    def __post_init__(self) -> None:
        self.selector = bytes(self.selector)
        self.input = bytes(self.input)
        if len(self.selector) != 4:
            raise ValueError("selector must be exactly 4 bytes")