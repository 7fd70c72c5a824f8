"""An in-memory execution environment for contracts: blocks, balances, calls and events."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

Handler = Callable[[bytes, bytes], "bytes | None"]


class CallFailure(Exception):
    """Raised when a value transfer or a cross-contract call cannot complete."""


@dataclass
class Environment:
    """The chain state seen by a running contract.

    `address` is the contract currently executing, `caller` the account that
    called it and `transferred_value` the value sent with the call.
    """

    address: str = "contract"
    caller: str = ""
    block_number: int = 0
    transferred_value: int = 0
    balances: dict[str, int] = field(default_factory=dict)
    events: list[object] = field(default_factory=list)
    contracts: dict[str, Handler] = field(default_factory=dict)
    _stack: list[str] = field(default_factory=list, init=False, repr=False)

    def advance(self, blocks: int = 1) -> int:
        """Move the chain forward by `blocks` blocks and return the new height."""
        if blocks < 0:
            raise ValueError("cannot move the chain backwards")
        self.block_number += blocks
        return self.block_number

    def _move(self, source: str, target: str, amount: int) -> None:
        if amount < 0:
            raise ValueError("amount must not be negative")
        available = self.balances.get(source, 0)
        if available < amount:
            raise CallFailure(f"insufficient balance in {source!r}")
        self.balances[source] = available - amount
        self.balances[target] = self.balances.get(target, 0) + amount

    def transfer(self, to: str, amount: int) -> None:
        """Send `amount` from the executing contract to `to`."""
        self._move(self.address, to, amount)

    def emit_event(self, event: object) -> None:
        """Record an event."""
        self.events.append(event)

    def register_contract(self, address: str, handler: Handler) -> None:
        """Deploy `handler` at `address`; it receives the selector and the input bytes."""
        self.contracts[address] = handler

    def invoke(
        self,
        target: str,
        selector: bytes,
        data: bytes = b"",
        amount: int = 0,
        ref_time_limit: int = 0,
        allow_reentry: bool = False,
    ) -> bytes:
        """Call the contract at `target` and return its output.

        The callee runs with the current contract as its caller. Any failure of
        the callee rolls back balances and events and raises CallFailure.
        `ref_time_limit` is accepted for call compatibility; execution is not metered.
        """
        handler = self.contracts.get(target)
        if handler is None:
            raise CallFailure(f"no contract at {target!r}")
        if not allow_reentry and target in {*self._stack, self.address}:
            raise CallFailure("reentrancy is not allowed")

        saved_balances = dict(self.balances)
        saved_events = len(self.events)
        saved_frame = (self.caller, self.address, self.transferred_value)

        self._move(self.address, target, amount)
        self._stack.append(self.address)
        self.caller, self.address, self.transferred_value = self.address, target, amount
        try:
            output = handler(bytes(selector), bytes(data))
        except Exception as exc:
            self.balances.clear()
            self.balances.update(saved_balances)
            del self.events[saved_events:]
            raise CallFailure(f"call to {target!r} failed") from exc
        finally:
            self._stack.pop()
            self.caller, self.address, self.transferred_value = saved_frame
        return b"" if output is None else bytes(output)