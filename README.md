# wetee

Building blocks for token-weighted DAO voting. The package provides:

- decision curves that set a minimum approval or support threshold at each block,
- the fixed-point helpers those curves are computed with,
- the records that describe tracks, votes, proposal states and calls,
- an in-memory environment that models blocks, balances, events and contract calls,
- a small transaction-list store.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `wetee.fixed`: fixed-point conversion with a unit of 1,000,000
  (`fixed_from_i64`, `fixed_from_u64`, `u32_from_fixed`). It also holds
  `Percent`, a percentage stored in tenths of a percent.
  `Percent.from_percent(v)` accepts 0 to 100 and raises `ValueError` outside
  that range. `mul_fixed`, `mul_u32`, `mul_u64` and `mul_i64` multiply by the
  percentage, and the integer forms raise `OverflowError` on overflow.
  `ListHelper` holds a list of issued ids and the next id to hand out.
- `wetee.curve`: the curves `LinearDecreasing`, `SteppedDecreasing` and
  `Reciprocal`, each with a `y(x)` method. It also holds their argument forms
  (`LinearDecreasingArg`, `SteppedDecreasingArg`, `ReciprocalArg`) and
  `arg_to_curve`, which builds a curve from an argument.
- `wetee.datas`: `Opinion` (`YES`, `NO`), `VoteInfo`, `Track`, `Tally`,
  `Call` (its selector must be exactly 4 bytes), and `PropStatus` with its
  `PropStatusKind`. A `PropStatus` is built with `pending()`, `ongoing()`,
  `confirming()`, `approved(block)`, `rejected(block)` or `canceled()`.
- `wetee.env`: `Environment` holds the executing address, the caller, the
  block number, the transferred value, account balances, emitted events and
  registered contract handlers. `advance`, `transfer`, `emit_event`,
  `register_contract` and `invoke` act on it. A failed transfer or call
  raises `CallFailure`. A failed `invoke` first rolls back the balances and
  events.
- `wetee.subnet`: `Subnet` keeps one `Transactions` list under a fixed key,
  with `set()`, `get()` and `list()`.

## Example

```python
from wetee.curve import LinearDecreasing, ReciprocalArg, arg_to_curve
from wetee.fixed import Percent
from wetee.env import Environment
from wetee.subnet import Subnet

curve = LinearDecreasing(begin=10000, end=50, length=30)
print(curve.y(0), curve.y(15), curve.y(30))   # 10000 5025 50

reciprocal = arg_to_curve(
    ReciprocalArg(x_offset_percent=Percent.from_percent(2), x_scale_arg=100,
                  begin=10000, end=2000)
)
print(reciprocal.y(0))

print(Percent.from_percent(2).mul_u32(1000))  # 20

env = Environment(balances={"contract": 100})
env.transfer("alice", 40)
print(env.balances)                           # {'contract': 60, 'alice': 40}

env.register_contract("echo", lambda selector, data: data)
print(env.invoke("echo", b"\x00\x00\x00\x01", b"hi"))  # b'hi'

subnet = Subnet()
print(subnet.get())                           # False
subnet.set()
subnet.set()
print(subnet.list().transactions)             # [2]
```

## What this package does not do

The package holds the parts a DAO is built from, but no DAO. Nothing in it
keeps member balances, submits or deposits proposals, counts votes against a
track's curves, or runs an approved `Call`. `Track`, `VoteInfo`, `PropStatus`
and `Call` are plain records, and no part of the package acts on them. There is
no error-code set or event type for governance actions. There is no
command-line tool, and all state lives only in memory.