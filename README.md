# abikit

Building blocks for Ethereum contract ABIs: parameter types, tokens, function
selectors, JSON ABI parameter and function specs, and log topic filters.

## Installing

```
pip install abikit
```

## Parameter types

`abikit.param_type` holds one class per ABI type: `AddressType`, `BytesType`,
`IntType`, `UintType`, `BoolType`, `StringType`, `ArrayType`, `FixedBytesType`,
`FixedArrayType` and `TupleType`. They all derive from `ParamType`. `read` parses a
type name, and `write` gives back the canonical name. `str()` of a type also gives
the canonical name.

```python
from abikit.param_type import read, write, write_for_abi

kind = read("((uint256,bytes32)[],address)")
write(kind)                 # "((uint256,bytes32)[],address)"
write_for_abi(kind, False)  # "tuple"
kind.is_dynamic()           # True
read("uint")                # UintType(size=256)
read("bool[][3]")           # FixedArrayType(inner=ArrayType(inner=BoolType()), size=3)
```

If `read` cannot understand a name, it raises `abikit.errors.InvalidName`. That
class, like `InvalidData`, derives from `AbiError`, which is a `ValueError`.

## Tokens

`abikit.token.Token` holds one ABI value. It has a `TokenKind` and a value.
Addresses and byte strings are stored as `bytes`. Integers are stored as unsigned
256-bit `int`s, with signed values in two's complement. Arrays and tuples are
stored as tuples of tokens.

```python
from abikit.param_type import UintType, BoolType
from abikit.token import Token, TokenKind, types_check

tokens = [Token(TokenKind.UINT, 0), Token(TokenKind.BOOL, False)]
types_check(tokens, [UintType(32), BoolType()])   # True
str(Token(TokenKind.UINT, 255))                  # "ff"
```

`Tokenizer` is an abstract base class that turns text into tokens. It splits the
text of arrays (`[a,b]`) and structs (`(a,b)`), and it treats commas inside double
quotes as part of an item. An unterminated quote, unbalanced brackets or a wrong
item count raises `InvalidData`. A subclass supplies the scalar parsers:
`tokenize_address`, `tokenize_string`, `tokenize_bool`, `tokenize_bytes`,
`tokenize_fixed_bytes`, `tokenize_uint` and `tokenize_int`.

## Signatures

```python
from abikit.param_type import UintType, BoolType
from abikit.signature import short_signature, long_signature

short_signature("baz", [UintType(32), BoolType()]).hex()  # "cdcd77c0"
long_signature("baz", [UintType(32), BoolType()])         # full 32-byte Keccak-256 hash
```

`abikit.util` provides `pad_u32`, which returns a 32-bit value as a right-aligned
32-byte word, and `sanitize_name`, which drops everything from the first `(`
onwards.

## JSON ABI specs

`Param`, `TupleParam` and `Function` read the JSON ABI form with `from_dict` and
write it with `to_dict`. Tuple `components` are folded into the `TupleType`, even
when the tuple sits inside an array such as `tuple[]` or `tuple[2]`. When
`to_dict` writes a parameter, it writes the components back out in nested form.
A missing or malformed field raises `InvalidData`.

```python
from abikit.function import Function

func = Function.from_dict({
    "type": "function",
    "name": "foo()",
    "inputs": [{"name": "a", "type": "address"}],
    "outputs": [],
})
func.name               # "foo" (anything from the first "(" is dropped)
func.signature()        # "foo(address)"
func.selector()         # first four bytes of keccak256("foo(address)")
func.state_mutability   # StateMutability.NONPAYABLE
```

`StateMutability` is a string enum with the members `PURE`, `VIEW`, `NONPAYABLE`
and `PAYABLE`.

## Logs and topic filters

`abikit.log` defines `RawLog`, which holds topics and data, along with `LogParam`
and `Log` for decoded logs. `RawLog.from_tuple((topics, data))` builds a raw log.

In `abikit.filter`, a `Topic` matches one of three things: any value
(`Topic.any()`), exactly one value (`Topic.this(v)`), or one of several values
(`Topic.one_of([...])`). `Topic.from_value` picks the right form for `None`, for a
list or tuple, and for a single value. `TopicFilter.to_json` gives the array form
used by JSON-RPC log queries. In that form, `null` means any value, a `0x` hex
string means one hash, and a list means several hashes.

## What it does not do

The package does not encode tokens to ABI bytes or decode bytes back into tokens.
It has no concrete `Tokenizer` for parsing scalar values. It has no models for
whole contracts, events or constructors. `Function` gives the selector and
signature, but it does not build call data and it does not parse return data.