import json

import pytest

from abikit.errors import InvalidName
from abikit.param_type import (
    AddressType,
    ArrayType,
    BoolType,
    BytesType,
    FixedArrayType,
    FixedBytesType,
    IntType,
    StringType,
    TupleType,
    UintType,
    read,
    write,
    write_for_abi,
)


@pytest.mark.parametrize(
    "param, expected",
    [
        (AddressType(), "address"),
        (BytesType(), "bytes"),
        (FixedBytesType(32), "bytes32"),
        (UintType(256), "uint256"),
        (IntType(64), "int64"),
        (BoolType(), "bool"),
        (StringType(), "string"),
        (ArrayType(BoolType()), "bool[]"),
        (FixedArrayType(UintType(256), 2), "uint256[2]"),
        (FixedArrayType(StringType(), 2), "string[2]"),
        (FixedArrayType(ArrayType(BoolType()), 2), "bool[][2]"),
    ],
)
def test_param_type_display(param, expected):
    assert str(param) == expected
    assert f"{param}" == expected


@pytest.mark.parametrize(
    "param, dynamic",
    [
        (AddressType(), False),
        (BytesType(), True),
        (FixedBytesType(32), False),
        (UintType(256), False),
        (IntType(64), False),
        (BoolType(), False),
        (StringType(), True),
        (ArrayType(BoolType()), True),
        (FixedArrayType(UintType(256), 2), False),
        (FixedArrayType(StringType(), 2), True),
        (FixedArrayType(ArrayType(BoolType()), 2), True),
        (TupleType([UintType(8), StringType()]), True),
        (TupleType([UintType(8), BoolType()]), False),
    ],
)
def test_is_dynamic(param, dynamic):
    assert param.is_dynamic() is dynamic


def test_is_empty_bytes_valid_encoding():
    assert FixedBytesType(0).is_empty_bytes_valid_encoding() is True
    assert FixedArrayType(BoolType(), 0).is_empty_bytes_valid_encoding() is True
    assert FixedBytesType(32).is_empty_bytes_valid_encoding() is False
    assert BytesType().is_empty_bytes_valid_encoding() is False


def test_tuple_params_list_and_tuple_equal():
    assert TupleType([BoolType()]) == TupleType((BoolType(),))


def test_read_param():
    assert read("address") == AddressType()
    assert read("bytes") == BytesType()
    assert read("bytes32") == FixedBytesType(32)
    assert read("bool") == BoolType()
    assert read("string") == StringType()
    assert read("int") == IntType(256)
    assert read("uint") == UintType(256)
    assert read("int32") == IntType(32)
    assert read("uint32") == UintType(32)


def test_read_array_param():
    assert read("address[]") == ArrayType(AddressType())
    assert read("uint[]") == ArrayType(UintType(256))
    assert read("bytes[]") == ArrayType(BytesType())
    assert read("bool[][]") == ArrayType(ArrayType(BoolType()))


def test_read_fixed_array_param():
    assert read("address[2]") == FixedArrayType(AddressType(), 2)
    assert read("bool[17]") == FixedArrayType(BoolType(), 17)
    assert read("bytes[45][3]") == FixedArrayType(FixedArrayType(BytesType(), 45), 3)


def test_read_mixed_arrays():
    assert read("bool[][3]") == FixedArrayType(ArrayType(BoolType()), 3)
    assert read("bool[3][]") == ArrayType(FixedArrayType(BoolType(), 3))


def test_read_struct_param():
    assert read("(address,bool)") == TupleType([AddressType(), BoolType()])
    assert read("(bool[3],uint256)") == TupleType(
        [FixedArrayType(BoolType(), 3), UintType(256)]
    )


def test_read_nested_struct_param():
    assert read("(address,bool,(bool,uint256))") == TupleType(
        [AddressType(), BoolType(), TupleType([BoolType(), UintType(256)])]
    )


def test_read_complex_nested_struct_param():
    assert read("(address,bool,(bool,uint256,(bool,uint256)),(bool,uint256))") == TupleType(
        [
            AddressType(),
            BoolType(),
            TupleType([BoolType(), UintType(256), TupleType([BoolType(), UintType(256)])]),
            TupleType([BoolType(), UintType(256)]),
        ]
    )


def test_read_nested_tuple_array_param():
    assert read("(uint256,bytes32)[]") == ArrayType(
        TupleType([UintType(256), FixedBytesType(32)])
    )


def test_read_inner_tuple_array_param():
    abi = "((uint256,bytes32)[],address)"
    param = TupleType(
        [ArrayType(TupleType([UintType(256), FixedBytesType(32)])), AddressType()]
    )
    assert read(abi) == param
    assert write(param) == abi


@pytest.mark.parametrize(
    "name",
    ["foo", "", "uintx", "bytesabc", "(address,bool))", "address)", "bool[x]"],
)
def test_read_invalid(name):
    with pytest.raises(InvalidName):
        read(name)


def test_write_param():
    assert write(AddressType()) == "address"
    assert write(BytesType()) == "bytes"
    assert write(FixedBytesType(32)) == "bytes32"
    assert write(UintType(256)) == "uint256"
    assert write(IntType(64)) == "int64"
    assert write(BoolType()) == "bool"
    assert write(StringType()) == "string"
    assert write(ArrayType(BoolType())) == "bool[]"
    assert write(FixedArrayType(StringType(), 2)) == "string[2]"
    assert write(FixedArrayType(ArrayType(BoolType()), 2)) == "bool[][2]"
    assert (
        write(
            ArrayType(
                TupleType(
                    [
                        ArrayType(TupleType([IntType(256), UintType(256)])),
                        FixedBytesType(32),
                    ]
                )
            )
        )
        == "((int256,uint256)[],bytes32)[]"
    )
    assert (
        write_for_abi(
            ArrayType(TupleType([ArrayType(IntType(256)), FixedBytesType(32)])),
            False,
        )
        == "tuple[]"
    )


def test_param_type_deserialization():
    text = (
        '["address", "bytes", "bytes32", "bool", "string", "int", "uint", '
        '"address[]", "uint[3]", "bool[][5]", "tuple[]"]'
    )
    deserialized = [read(name) for name in json.loads(text)]
    assert deserialized == [
        AddressType(),
        BytesType(),
        FixedBytesType(32),
        BoolType(),
        StringType(),
        IntType(256),
        UintType(256),
        ArrayType(AddressType()),
        FixedArrayType(UintType(256), 3),
        FixedArrayType(ArrayType(BoolType()), 5),
        ArrayType(TupleType([])),
    ]


@pytest.mark.parametrize(
    "name",
    [
        "address",
        "uint8[]",
        "bool[][5]",
        "(address,(bool,uint256)[2])",
        "((uint256,bytes32)[],address)[]",
    ],
)
def test_read_write_round_trip(name):
    assert write(read(name)) == name