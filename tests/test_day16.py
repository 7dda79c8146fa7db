import pytest

from aoc2021.day16 import Packet, Solver, parse_bits, parse_input, parse_packet


def test_literal_packet():
    assert list(parse_bits("D2FE28")) == [
        1, 1, 0, 1, 0, 0, 1, 0, 1, 1, 1, 1, 1, 1, 1, 0, 0, 0, 1, 0, 1, 0, 0, 0
    ]
    p = parse_packet(parse_bits("D2FE28"))
    assert p.version == 6
    assert p.type_id == 4
    assert p.literal == 2021
    assert p.value() == 2021


def test_length_type_operator():
    assert list(parse_bits("38006F45291200")) == [
        0, 0, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 0, 1, 1, 1, 1, 0, 1, 0, 0, 0,
        1, 0, 1, 0, 0, 1, 0, 1, 0, 0, 1, 0, 0, 0, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0
    ]
    p = parse_packet(parse_bits("38006F45291200"))
    assert (p.version, p.type_id) == (1, 6)
    assert [(s.version, s.type_id, s.literal) for s in p.subpackets] == [
        (6, 4, 10),
        (2, 4, 20),
    ]


def test_count_type_operator():
    assert list(parse_bits("EE00D40C823060")) == [
        1, 1, 1, 0, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 1,
        1, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 1, 1, 0, 0, 0, 0, 0, 1, 1, 0, 0, 0, 0, 0
    ]
    p = parse_packet(parse_bits("EE00D40C823060"))
    assert (p.version, p.type_id) == (7, 3)
    assert [(s.version, s.type_id, s.literal) for s in p.subpackets] == [
        (2, 4, 1),
        (4, 4, 2),
        (1, 4, 3),
    ]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("8A004A801A8002F478", 16),
        ("620080001611562C8802118E34", 12),
        ("C0015000016115A2E0802F182340", 23),
        ("A0016C880162017C3686B18A3D4780", 31),
    ],
)
def test_sum_versions(text, expected):
    assert parse_input(text).sum_versions() == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("C200B40A82", 3),
        ("04005AC33890", 54),
        ("880086C3E88112", 7),
        ("CE00C43D881120", 9),
        ("D8005AC2A8F0", 1),
        ("F600BC2D8F", 0),
        ("9C005AC2F8F0", 0),
        ("9C0141080250320F1802104A08", 1),
    ],
)
def test_value(text, expected):
    assert parse_input(text).value() == expected


def test_non_hex_ignored():
    assert list(parse_bits("D2FE28\n")) == list(parse_bits("D2FE28"))


def test_truncated_input():
    with pytest.raises(ValueError):
        parse_input("D2")


def test_literal_without_value():
    with pytest.raises(ValueError):
        Packet(1, 4).value()


def test_solver():
    solver = Solver("C200B40A82")
    assert solver.part2() == "3"
    assert Solver("8A004A801A8002F478").part1() == "16"