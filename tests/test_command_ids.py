#!/usr/bin/env python3
"""Tests for command identifier allocation"""

import random

import pytest

from helpers import game_messages, game_proto, enum, proto_file

from protoc_gen_gocmd.command_ids import allocate_command_ids, base_offset, number_messages
from protoc_gen_gocmd.descriptors import EnumType, FileUnit, MessageType
from protoc_gen_gocmd.errors import AllocationError


class TestBaseOffset:

    def test_small_file_keeps_app_block(self):
        assert base_offset(1, 5) == 0x1000

    def test_large_file_shifts_one_digit(self):
        assert base_offset(1, 5000) == 0x10000

    def test_shift_repeats_until_wide_enough(self):
        assert base_offset(1, 0x10001) == 0x100000

    def test_equal_count_does_not_shift(self):
        assert base_offset(1, 0x1000) == 0x1000

    def test_app_id_scales_block(self):
        assert base_offset(2, 0) == 0x2000
        assert base_offset(0x12, 3) == 0x12000

    def test_zero_app_id(self):
        assert base_offset(0, 0) == 0
        assert base_offset(0, 1) == 1
        assert base_offset(0, 5) == 0x10

    def test_negative_app_id_rejected(self):
        with pytest.raises(AllocationError):
            base_offset(-1, 3)


def test_number_messages_is_dense():
    assert number_messages(['a', 'b', 'c'], 0x1000) == {'a': 0x1001, 'b': 0x1002, 'c': 0x1003}
    assert number_messages([], 0x1000) == {}


class TestAllocateCommandIds:

    def test_game_file(self, game_ids):
        assert game_ids == {
            'HeartbeatEvent': 0x1001,
            'LoginRequest': 0x1002,
            'LoginResponse': 0x1003,
        }

    def test_first_id_for_five_messages(self):
        unit = FileUnit('a.proto', messages=tuple(MessageType(n) for n in
                        ['ARequest', 'B', 'C', 'D', 'E']))
        assert next(iter(allocate_command_ids(unit).values())) == 0x1001

    def test_first_id_for_five_thousand_messages(self):
        names = ['AaaRequest'] + [f'Plain{i:04d}' for i in range(4999)]
        unit = FileUnit('big.proto', messages=tuple(MessageType(n) for n in names))
        ids = allocate_command_ids(unit)
        assert ids == {'AaaRequest': 0x10001}

    def test_non_commands_do_not_consume_ids(self):
        unit = FileUnit('a.proto', messages=tuple(MessageType(n) for n in
                        ['AEvent', 'BConfig', 'CRequest']))
        assert allocate_command_ids(unit) == {'AEvent': 0x1001, 'CRequest': 0x1002}

    def test_order_follows_names_not_declaration(self):
        messages = game_messages()
        shuffled = list(messages)
        random.Random(7).shuffle(shuffled)
        first = allocate_command_ids(FileUnit.from_proto(proto_file('a.proto', messages)))
        second = allocate_command_ids(FileUnit.from_proto(proto_file('a.proto', shuffled)))
        assert first == second
        assert list(first) == sorted(first)

    def test_ids_are_unique(self):
        names = [f'Msg{i}Request' for i in range(300)] + [f'Msg{i}Event' for i in range(300)]
        unit = FileUnit('a.proto', messages=tuple(MessageType(n) for n in names))
        ids = allocate_command_ids(unit)
        assert len(ids) == 600
        assert len(set(ids.values())) == 600

    def test_app_enum_moves_block(self):
        unit = FileUnit.from_proto(proto_file(
            'a.proto', game_messages(), [enum('App', ('Id', 2))]))
        assert allocate_command_ids(unit)['HeartbeatEvent'] == 0x2001

    def test_no_commands_gives_empty_map(self):
        unit = FileUnit('a.proto', messages=(MessageType('Config'),),
                        enums=(EnumType('App', (('Id', 1),)),))
        assert allocate_command_ids(unit) == {}

    def test_repeatable(self):
        assert allocate_command_ids(FileUnit.from_proto(game_proto())) == \
            allocate_command_ids(FileUnit.from_proto(game_proto()))
