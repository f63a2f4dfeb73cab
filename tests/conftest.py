"""Pytest configuration and fixtures for protoc_gen_gocmd tests"""

import pytest
from pathlib import Path
import sys

# Add src to path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from helpers import game_proto

from protoc_gen_gocmd.command_ids import allocate_command_ids
from protoc_gen_gocmd.descriptors import FileUnit
from protoc_gen_gocmd.options import GeneratorOptions


@pytest.fixture
def game_file():
    """proto3 file with three commands, two plain messages and an enum"""
    return FileUnit.from_proto(game_proto())


@pytest.fixture
def game_file_proto2():
    return FileUnit.from_proto(game_proto(syntax=''))


@pytest.fixture
def game_ids(game_file):
    return allocate_command_ids(game_file)


@pytest.fixture
def options():
    return GeneratorOptions()
