"""
Read-only view over the descriptors protoc hands to the plugin.

The protobuf ``FileDescriptorProto`` messages are normalized into frozen
values once per run; every emitter works on these values only.
"""
import enum
import re
from dataclasses import dataclass
from pathlib import PurePosixPath
from types import MappingProxyType
from typing import NamedTuple, Optional, Tuple

from google.protobuf.descriptor_pb2 import FieldDescriptorProto

from .errors import TypeMappingError

# Scalar wire types -> target language primitive names
GO_SCALAR_TYPES = MappingProxyType({
    'TYPE_DOUBLE': 'float64',
    'TYPE_FLOAT': 'float32',
    'TYPE_INT32': 'int32',
    'TYPE_INT64': 'int64',
    'TYPE_UINT32': 'uint32',
    'TYPE_UINT64': 'uint64',
    'TYPE_SINT32': 'int32',
    'TYPE_SINT64': 'int64',
    'TYPE_FIXED32': 'uint32',
    'TYPE_FIXED64': 'uint64',
    'TYPE_SFIXED32': 'int32',
    'TYPE_SFIXED64': 'int64',
    'TYPE_BOOL': 'bool',
    'TYPE_STRING': 'string',
    'TYPE_BYTES': '[]byte',
})

TS_SCALAR_TYPES = MappingProxyType({
    'TYPE_DOUBLE': 'number',
    'TYPE_FLOAT': 'number',
    'TYPE_INT32': 'number',
    'TYPE_INT64': 'number',
    'TYPE_UINT32': 'number',
    'TYPE_UINT64': 'number',
    'TYPE_SINT32': 'number',
    'TYPE_SINT64': 'number',
    'TYPE_FIXED32': 'number',
    'TYPE_FIXED64': 'number',
    'TYPE_SFIXED32': 'number',
    'TYPE_SFIXED64': 'number',
    'TYPE_BOOL': 'boolean',
    'TYPE_STRING': 'string',
    'TYPE_BYTES': 'Uint8Array',
})

REFERENCE_TYPES = frozenset({'TYPE_MESSAGE', 'TYPE_ENUM'})

APP_ENUM_NAME = 'App'
APP_ID_CONSTANT = 'Id'
DEFAULT_APP_ID = 1


class CommandKind(enum.Enum):
    REQUEST = 'request'
    RESPONSE = 'response'
    EVENT = 'event'


def command_kind(name: str) -> Optional[CommandKind]:
    """Classify a message name by its suffix, ignoring case."""
    lowered = name.lower()
    for kind in CommandKind:
        if lowered.endswith(kind.value):
            return kind
    return None


def is_command_type(name: str) -> bool:
    return command_kind(name) is not None


_SEGMENT_START = re.compile(r'(^|[_\s])([a-z])')


def export_name(name: str) -> str:
    """Capitalize the first letter of every ``_``/whitespace separated segment.

    All other characters, separators included, are kept as they are so the
    same message yields the same identifier in every generated file.
    """
    return _SEGMENT_START.sub(lambda m: m.group(1) + m.group(2).upper(), name)


def bare_type_name(type_name: str) -> str:
    """Strip the package qualifier: ``.pkg.Foo`` -> ``Foo``."""
    return type_name.rsplit('.', 1)[-1]


@dataclass(frozen=True)
class Field:
    name: str
    type: str
    type_name: str = ''
    repeated: bool = False

    @property
    def is_reference(self) -> bool:
        return self.type in REFERENCE_TYPES

    @classmethod
    def from_proto(cls, proto):
        return cls(
            name=proto.name,
            type=FieldDescriptorProto.Type.Name(proto.type),
            type_name=proto.type_name,
            repeated=proto.label == FieldDescriptorProto.LABEL_REPEATED,
        )


@dataclass(frozen=True)
class MessageType:
    name: str
    fields: Tuple[Field, ...] = ()

    @property
    def kind(self) -> Optional[CommandKind]:
        return command_kind(self.name)

    @property
    def is_command_type(self) -> bool:
        return self.kind is not None

    @classmethod
    def from_proto(cls, proto):
        return cls(proto.name, tuple(Field.from_proto(f) for f in proto.field))


@dataclass(frozen=True)
class EnumType:
    name: str
    values: Tuple[Tuple[str, int], ...] = ()

    @classmethod
    def from_proto(cls, proto):
        return cls(proto.name, tuple((v.name, v.number) for v in proto.value))


@dataclass(frozen=True)
class FileUnit:
    name: str
    package: str = ''
    syntax: str = 'proto2'
    messages: Tuple[MessageType, ...] = ()
    enums: Tuple[EnumType, ...] = ()
    go_package: str = ''
    java_package: str = ''

    def __post_init__(self):
        # Identifiers depend on this order, never on declaration order
        ordered = tuple(sorted(self.messages, key=lambda m: m.name))
        object.__setattr__(self, 'messages', ordered)

    @classmethod
    def from_proto(cls, proto):
        return cls(
            name=proto.name,
            package=proto.package,
            syntax=proto.syntax or 'proto2',
            messages=tuple(MessageType.from_proto(m) for m in proto.message_type),
            enums=tuple(EnumType.from_proto(e) for e in proto.enum_type),
            go_package=proto.options.go_package,
            java_package=proto.options.java_package,
        )

    @property
    def base_name(self) -> str:
        """File name without its extension, directories kept."""
        path = PurePosixPath(self.name)
        return str(path.with_suffix('')) if path.suffix else self.name

    @property
    def stem(self) -> str:
        return PurePosixPath(self.name).stem

    @property
    def is_proto3(self) -> bool:
        return self.syntax == 'proto3'

    @property
    def app_id(self) -> int:
        return get_app_id(self)

    @property
    def command_messages(self) -> Tuple[MessageType, ...]:
        return tuple(m for m in self.messages if m.is_command_type)


def is_enum_type(name: str, file: FileUnit) -> bool:
    return any(e.name == name for e in file.enums)


def get_app_id(file: FileUnit) -> int:
    for enum_type in file.enums:
        if enum_type.name != APP_ENUM_NAME:
            continue
        for constant, number in enum_type.values:
            if constant == APP_ID_CONSTANT:
                return number
    return DEFAULT_APP_ID


class ResolvedType(NamedTuple):
    name: str
    is_builtin: bool
    is_enum: bool


def resolve_field_type(field: Field, file: FileUnit, scalar_types,
                       message: Optional[MessageType] = None) -> ResolvedType:
    """Map a field to its type name in the target described by ``scalar_types``.

    Scalars come from the mapping table. References return the bare
    referenced name, unchanged, and whether it is an enum of ``file``.
    """
    if field.is_reference:
        if not field.type_name:
            raise TypeMappingError(file.name, message.name if message else '?',
                                   field.name, field.type)
        name = bare_type_name(field.type_name)
        return ResolvedType(name, False, is_enum_type(name, file))
    mapped = scalar_types.get(field.type)
    if not mapped:
        raise TypeMappingError(file.name, message.name if message else '?',
                               field.name, field.type)
    return ResolvedType(mapped, True, False)
