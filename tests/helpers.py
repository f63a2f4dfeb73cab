"""Builders for descriptor and request messages used across tests"""

from google.protobuf import descriptor_pb2
from google.protobuf.compiler import plugin_pb2

FieldProto = descriptor_pb2.FieldDescriptorProto


def field(name, type_='TYPE_INT32', type_name='', repeated=False, number=1):
    f = FieldProto(name=name, number=number, type=FieldProto.Type.Value(type_))
    f.label = FieldProto.LABEL_REPEATED if repeated else FieldProto.LABEL_OPTIONAL
    if type_name:
        f.type_name = type_name
    return f


def message(name, *fields):
    msg = descriptor_pb2.DescriptorProto(name=name)
    for number, f in enumerate(fields, start=1):
        f.number = number
        msg.field.append(f)
    return msg


def enum(name, *values):
    en = descriptor_pb2.EnumDescriptorProto(name=name)
    for value_name, number in values:
        en.value.add(name=value_name, number=number)
    return en


def proto_file(name, messages=(), enums=(), package='game', syntax='proto3',
               go_package='', java_package=''):
    f = descriptor_pb2.FileDescriptorProto(name=name, package=package, syntax=syntax)
    f.message_type.extend(messages)
    f.enum_type.extend(enums)
    if go_package:
        f.options.go_package = go_package
    if java_package:
        f.options.java_package = java_package
    return f


def request(files, parameter='', to_generate=None):
    req = plugin_pb2.CodeGeneratorRequest(parameter=parameter)
    req.proto_file.extend(files)
    if to_generate is None:
        to_generate = [f.name for f in files]
    req.file_to_generate.extend(to_generate)
    return req


def game_messages():
    """Declared out of name order on purpose."""
    return [
        message('LoginResponse',
                field('token', 'TYPE_STRING'),
                field('status', 'TYPE_ENUM', '.game.Status')),
        message('LoginRequest',
                field('user_id', 'TYPE_INT64'),
                field('name', 'TYPE_STRING'),
                field('tags', 'TYPE_STRING', repeated=True),
                field('avatar', 'TYPE_BYTES')),
        message('PlayerInfo',
                field('level', 'TYPE_INT32'),
                field('items', 'TYPE_MESSAGE', '.game.Item', repeated=True)),
        message('Item', field('id', 'TYPE_INT32')),
        message('HeartbeatEvent'),
    ]


def game_proto(name='game.proto', syntax='proto3', **kwargs):
    return proto_file(name, game_messages(),
                      [enum('Status', ('OK', 0), ('FAIL', 1))],
                      syntax=syntax, **kwargs)
