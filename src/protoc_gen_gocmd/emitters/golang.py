"""
Go emitters: command table, constructors, unpack dispatch and reply helpers.

The generated code expects the gogo/protobuf generated types of the same
schema in the same Go package (``Marshal``/``Unmarshal``/``Reset`` and, for
reply helpers, a ``ResponseMessage`` envelope plus a ``CODE`` enum).
"""
from ..descriptors import GO_SCALAR_TYPES, CommandKind, export_name, resolve_field_type
from ..options import Target
from .base import Emitter, register

GOGO_PROTO_IMPORT = 'github.com/gogo/protobuf/proto'

COMMAND_DECORATIONS = {
    CommandKind.REQUEST: '<<请求>> ',
    CommandKind.RESPONSE: '<<响应>> ',
    CommandKind.EVENT: '<<事件>> ',
}


def go_package_name(file) -> str:
    """``go_package`` option if set, else the proto package with ``_``."""
    if file.go_package:
        path, _, name = file.go_package.partition(';')
        return name or path.rstrip('/').rsplit('/', 1)[-1]
    return file.package.replace('.', '_')


def command_const(name: str) -> str:
    return 'Cmd_' + export_name(name)


class GoEmitter(Emitter):
    suffix = None

    def header(self, file):
        lines = super().header(file)
        lines.append(f'package {go_package_name(file)}')
        lines.append('')
        return lines

    def output_name(self, file):
        return file.base_name + self.suffix


@register(Target.CMD)
class CommandTableEmitter(GoEmitter):
    suffix = '.cmd.go'

    def render(self, file, command_ids):
        lines = self.header(file)
        for name, command_id in command_ids.items():
            lines.append(f'const {command_const(name)} = 0x{command_id:X}')
        lines.append('')
        lines.append('var CmdName = map[int32]string{')
        for message in file.command_messages:
            decoration = COMMAND_DECORATIONS[message.kind]
            lines.append(f'{self.tab}{command_const(message.name)}: '
                         f'"{decoration}{export_name(message.name)}",')
        lines.append('}')
        return '\n'.join(lines) + '\n'


@register(Target.PACK)
class PackEmitter(GoEmitter):
    suffix = '.pack.go'

    def argument(self, file, message, field):
        """Return ``(parameter declaration, struct assignment)`` for a field."""
        resolved = resolve_field_type(field, file, GO_SCALAR_TYPES, message)
        arg_name = field.name.upper()
        if resolved.is_builtin:
            type_name = resolved.name
        else:
            type_name = export_name(resolved.name)
            if not resolved.is_enum:
                type_name = '*' + type_name
        if field.repeated:
            type_name = '[]' + type_name

        # proto2 keeps optional scalars and enums behind pointers; slices never
        wrap = (not file.is_proto3 and not type_name.startswith('[]')
                and (resolved.is_builtin or resolved.is_enum))
        value = '&' + arg_name if wrap else arg_name
        return f'{arg_name} {type_name}', f'{export_name(field.name)}: {value},'

    def render(self, file, command_ids):
        lines = self.header(file)
        tab = self.tab
        for index, message in enumerate(file.messages):
            if index:
                lines.append('')
            type_name = export_name(message.name)
            params = []
            assignments = []
            for field in message.fields:
                param, assignment = self.argument(file, message, field)
                params.append(param)
                assignments.append(assignment)

            lines.append(f'func New{type_name}({", ".join(params)}) *{type_name} {{')
            if assignments:
                lines.append(f'{tab}return &{type_name}{{')
                lines.extend(f'{tab}{tab}{a}' for a in assignments)
                lines.append(f'{tab}}}')
            else:
                lines.append(f'{tab}return &{type_name}{{}}')
            lines.append('}')

            lines.append(f'func (m *{type_name}) Bytes() []byte {{')
            lines.append(f'{tab}data, err := m.Marshal()')
            lines.append(f'{tab}if err != nil {{ panic(err) }}')
            lines.append(f'{tab}return data')
            lines.append('}')
        return '\n'.join(lines) + '\n'


@register(Target.UNPACK)
class UnpackEmitter(GoEmitter):
    suffix = '.unpack.go'

    def render(self, file, command_ids):
        tab = self.tab
        lines = self.header(file)
        lines.append('import "fmt"')
        lines.append('')
        lines.append('func Unpack(fromCmd int32, data []byte) (interface{}, error) {')
        lines.append(f'{tab}switch fromCmd {{')
        for name in command_ids:
            lines.append(f'{tab}case {command_const(name)}:')
            lines.append(f'{tab}{tab}pb := new({export_name(name)})')
            lines.append(f'{tab}{tab}err := pb.Unmarshal(data)')
            lines.append(f'{tab}{tab}return pb, err')
            lines.append('')
        lines.append(f'{tab}default:')
        lines.append(f'{tab}{tab}return nil, fmt.Errorf("unhandled cmd: 0x%x", fromCmd)')
        lines.append(f'{tab}}}')
        lines.append('}')
        return '\n'.join(lines) + '\n'


@register(Target.GO_RESP)
class ReplyEmitter(GoEmitter):
    """Reply helpers sharing one pooled ``ResponseMessage``.

    A pooled envelope is reset and has every field assigned on acquire, and
    is reset again on release, so nothing from a previous reply survives.
    """
    suffix = '.resp.go'

    def pool_helpers(self, file):
        tab = self.tab
        if file.is_proto3:
            msg_type, err_code = 'msgType', 'errCode'
        else:
            msg_type, err_code = 'proto.Int32(msgType)', 'errCode.Enum()'
        return [
            'var msgPool = &sync.Pool{New: func() interface{} { return new(ResponseMessage) }}',
            '',
            'func acquireResponseMessage(msgType int32, errCode CODE, body []byte) *ResponseMessage {',
            f'{tab}resp := msgPool.Get().(*ResponseMessage)',
            f'{tab}resp.Reset()',
            f'{tab}resp.MessageType = {msg_type}',
            f'{tab}resp.ErrorCode = {err_code}',
            f'{tab}resp.Body = body',
            f'{tab}return resp',
            '}',
            '',
            'func releaseResponseMessage(resp *ResponseMessage) {',
            f'{tab}resp.Reset()',
            f'{tab}msgPool.Put(resp)',
            '}',
        ]

    def reply(self, signature, cmd, err_code, body):
        tab = self.tab
        return [
            '',
            f'func {signature} []byte {{',
            f'{tab}resp := acquireResponseMessage({cmd}, {err_code}, {body})',
            f'{tab}defer releaseResponseMessage(resp)',
            f'{tab}return resp.Bytes()',
            '}',
        ]

    def render(self, file, command_ids):
        lines = self.header(file)
        lines.append('import "sync"')
        lines.append('')
        if not file.is_proto3:
            lines.append(f'import "{GOGO_PROTO_IMPORT}"')
            lines.append('')
        lines.extend(self.pool_helpers(file))
        for message in file.command_messages:
            name = export_name(message.name)
            cmd = command_const(message.name)
            lines.extend(self.reply(f'Reply{name}Err(errCode CODE)', cmd, 'errCode', 'nil'))
            lines.extend(self.reply(f'Reply{name}Ok()', cmd, 'CODE_SUCCESS', 'nil'))
            lines.extend(self.reply(f'Reply{name}OkWith(msg *{name})', cmd,
                                    'CODE_SUCCESS', 'msg.Bytes()'))
        return '\n'.join(lines) + '\n'
