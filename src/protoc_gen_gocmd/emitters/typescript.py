"""TypeScript command constants, builder registrations and model classes."""
from ..descriptors import TS_SCALAR_TYPES, export_name, resolve_field_type
from ..options import Target
from .base import Emitter, register

# The login reply is handled by the connection itself, not by a listener
MANUAL_LISTEN_MESSAGES = frozenset({'LoginResponse'})

# Envelopes wrap every command on the wire; they get no model class
ENVELOPE_MESSAGES = frozenset({'RequestMessage', 'ResponseMessage'})


@register(Target.TS)
class TypeScriptCommandEmitter(Emitter):

    def output_name(self, file):
        return 'proto.cmd.ts'

    def render(self, file, command_ids):
        lines = self.header(file)
        lines.append('module proto.cmd {')
        for name, command_id in command_ids.items():
            lines.append(f'{self.tab}export var {export_name(name)}: number = 0x{command_id:X};')
        lines.append('}')
        return '\n'.join(lines) + '\n'


@register(Target.TS_PB)
class TypeScriptBuilderEmitter(Emitter):

    def output_name(self, file):
        return 'proto.builder.ts'

    def render(self, file, command_ids):
        stem = file.stem
        lines = self.header(file)
        lines.append('module proto {')
        for name in command_ids:
            constant = export_name(name)
            entry = (f'{self.tab}export var {stem.upper()}_{constant} = '
                     f'{{ cmd: proto.{stem}.{constant}, cls: "proto.builder.{name}"')
            if name in MANUAL_LISTEN_MESSAGES:
                entry += ', auto_listen: false'
            lines.append(entry + '};')
        lines.append('}')
        return '\n'.join(lines) + '\n'


@register(Target.TS_MODEL)
class TypeScriptModelEmitter(Emitter):

    def output_name(self, file):
        return 'proto.model.ts'

    def field_type(self, file, message, field):
        resolved = resolve_field_type(field, file, TS_SCALAR_TYPES, message)
        type_name = resolved.name if resolved.is_builtin else export_name(resolved.name)
        if field.repeated:
            return f'Array<{type_name}>'
        return type_name

    def render(self, file, command_ids):
        tab = self.tab
        lines = self.header(file)
        lines.append('module proto.model {')
        for enum_type in file.enums:
            lines.append(f'{tab}export enum {export_name(enum_type.name)} {{')
            for constant, number in enum_type.values:
                lines.append(f'{tab}{tab}{constant} = {number},')
            lines.append(f'{tab}}}')
            lines.append('')

        for message in file.messages:
            if message.name in ENVELOPE_MESSAGES:
                continue
            lines.append(f'{tab}export class {export_name(message.name)} {{')
            for field in message.fields:
                lines.append(f'{tab}{tab}public {field.name}: '
                             f'{self.field_type(file, message, field)};')
            lines.append(f'{tab}}}')
            lines.append('')
        lines.append('}')
        return '\n'.join(lines) + '\n'
