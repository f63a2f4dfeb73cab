"""ActionScript command constants."""
from ..descriptors import export_name
from ..options import Target
from .base import Emitter, register

OUTPUT_NAME = 'ProtocolType.as'


@register(Target.AS)
class ActionScriptEmitter(Emitter):

    def output_name(self, file):
        return OUTPUT_NAME

    def render(self, file, command_ids):
        tab = self.tab
        namespace = self.options.as_namespace
        if namespace is None:
            namespace = file.package
        lines = self.header(file)
        lines.append(f'package {namespace}')
        lines.append('{')
        lines.append(f'{tab}public class ProtocolType{{')
        for name, command_id in command_ids.items():
            lines.append(f'{tab}{tab}public static const {export_name(name)} : int = 0x{command_id:X};')
        lines.append(f'{tab}}}')
        lines.append('}')
        return '\n'.join(lines) + '\n'
