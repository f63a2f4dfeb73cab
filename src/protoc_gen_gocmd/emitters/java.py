"""
Java message type constants.

Unlike the command table this numbers every message of the file, command
type or not. The counter starts from the same base offset but is its own
sequence, so a message's Java id generally differs from its command id.
"""
from ..command_ids import base_offset, number_messages
from ..descriptors import export_name
from ..options import Target
from .base import Emitter, register

OUTPUT_NAME = 'MessageTypes.java'


def message_type_ids(file):
    base = base_offset(file.app_id, len(file.messages))
    return number_messages((m.name for m in file.messages), base)


@register(Target.JAVA)
class JavaEmitter(Emitter):

    def output_name(self, file):
        return OUTPUT_NAME

    def package(self, file):
        if self.options.java_package is not None:
            return self.options.java_package
        return file.java_package or file.package

    def render(self, file, command_ids):
        tab = self.tab
        ids = message_type_ids(file)
        lines = self.header(file)
        package = self.package(file)
        if package:
            lines.append(f'package {package};')
            lines.append('')
        lines.append('import java.util.Map;')
        lines.append('import java.util.HashMap;')
        lines.append('')
        lines.append('public class MessageTypes {')
        for name, type_id in ids.items():
            lines.append(f'{tab}public static final int {export_name(name)} = 0x{type_id:X};')
        lines.append('')
        lines.append(f'{tab}private static Map<Integer, String> messageTypeToMessageNameMapping'
                     ' = new HashMap<Integer, String>();')
        lines.append(f'{tab}private static Map<String, Integer> messageNameToMessageTypeMapping'
                     ' = new HashMap<String, Integer>();')
        lines.append('')
        lines.append(f'{tab}static {{')
        for name in ids:
            constant = export_name(name)
            lines.append(f'{tab}{tab}messageTypeToMessageNameMapping.put({constant}, "{name}");')
            lines.append(f'{tab}{tab}messageNameToMessageTypeMapping.put("{name}", {constant});')
        lines.append(f'{tab}}}')
        lines.append('')
        lines.append(f'{tab}public static String getMessageTypeName(int messageTypeId) {{')
        lines.append(f'{tab}{tab}return messageTypeToMessageNameMapping.get(messageTypeId);')
        lines.append(f'{tab}}}')
        lines.append('')
        lines.append(f'{tab}public static Integer getMessageTypeId(String messageTypeName) {{')
        lines.append(f'{tab}{tab}return messageNameToMessageTypeMapping.get(messageTypeName);')
        lines.append(f'{tab}}}')
        lines.append('}')
        return '\n'.join(lines) + '\n'
