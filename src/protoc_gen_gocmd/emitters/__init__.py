"""One emitter per output target; importing the package fills EMITTERS."""
from .base import EMITTERS, Emitter, GeneratedFile, HEADER_TOOL
from .golang import CommandTableEmitter, PackEmitter, ReplyEmitter, UnpackEmitter
from .actionscript import ActionScriptEmitter
from .java import JavaEmitter
from .typescript import (
    TypeScriptBuilderEmitter,
    TypeScriptCommandEmitter,
    TypeScriptModelEmitter,
)

__all__ = [
    'EMITTERS', 'Emitter', 'GeneratedFile', 'HEADER_TOOL',
    'CommandTableEmitter', 'PackEmitter', 'UnpackEmitter', 'ReplyEmitter',
    'ActionScriptEmitter', 'JavaEmitter',
    'TypeScriptCommandEmitter', 'TypeScriptBuilderEmitter', 'TypeScriptModelEmitter',
]
