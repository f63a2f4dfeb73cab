"""Common emitter interface and the target registry."""
import abc
from dataclasses import dataclass

HEADER_TOOL = 'protoc-gen-gocmd'

# Target -> Emitter subclass, filled by @register
EMITTERS = {}


@dataclass(frozen=True)
class GeneratedFile:
    name: str
    content: str


def register(target):
    def wrap(cls):
        cls.target = target
        EMITTERS[target] = cls
        return cls
    return wrap


class Emitter(abc.ABC):
    """Renders one artifact for one file.

    Subclasses hold no state besides the options they were built with;
    ``render`` must depend only on its arguments.
    """
    target = None

    def __init__(self, options):
        self.options = options
        self.tab = options.indent

    def header(self, file):
        return [
            f'// Code generated by {HEADER_TOOL}.',
            f'// source: {file.name}',
            '// DO NOT EDIT!',
            '',
        ]

    @abc.abstractmethod
    def output_name(self, file) -> str:
        ...

    @abc.abstractmethod
    def render(self, file, command_ids) -> str:
        ...

    def emit(self, file, command_ids) -> GeneratedFile:
        return GeneratedFile(self.output_name(file), self.render(file, command_ids))
