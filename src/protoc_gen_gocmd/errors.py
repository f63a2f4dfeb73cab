"""Exceptions raised by the generator."""


class GeneratorError(Exception):
    """Base class for every error the plugin reports."""


class ConfigurationError(GeneratorError):
    pass


class EnvelopeError(GeneratorError):
    pass


class AllocationError(GeneratorError):
    pass


class TypeMappingError(GeneratorError):
    def __init__(self, file_name, message_name, field_name, field_type):
        self.file_name = file_name
        self.message_name = message_name
        self.field_name = field_name
        self.field_type = field_type
        super().__init__(
            f"{file_name}: cannot map type {field_type or '<empty>'} "
            f"of field {message_name}.{field_name}"
        )
