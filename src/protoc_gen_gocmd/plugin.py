"""
protoc plugin entry point.

Reads a CodeGeneratorRequest from stdin and writes a CodeGeneratorResponse
to stdout. Diagnostics go to stderr since stdout carries the response.

Usage:
    protoc --plugin=protoc-gen-gocmd --gocmd_out=cmd,pack,unpack:./gen foo.proto
"""
import sys

from google.protobuf.compiler import plugin_pb2 as plugin
from google.protobuf.message import DecodeError

from .descriptors import FileUnit
from .errors import AllocationError, ConfigurationError, EnvelopeError, GeneratorError, TypeMappingError
from .generator import generate
from .options import GeneratorOptions

PLUGIN_NAME = 'protoc-gen-gocmd'


def parse_request(data: bytes):
    request = plugin.CodeGeneratorRequest()
    try:
        request.ParseFromString(data)
    except DecodeError as e:
        raise EnvelopeError(f"parsing input proto: {e}") from e
    return request


def select_files(request):
    """FileUnits for the requested files, in ``proto_file`` order."""
    wanted = set(request.file_to_generate)
    return [FileUnit.from_proto(f) for f in request.proto_file if f.name in wanted]


def run(data: bytes):
    """Turn a serialized request into a response message.

    Configuration and envelope problems raise; problems with the schema
    itself are reported through ``response.error`` with no files attached.
    """
    request = parse_request(data)
    if not request.file_to_generate:
        raise ConfigurationError("no files to generate")
    options = GeneratorOptions.from_parameter(request.parameter)
    files = select_files(request)

    response = plugin.CodeGeneratorResponse()
    try:
        generated = generate(files, options)
    except (TypeMappingError, AllocationError) as e:
        response.error = str(e)
        return response
    for item in generated:
        out = response.file.add()
        out.name = item.name
        out.content = item.content
    return response


def fail(message):
    print(f"{PLUGIN_NAME}: error: {message}", file=sys.stderr)
    sys.exit(1)


def write_response(response):
    try:
        data = response.SerializeToString()
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    except OSError as e:
        raise EnvelopeError(f"failed to write output proto: {e}") from e


def main():
    if sys.stdin.isatty():
        print(f"{PLUGIN_NAME} is a protoc plugin, it is not intended for direct use.", file=sys.stderr)
        print("", file=sys.stderr)
        print("Usage:", file=sys.stderr)
        print(f"  protoc --plugin={PLUGIN_NAME}=$(which {PLUGIN_NAME}) \\", file=sys.stderr)
        print("         --gocmd_out=cmd,pack,unpack:./gen your_file.proto", file=sys.stderr)
        sys.exit(1)

    try:
        data = sys.stdin.buffer.read()
    except OSError as e:
        fail(f"reading input: {e}")

    try:
        response = run(data)
        write_response(response)
    except GeneratorError as e:
        fail(e)

    if response.error:
        fail(response.error)


if __name__ == '__main__':
    main()
