"""Runs the enabled emitters over every input file."""
import sys

from .command_ids import allocate_command_ids
from .emitters import EMITTERS
from .errors import ConfigurationError
from .options import Target


def generate(files, options):
    """Return one GeneratedFile per (file, enabled target), file-major.

    ``options.targets`` is emitted in ``Target`` declaration order whatever
    order it was given in.
    """
    if not options.targets:
        candidates = ','.join(t.value for t in Target)
        raise ConfigurationError(
            f"please specify which files to be generated, candidates: {candidates}")

    emitters = [EMITTERS[t](options) for t in Target if t in options.targets]
    generated = []
    for file in files:
        if options.verbose:
            print(f"Generating {file.name}...", file=sys.stderr)
        command_ids = allocate_command_ids(file)
        for emitter in emitters:
            generated.append(emitter.emit(file, command_ids))
    if options.verbose:
        print(f"Generated {len(generated)} files from {len(files)} inputs", file=sys.stderr)
    return generated
