"""Plugin parameter parsing and the set of output targets."""
import enum
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

DEFAULT_INDENT = '    '


class Target(enum.Enum):
    """Output targets, in the order their files are emitted for each input."""
    CMD = 'cmd'
    PACK = 'pack'
    UNPACK = 'unpack'
    AS = 'as'
    JAVA = 'java'
    TS = 'ts'
    TS_PB = 'ts.pb'
    TS_MODEL = 'ts.model'
    GO_RESP = 'go.resp'


def parse_parameter(parameter: str) -> Dict[str, str]:
    """Split ``a,b=c`` into ``{'a': 'true', 'b': 'c'}``."""
    params = {}
    for token in parameter.split(','):
        token = token.strip()
        if not token:
            continue
        key, sep, value = token.partition('=')
        params[key] = value if sep else 'true'
    return params


@dataclass(frozen=True)
class GeneratorOptions:
    targets: Tuple[Target, ...] = ()
    indent: str = DEFAULT_INDENT
    as_namespace: Optional[str] = None
    java_package: Optional[str] = None
    verbose: bool = False

    @classmethod
    def from_parameter(cls, parameter: str):
        params = parse_parameter(parameter)
        return cls(
            targets=tuple(t for t in Target if t.value in params),
            indent='\t' if 'usetabs' in params else DEFAULT_INDENT,
            as_namespace=params.get('asns'),
            java_package=params.get('pkg'),
            verbose='verbose' in params,
        )
