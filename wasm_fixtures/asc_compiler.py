import shlex
from typing import List, Sequence, Union

from wasm_fixtures.fixture_list import CompileStep

DEFAULT_ASC_FLAGS = ("--exportRuntime", "--runtime", "stub")


def _split(value: Union[str, Sequence[str]]) -> List[str]:
    if isinstance(value, str):
        return shlex.split(value)
    return list(value)


class AscCompiler:
    """Builds the AssemblyScript compiler command line for a compile step."""

    def __init__(
        self,
        command: Union[str, Sequence[str]] = "asc",
        flags: Union[str, Sequence[str]] = DEFAULT_ASC_FLAGS,
    ):
        self.command = _split(command)
        if not self.command:
            raise ValueError("Compiler command must not be empty")
        self.flags = _split(flags)

    def command_for(self, step: CompileStep) -> List[str]:
        """argv for ``asc <flags> <source> -b <output>``."""
        return [*self.command, *self.flags, str(step.source), "-b", str(step.output)]
