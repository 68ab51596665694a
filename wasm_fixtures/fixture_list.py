from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

# Compiled in this order; the runtime test suite loads each module by name.
WASM_FIXTURES = (
    "abi_classes",
    "abi_store_value",
    "abi_token",
    "abort",
    "big_int_arithmetic",
    "big_int_to_hex",
    "big_int_to_string",
    "bytes_to_base58",
    "contract_calls",
    "crypto",
    "data_source_create",
    "ens_name_by_hash",
    "ipfs_cat",
    "ipfs_map",
    "json_parsing",
    "non_terminating",
    "store",
    "string_to_number",
)

SOURCE_SUFFIX = ".ts"
ARTIFACT_SUFFIX = ".wasm"


@dataclass(frozen=True)
class CompileStep:
    """One compiler invocation: an AssemblyScript source and the wasm module it produces."""
    name: str
    source: Path
    output: Path


def build_compile_steps(
    fixtures_dir: Union[str, Path],
    names: Optional[Iterable[str]] = None,
) -> List[CompileStep]:
    """
    Builds the compile steps for the fixture list.

    Args:
        fixtures_dir: Directory holding the ``.ts`` sources; artifacts are written next to them.
        names: Optional subset of fixture names. The fixture list order is kept either way.

    Raises:
        ValueError: If a name is not a known fixture.
    """
    fixtures_dir = Path(fixtures_dir)
    selected = WASM_FIXTURES
    if names:
        wanted = set(names)
        unknown = wanted - set(WASM_FIXTURES)
        if unknown:
            raise ValueError(f"Unknown fixtures: {sorted(unknown)}. Available: {list(WASM_FIXTURES)}")
        selected = tuple(name for name in WASM_FIXTURES if name in wanted)

    return [
        CompileStep(
            name=name,
            source=fixtures_dir / f"{name}{SOURCE_SUFFIX}",
            output=fixtures_dir / f"{name}{ARTIFACT_SUFFIX}",
        )
        for name in selected
    ]
