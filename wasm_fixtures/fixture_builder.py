"""
Sequential, fail-fast compilation of the wasm test fixtures.

Every step blocks until the compiler process exits. The first non-zero exit
code stops the batch; later steps are never started and the batch exit code
is the failing step's exit code. A run always starts from the first step.
"""
import shlex
import subprocess
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence, Union

from utils.logger_utils import get_logger
from wasm_fixtures.asc_compiler import AscCompiler
from wasm_fixtures.exceptions import CompilerNotExecutableError, CompilerNotFoundError
from wasm_fixtures.fixture_list import CompileStep

logger = get_logger("Fixture Builder")

# coreutils `timeout` convention
TIMEOUT_EXIT_CODE = 124
STDERR_TAIL_LINES = 20


class BuildStatus(str, Enum):
    """Fixture build status"""
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    TIMEOUT = "TIMEOUT"


@dataclass
class StepResult:
    """Outcome of a single compiler invocation"""
    step: CompileStep
    command: List[str]
    exit_code: int
    stdout: str = ""
    stderr: str = ""
    timed_out: bool = False

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


@dataclass
class BuildReport:
    """Result of a fixture build run"""
    total: int
    results: List[StepResult] = field(default_factory=list)
    status: Optional[BuildStatus] = None

    @property
    def failed_step(self) -> Optional[StepResult]:
        if self.results and not self.results[-1].ok:
            return self.results[-1]
        return None

    @property
    def exit_code(self) -> int:
        failed = self.failed_step
        return failed.exit_code if failed else 0

    @property
    def artifacts(self) -> List[Path]:
        return [result.step.output for result in self.results if result.ok]


def _normalize_exit_code(returncode: int) -> int:
    # subprocess reports death by signal as -N; a shell reports 128 + N
    if returncode < 0:
        return 128 + abs(returncode)
    return returncode


class FixtureBuilder:
    """Runs the compiler once per compile step, in order, stopping at the first failure."""

    def __init__(
        self,
        compiler: AscCompiler,
        steps: Sequence[CompileStep],
        cwd: Union[str, Path, None] = None,
        timeout: Optional[int] = None,
    ):
        self.compiler = compiler
        self.steps = list(steps)
        self.cwd = Path(cwd) if cwd is not None else None
        self.timeout = timeout

    def describe(self) -> List[str]:
        """Shell-quoted command lines, one per step, without running anything."""
        return [shlex.join(self.compiler.command_for(step)) for step in self.steps]

    def run(self) -> BuildReport:
        report = BuildReport(total=len(self.steps))
        logger.info(f"Compiling {report.total} wasm fixtures...")

        for index, step in enumerate(self.steps, 1):
            logger.info(f"[{index}/{report.total}] {step.source} -> {step.output}")
            result = self._run_step(step)
            report.results.append(result)

            if not result.ok:
                report.status = BuildStatus.TIMEOUT if result.timed_out else BuildStatus.FAILED
                logger.error(
                    f"Compilation of '{step.name}' failed with exit code {result.exit_code}; "
                    f"skipping {report.total - index} remaining fixture(s)"
                )
                tail = result.stderr.strip().splitlines()[-STDERR_TAIL_LINES:]
                for line in tail:
                    logger.error(f"  {line}")
                return report

            if result.stdout.strip():
                logger.debug(result.stdout.strip())

        report.status = BuildStatus.SUCCESS
        logger.info(f"All {report.total} wasm fixtures compiled successfully.")
        return report

    def _run_step(self, step: CompileStep) -> StepResult:
        command = self.compiler.command_for(step)
        try:
            completed = subprocess.run(
                command,
                cwd=str(self.cwd) if self.cwd is not None else None,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise CompilerNotFoundError(command[0]) from e
        except PermissionError as e:
            raise CompilerNotExecutableError(command[0]) from e
        except subprocess.TimeoutExpired as e:
            stderr = e.stderr.decode(errors="replace") if isinstance(e.stderr, bytes) else (e.stderr or "")
            return StepResult(
                step=step,
                command=command,
                exit_code=TIMEOUT_EXIT_CODE,
                stderr=f"{stderr}\nCommand timed out after {self.timeout}s",
                timed_out=True,
            )

        return StepResult(
            step=step,
            command=command,
            exit_code=_normalize_exit_code(completed.returncode),
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
