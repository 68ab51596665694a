from typing import Optional, Tuple

import click

from config.settings import settings
from utils.logger_utils import configure_logging, get_logger
from wasm_fixtures.asc_compiler import AscCompiler
from wasm_fixtures.exceptions import CompilerNotExecutableError, CompilerNotFoundError
from wasm_fixtures.fixture_builder import FixtureBuilder
from wasm_fixtures.fixture_list import WASM_FIXTURES, build_compile_steps

logger = get_logger("Compile Wasm Fixtures")

# Shell conventions for "command not executable" and "command not found"
COMMAND_NOT_EXECUTABLE_EXIT_CODE = 126
COMMAND_NOT_FOUND_EXIT_CODE = 127


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option(
    "-f",
    "--fixtures-dir",
    default=settings.compiler.fixtures_dir,
    show_default=True,
    type=str,
    help="Directory holding the .ts sources; .wasm artifacts are written next to them.",
)
@click.option(
    "--compiler",
    default=settings.compiler.command,
    show_default=True,
    type=str,
    help="AssemblyScript compiler command line, e.g. 'asc' or 'npx asc'.",
)
@click.option(
    "--flags",
    default=settings.compiler.flags,
    show_default=True,
    type=str,
    help="Flags passed to the compiler before the source file.",
)
@click.option(
    "--only",
    multiple=True,
    type=click.Choice(list(WASM_FIXTURES)),
    help="Compile only these fixtures (repeatable). Fixture list order is kept.",
)
@click.option(
    "--timeout",
    default=settings.compiler.timeout_seconds,
    type=click.IntRange(min=1),
    help="Per fixture timeout in seconds. A timed out compilation fails with exit code 124.",
)
@click.option("--dry-run", is_flag=True, default=False, help="Print the compiler commands without running them.")
@click.option("--log-file", default=None, show_default=True, type=str, help="Path to the log file.")
@click.pass_context
def compile_wasm_fixtures(
    ctx: click.Context,
    fixtures_dir: str,
    compiler: str,
    flags: str,
    only: Tuple[str, ...],
    timeout: Optional[int],
    dry_run: bool,
    log_file: Optional[str] = None,
):
    """
    Compiles the wasm test fixtures one after the other.
    Stops at the first failing compilation and exits with its exit code.
    """
    configure_logging(log_file, settings.app.log_level)

    builder = FixtureBuilder(
        compiler=AscCompiler(command=compiler, flags=flags),
        steps=build_compile_steps(fixtures_dir, only),
        timeout=timeout,
    )

    if dry_run:
        for command in builder.describe():
            click.echo(command)
        return

    try:
        report = builder.run()
    except CompilerNotFoundError as e:
        logger.error(f"{e}. Install AssemblyScript (npm install -g assemblyscript) or pass --compiler.")
        ctx.exit(COMMAND_NOT_FOUND_EXIT_CODE)
    except CompilerNotExecutableError as e:
        logger.error(f"{e}. Check the file permissions or pass --compiler.")
        ctx.exit(COMMAND_NOT_EXECUTABLE_EXIT_CODE)

    ctx.exit(report.exit_code)
