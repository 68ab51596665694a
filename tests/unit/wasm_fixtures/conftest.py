import shlex
import sys
import textwrap

import pytest

# Stand-in for asc: records the source it was called with and writes a tiny wasm module,
# or fails with FAKE_ASC_EXIT_CODE when the source matches FAKE_ASC_FAIL_ON.
FAKE_ASC = textwrap.dedent(
    """
    import os
    import sys

    args = sys.argv[1:]
    output = args[args.index("-b") + 1]
    source = args[args.index("-b") - 1]

    with open("invocations.log", "a") as log:
        log.write(" ".join(args) + "\\n")

    fail_on = os.environ.get("FAKE_ASC_FAIL_ON")
    if fail_on and os.path.basename(source) == fail_on + ".ts":
        sys.stderr.write("ERROR TS2304: Cannot find name 'oops'.\\n")
        sys.exit(int(os.environ.get("FAKE_ASC_EXIT_CODE", "1")))

    with open(output, "wb") as fh:
        fh.write(b"\\x00asm\\x01\\x00\\x00\\x00")
    """
)


@pytest.fixture
def fake_asc(tmp_path):
    script = tmp_path / "fake_asc.py"
    script.write_text(FAKE_ASC)
    (tmp_path / "wasm_test").mkdir()
    return [sys.executable, str(script)]


@pytest.fixture
def fake_asc_command_line(fake_asc):
    return shlex.join(fake_asc)


@pytest.fixture
def read_invocations(tmp_path):
    def _read():
        return _read_log(tmp_path)
    return _read


def _read_log(tmp_path):
    log = tmp_path / "invocations.log"
    if not log.exists():
        return []
    return log.read_text().splitlines()
