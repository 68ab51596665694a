class FixtureBuildError(Exception):
    """Base error for the wasm fixture build."""


class CompilerNotFoundError(FixtureBuildError):
    """The compiler executable could not be started."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Compiler executable not found: {command}")


class CompilerNotExecutableError(FixtureBuildError):
    """The compiler file exists but may not be executed."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Compiler is not executable: {command}")
