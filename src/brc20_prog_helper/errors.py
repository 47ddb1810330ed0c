from __future__ import annotations


class HelperError(RuntimeError):
    exit_code: int = 1


class SourceNotFoundError(HelperError):
    exit_code = 2


class CompilationError(HelperError):
    exit_code = 3

    def __init__(self, message: str, diagnostics: list[str] | None = None) -> None:
        super().__init__(message)
        self.diagnostics = diagnostics or []


class ContractNotFoundError(HelperError):
    exit_code = 4


class EncodingError(HelperError, ValueError):
    exit_code = 5


class EnvelopeInvalidError(HelperError):
    exit_code = 6

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []
