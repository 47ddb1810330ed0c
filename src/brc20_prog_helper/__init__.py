__all__ = [
    # Build
    "BuildOptions",
    "BuildResult",
    "build_artifacts",
    # Compiler
    "CompiledContract",
    "ImportResult",
    "collect_sources",
    "compile_contract",
    "extract_artifact",
    "find_import",
    # Encoding
    "build_deploy_data",
    "encode_function_data",
    "function_selector",
    "function_signature",
    # Envelopes
    "TransactionEnvelope",
    "validate_envelope",
    # Errors
    "HelperError",
    "SourceNotFoundError",
    "CompilationError",
    "ContractNotFoundError",
    "EncodingError",
    "EnvelopeInvalidError",
]

from .artifacts import BuildOptions, BuildResult, build_artifacts
from .compiler.imports import ImportResult, collect_sources, find_import
from .compiler.solc import CompiledContract, compile_contract, extract_artifact
from .encoding.abi import function_selector, function_signature
from .encoding.tx import build_deploy_data, encode_function_data
from .errors import (
    CompilationError,
    ContractNotFoundError,
    EncodingError,
    EnvelopeInvalidError,
    HelperError,
    SourceNotFoundError,
)
from .spec.models import TransactionEnvelope, validate_envelope
