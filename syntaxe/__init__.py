"""Syntaxe - declarative validation and encoding of Python objects."""

__version__ = "0.1.0"

from .builtins import (
    ChildValidation,
    ChoiceValidation,
    EmailValidation,
    FloatValidation,
    IntegerValidation,
    RegexValidation,
    Required,
    StringValidation,
    StripTags,
    Trim,
    XssEncoding,
    register_builtins,
)
from .core import (
    FieldEncoding,
    FieldValidation,
    encoding_provider,
    object_validation,
    validation_provider,
)
from .engine import (
    AnnotatedFieldValidator,
    Encoder,
    EncodingError,
    EngineError,
    ResolutionError,
    SyntaxeError,
    Validatable,
    ValidationEngine,
    ValidationException,
    Validator,
    ValidatorRegistry,
    encode,
    get_engine,
    validate,
    validate_and_throw,
)

__all__ = [
    "__version__",
    # Entry points
    "encode",
    "get_engine",
    "validate",
    "validate_and_throw",
    "ValidationEngine",
    "ValidatorRegistry",
    "register_builtins",
    # Contracts
    "AnnotatedFieldValidator",
    "Encoder",
    "Validatable",
    "Validator",
    # Declarations
    "FieldEncoding",
    "FieldValidation",
    "encoding_provider",
    "object_validation",
    "validation_provider",
    "ChildValidation",
    "ChoiceValidation",
    "EmailValidation",
    "FloatValidation",
    "IntegerValidation",
    "RegexValidation",
    "Required",
    "StringValidation",
    "StripTags",
    "Trim",
    "XssEncoding",
    # Exceptions
    "EncodingError",
    "EngineError",
    "ResolutionError",
    "SyntaxeError",
    "ValidationException",
]
