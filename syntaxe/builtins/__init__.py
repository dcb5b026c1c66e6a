"""Built-in validators, encoders and their metadata markers."""

from ..engine.registry import ValidatorRegistry
from .annotations import (
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
)
from .encoders import StripTagsEncoder, TrimEncoder, XssEncoder
from .validators import (
    ChildValidator,
    ChoiceValidator,
    EmailValidator,
    FloatValidator,
    IntegerValidator,
    RegexValidator,
    RequiredValidator,
    StringValidator,
)

BUILTIN_VALIDATORS = {
    "required": RequiredValidator,
    "string": StringValidator,
    "regex": RegexValidator,
    "email": EmailValidator,
    "integer": IntegerValidator,
    "float": FloatValidator,
    "choice": ChoiceValidator,
    "child": ChildValidator,
}

BUILTIN_ENCODERS = {
    "xss": XssEncoder,
    "strip_tags": StripTagsEncoder,
    "trim": TrimEncoder,
}


def register_builtins(registry: ValidatorRegistry) -> ValidatorRegistry:
    """Register the built-in validator and encoder kinds in ``registry``."""
    for kind, validator in BUILTIN_VALIDATORS.items():
        registry.register_validator(kind, validator, field_aware=True)
    for kind, encoder in BUILTIN_ENCODERS.items():
        registry.register_encoder(kind, encoder)
    return registry


__all__ = [
    "BUILTIN_ENCODERS",
    "BUILTIN_VALIDATORS",
    "register_builtins",
    # Metadata markers
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
    # Implementations
    "ChildValidator",
    "ChoiceValidator",
    "EmailValidator",
    "FloatValidator",
    "IntegerValidator",
    "RegexValidator",
    "RequiredValidator",
    "StringValidator",
    "StripTagsEncoder",
    "TrimEncoder",
    "XssEncoder",
]
