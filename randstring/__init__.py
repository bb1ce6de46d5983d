"""randstring: constraint-driven random string and password generation."""

from .validator import AlphaCase, ConfigurationError, ErrorKind, GenerationConfig, validate
from .generator import generate, generate_many, generate_string
from .strength import EnforcingPattern, PasswordStrength, check_strength

__version__ = "1.0.0"
