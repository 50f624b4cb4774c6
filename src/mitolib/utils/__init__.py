"""
Module containing the package error taxonomy, warnings and configuration base class.
"""
from dataclasses import dataclass, fields
from typing import Any


# Exceptions and Warnings ----------------------------------------------------------------------------------------------
class MitolibError(Exception):
    """Base class for all errors raised by mitolib."""


class BoundsError(MitolibError, IndexError):
    """Raised when an index falls outside a molecule window, the reference, or inside an excluded wrap gap."""


class ConfigurationError(MitolibError):
    """Raised for an invalid strand code or an unknown reference lookup key."""


class DomainError(MitolibError):
    """Raised when an operation is not defined for a molecule (e.g. translating a partial or non-coding transcript)."""


class ValidationError(MitolibError, ValueError):
    """Raised for malformed variant tokens, malformed positions and non-positive indices."""


class MitolibWarning(Warning): pass
class TranscriptWarning(MitolibWarning): pass


# Classes --------------------------------------------------------------------------------------------------------------
@dataclass(slots=True, frozen=True, kw_only=True)
class Config:
    """
    Config parent class that can conveniently set attributes from CLI args
    """
    @classmethod
    def from_obj(cls, obj: Any) -> 'Config':
        return cls(**{f.name: val for f in fields(cls) if (val := getattr(obj, f.name, None)) is not None})
