"""Chat domain - persona replies in chat channels."""

from .domain import ChatDomain
from .persona import Persona

__all__ = ["ChatDomain", "Persona"]
