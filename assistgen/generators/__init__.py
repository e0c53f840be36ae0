"""Built-in generator registrations."""

from .registry import register_generator
from .tau import TAUSnippetGenerator

register_generator(TAUSnippetGenerator, replace=True)

__all__ = ["TAUSnippetGenerator"]
