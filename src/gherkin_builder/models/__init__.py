"""Pydantic data models for glue code scanning.

- Classified method parameters (ParameterDescriptor, ParameterKind)
- Recognized steps (StepDescriptor)

Models are frozen: a descriptor never changes after the parser emits it.

Example:
    >>> from gherkin_builder.models import ParameterDescriptor, StepDescriptor
    >>> step = StepDescriptor(phrase="I log in", parameters=())
    >>> step.model_dump_json()
"""

from .parameter import ParameterDescriptor, ParameterKind
from .step import StepDescriptor

__all__ = [
    "ParameterDescriptor",
    "ParameterKind",
    "StepDescriptor",
]
