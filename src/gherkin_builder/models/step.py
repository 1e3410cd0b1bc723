"""Step model for recognized glue code steps.

A step descriptor is emitted once per step-annotated method, pairing the
display phrase from the annotation with the method's classified
parameters.
"""

from pydantic import BaseModel, ConfigDict, Field

from .parameter import ParameterDescriptor


class StepDescriptor(BaseModel):
    """Recognized step from glue code.

    Attributes:
        phrase: Display phrase derived from the annotation's match pattern.
        parameters: Classified method parameters in declaration order.

    Example:
        >>> step = StepDescriptor(
        ...     phrase="I click XXXX",
        ...     parameters=(ParameterDescriptor.text("target"),),
        ... )
    """

    model_config = ConfigDict(frozen=True)

    phrase: str = Field(description="Display phrase with placeholders")
    parameters: tuple[ParameterDescriptor, ...] = Field(
        default=(), description="Classified method parameters"
    )
