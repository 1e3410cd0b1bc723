"""Rendering of step descriptors for the Gherkin builder page.

The builder page loads a script that pushes one ``step`` object per glue
code step onto ``testSteps``; each parameter becomes a ``keypair`` whose
type is ``"number"``, ``"text"``, ``"date"`` or the bare name of an
enumeration object defined elsewhere on the page.
"""

from collections.abc import Iterable
from typing import Any

from .models import ParameterDescriptor, ParameterKind, StepDescriptor


def render_parameter(parameter: ParameterDescriptor) -> str:
    """Render one parameter as a ``new keypair( ... )`` expression."""
    if parameter.kind is ParameterKind.ENUM:
        type_ref = parameter.enum_type
    else:
        type_ref = f'"{parameter.kind.value}"'
    return f'new keypair( "{parameter.name}", {type_ref} )'


def render_step(step: StepDescriptor) -> str:
    """Render a step as a ``testSteps.push`` statement."""
    parts = [f'"{step.phrase}"'] + [render_parameter(p) for p in step.parameters]
    return f"testSteps.push( new step( {', '.join(parts)} ) );"


def render_steps(steps: Iterable[StepDescriptor]) -> str:
    return "\n".join(render_step(step) for step in steps)


def step_to_dict(step: StepDescriptor) -> dict[str, Any]:
    """Return a JSON-ready dict, dropping ``enum_type`` where it is unset."""
    return {
        "phrase": step.phrase,
        "parameters": [p.model_dump(mode="json", exclude_none=True) for p in step.parameters],
    }


def steps_to_dicts(steps: Iterable[StepDescriptor]) -> list[dict[str, Any]]:
    return [step_to_dict(step) for step in steps]
