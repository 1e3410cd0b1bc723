"""Phrase extraction from step annotation match patterns."""

import re

from ..constants import ANY_MARKER, CAPTURE_PLACEHOLDER, OPTIONAL_TEMPLATE
from ..errors import MalformedPattern

_NON_CAPTURING_GROUP = re.compile(r"\(\?:.*?\)")
_GROUP = re.compile(r"\(.*?\)")
_OPTIONAL = re.compile(r"\[([^\[\]]*)\]\?")


def extract_pattern(annotation_text: str) -> str:
    """Return the expression strictly between the first ``^`` and the last ``$``.

    Args:
        annotation_text: Step annotation, e.g. ``@Given("^I log in$")``

    Returns:
        The raw match pattern

    Raises:
        MalformedPattern: If ``^`` or ``$`` is missing, or ``^`` follows ``$``
    """
    start = annotation_text.find("^")
    end = annotation_text.rfind("$")
    if start < 0 or end < 0 or start > end:
        raise MalformedPattern(
            "There is a problem with your glue code. It is expected to start with '^' "
            f"and end with '$'. Examine the expression '{annotation_text}'",
            annotation_text,
        )
    return annotation_text[start + 1 : end]


def extract_phrase(annotation_text: str) -> str:
    """Convert a step annotation into a display phrase.

    Substitutions run in a fixed order so later passes never re-match
    earlier output:

    1. non-capturing groups ``(?:...)`` become the "any" marker
    2. remaining groups ``(...)`` become the capture placeholder
    3. optional groups ``[...]?`` keep their text inside the "optional" marker;
       nested ones are wrapped innermost first

    Args:
        annotation_text: Step annotation. Examples:
            ``@Given("^I have a new registered user$")``,
            ``@When("^I (.*)login$")``,
            ``@Then("^I see the login error message \\"([^\\"]*)\\"$")``

    Returns:
        Phrase for the builder

    Raises:
        MalformedPattern: If the annotation has no ``^...$`` span
    """
    phrase = extract_pattern(annotation_text)
    phrase = _NON_CAPTURING_GROUP.sub(lambda _: ANY_MARKER, phrase)
    phrase = _GROUP.sub(lambda _: CAPTURE_PLACEHOLDER, phrase)
    # innermost first, until no optional group is left
    count = 1
    while count:
        phrase, count = _OPTIONAL.subn(lambda m: OPTIONAL_TEMPLATE.format(m.group(1)), phrase)
    return phrase
