"""
JSON text helpers for sections.

Section.to_json() / Section.create_from_json() work on plain dicts; these
helpers add the string layer used when a section crosses a process or
storage boundary. The tuning is never written, so the caller supplies it
again on load.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence

from chuk_tab.constants import ErrorMessages
from chuk_tab.core.pitch import Note
from chuk_tab.errors import MalformedDocumentError
from chuk_tab.models.section import Section

logger = logging.getLogger(__name__)


def dumps(section: Section, indent: int | None = None) -> str:
    """Serialize a section to a JSON string."""
    return json.dumps(section.to_json(), indent=indent)


def loads(text: str, tuning: Sequence[Note]) -> Section:
    """
    Load a section from a JSON string.

    Raises:
        MalformedDocumentError: if the text is not JSON or not a section
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug("Invalid section json: %s", e)
        raise MalformedDocumentError(ErrorMessages.INVALID_JSON.format(reason=e.msg)) from e

    return Section.create_from_json(data, tuning)
