from __future__ import annotations

from rich.text import Text

from shoporusni.api.models import Statistics

CURRENT_STYLE = "red"
INCREASE_STYLE = "green"


def render(doc: Statistics, counter: str = "personnel_units") -> Text:
    """Format ``<current>↑<increase>`` for one counter."""
    current = getattr(doc.data.stats, counter)
    increase = getattr(doc.data.increase, counter)
    return Text.assemble(
        (str(current), CURRENT_STYLE),
        "↑",
        (str(increase), INCREASE_STYLE),
    )
