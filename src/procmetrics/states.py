"""Per-state process counting."""

from collections.abc import Iterable

from procmetrics.catalog import STATE_NAMES, STATES
from procmetrics.log import get_logger
from procmetrics.models import ProcessRecord

logger = get_logger(__name__)


def aggregate(
    snapshot: Iterable[ProcessRecord],
    known_states: Iterable[str] = STATE_NAMES,
) -> dict[str, int]:
    """
    Count processes per known state.

    Every known state is present in the result, even with a count of 0.
    Records whose state code maps to no known state are not counted.
    """
    counts = dict.fromkeys(known_states, 0)
    for record in snapshot:
        state = STATES.get(record.state)
        if state is None or state not in counts:
            logger.debug("unknown_process_state", pid=record.pid, state=record.state)
            continue
        counts[state] += 1
    return counts
