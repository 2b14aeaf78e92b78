"""
ToC repair services.

Raw ToC lines from PDF text are often broken: titles wrapped onto two
lines, page numbers split off, leaders garbled. A repair service (for
instance a language model behind an API) may rewrite them into one
clean entry per line before parsing.

Repair is optional and best-effort: one synchronous call per document,
no retries, and any failure leaves the original lines in place.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable

from pdf2docs.config import DEFAULT_REPAIR_INSTRUCTION

logger = logging.getLogger(__name__)

RepairFunction = Callable[[list[str], str], list[str] | str]


class ToCRepairService(ABC):
    """Abstract base for ToC repair services."""

    name: str = "base"

    @abstractmethod
    def repair(self, lines: list[str], instruction: str = DEFAULT_REPAIR_INSTRUCTION) -> list[str]:
        """Return repaired ToC lines, in order.

        May raise; callers treat any exception as "no repair".
        """
        pass


class NoopRepair(ToCRepairService):
    """Returns lines unchanged."""

    name = "noop"

    def repair(self, lines: list[str], instruction: str = DEFAULT_REPAIR_INSTRUCTION) -> list[str]:
        return list(lines)


class CallableRepair(ToCRepairService):
    """Adapts a plain function to the repair interface.

    The function receives the raw lines and the instruction and may
    return either a list of lines or a single block of text, which is
    split into its non-blank lines.

    Usage:
        def ask_model(lines, instruction):
            return client.complete(instruction + "\\n\\n" + "\\n".join(lines))

        service = CallableRepair(ask_model, name="my-model")
    """

    def __init__(self, func: RepairFunction, name: str = "callable"):
        """Initialize with the wrapped function.

        Args:
            func: Called as func(lines, instruction).
            name: Name used in logs.
        """
        self.func = func
        self.name = name

    def repair(self, lines: list[str], instruction: str = DEFAULT_REPAIR_INSTRUCTION) -> list[str]:
        result = self.func(list(lines), instruction)
        if result is None:
            return []
        if isinstance(result, str):
            result = result.split("\n")
        return [line.strip() for line in result if line and line.strip()]


def apply_repair(
    service: ToCRepairService | None,
    lines: list[str],
    log: list[str],
    instruction: str = DEFAULT_REPAIR_INSTRUCTION,
) -> list[str]:
    """Run a repair service over ToC lines, keeping the input on failure.

    Args:
        service: Repair service, or None to skip repair.
        lines: Candidate ToC lines from the locator.
        log: Processing log to append notes to.
        instruction: Natural-language instruction for the service.

    Returns:
        Repaired lines, or the input lines when the service is absent,
        fails or returns nothing.
    """
    if service is None or not lines:
        return lines

    try:
        repaired = service.repair(lines, instruction)
    except Exception as e:
        log.append(f"ToC repair {service.name} failed: {e}")
        logger.warning("ToC repair %s failed: %s", service.name, e)
        return lines

    if not repaired:
        log.append(f"ToC repair {service.name} returned nothing, keeping original lines")
        logger.warning("ToC repair %s returned nothing", service.name)
        return lines

    log.append(f"ToC repair {service.name}: {len(lines)} lines -> {len(repaired)} lines")
    return repaired
