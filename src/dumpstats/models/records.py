"""
Aggregation data models for heap dump decoding.

This module defines the structures produced and consumed during a single
decode pass:

- AggregateRecord: running per-class totals, one per distinct class id
- DecoderState: the transient traversal state threaded through the event loop
- ReportTotals: sums across all records, computed by the reporter
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class AggregateRecord:
    """
    Running totals for one class identifier seen in a heap dump.

    Records are created empty on first reference to a class id and mutated in
    place for the rest of the decode pass. The reporter treats them as
    read-only.
    """

    # Class identifier assigned by the producing VM.
    key: int
    # Display name, set by the first ClassName event naming this key.
    name: Optional[str] = None
    # Sum of instance sizes in machine words.
    footprint: int = 0
    # Number of counted instances.
    count: int = 0

    def add_instance(self, size: int) -> None:
        """Attribute one instance of `size` words to this class."""
        self.footprint += size
        self.count += 1

    def assign_name(self, name: str) -> bool:
        """Set the name unless one is already present. Returns True if it was set."""
        if self.name is not None:
            return False
        self.name = name
        return True


@dataclass
class DecoderState:
    """
    Traversal state for one pass over the event stream.
    """

    # Word size of the most recently announced object.
    current_size: int = 0
    # Identifier most recently pushed or rooted.
    current_id: int = 0
    # Set by Pop; the next Push is a revisit and is not counted.
    suppress_next: bool = False
    # Number of events seen per tag name.
    events: Counter = field(default_factory=Counter)


@dataclass(frozen=True)
class ReportTotals:
    """Sums over every record in a report, in machine words."""

    footprint: int
    count: int
    classes: int
