from dataclasses import dataclass, field
from typing import Optional, Tuple

from cycle_tracker.models.period_cycle import PeriodCycle
from cycle_tracker.models.cycle_settings import CycleSettings


@dataclass(frozen=True)
class CycleTrackerState:
    """
    Caller-owned snapshot of the cycle history and settings.
    Cycles are ordered newest first; every engine call returns a new state.
    """
    cycles: Tuple[PeriodCycle, ...] = ()
    settings: CycleSettings = field(default_factory=CycleSettings)

    def __post_init__(self):
        # Accept any sequence but always store an immutable tuple
        object.__setattr__(self, 'cycles', tuple(self.cycles))

    @property
    def most_recent_cycle(self) -> Optional[PeriodCycle]:
        return self.cycles[0] if self.cycles else None

    @property
    def has_history(self) -> bool:
        return len(self.cycles) > 0

    def find_cycle(self, cycle_id: str) -> Optional[PeriodCycle]:
        for cycle in self.cycles:
            if cycle.id == cycle_id:
                return cycle
        return None
