"""ratfem.config
Runtime switches, read from the environment.
"""
import os
from dataclasses import dataclass

_TRUE = {"1", "true", "yes"}
ZERO_DENOMINATOR_POLICIES = ("raise", "propagate")


@dataclass(frozen=True)
class Settings:
    second_derivatives: bool = True
    zero_denominator: str = "raise"      # "raise" | "propagate"

    def __post_init__(self):
        if self.zero_denominator not in ZERO_DENOMINATOR_POLICIES:
            raise ValueError(
                f"zero_denominator must be one of {ZERO_DENOMINATOR_POLICIES}, "
                f"got {self.zero_denominator!r}"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        disable_d2 = os.getenv("RATFEM_DISABLE_SECOND_DERIVATIVES", "").lower() in _TRUE
        policy = os.getenv("RATFEM_ZERO_DENOMINATOR", "raise").strip().lower() or "raise"
        return cls(second_derivatives=not disable_d2, zero_denominator=policy)
