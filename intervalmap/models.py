"""Pydantic v2 models for replay scripts, checks and fuzz reports."""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from intervalmap.limits import resolve_limits

ScriptKey = int | Literal["lowest", "highest"]


class AssignOp(BaseModel):
    """A single ``assign(begin, end, value)`` step of a replay script."""

    begin: ScriptKey
    end: ScriptKey
    value: Any


class ReplayScript(BaseModel):
    """A sequence of assign operations loaded from YAML."""

    name: str
    description: str = ""
    initial: Any
    limits: str = "unbounded"
    operations: list[AssignOp] = Field(default_factory=list)
    probes: list[ScriptKey] = Field(default_factory=list)
    expected: list[tuple[ScriptKey, Any]] | None = None

    @field_validator("limits")
    @classmethod
    def validate_limits(cls, value: str) -> str:
        """Reject key domains that ``resolve_limits`` does not know.

        Args:
            value: Raw limits name from the script.

        Returns:
            The lower-cased limits name.
        """
        resolve_limits(value)
        return value.lower()


class CanonicalityResult(BaseModel):
    """Result of checking a breakpoint sequence for canonical form."""

    passed: bool
    violations: list[str]
    metrics: dict


class Mismatch(BaseModel):
    """A key whose looked-up value differs from the brute-force table."""

    round: int
    key: int
    expected: Any
    actual: Any


class FuzzReport(BaseModel):
    """Outcome of a randomized differential run."""

    seed: int
    rounds: int
    assigns: int = 0
    empty_assigns: int = 0
    checks: int = 0
    max_breakpoints: int = 1
    mismatches: list[Mismatch] = Field(default_factory=list)
    canonicity_violations: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_counts(self) -> "FuzzReport":
        """Ensure the assign counters never exceed the number of rounds.

        Returns:
            The validated FuzzReport instance.
        """
        if self.assigns + self.empty_assigns > self.rounds:
            raise ValueError("FuzzReport counts more assigns than rounds")
        return self

    @property
    def passed(self) -> bool:
        return not self.mismatches and not self.canonicity_violations
