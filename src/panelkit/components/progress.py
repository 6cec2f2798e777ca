from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StageId:
    """Stage identity as a pair of small integers.

    Serves both naming schemes: (world, level) and (area, stage). The text
    form is ``"major-minor"``, e.g. ``"1-1"``.
    """

    major: int
    minor: int

    @classmethod
    def parse(cls, text: str) -> "StageId":
        parts = str(text).strip().split("-")
        if len(parts) != 2:
            raise ValueError(f"Stage must look like 'M-m', got {text!r}")
        try:
            major, minor = int(parts[0]), int(parts[1])
        except ValueError:
            raise ValueError(f"Stage must look like 'M-m', got {text!r}") from None
        return cls(major=major, minor=minor)

    def __str__(self) -> str:
        return f"{self.major}-{self.minor}"


@dataclass(frozen=True, slots=True)
class ProgressState:
    """Progress a continue password encodes.

    Time fields are expected to be clamped already (hours 0-9, minutes and
    seconds 0-59).
    """

    stage: StageId
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    back_side: bool = False


@dataclass(slots=True)
class PasswordForm:
    """Singleton component holding the password screen's current inputs."""

    scheme_name: str
    state: ProgressState
    password: str = ""
