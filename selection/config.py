# selection/config.py
from dataclasses import asdict, dataclass, field
from typing import Iterable, Optional, Tuple

from scoring.shapes import ShapeKind


class ConfigError(ValueError):
    """Invalid run configuration; raised before the search loop starts."""


def parse_shapes(spec) -> Tuple[ShapeKind, ...]:
    '''
    "lines,rectangles" or an iterable of names / ShapeKind -> tuple of kinds.
    Order is kept; it defines what each random draw can pick.
    '''
    names: Iterable = spec.split(",") if isinstance(spec, str) else spec
    kinds = []
    for name in names:
        if isinstance(name, ShapeKind):
            kinds.append(name)
            continue
        try:
            kinds.append(ShapeKind.parse(name))
        except ValueError as e:
            raise ConfigError(str(e)) from e
    if not kinds:
        raise ConfigError("at least one shape is required")
    return tuple(kinds)


@dataclass
class RedrawConfig:
    iterations: int = 500000
    min_size: int = 1
    max_size: int = 20
    shapes: Tuple[ShapeKind, ...] = field(default=(ShapeKind.LINE,))
    uniform_palette: bool = False
    adaptive: bool = False
    adapt_rate: int = 100000
    adapt_coeff: float = 0.9
    biased: bool = False
    animate: bool = False
    animation_interval: int = 1000
    blur: bool = False
    blur_amount: float = 0.5
    quiet: bool = False
    seed: Optional[int] = None

    def validate(self) -> "RedrawConfig":
        self.shapes = parse_shapes(self.shapes)
        if self.iterations < 0:
            raise ConfigError(f"iterations must be >= 0, got {self.iterations}")
        if self.min_size < 0:
            raise ConfigError(f"min size must be >= 0, got {self.min_size}")
        if self.min_size >= self.max_size:
            raise ConfigError(f"min size ({self.min_size}) must be below max size ({self.max_size})")
        if self.adapt_rate <= 0:
            raise ConfigError(f"adapt rate must be positive, got {self.adapt_rate}")
        if not 0.0 < self.adapt_coeff < 1.0:
            raise ConfigError(f"adapt coeff must be in (0, 1), got {self.adapt_coeff}")
        if self.animation_interval <= 0:
            raise ConfigError(f"animation interval must be positive, got {self.animation_interval}")
        if self.blur_amount < 0:
            raise ConfigError(f"blur amount must be >= 0, got {self.blur_amount}")
        return self

    def to_dict(self) -> dict:
        d = asdict(self)
        d["shapes"] = [k.value for k in self.shapes]
        return d
