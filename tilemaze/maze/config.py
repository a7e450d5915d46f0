from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .cells import Pattern
from .colormap import check_dimensions, normalize_pattern
from .errors import ConfigError, InvalidDimensions
from .patterns import DEFAULT_PRESET, get_preset

_FALSE_VALUES = {'0', 'false', 'no', 'off', ''}


def _default_pattern() -> Pattern:
    return get_preset(DEFAULT_PRESET)[0]


def _env_flag(value: str) -> bool:
    return value.strip().lower() not in _FALSE_VALUES


@dataclass
class MazeConfig:
    width: int = 33
    height: int = 26
    pattern: Pattern = field(default_factory=_default_pattern)
    line_reset: bool = True
    widen: bool = True
    seed: Optional[int] = None
    strict: bool = False
    enable_metrics: bool = True

    def validate(self) -> None:
        """Raise ``InvalidDimensions`` / ``InvalidPattern`` for unusable settings."""
        check_dimensions(self.width, self.height)
        normalize_pattern(self.pattern, self.line_reset)

    @classmethod
    def from_preset(cls, name: str, **overrides) -> "MazeConfig":
        pattern, line_reset = get_preset(name)
        return cls(pattern=pattern, line_reset=line_reset, **overrides)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "MazeConfig":
        """Build a config from ``TILEMAZE_*`` variables; explicit overrides win."""
        env = os.environ if environ is None else environ
        values = {}
        if 'TILEMAZE_PRESET' in env:
            pattern, line_reset = get_preset(env['TILEMAZE_PRESET'])
            values['pattern'] = pattern
            values['line_reset'] = line_reset
        for env_key, attr in (('TILEMAZE_WIDTH', 'width'), ('TILEMAZE_HEIGHT', 'height')):
            if env_key in env:
                try:
                    values[attr] = int(env[env_key])
                except ValueError:
                    raise InvalidDimensions(f"{env_key} must be an integer, got {env[env_key]!r}") from None
        if env.get('TILEMAZE_SEED', '').strip():
            try:
                values['seed'] = int(env['TILEMAZE_SEED'])
            except ValueError:
                raise ConfigError(f"TILEMAZE_SEED must be an integer, got {env['TILEMAZE_SEED']!r}") from None
        flag_map = {
            'TILEMAZE_LINE_RESET': 'line_reset',
            'TILEMAZE_WIDEN': 'widen',
            'TILEMAZE_STRICT': 'strict',
            'TILEMAZE_ENABLE_METRICS': 'enable_metrics',
        }
        for env_key, attr in flag_map.items():
            if env_key in env:
                values[attr] = _env_flag(env[env_key])
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


__all__ = ["MazeConfig"]
