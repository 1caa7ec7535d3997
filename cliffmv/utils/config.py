"""
Configuration management for cliffmv.

A Config carries the dimension count and precision of the multivectors a
run works with, the tolerances used to compare them, the seed of the
random generator and the logging level. Configs are stored as JSON.
"""

import json
from dataclasses import dataclass, field, asdict, fields, replace
from typing import Dict, Any, Tuple
from pathlib import Path

import torch

_DTYPES = {
    'float32': torch.float32,
    'float64': torch.float64,
}


@dataclass
class Config:
    """
    Configuration for multivector computations.

    Attributes:
        dimension_count: Number of basis vectors of generated multivectors
        dtype: Coefficient dtype name ('float32' or 'float64')
        rtol: Relative tolerance for approximate comparisons
        atol: Absolute tolerance for approximate comparisons
        seed: Seed of the generator returned by make_generator()
        log_level: Logging level name
        extra: Keys not recognised as fields
    """

    dimension_count: int = 4
    dtype: str = 'float64'

    # Tolerances
    rtol: float = 1e-9
    atol: float = 1e-9

    # Randomness
    seed: int = 0

    # Logging
    log_level: str = 'INFO'

    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def torch_dtype(self) -> torch.dtype:
        """Resolve the dtype name to a torch dtype."""
        if self.dtype not in _DTYPES:
            raise ValueError(f"Unknown dtype: {self.dtype}. Available: {sorted(_DTYPES)}")
        return _DTYPES[self.dtype]

    def make_generator(self) -> torch.Generator:
        """Fresh torch.Generator seeded with `seed`; equal seeds give equal draws."""
        return torch.Generator().manual_seed(self.seed)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def _split(cls, values: Dict[str, Any]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        """Separate field values from unrecognised keys."""
        names = {f.name for f in fields(cls)} - {'extra'}
        known = {k: v for k, v in values.items() if k in names}
        unknown = {k: v for k, v in values.items() if k not in names and k != 'extra'}
        return known, unknown

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """
        Build a config from a plain dict.

        Unrecognised keys, and the contents of a nested 'extra' dict, end
        up in `extra`.
        """
        known, unknown = cls._split(config_dict)
        extra = dict(config_dict.get('extra', {}))
        extra.update(unknown)
        return cls(extra=extra, **known)

    def update(self, **kwargs) -> 'Config':
        """Copy of this config with the given fields replaced."""
        known, unknown = self._split(kwargs)
        return replace(self, extra={**self.extra, **unknown}, **known)


def load_config(filepath: str) -> Config:
    """
    Read a config from a JSON file.

    Args:
        filepath: Path of the JSON file

    Returns:
        Config object
    """
    return Config.from_dict(json.loads(Path(filepath).read_text()))


def save_config(config: Config, filepath: str) -> None:
    """Write a config as indented JSON, creating parent directories."""
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config.to_dict(), indent=2))
