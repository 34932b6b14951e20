import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)

    MIN_WORD_LENGTH: int = 4
    MAX_WORD_LENGTH: int = 16
    GRID_SIZE: int = 4
    PRUNE_BY_PREFIX: bool = True

    MAX_RESULTS: int = 0
    DEBUG: bool = False

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "data" / "words.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                setattr(self, fld, _coerce(getattr(self, fld), env_val))


def _coerce(current, value):
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        return str(value).lower() in ("1", "true", "yes")
    if isinstance(current, int):
        return int(value)
    if isinstance(current, float):
        return float(value)
    if isinstance(current, Path):
        return Path(value)
    return str(value)


# Fields that may be changed at runtime through /api/settings
EDITABLE_FIELDS: dict[str, type] = {
    "MIN_WORD_LENGTH": int,
    "MAX_WORD_LENGTH": int,
    "GRID_SIZE": int,
    "PRUNE_BY_PREFIX": bool,
    "MAX_RESULTS": int,
    "DEBUG": bool,
}

_MINIMUMS = {
    "MIN_WORD_LENGTH": 1,
    "MAX_WORD_LENGTH": 1,
    "GRID_SIZE": 1,
    "MAX_RESULTS": 0,
}


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **kwargs) -> dict[str, str]:
    """Apply editable field updates. Returns per-field error messages; valid fields are applied regardless."""
    errors: dict[str, str] = {}
    bounds = (cfg.MIN_WORD_LENGTH, cfg.MAX_WORD_LENGTH)
    for name, value in kwargs.items():
        if name not in EDITABLE_FIELDS:
            errors[name] = "not an editable setting"
            continue
        try:
            new_value = _coerce(getattr(cfg, name), value)
        except (TypeError, ValueError):
            errors[name] = f"expected {EDITABLE_FIELDS[name].__name__}, got {value!r}"
            continue
        if name in _MINIMUMS and new_value < _MINIMUMS[name]:
            errors[name] = f"must be at least {_MINIMUMS[name]}"
            continue
        setattr(cfg, name, new_value)

    # The length window is checked as a pair; an inverted one would match nothing
    if cfg.MIN_WORD_LENGTH > cfg.MAX_WORD_LENGTH:
        errors["MIN_WORD_LENGTH"] = (
            f"must not exceed MAX_WORD_LENGTH ({cfg.MIN_WORD_LENGTH} > {cfg.MAX_WORD_LENGTH})"
        )
        cfg.MIN_WORD_LENGTH, cfg.MAX_WORD_LENGTH = bounds
    return errors


settings = Settings()
