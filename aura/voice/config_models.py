from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field

from aura import ARGS_DIR

logger = logging.getLogger(__name__)


DEFAULT_FILLER_WORDS: list[str] = [
    "um", "uh", "er", "ah", "like", "you know", "hey", "ok", "okay", "so",
    "well", "please", "just", "can you", "could you", "i want you to",
]


# =============================================================================
# VoiceConfig (args/voice.yaml)
# =============================================================================

class CommandDetectionConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    # Longer utterances are treated as conversation even if they contain a trigger word
    max_command_words: int = Field(default=10, ge=1)
    filler_words: list[str] = Field(default_factory=lambda: list(DEFAULT_FILLER_WORDS))
    wake_words: list[str] = Field(default_factory=lambda: ["aura"])

    @property
    def stripped_words(self) -> tuple[str, ...]:
        """Filler words plus wake words, lowercased, in declaration order."""
        words = [w.strip().lower() for w in [*self.filler_words, *self.wake_words]]
        return tuple(dict.fromkeys(w for w in words if w))


class VoiceConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    detection: CommandDetectionConfig = Field(default_factory=CommandDetectionConfig)


# =============================================================================
# Loader
# =============================================================================

_CONFIG_MAP: dict[str, type[BaseModel]] = {
    "voice": VoiceConfig,
}


def load_and_validate(
    config_name: str,
    model_class: type[BaseModel] | None = None,
    path: Path | None = None,
) -> BaseModel:
    if model_class is None:
        model_class = _CONFIG_MAP.get(config_name)
        if model_class is None:
            raise ValueError(f"Unknown config: {config_name}. Available: {list(_CONFIG_MAP.keys())}")

    yaml_path = path or ARGS_DIR / f"{config_name}.yaml"

    try:
        if yaml_path.exists():
            with open(yaml_path) as f:
                raw = yaml.safe_load(f) or {}
        else:
            raw = {}

        return model_class.model_validate(raw)
    except Exception as e:
        logger.warning(f"Config validation failed for {config_name}: {e}, using defaults")
        return model_class()


def load_voice_config(path: Path | None = None) -> VoiceConfig:
    return load_and_validate("voice", VoiceConfig, path)  # type: ignore[return-value]
