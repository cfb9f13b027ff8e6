"""Shell configuration with environment overrides."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from ana import __version__
from ana_repl.errors import ConfigurationError

DEFAULT_PROMPT = ">> "
DEFAULT_BANNER = "Welcome to Ana v{version}"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass
class ReplConfig:
    prompt: str = DEFAULT_PROMPT
    banner: str = DEFAULT_BANNER
    strict: bool = False
    show_eof: bool = False

    def banner_text(self) -> str:
        return self.banner.format(version=__version__)

    @classmethod
    def from_env(cls, *, environ: Mapping[str, str] | None = None) -> ReplConfig:
        """Build a config from ANA_* variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        config = cls()

        prompt = env.get("ANA_PROMPT")
        if prompt is not None:
            config.prompt = prompt

        strict = env.get("ANA_STRICT")
        if strict is not None:
            config.strict = _parse_bool("ANA_STRICT", strict)

        show_eof = env.get("ANA_SHOW_EOF")
        if show_eof is not None:
            config.show_eof = _parse_bool("ANA_SHOW_EOF", show_eof)

        return config


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigurationError(name, raw)
