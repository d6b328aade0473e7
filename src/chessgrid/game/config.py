"""Game configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from chessgrid.core.enums import Color

ENV_HUMAN_COLOR = "CHESSGRID_HUMAN_COLOR"
ENV_KEEP_SELECTION = "CHESSGRID_KEEP_SELECTION"
ENV_AI_SEED = "CHESSGRID_AI_SEED"

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Settings for a :class:`~chessgrid.game.controller.GameController`.

    Args:
        human_color: Colour of the human player; decides board orientation.
        keep_selection_on_illegal_move: Keep the selected piece after a
            rejected destination instead of clearing the selection.
        ai_seed: Seed for the random mover, ``None`` for system entropy.
    """

    human_color: Color = Color.WHITE
    keep_selection_on_illegal_move: bool = False
    ai_seed: int | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GameConfig:
        env = os.environ if environ is None else environ

        color_name = env.get(ENV_HUMAN_COLOR, "white").strip().upper()
        try:
            human_color = Color[color_name]
        except KeyError:
            raise ValueError(
                f"Invalid {ENV_HUMAN_COLOR}: {env[ENV_HUMAN_COLOR]!r}"
            ) from None

        flag = env.get(ENV_KEEP_SELECTION, "").strip().lower()
        if flag not in _TRUE | _FALSE:
            raise ValueError(f"Invalid {ENV_KEEP_SELECTION}: {flag!r}")

        seed_text = env.get(ENV_AI_SEED, "").strip()
        try:
            seed = int(seed_text) if seed_text else None
        except ValueError:
            raise ValueError(f"Invalid {ENV_AI_SEED}: {seed_text!r}") from None

        return cls(
            human_color=human_color,
            keep_selection_on_illegal_move=flag in _TRUE,
            ai_seed=seed,
        )
