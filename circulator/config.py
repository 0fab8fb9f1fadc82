"""Configuration helpers for building circles."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass
class CirculatorOptions:
    """Options for :class:`circulator.Circulator`.

    ``random_seed`` of ``None`` gives an unseeded, non-reproducible run.
    """

    random_seed: Optional[int] = None

    def make_rng(self) -> np.random.Generator:
        return np.random.default_rng(self.random_seed)


_DEFAULT_OPTIONS = CirculatorOptions()


def get_default_options() -> CirculatorOptions:
    return copy.deepcopy(_DEFAULT_OPTIONS)


def set_default_options(options: CirculatorOptions) -> None:
    global _DEFAULT_OPTIONS
    _DEFAULT_OPTIONS = copy.deepcopy(options)
