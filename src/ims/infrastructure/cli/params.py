"""Custom click parameter types shared by the menu and the commands."""

from __future__ import annotations

import math

import click


class PriceType(click.FloatRange):
    """A non-negative, finite price. Rejects ``nan`` and ``inf``."""

    name = "price"

    def __init__(self) -> None:
        super().__init__(min=0.0)

    def convert(self, value, param, ctx):
        rv = super().convert(value, param, ctx)
        if not math.isfinite(rv):
            self.fail(f"{value!r} is not a finite number.", param, ctx)
        return rv


PRICE = PriceType()
