"""Display helpers for conversion results."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Dict, Optional

from .converter import BadInputError, Conversion, resolve_unit


def format_value(
    value: float,
    *,
    sig_figs: Optional[int] = None,
    decimals: Optional[int] = None,
) -> str:
    """Format ``value`` with a fixed number of decimals or significant figures.

    Without either option the value is printed with up to 15 significant
    digits, which hides the last-digit noise of float arithmetic.
    """

    if sig_figs is not None and decimals is not None:
        raise BadInputError("Specify either significant figures or decimals, not both.")
    if not math.isfinite(value):
        return str(value)
    if decimals is not None:
        if decimals < 0:
            raise BadInputError("Decimal precision must be non-negative.")
        return f"{value:.{decimals}f}"
    if sig_figs is not None:
        if sig_figs <= 0:
            raise BadInputError("Significant figures must be positive.")
        return _format_sig_figs(value, sig_figs)
    return f"{value:.15g}"


def _format_sig_figs(value: float, sig_figs: int) -> str:
    if value == 0:
        return "0" if sig_figs == 1 else "0." + "0" * (sig_figs - 1)
    magnitude = int(math.floor(math.log10(abs(value))))
    digits = sig_figs - 1 - magnitude
    with localcontext() as ctx:
        ctx.rounding = ROUND_HALF_UP
        ctx.prec = sig_figs + 2
        rounded = (
            Decimal(str(value))
            .scaleb(digits)
            .to_integral_value(rounding=ROUND_HALF_UP)
            .scaleb(-digits)
        )
    if -4 <= magnitude < sig_figs:
        return f"{float(rounded):.{max(digits, 0)}f}"
    return f"{float(rounded):.{sig_figs - 1}e}"


def describe(
    conversion: Conversion,
    *,
    sig_figs: Optional[int] = None,
    decimals: Optional[int] = None,
) -> Dict[str, object]:
    """Render ``conversion`` as a JSON-safe mapping.

    Non-finite results have no JSON number, so ``value`` is ``None`` and the
    ``formatted`` text (``inf``, ``-inf`` or ``nan``) carries the result.
    """

    # The tool shows the number followed by the unit name the user picked.
    formatted = format_value(conversion.result, sig_figs=sig_figs, decimals=decimals)
    unit = resolve_unit(conversion.dimension, conversion.to_unit)
    return {
        "value": conversion.result if math.isfinite(conversion.result) else None,
        "unit": conversion.to_unit,
        "label": unit.label if unit is not None else conversion.to_unit,
        "formatted": formatted,
        "display": f"{formatted} {conversion.to_unit}",
        "constants": conversion.constants,
    }


__all__ = ["describe", "format_value"]
