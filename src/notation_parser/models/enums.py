"""Enumerations and constant lookup tables for the workout notation.

Intensity codes are the Spanish club shorthand used on training sheets
(TS = Trote Suave, TL = Trote Ligero, ...).
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class IntensityType(str, Enum):
    """Training effort zone codes."""

    TS = "TS"
    TL = "TL"
    TR = "TR"
    CA = "Ca"
    PA = "PA"
    RC = "RC"
    PL = "PL"   # Pause in place, always a rest


class StepKind(str, Enum):
    """Kinds of atomic workout steps."""

    WARMUP = "warmup"
    COOLDOWN = "cooldown"
    RUN = "run"
    REST = "rest"
    RECOVER = "recover"


REPETITION_KIND = "repetition"

# ---------------------------------------------------------------------------
# Lookup tables (read-only)
# ---------------------------------------------------------------------------

INTENSITY_LABELS = MappingProxyType({
    IntensityType.TS: "Trote Suave",
    IntensityType.TL: "Trote Ligero",
    IntensityType.TR: "Trote Rápido",
    IntensityType.CA: "Caminar",
    IntensityType.PA: "Paso Ajustado",
    IntensityType.RC: "Ritmo de Competición",
    IntensityType.PL: "Pausa en el lugar",
})

# Substrings searched in priority order; first hit wins.
INTENSITY_SEARCH_ORDER: tuple[tuple[IntensityType, tuple[str, ...]], ...] = (
    (IntensityType.TS, ("TS",)),
    (IntensityType.TL, ("TL",)),
    (IntensityType.TR, ("TR",)),
    (IntensityType.CA, ("CA", "CAMINAR")),
    (IntensityType.PA, ("PA",)),
    (IntensityType.RC, ("RC",)),
    (IntensityType.PL, ("PL",)),
)

# Warmup and cooldown are always emitted with this intensity unless the
# notation names another one.
DEFAULT_BOUNDARY_INTENSITY = IntensityType.TS
