"""Configuration dataclasses for pnmisc."""

from __future__ import annotations

from dataclasses import dataclass, field

POOL_ALONG_CHOICES: tuple[str, ...] = ("none", "x", "y")


@dataclass
class LabelConfig:
    """Placement of text labels in npc (normalised parent coordinates).

    Attributes
    ----------
    margin_npc : float
        Distance kept from the panel edge by the ``left``/``right``/
        ``bottom``/``top`` tokens.
    h_step : float
        Horizontal shift per group, towards the panel centre.
    v_step : float
        Vertical shift per group, towards the panel centre.

    The defaults of ``stat_poly_eq`` (``hstep``, ``vstep``, ``margin_npc``)
    are taken from this class.
    """

    margin_npc: float = 0.0
    h_step: float = 0.0
    v_step: float = 0.1


@dataclass
class QuadrantConfig:
    """Quadrant counting parameters.

    Attributes
    ----------
    pool_along : str
        ``"none"``, ``"x"`` or ``"y"``.
    xintercept, yintercept : float
        Origin of the quadrants.
    quadrants : list[int] | None
        Quadrants of interest; ``None`` derives them from the data range,
        ``[0]`` requests the whole-panel total.
    label_x, label_y : float | str | list | None
        Label anchors in npc units or as tokens; ``None`` uses the defaults.
    """

    pool_along: str = "none"
    xintercept: float = 0.0
    yintercept: float = 0.0
    quadrants: list[int] | None = None
    label_x: float | str | list | None = None
    label_y: float | str | list | None = None
    labels: LabelConfig = field(default_factory=LabelConfig)

    def validate(self) -> None:
        """Raise ``ValueError`` for malformed parameters."""
        if self.pool_along not in POOL_ALONG_CHOICES:
            raise ValueError(
                f"pool_along must be one of {POOL_ALONG_CHOICES}, got {self.pool_along!r}"
            )
        if self.quadrants is not None and len(self.quadrants) > 4:
            raise ValueError(
                f"At most four quadrants can be requested, got {len(self.quadrants)}"
            )
