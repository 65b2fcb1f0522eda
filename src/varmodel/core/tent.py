"""
Tents: single-axis support functions
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Tent:
    """The min/peak/max of a master's influence on one axis.

    Visualize as a tent of influence, starting at lower, peaking at peak,
    and dropping off to zero at upper. Use Tent.new() to build one from a
    master location; the plain constructor stores the values as given,
    which is what region splitting needs when it moves an edge.
    """

    lower: float
    peak: float
    upper: float

    @classmethod
    def new(cls, lower: float, peak: float, upper: float) -> "Tent":
        """Build a tent that stays on the peak's side of the default"""
        lower, peak, upper = float(lower), float(peak), float(upper)
        if peak > 0.0:
            lower = 0.0
        else:
            upper = 0.0
        return cls(lower, peak, upper)

    @property
    def is_sentinel(self) -> bool:
        """(0, 0, 0) means apply at full scale everywhere"""
        return self.lower == 0.0 and self.peak == 0.0 and self.upper == 0.0

    def validate(self) -> bool:
        """Whether this tent could have any influence under OpenType rules.

        (0, 0, 0) IS valid. A tent spanning zero is not, since the influence
        at the default must be zero.
        """
        if self.lower > self.peak or self.peak > self.upper:
            return False
        if self.lower < 0.0 and self.upper > 0.0:
            return False
        return True

    def __str__(self) -> str:
        comment = "" if self.validate() else " (invalid)"
        return f"Tent {{{self.lower:g}, {self.peak:g}, {self.upper:g}{comment}}}"
