"""
Errors raised by VarModel

All of them signal a caller contract violation; the computation is
deterministic so none is worth retrying.
"""

from typing import Sequence


class VarModelError(Exception):
    """Base class for VarModel errors"""


class VariationModelError(VarModelError):
    """The model could not be built from the supplied locations"""


class AxesWithoutAssignedOrder(VariationModelError):
    def __init__(self, axis_names: Sequence[str], location):
        self.axis_names = list(axis_names)
        self.location = location
        super().__init__(
            f"Axes {self.axis_names} of {location!r} have no assigned order"
        )


class DeltaError(VarModelError):
    """Deltas could not be computed for the supplied values"""


class DefaultUndefined(DeltaError):
    def __init__(self):
        super().__init__("The default must have a point sequence")


class InconsistentNumbersOfPoints(DeltaError):
    def __init__(self):
        super().__init__("Every point sequence must have the same length")


class UnknownLocation(DeltaError):
    def __init__(self, location):
        self.location = location
        super().__init__(f"{location!r} is not present in the variation model")


class DuplicateLocation(DeltaError):
    """Two keys of one mapping name the same master once zero-filled"""

    def __init__(self, first, second, location):
        self.first = first
        self.second = second
        self.location = location
        super().__init__(f"{first!r} and {second!r} both complete to {location!r}")


class DesignSpaceModelError(VarModelError):
    """A designspace document can't be turned into a variation model"""


class MastersDocumentError(VarModelError):
    """A masters document is malformed"""
