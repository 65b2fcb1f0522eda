"""
The variation model

Given a set of master locations, figures out a set of regions and the weight
each region assigns to each master. That lets us turn absolute per-master
values into deltas for a variation store.

Python port of the ideas in fontTools.varLib.models.VariationModel, built in
two phases: __init__ computes every table up front and queries only read
them, so one model can serve many threads at once.
"""

from typing import (
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

from ..utils.logging import VarModelLogger
from .errors import (
    AxesWithoutAssignedOrder,
    DefaultUndefined,
    DuplicateLocation,
    InconsistentNumbersOfPoints,
    UnknownLocation,
)
from .location import LocationLike, NormalizedLocation
from .region import VariationRegion
from .regions import DeltaWeights, delta_weights, master_influence, regions_for
from .sorting import LocationSortingHat

P = TypeVar("P")
V = TypeVar("V")


class VariationModel:
    """A model of how variation space is subdivided into regions to create deltas.

    Locations should be points in variation space where we wish to define
    something, such as a glyph instance. Axis order should reflect the
    importance of the axis.

    Attributes (read-only, index i of each refers to the same master):
        default: the all-zero location over every axis in axis_order
        locations: deduplicated, zero-completed locations in sorted order
        influence: one VariationRegion per location, after splitting
        delta_weights: per location, (earlier index, weight) pairs
    """

    def __init__(self, locations: Iterable[LocationLike], axis_order: Sequence[str]):
        axis_order = list(axis_order)
        axes = set(axis_order)
        self._axis_order: Tuple[str, ...] = tuple(axis_order)
        self._default = NormalizedLocation({axis_name: 0.0 for axis_name in axes})

        expanded = {self._default}
        for location in locations:
            location = NormalizedLocation(location)
            # Only axes that have an assigned order are valid
            bad_axes = [name for name in location.axis_names() if name not in axes]
            if bad_axes:
                raise AxesWithoutAssignedOrder(bad_axes, location)
            expanded.add(self._complete(location))

        sorting_hat = LocationSortingHat(expanded, axis_order)
        sorted_locations = sorting_hat.sort(expanded)

        influence = master_influence(regions_for(sorted_locations))
        weights = delta_weights(sorted_locations, influence)

        self._locations: Tuple[NormalizedLocation, ...] = tuple(sorted_locations)
        self._influence: Tuple[VariationRegion, ...] = tuple(influence)
        self._delta_weights: Tuple[DeltaWeights, ...] = tuple(weights)
        self._index: Dict[NormalizedLocation, int] = {
            loc: idx for idx, loc in enumerate(self._locations)
        }
        VarModelLogger.debug(
            f"Built variation model with {len(self._locations)} locations "
            f"over axes {list(self._axis_order)}"
        )

    @classmethod
    def empty(cls) -> "VariationModel":
        """A model with no axes and no locations"""
        return cls.from_parts(NormalizedLocation(), (), (), (), ())

    @classmethod
    def from_parts(
        cls,
        default: NormalizedLocation,
        axis_order: Sequence[str],
        locations: Sequence[NormalizedLocation],
        influence: Sequence[VariationRegion],
        weights: Sequence[Sequence[Tuple[int, float]]],
    ) -> "VariationModel":
        """Assemble a model from precomputed tables (deserialization)"""
        if not len(locations) == len(influence) == len(weights):
            raise ValueError("locations, influence and delta_weights must have the same length")
        model = cls.__new__(cls)
        model._axis_order = tuple(axis_order)
        model._default = default
        model._locations = tuple(locations)
        model._influence = tuple(influence)
        model._delta_weights = tuple(
            tuple((int(idx), float(weight)) for idx, weight in row) for row in weights
        )
        model._index = {loc: idx for idx, loc in enumerate(model._locations)}
        return model

    def _complete(self, location: NormalizedLocation) -> NormalizedLocation:
        """Assign 0 to every ordered axis the location doesn't mention"""
        if all(location.has(name) for name in self._axis_order):
            return location
        coords = {name: 0.0 for name in self._axis_order}
        coords.update(location)
        return NormalizedLocation(coords)

    def location_key(self, location: LocationLike) -> NormalizedLocation:
        """The model's key for location: zero-completed when its axes are all ordered"""
        location = NormalizedLocation(location)
        if all(name in self._axis_order for name in location.axis_names()):
            return self._complete(location)
        return location

    @property
    def axis_order(self) -> Tuple[str, ...]:
        return self._axis_order

    @property
    def default(self) -> NormalizedLocation:
        return self._default

    def default_location(self) -> NormalizedLocation:
        return self._default

    @property
    def locations(self) -> Tuple[NormalizedLocation, ...]:
        return self._locations

    @property
    def influence(self) -> Tuple[VariationRegion, ...]:
        return self._influence

    @property
    def delta_weights(self) -> Tuple[DeltaWeights, ...]:
        return self._delta_weights

    def __len__(self) -> int:
        return len(self._locations)

    def __iter__(self) -> Iterator[NormalizedLocation]:
        return iter(self._locations)

    def __contains__(self, location) -> bool:
        return self.location_key(location) in self._index

    def __eq__(self, other) -> bool:
        if not isinstance(other, VariationModel):
            return NotImplemented
        return (
            self._default == other._default
            and self._locations == other._locations
            and self._influence == other._influence
            and self._delta_weights == other._delta_weights
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"VariationModel(axis_order={list(self._axis_order)}, "
            f"locations={list(self._locations)})"
        )

    def index_of(self, location: LocationLike) -> int:
        """Position of location in the sorted master order"""
        key = self.location_key(location)
        try:
            return self._index[key]
        except KeyError:
            raise UnknownLocation(key) from None

    def weights_for(self, location: LocationLike) -> DeltaWeights:
        """The delta weight row for a master location known to the model"""
        return self._delta_weights[self.index_of(location)]

    def scalars_at(self, location: LocationLike) -> List[float]:
        """The scalar of every master's region at an arbitrary location"""
        location = NormalizedLocation(location)
        return [region.scalar_at(location) for region in self._influence]

    def _normalize_keys(self, values: Mapping) -> Dict[NormalizedLocation, Sequence]:
        normalized: Dict[NormalizedLocation, Sequence] = {}
        given = {}
        for loc, seq in values.items():
            key = self.location_key(loc)
            if key in normalized:
                raise DuplicateLocation(given[key], loc, key)
            given[key] = loc
            normalized[key] = seq
        return normalized

    @staticmethod
    def _check_lengths(seqs: Iterable[Sequence], expected: int) -> None:
        if any(len(seq) != expected for seq in seqs):
            raise InconsistentNumbersOfPoints()

    def deltas(
        self, point_seqs: Mapping[NormalizedLocation, Sequence[P]]
    ) -> Dict[NormalizedLocation, List[V]]:
        """Convert absolute positions at master locations to offsets.

        All point sequences must have the same length, and one is required
        for the default location. It is NOT required to provide a sequence
        for every location known to the model; masters without one are left
        out of the result. Sequences for locations the model doesn't know
        are ignored.

        P is the point type, an absolute position in 1 or 2 dimensional
        space; V is the vector type produced by subtracting points. Floats
        or Point2D/Vector2D are typical choices.

        Args:
            point_seqs: master location -> sequence of absolute values

        Returns:
            master location -> sequence of deltas, positionally aligned

        Raises:
            DefaultUndefined: no sequence for the default location
            InconsistentNumbersOfPoints: sequence lengths differ
            DuplicateLocation: two keys name the same master once zero-filled
        """
        point_seqs = self._normalize_keys(point_seqs)
        defaults = point_seqs.get(self._default)
        if defaults is None:
            raise DefaultUndefined()
        self._check_lengths(point_seqs.values(), len(defaults))

        result: Dict[NormalizedLocation, List[V]] = {}
        # Deltas by model index; None for masters without values
        resolved: List[Optional[List[V]]] = [None] * len(self._locations)

        # locations[i] is only influenced by locations[:i], so walking in order
        # means every influence we subtract has already been resolved
        for loc_idx, location in enumerate(self._locations):
            points = point_seqs.get(location)
            if points is None:
                continue
            master_weights = self._delta_weights[loc_idx]
            deltas = []
            for idx, point in enumerate(points):
                delta = point - type(point)()
                for master_idx, weight in master_weights:
                    master_deltas = resolved[master_idx]
                    if master_deltas is None:
                        continue
                    other = master_deltas[idx]
                    delta = delta - (other if weight == 1.0 else other * weight)
                deltas.append(delta)
            resolved[loc_idx] = deltas
            result[location] = deltas

        return result

    def reconstruct(
        self, deltas: Mapping[NormalizedLocation, Sequence[V]]
    ) -> Dict[NormalizedLocation, List[V]]:
        """Undo deltas(): replay the weight table adding earlier deltas back.

        Returns the absolute values as offsets from the origin (the vector
        type), for every location present in deltas.

        The round trip is exact when every weighted delta and partial sum is
        representable: weights of 1.0 or dyadic fractions (0.5, 0.25, ...)
        with integer values of moderate size. Other weights, such as those
        from a master at 0.66, round and give values back to within a few
        ulps only.
        """
        deltas = self._normalize_keys(deltas)
        if deltas:
            self._check_lengths(deltas.values(), len(next(iter(deltas.values()))))
        result: Dict[NormalizedLocation, List[V]] = {}
        for loc_idx, location in enumerate(self._locations):
            own = deltas.get(location)
            if own is None:
                continue
            contributions = [
                (deltas[self._locations[master_idx]], weight)
                for master_idx, weight in self._delta_weights[loc_idx]
                if self._locations[master_idx] in deltas
            ]
            values = []
            for idx, delta in enumerate(own):
                value = delta
                # reverse of the subtraction order in deltas()
                for master_deltas, weight in reversed(contributions):
                    value = value - master_deltas[idx] * -weight
                values.append(value)
            result[location] = values
        return result

    def interpolate_from_deltas(
        self, location: LocationLike, deltas: Mapping[NormalizedLocation, Sequence[V]]
    ) -> List[V]:
        """Value at any location from the deltas of the masters.

        Sums scalar * delta over the masters present in deltas. At a master
        location, with every master's deltas supplied, this gives back the
        master's own value.
        """
        deltas = self._normalize_keys(deltas)
        defaults = deltas.get(self._default)
        if defaults is None:
            raise DefaultUndefined()
        self._check_lengths(deltas.values(), len(defaults))
        scalars = self.scalars_at(self.location_key(location))

        values = []
        for idx in range(len(defaults)):
            value = None
            for master_loc, scalar in zip(self._locations, scalars):
                if scalar == 0.0 or master_loc not in deltas:
                    continue
                contribution = deltas[master_loc][idx] * scalar
                # Vector only promises * and -
                value = contribution if value is None else value - contribution * -1.0
            values.append(value)
        return values
