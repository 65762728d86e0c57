from dataclasses import dataclass
from enum import IntEnum

from geokernel.geometry import Point
from geokernel.tools import Diapason


class IntersectionStatus(IntEnum):
    not_intersecting = -1
    parallel = 0
    coincident = 1
    in_range = 2
    out_of_range = 3


@dataclass(frozen=True)
class Intersection:
    """
    Relation between two line segments.

    Point is None when the segments are parallel or do not intersect, the
    start of the first segment when they are coincident and the computed
    crossing otherwise.
    """

    status: IntersectionStatus
    point: Point | None = None

    @property
    def is_in_range(self) -> bool:
        return self.status == IntersectionStatus.in_range

    @property
    def is_coincident(self) -> bool:
        return self.status == IntersectionStatus.coincident

    @property
    def has_point(self) -> bool:
        return self.point is not None


_segment_parameter_diapason = Diapason(0, 1, is_end_inclusive=True)


def get_line_intersection(
    first_start: Point,
    first_end: Point,
    second_start: Point,
    second_end: Point
) -> Intersection:
    x0, y0 = first_start
    x1, y1 = first_end
    x2, y2 = second_start
    x3, y3 = second_end

    denominator = (y3 - y2) * (x1 - x0) - (x3 - x2) * (y1 - y0)
    first_numerator = (x3 - x2) * (y0 - y2) - (y3 - y2) * (x0 - x2)
    second_numerator = (x1 - x0) * (y0 - y2) - (y1 - y0) * (x0 - x2)

    if denominator == 0:
        if first_numerator == 0 and second_numerator == 0:
            return Intersection(IntersectionStatus.coincident, Point(x0, y0))

        return Intersection(IntersectionStatus.parallel)

    first_parameter = first_numerator / denominator
    second_parameter = second_numerator / denominator

    if (
        first_parameter not in _segment_parameter_diapason
        or second_parameter not in _segment_parameter_diapason
    ):
        return Intersection(IntersectionStatus.not_intersecting)

    point = Point(x0 + first_parameter * (x1 - x0), y0 + first_parameter * (y1 - y0))

    # The parametric test can pass while the rebuilt point drifts off a segment
    if (
        is_point_on_segment(point, first_start, first_end)
        and is_point_on_segment(point, second_start, second_end)
    ):
        return Intersection(IntersectionStatus.in_range, point)

    return Intersection(IntersectionStatus.out_of_range, point)


def is_point_on_segment(point: Point, start: Point, end: Point) -> bool:
    return point.distance(start) + point.distance(end) == start.distance(end)
