import logging
from enum import Enum
from typing import Iterable, Union

from beautiful_repr import StylizedMixin, Field, TemplateFormatter, parse_length

from geokernel.interfaces import IFigure
from geokernel.geometry import Point, MAX_COORDINATE
from geokernel.intersections import get_line_intersection
from geokernel.states import ChangeTracker, DirtyState
from geokernel.tools import Diapason, ComparisonResult, compare, are_equal_groups


logger = logging.getLogger(__name__)


class ShapeKind(Enum):
    polygon = "Base"
    line = "Line"
    triangle = "Triangle"
    rectangle = "Rectangle"
    regular_polygon = "Polygon"
    ellipse = "Ellipse"
    circle = "Circle"
    irregular_polygon = "IrregularPolygon"


class Polygon(IFigure, StylizedMixin):
    """
    Ordered vertex store with the metrics shared by every shape.

    The first four vertices are mirrored by the public anchor fields first,
    second, third and fourth. Anchors may be rebound or changed in place at
    any time; the vertex list catches up on the next call of points(), which
    every metric goes through.
    """

    _repr_fields = (
        Field('label'),
        Field(
            'vertices',
            value_getter=parse_length,
            formatter=TemplateFormatter("{value} vertices")
        ),
    )

    kind = ShapeKind.polygon

    def __init__(self, points: Iterable[Point] = tuple()):
        self.label = self.kind.value
        self._vertices = list()
        self.first, self.second, self.third, self.fourth = (Point() for _ in range(4))
        self._anchor_tracker = ChangeTracker(self._get_anchor_snapshot)

        Polygon.setup(self, points)

    def __contains__(self, point: Point) -> bool:
        return self.is_point_inside(point)

    @property
    def anchors(self) -> tuple[Point, Point, Point, Point]:
        return (self.first, self.second, self.third, self.fourth)

    @property
    def vertices(self) -> list[Point]:
        return self.points()

    @property
    def is_modified(self) -> bool:
        return isinstance(self._anchor_tracker.refresh(), DirtyState)

    def setup(self, points: Iterable[Point]) -> list[Point]:
        points = [point.copy() for point in points]

        if len(points) < 2:
            if points:
                logger.debug("%s can't be built from a single point", self.kind.value)

            points = list()

        self._vertices = points
        self.first, self.second, self.third, self.fourth = (
            points[index].copy() if index < len(points) else Point()
            for index in range(4)
        )
        self._anchor_tracker.mark_clean()

        return self.points()

    def points(self) -> list[Point]:
        self._apply_changed_anchors()

        return [vertex.copy() for vertex in self._vertices]

    def get_coordinates(self) -> list[tuple[int | float, int | float]]:
        return [vertex.coordinates for vertex in self.points()]

    def is_convex(self) -> bool:
        vertices = self.points()

        if len(vertices) < 3:
            return False

        turn_directions = frozenset(
            compare(self._get_turn_of(
                vertices[vertex_index - 1],
                vertices[vertex_index],
                vertices[(vertex_index + 1) % len(vertices)]
            ), 0)
            for vertex_index in range(len(vertices))
        )

        return len(turn_directions - {ComparisonResult.equals}) <= 1

    def area(self) -> float:
        vertices = self.points()

        if len(vertices) < 3:
            return 0
        elif len(vertices) == 3:
            return Point.get_triangle_area(*vertices)
        elif self.is_convex():
            return sum(
                Point.get_triangle_area(vertices[0], vertices[vertex_index - 1], vertices[vertex_index])
                for vertex_index in range(2, len(vertices))
            )
        else:
            return self.get_shoelace_area(vertices)

    def perimeter(self) -> float:
        vertices = self.points()
        perimeter = Point.get_distance_sum(vertices)

        if len(vertices) > 2:
            perimeter += vertices[-1].distance(vertices[0])

        return perimeter

    def side_lengths(self) -> list[float]:
        vertices = self.points()

        if len(vertices) < 2:
            return [0]
        elif len(vertices) == 2:
            return [self.perimeter()]

        return [
            vertex.distance(vertices[(vertex_index + 1) % len(vertices)])
            for vertex_index, vertex in enumerate(vertices)
        ]

    def average_length(self) -> float:
        vertices = self.points()

        return self.perimeter() / float(len(vertices)) if vertices else 0

    def is_point_inside(self, point: Point) -> bool:
        vertices = self.points()
        ray_end = Point(MAX_COORDINATE, point.y)
        number_of_crossings = 0

        for vertex_index, start in enumerate(vertices):
            end = vertices[(vertex_index + 1) % len(vertices)]

            if point == start or point == end:
                return True

            intersection = get_line_intersection(point, ray_end, start, end)

            if intersection.is_coincident:
                return point.x in Diapason(start.x, end.x, is_end_inclusive=True)

            if intersection.is_in_range:
                if intersection.point == point:
                    return True

                number_of_crossings += 1

        return number_of_crossings % 2 == 1

    def get_contained(self, points: Union[Iterable[Point], 'Polygon']) -> tuple[list[Point], bool]:
        if isinstance(points, Polygon):
            points = points.points()

        contained_points = [point.copy() for point in points if self.is_point_inside(point)]

        return contained_points, len(contained_points) > 0

    def get_intersection_points(self, points: Union[Iterable[Point], 'Polygon']) -> list[Point]:
        """
        Returns every in-range crossing between the edges of this polygon and
        the closed outline of the given points. A crossing found by several
        edge pairs, like a shared corner, is listed once per pair.
        """

        own_vertices = self.points()
        other_vertices = points.points() if isinstance(points, Polygon) else list(points)
        intersection_points = list()

        for own_index, own_vertex in enumerate(own_vertices):
            for other_index, other_vertex in enumerate(other_vertices):
                intersection = get_line_intersection(
                    own_vertex,
                    own_vertices[(own_index + 1) % len(own_vertices)],
                    other_vertex,
                    other_vertices[(other_index + 1) % len(other_vertices)]
                )

                if intersection.is_in_range:
                    intersection_points.append(intersection.point)

        return intersection_points

    def organize(self) -> list[Point]:
        return Point.get_organized(self.points())

    def is_equal_to(self, polygon: 'Polygon', is_order_important: bool = False) -> bool:
        return are_equal_groups(self.points(), polygon.points(), is_order_important)

    def get_rounded_by(self, decimal_places: int = 2) -> 'Polygon':
        return Polygon(Point.get_rounded_all(self.points(), decimal_places))

    @staticmethod
    def get_shoelace_area(points: Iterable[Point]) -> float:
        """Signed area; the sign follows the winding of the points."""

        points = tuple(points)
        forward_sum = 0
        backward_sum = 0

        for point_index, point in enumerate(points):
            next_point = points[(point_index + 1) % len(points)]
            forward_sum += point.x * next_point.y
            backward_sum += point.y * next_point.x

        return (forward_sum - backward_sum) / 2

    @staticmethod
    def _get_turn_of(previous: Point, middle: Point, next_: Point) -> float:
        return (
            (previous.x - middle.x) * (next_.y - middle.y)
            - (previous.y - middle.y) * (next_.x - middle.x)
        )

    def _get_anchor_snapshot(self) -> tuple[Point, Point, Point, Point]:
        return tuple(anchor.copy() for anchor in self.anchors)

    def _apply_changed_anchors(self) -> None:
        state = self._anchor_tracker.refresh()

        if not isinstance(state, DirtyState):
            return

        logger.debug("Anchors of %s changed, updating its vertices", self.label)

        for vertex_index, anchor in enumerate(state.snapshot[:len(self._vertices)]):
            self._vertices[vertex_index] = anchor.copy()

        self._anchor_tracker.mark_clean()
