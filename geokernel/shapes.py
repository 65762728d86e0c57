import logging
from math import sqrt, pi
from typing import Iterable, Self

from beautiful_repr import Field

from geokernel.errors.geometry_errors import RegularPolygonParametersError
from geokernel.figures import Polygon, ShapeKind
from geokernel.geometry import Point, ORIGIN
from geokernel.intersections import Intersection, get_line_intersection
from geokernel.states import ChangeTracker, DirtyState
from geokernel.tools import (
    Report,
    ReportAnalyzer,
    LoggingReportHandler,
    StrictToStateMixin,
    round_number,
)


logger = logging.getLogger(__name__)


class Line(Polygon):
    kind = ShapeKind.line

    def __init__(self, first: Point | None = None, second: Point = ORIGIN):
        super().__init__()

        if first is not None:
            self.setup(first, second)

    @classmethod
    def create_by_angle(cls, origin: Point, angle: int | float, length: int | float) -> Self:
        line = cls()
        line.setup_by_angle(origin, angle, length)

        return line

    def setup(self, first: Point, second: Point = ORIGIN) -> list[Point]:
        return super().setup((first, second))

    def setup_by_angle(self, origin: Point, angle: int | float, length: int | float) -> list[Point]:
        return self.setup(origin, origin.position(angle, length))

    def length(self) -> float:
        return self.perimeter()

    def angle(self) -> float:
        if len(self.points()) < 2:
            return 0

        return self.first.angle(self.second)

    def middle(self) -> Point:
        self.points()

        return self.first.position(self.angle(), self.length() / 2)

    def intersection(self, line: 'Line') -> Intersection:
        return get_line_intersection(self.first, self.second, line.first, line.second)

    def perpendicular(self, point: Point) -> 'Line':
        """
        Returns the line from the base line's direction to the point.

        The foot is always taken forward from the first point, so points
        lying behind it get a mirrored foot.
        """

        area = self.first.triangle_area(self.second, point)
        hypotenuse = self.first.distance(point)
        base = self.first.distance(self.second)
        height = 2 * area / base if base != 0 else 0
        foot_distance = sqrt(max(hypotenuse**2 - height**2, 0))

        return Line(self.first.position(self.angle(), foot_distance), point)

    @staticmethod
    def get_intersection_between(first_line: 'Line', second_line: 'Line') -> Intersection:
        return first_line.intersection(second_line)


class Triangle(Polygon):
    kind = ShapeKind.triangle

    def __init__(self, first: Point | None = None, second: Point = ORIGIN, third: Point = ORIGIN):
        super().__init__()

        if first is not None:
            self.setup(first, second, third)

    @classmethod
    def create_by_height(cls, first: Point, second: Point, height: int | float) -> Self:
        triangle = cls()
        triangle.setup_by_height(first, second, height)

        return triangle

    def setup(self, first: Point, second: Point, third: Point) -> list[Point]:
        return super().setup((first, second, third))

    def setup_by_side(self, side: Line, height: int | float) -> list[Point]:
        return self.setup(
            side.first,
            side.second,
            side.middle().position(90 + side.angle(), height)
        )

    def setup_by_height(self, first: Point, second: Point, height: int | float) -> list[Point]:
        return self.setup_by_side(Line(first, second), height)

    def height(self) -> float:
        return self.first.triangle_height(self.second, self.third)


class Rectangle(Polygon):
    kind = ShapeKind.rectangle

    def __init__(
        self,
        first: Point | None = None,
        second: Point = ORIGIN,
        third: Point = ORIGIN,
        fourth: Point = ORIGIN
    ):
        super().__init__()

        if first is not None:
            self.setup(first, second, third, fourth)

    @classmethod
    def create_by_size(cls, origin: Point, width: int | float, height: int | float) -> Self:
        rectangle = cls()
        rectangle.setup_by_size(origin, width, height)

        return rectangle

    def setup(self, first: Point, second: Point, third: Point, fourth: Point) -> list[Point]:
        return super().setup((first, second, third, fourth))

    def setup_by_size(self, origin: Point, width: int | float, height: int | float) -> list[Point]:
        return self.setup(
            origin,
            origin + Point(width, 0),
            origin + Point(width, height),
            origin + Point(0, height)
        )

    def width(self) -> float:
        return self.first.distance(self.second)

    def height(self) -> float:
        return self.first.distance(self.fourth)


class RegularPolygon(Polygon, StrictToStateMixin):
    """
    Polygon derived from a center, two radii, a starting angle and a number
    of sides.

    Vertices are placed every 360 // sides whole degrees starting from the
    truncated angle, so side counts that don't divide 360 don't produce
    exactly that many vertices. Ellipse and circle kinds are 360-sided
    polygons whose area, perimeter and containment use closed forms.

    The parameters are public; changing them regenerates the vertices on the
    next read.
    """

    _repr_fields = Polygon._repr_fields + (
        Field('center'),
        Field('horizontal_radius'),
        Field('vertical_radius'),
        Field('sides'),
    )

    _max_sides = 360
    _min_sides = 3
    _min_radius = 1
    _closed_form_kinds = frozenset((ShapeKind.ellipse, ShapeKind.circle))

    _state_report_analyzer = ReportAnalyzer((
        LoggingReportHandler(logger, "Regular polygon parameters are not viable"),
    ))

    kind = ShapeKind.regular_polygon

    def __init__(
        self,
        center: Point | None = None,
        radius: int | float = 0,
        angle: int | float = 0,
        sides: int = 0,
        vertical_radius: int | float | None = None
    ):
        self.center = Point()
        self.horizontal_radius = 0
        self.vertical_radius = 0
        self.angle = 0
        self.sides = 0
        self._parameter_tracker = ChangeTracker(self._get_parameter_snapshot)

        super().__init__()

        if center is not None:
            self.setup(center, radius, angle, sides, vertical_radius)

    @classmethod
    def create_ellipse(
        cls,
        center: Point,
        horizontal_radius: int | float,
        vertical_radius: int | float
    ) -> Self:
        ellipse = cls()
        ellipse.setup_ellipse(center, horizontal_radius, vertical_radius)

        return ellipse

    @classmethod
    def create_circle(cls, center: Point, radius: int | float) -> Self:
        circle = cls()
        circle.setup_circle(center, radius)

        return circle

    @property
    def is_modified(self) -> bool:
        return (
            super().is_modified
            or isinstance(self._parameter_tracker.refresh(), DirtyState)
        )

    def setup(
        self,
        center: Point,
        radius: int | float,
        angle: int | float = 0,
        sides: int = 0,
        vertical_radius: int | float | None = None
    ) -> list[Point]:
        self.center = center.copy()
        self.horizontal_radius = radius
        self.vertical_radius = radius if vertical_radius is None else vertical_radius
        self.angle = angle
        self.sides = sides
        self._parameter_tracker.mark_clean()

        return self._build_vertices()

    def setup_ellipse(
        self,
        center: Point,
        horizontal_radius: int | float,
        vertical_radius: int | float
    ) -> list[Point]:
        self._change_kind_to(ShapeKind.ellipse)

        return self.setup(center, horizontal_radius, 0, self._max_sides, vertical_radius)

    def setup_circle(self, center: Point, radius: int | float) -> list[Point]:
        self._change_kind_to(ShapeKind.circle)

        return self.setup(center, radius, 0, self._max_sides)

    def points(self) -> list[Point]:
        if isinstance(self._parameter_tracker.refresh(), DirtyState):
            logger.debug("Parameters of %s changed, regenerating its vertices", self.label)
            self._parameter_tracker.mark_clean()
            self._build_vertices()

        return super().points()

    def side_length(self, decimal_places: int = -1) -> float:
        if len(self.points()) < 2:
            return 0

        return round_number(self.first.distance(self.second), decimal_places)

    def area(self) -> float:
        if self.kind not in self._closed_form_kinds:
            return super().area()
        elif not self.points():
            return 0

        return self.horizontal_radius * self.vertical_radius * pi

    def perimeter(self) -> float:
        if self.kind not in self._closed_form_kinds:
            return super().perimeter()
        elif not self.points():
            return 0

        # Ramanujan's approximation
        major = max(self.horizontal_radius, self.vertical_radius)
        minor = min(self.horizontal_radius, self.vertical_radius)
        h = (major - minor)**2 / (major + minor)**2

        return pi * (major + minor) * (1 + ((3 * h) / (10 + sqrt(4 - 3 * h))))

    def is_point_inside(self, point: Point) -> bool:
        if self.kind not in self._closed_form_kinds:
            return super().is_point_inside(point)
        elif not self.points():
            return False

        return (
            (point.x - self.center.x)**2 / self.horizontal_radius**2
            + (point.y - self.center.y)**2 / self.vertical_radius**2
        ) <= 1

    def _is_correct(self) -> Report:
        if self.horizontal_radius < self._min_radius or self.vertical_radius < self._min_radius:
            return Report.create_error_report(RegularPolygonParametersError(
                f"Radii must be at least {self._min_radius}, "
                f"not {self.horizontal_radius} and {self.vertical_radius}"
            ))
        elif min(self.sides, self._max_sides) < self._min_sides:
            return Report.create_error_report(RegularPolygonParametersError(
                f"Regular polygon needs at least {self._min_sides} sides, not {self.sides}"
            ))

        return Report(True)

    def _build_vertices(self) -> list[Point]:
        if not self._check_state_errors():
            return Polygon.setup(self, tuple())

        if self.sides > self._max_sides:
            logger.debug("%s sides are reduced to %s", self.sides, self._max_sides)

        step = 360 // int(min(self.sides, self._max_sides))
        start_angle = int(self.angle)

        return Polygon.setup(self, (
            self.center.position(angle, self.horizontal_radius, self.vertical_radius)
            for angle in range(start_angle, 360 + start_angle, step)
        ))

    def _change_kind_to(self, kind: ShapeKind) -> None:
        self.kind = kind
        self.label = kind.value

    def _get_parameter_snapshot(self) -> tuple:
        return (
            self.center.copy(),
            self.horizontal_radius,
            self.vertical_radius,
            self.angle,
            self.sides,
        )


class IrregularPolygon(Polygon):
    """Polygon holding exactly the points it was given."""

    kind = ShapeKind.irregular_polygon

    def __init__(self, points: Iterable[Point] | Polygon = tuple()):
        super().__init__(points.points() if isinstance(points, Polygon) else points)
