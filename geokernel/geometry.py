from functools import wraps
from math import sqrt, atan, cos, sin, pi
from typing import Iterable, Iterator, Callable, Union

from geokernel.errors.geometry_errors import *
from geokernel.tools import (
    round_number,
    get_sorted_numbers,
    get_collection_with_reduced_nesting_level_by,
)


MAX_COORDINATE = float.fromhex('0x1.fffffep+127')


def to_radians(angle: int | float) -> float:
    return angle * pi / 180.0


def to_degrees(radians: int | float) -> float:
    return radians * 180.0 / pi


def get_line_angle(x0: float, y0: float, x1: float, y1: float) -> float:
    """
    Returns the direction of the line (x0, y0) -> (x1, y1) in degrees
    within [0, 360).
    """

    if x0 == x1:
        if y0 < y1:
            return 90
        elif y0 > y1:
            return 270
        else:
            return 0

    if y0 == y1:
        return 0 if x0 < x1 else 180

    result = to_degrees(atan((y1 - y0) / (x1 - x0)))

    if x0 > x1:
        result += 180
    elif y0 > y1:
        result += 360

    return result


def get_distance(x0: float, y0: float, x1: float, y1: float) -> float:
    return sqrt((x0 - x1)**2 + (y0 - y1)**2)


def get_triangle_area(
    x0: float, y0: float,
    x1: float, y1: float,
    x2: float, y2: float
) -> float:
    # Heron's formula
    a = get_distance(x0, y0, x1, y1)
    b = get_distance(x1, y1, x2, y2)
    c = get_distance(x2, y2, x0, y0)
    s = (a + b + c) / 2.0

    return sqrt(max(s * (s - a) * (s - b) * (s - c), 0))


def get_triangle_height(
    x0: float, y0: float,
    x1: float, y1: float,
    x2: float, y2: float
) -> float:
    area = get_triangle_area(x0, y0, x1, y1, x2, y2)

    return max(
        2 * area / side if side != 0 else 0
        for side in (
            get_distance(x0, y0, x1, y1),
            get_distance(x1, y1, x2, y2),
            get_distance(x2, y2, x0, y0),
        )
    )


class Point:
    __slots__ = ('x', 'y')

    def __init__(self, x: int | float = 0, y: int | float = 0):
        self.x = x
        self.y = y

    __hash__ = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.x}, {self.y})"

    def __iter__(self) -> Iterator[int | float]:
        return iter((self.x, self.y))

    def __eq__(self, other: 'Point') -> bool:
        if not isinstance(other, Point):
            return NotImplemented

        return self.x == other.x and self.y == other.y

    def _interpret_input_as_components(
        method: Callable[['Point', int | float, int | float], any]
    ) -> Callable[[Union['Point', int, float]], any]:
        @wraps(method)
        def wrapper(self: 'Point', other: Union['Point', int, float]) -> any:
            if isinstance(other, Point):
                return method(self, other.x, other.y)
            elif isinstance(other, (int, float)):
                return method(self, other, other)

            return NotImplemented

        return wrapper

    @_interpret_input_as_components
    def __add__(self, x: int | float, y: int | float) -> 'Point':
        return Point(self.x + x, self.y + y)

    def __radd__(self, number: int | float) -> 'Point':
        return self + number

    @_interpret_input_as_components
    def __sub__(self, x: int | float, y: int | float) -> 'Point':
        return Point(self.x - x, self.y - y)

    @_interpret_input_as_components
    def __mul__(self, x: int | float, y: int | float) -> 'Point':
        return Point(self.x * x, self.y * y)

    def __rmul__(self, number: int | float) -> 'Point':
        return self * number

    def __neg__(self) -> 'Point':
        return Point(-self.x, -self.y)

    @_interpret_input_as_components
    def __iadd__(self, x: int | float, y: int | float) -> 'Point':
        self.shift_by(x, y)
        return self

    @_interpret_input_as_components
    def __isub__(self, x: int | float, y: int | float) -> 'Point':
        self.shift_by(-x, -y)
        return self

    @_interpret_input_as_components
    def __imul__(self, x: int | float, y: int | float) -> 'Point':
        self.multiply_by(x, y)
        return self

    @property
    def coordinates(self) -> tuple[int | float, int | float]:
        return (self.x, self.y)

    def copy(self) -> 'Point':
        return Point(self.x, self.y)

    def shift_by(self, x: int | float, y: int | float) -> None:
        self.x += x
        self.y += y

    def multiply_by(self, x: int | float, y: int | float) -> None:
        self.x *= x
        self.y *= y

    def reset(self) -> None:
        self.x = 0
        self.y = 0

    def distance(self, point: 'Point') -> float:
        return get_distance(self.x, self.y, point.x, point.y)

    def angle(self, point: 'Point') -> float:
        return get_line_angle(self.x, self.y, point.x, point.y)

    def position(
        self,
        angle: int | float,
        horizontal_radius: int | float,
        vertical_radius: int | float | None = None
    ) -> 'Point':
        if vertical_radius is None:
            vertical_radius = horizontal_radius

        return Point(
            self.x + horizontal_radius * cos(to_radians(angle)),
            self.y + vertical_radius * sin(to_radians(angle))
        )

    def triangle_area(self, first: 'Point', second: 'Point') -> float:
        return self.get_triangle_area(self, first, second)

    def triangle_height(self, first: 'Point', second: 'Point') -> float:
        return self.get_triangle_height(self, first, second)

    def get_rounded_by(self, decimal_places: int = 2) -> 'Point':
        return Point(
            round_number(self.x, decimal_places),
            round_number(self.y, decimal_places)
        )

    @staticmethod
    def get_triangle_area(first: 'Point', second: 'Point', third: 'Point') -> float:
        return get_triangle_area(first.x, first.y, second.x, second.y, third.x, third.y)

    @staticmethod
    def get_triangle_height(first: 'Point', second: 'Point', third: 'Point') -> float:
        return get_triangle_height(first.x, first.y, second.x, second.y, third.x, third.y)

    @staticmethod
    def get_angle_between(
        origin: 'Point',
        first: 'Point',
        second: 'Point',
        is_signed: bool = False
    ) -> float:
        first_angle = origin.angle(first)
        second_angle = origin.angle(second)

        if is_signed:
            return first_angle - second_angle

        return max(first_angle, second_angle) - min(first_angle, second_angle)

    @staticmethod
    def get_total(points: Iterable['Point']) -> 'Point':
        total = Point()

        for point in points:
            total += point

        return total

    @classmethod
    def get_average(cls, points: Iterable['Point']) -> tuple['Point', bool]:
        points = tuple(points)

        if not points:
            return Point(), False

        return cls.get_total(points) * (1.0 / float(len(points))), True

    @staticmethod
    def get_distance_sum(points: Iterable['Point']) -> float:
        points = tuple(points)

        return sum(
            points[point_index].distance(points[point_index - 1])
            for point_index in range(1, len(points))
        )

    @staticmethod
    def get_shifted_all(points: Iterable['Point'], value: Union['Point', int, float]) -> list['Point']:
        return [point + value for point in points]

    @staticmethod
    def get_rounded_all(points: Iterable['Point'], decimal_places: int) -> list['Point']:
        return [point.get_rounded_by(decimal_places) for point in points]

    @staticmethod
    def get_sorted(points: Iterable['Point'], is_x_axis: bool = True) -> list['Point']:
        """
        Sorts points by the X or Y axis.

        Points sharing an X value keep their encounter order, points sharing
        a Y value are ordered by ascending X.
        """

        points = tuple(points)

        if len(points) < 2:
            return [point.copy() for point in points]

        other_axis_values_by_key = dict()

        for point in points:
            key, value = (point.x, point.y) if is_x_axis else (point.y, point.x)
            other_axis_values_by_key.setdefault(key, list()).append(value)

        return get_collection_with_reduced_nesting_level_by(1, (
            [
                Point(key, value) for value in values
            ] if is_x_axis else [
                Point(value, key) for value in get_sorted_numbers(values)
            ]
            for key, values in sorted(other_axis_values_by_key.items())
        ))

    @staticmethod
    def get_organized(points: Iterable['Point'], center: Union['Point', None] = None) -> list['Point']:
        """
        Orders points by their angle seen from the center (the origin by
        default). Points at the same angle keep their encounter order.
        """

        points = tuple(points)
        center = ORIGIN if center is None else center

        if len(points) < 2:
            return [point.copy() for point in points]

        points_by_angle = dict()

        for point in points:
            points_by_angle.setdefault(center.angle(point), list()).append(point.copy())

        return get_collection_with_reduced_nesting_level_by(1, (
            points_by_angle[angle] for angle in sorted(points_by_angle.keys())
        ))


class ConstantPoint(Point):
    __slots__ = ()

    def __init__(self, x: int | float = 0, y: int | float = 0):
        object.__setattr__(self, 'x', x)
        object.__setattr__(self, 'y', y)

    def __setattr__(self, name: str, value: any) -> None:
        raise ImmutablePointError(f"{self} is a constant and can't change its {name}")

    def __hash__(self) -> int:
        return hash(self.coordinates)

    def __iadd__(self, other: Union['Point', int, float]) -> Point:
        return self + other

    def __isub__(self, other: Union['Point', int, float]) -> Point:
        return self - other

    def __imul__(self, other: Union['Point', int, float]) -> Point:
        return self * other


ORIGIN = ConstantPoint(0, 0)
ZERO = ConstantPoint(0, 0)
MAX_POINT = ConstantPoint(MAX_COORDINATE, MAX_COORDINATE)
