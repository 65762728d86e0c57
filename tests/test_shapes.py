import logging
from math import sqrt, pi

import pytest

from geokernel.figures import Polygon, ShapeKind
from geokernel.geometry import ORIGIN, Point
from geokernel.intersections import IntersectionStatus
from geokernel.shapes import Line, Triangle, Rectangle, RegularPolygon, IrregularPolygon


class TestLine:
    """Two-point figures."""

    def test_measures(self):
        line = Line(Point(0, 0), Point(3, 4))

        assert line.kind is ShapeKind.line
        assert line.label == "Line"
        assert line.length() == 5
        assert line.angle() == pytest.approx(53.13010235)
        assert line.middle().x == pytest.approx(1.5)
        assert line.middle().y == pytest.approx(2)

    def test_second_point_defaults_to_origin(self):
        assert Line(Point(2, 0)).points() == [Point(2, 0), Point(0, 0)]

    def test_empty_line(self):
        line = Line()

        assert line.points() == []
        assert line.angle() == 0
        assert line.length() == 0

    def test_creation_by_angle(self):
        line = Line.create_by_angle(Point(1, 1), 0, 5)

        assert line.points() == [Point(1, 1), Point(6, 1)]

    def test_containment(self):
        line = Line(Point(0, 0), Point(1, 1))

        assert Point(0.5, 0.5) in line
        assert Point(0.3, 0.2) not in line

    def test_intersection(self):
        vertical = Line(Point(2, 2), Point(2, 10))
        horizontal = Line(Point(0, 4), Point(10, 4))

        assert vertical.intersection(horizontal).point == Point(2, 4)
        assert Line.get_intersection_between(vertical, horizontal).is_in_range

    def test_parallel_lines(self):
        intersection = Line(Point(1, 2), Point(5, 5)).intersection(Line(Point(2, 1), Point(6, 4)))

        assert intersection.status is IntersectionStatus.parallel

    def test_intersection_follows_moved_anchor(self):
        line = Line(Point(0, 0), Point(1, 0))
        line.second = Point(10, 0)

        assert line.intersection(Line(Point(5, -1), Point(5, 1))).point == Point(5, 0)

    def test_perpendicular(self):
        perpendicular = Line(Point(-1, 0), Point(1, 0)).perpendicular(Point(-1.5, 2))

        assert perpendicular.first.x == pytest.approx(-0.5)
        assert perpendicular.first.y == pytest.approx(0)
        assert perpendicular.second == Point(-1.5, 2)


class TestTriangle:
    def test_measures(self):
        triangle = Triangle(Point(0, 0), Point(4, 0), Point(0, 3))

        assert triangle.area() == 6
        assert triangle.perimeter() == 12
        assert triangle.height() == 4

    def test_creation_by_height(self):
        triangle = Triangle.create_by_height(Point(0, 0), Point(4, 0), 3)
        apex = triangle.third

        assert apex.x == pytest.approx(2)
        assert apex.y == pytest.approx(3)
        assert triangle.area() == pytest.approx(6)

    def test_setup_by_side(self):
        triangle = Triangle()
        triangle.setup_by_side(Line(Point(0, 0), Point(0, 2)), 1)

        assert triangle.third.x == pytest.approx(-1)
        assert triangle.third.y == pytest.approx(1)


class TestRectangle:
    def test_creation_by_size(self):
        rectangle = Rectangle.create_by_size(Point(1, 1), 4, 2)

        assert rectangle.points() == [Point(1, 1), Point(5, 1), Point(5, 3), Point(1, 3)]
        assert rectangle.width() == 4
        assert rectangle.height() == 2
        assert rectangle.perimeter() == 12
        assert rectangle.area() == pytest.approx(8)

    def test_containment(self):
        rectangle = Rectangle(Point(0, 0), Point(4, 0), Point(4, 2), Point(0, 2))

        assert rectangle.is_point_inside(Point(2, 1))
        assert not rectangle.is_point_inside(Point(5, 1))


class TestRegularPolygon:
    """Vertices derived from center, radii, angle and sides."""

    def test_square(self):
        square = RegularPolygon(ORIGIN, sqrt(2), 45, 4)

        assert len(square.points()) == 4
        assert square.side_length(2) == 2
        assert square.area() == pytest.approx(4)

    def test_step_is_whole_degrees(self):
        assert len(RegularPolygon(ORIGIN, 10, 0, 7).points()) == 8
        assert len(RegularPolygon(ORIGIN, 10, 0, 6).points()) == 6

    def test_sides_are_clamped(self):
        assert len(RegularPolygon(ORIGIN, 10, 0, 400).points()) == 360

    def test_unviable_parameters_give_empty_polygon(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="geokernel.shapes"):
            small = RegularPolygon(ORIGIN, 0.5, 0, 5)
            flat = RegularPolygon(ORIGIN, 5, 0, 2)

        assert small.points() == []
        assert flat.points() == []
        assert flat.side_length() == 0
        assert any("RegularPolygonParametersError" in record.getMessage() for record in caplog.records)

    def test_rotation_equality(self):
        first = RegularPolygon(ORIGIN, sqrt(2), 0, 4)
        second = RegularPolygon(ORIGIN, sqrt(2), 90, 4)

        assert first.get_rounded_by(5).is_equal_to(second.get_rounded_by(5))
        assert not first.is_equal_to(second)

    def test_changed_parameters_regenerate_vertices(self):
        polygon = RegularPolygon(Point(1, 1), 5, 0, 4)
        polygon.sides = 3

        assert polygon.is_modified
        assert len(polygon.points()) == 3
        assert not polygon.is_modified

    def test_moved_center_moves_vertices(self):
        polygon = RegularPolygon(ORIGIN, 5, 0, 4)
        polygon.center.x = 10

        assert polygon.points()[0] == Point(15, 0)

    def test_moved_anchor(self):
        polygon = RegularPolygon(ORIGIN, 5, 0, 4)
        polygon.first = Point(6, 0)

        assert polygon.is_modified
        assert polygon.points()[0] == Point(6, 0)

    def test_anchor_rebound_again_after_modification_check(self):
        polygon = RegularPolygon(ORIGIN, 5, 0, 4)
        polygon.first = Point(6, 0)

        assert polygon.is_modified

        polygon.first = Point(8, 0)

        assert polygon.points()[0] == Point(8, 0)
        assert not polygon.is_modified

    def test_parameters_changed_again_after_modification_check(self):
        polygon = RegularPolygon(ORIGIN, 5, 0, 4)
        polygon.sides = 3

        assert polygon.is_modified

        polygon.sides = 6

        assert len(polygon.points()) == 6

    def test_repr_names_the_class(self):
        assert "RegularPolygon" in repr(RegularPolygon(ORIGIN, 5, 0, 4))


class TestEllipse:
    """Closed-form ellipse and circle kinds."""

    def test_kinds(self):
        ellipse = RegularPolygon.create_ellipse(ORIGIN, 8, 2)
        circle = RegularPolygon.create_circle(ORIGIN, 4)

        assert (ellipse.kind, ellipse.label) == (ShapeKind.ellipse, "Ellipse")
        assert (circle.kind, circle.label) == (ShapeKind.circle, "Circle")
        assert len(circle.points()) == 360

    def test_area(self):
        ellipse = RegularPolygon.create_ellipse(ORIGIN, 8, 2)

        assert ellipse.area() == RegularPolygon.create_circle(ORIGIN, 4).area()
        assert ellipse.area() == 16 * pi

    def test_perimeter(self):
        assert RegularPolygon.create_circle(ORIGIN, 4).perimeter() == pytest.approx(8 * pi)
        assert RegularPolygon.create_ellipse(ORIGIN, 8, 2).perimeter() == pytest.approx(34.3136, abs=1e-3)

    def test_containment(self):
        ellipse = RegularPolygon.create_ellipse(Point(1, 1), 8, 2)

        assert ellipse.is_point_inside(Point(8, 1))
        assert ellipse.is_point_inside(Point(9, 1))
        assert not ellipse.is_point_inside(Point(1, 4))

    def test_empty_ellipse(self):
        circle = RegularPolygon.create_circle(ORIGIN, 0)

        assert circle.area() == 0
        assert circle.perimeter() == 0
        assert not circle.is_point_inside(ORIGIN)


class TestIrregularPolygon:
    def test_from_points(self):
        polygon = IrregularPolygon([Point(0, 0), Point(2, 0), Point(1, 3)])

        assert polygon.kind is ShapeKind.irregular_polygon
        assert polygon.area() == pytest.approx(3)

    def test_from_polygon(self):
        rectangle = Rectangle.create_by_size(ORIGIN, 2, 2)
        polygon = IrregularPolygon(rectangle)
        rectangle.first.x = 1

        assert polygon.points()[0] == Point(0, 0)
        assert polygon.is_equal_to(Polygon(Rectangle.create_by_size(ORIGIN, 2, 2).points()))
