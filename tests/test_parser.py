import pytest

from wktproj.core.errors import MalformedCoordinate, UnsupportedFormat
from wktproj.core.geometry import GeometryType
from wktproj.core.point import Point
from wktproj.wkt.builder import WktBuilder
from wktproj.wkt.parser import GRAMMARS, WktParser, parse_wkt


@pytest.fixture
def parser():
    return WktParser()


def test_point_parsing(parser):
    geometry = parser.parse('POINT(30.0 10.0)')

    assert geometry.geometry_type == GeometryType.POINT
    assert geometry.points == (Point(x=30.0, y=10.0, z=None),)
    assert WktBuilder().build(geometry) == 'POINT(30.0 10.0)'


def test_point_z_parsing(parser):
    geometry = parser.parse('POINT Z (30 10 5)')

    assert geometry.geometry_type == GeometryType.POINT_Z
    assert geometry.points == (Point(x=30.0, y=10.0, z=5.0),)
    assert WktBuilder().build(geometry) == 'POINT Z (30.0 10.0 5.0)'


def test_line_string_parsing(parser):
    geometry = parser.parse('LINESTRING(30.0 10.0, 10.0 30.0, 40.0 40.0)')

    assert geometry.geometry_type == GeometryType.LINESTRING
    assert geometry.points == (
        Point(x=30.0, y=10.0),
        Point(x=10.0, y=30.0),
        Point(x=40.0, y=40.0),
    )


def test_line_string_z_parsing(parser):
    geometry = parser.parse('LINESTRING Z (30.0 10.0 40.0, 10.0 30.0 20.0, 40.0 40.0 10.0)')

    assert geometry.geometry_type == GeometryType.LINESTRING_Z
    assert geometry.points == (
        Point(x=30.0, y=10.0, z=40.0),
        Point(x=10.0, y=30.0, z=20.0),
        Point(x=40.0, y=40.0, z=10.0),
    )


def test_polygon_parsing(parser):
    geometry = parser.parse('POLYGON((30.0 10.0, 40.0 40.0, 20.0 40.0, 10.0 20.0, 30.0 10.0))')

    assert geometry.geometry_type == GeometryType.POLYGON
    assert len(geometry.points) == 5
    assert geometry.points[0] == geometry.points[-1]
    assert all(p.z is None for p in geometry.points)


@pytest.mark.parametrize("text, expected_type", [
    ('POINT (30 10)', GeometryType.POINT),
    ('POINT Z(30 10 5)', GeometryType.POINT_Z),
    ('POINTZ (30 10 5)', GeometryType.POINT_Z),
    ('LINESTRING (30 10, 10 30)', GeometryType.LINESTRING),
    ('LINESTRING Z(30 10 1, 10 30 2)', GeometryType.LINESTRING_Z),
    ('POLYGON ((0 0, 1 0, 0 1, 0 0))', GeometryType.POLYGON),
    ('  POINT(1 2)\n', GeometryType.POINT),
    ('LINESTRING(1 2,3 4 ,  5 6)', GeometryType.LINESTRING),
])
def test_tolerated_spacing(parser, text, expected_type):
    assert parser.parse(text).geometry_type == expected_type


def test_signed_and_fractional_numbers(parser):
    geometry = parser.parse('LINESTRING(-71.06 42.36, +0.5 -.25)')

    assert geometry.points == (Point(x=-71.06, y=42.36), Point(x=0.5, y=-0.25))


def test_two_dimensional_variants_have_no_z(parser):
    assert parser.parse('POINT(30.0 10.0)').points[0].z is None
    assert parser.parse('LINESTRING(1 2, 3 4)').points[1].z is None


def test_order_is_preserved(parser):
    text = 'LINESTRING(5 5, 1 1, 3 3, 1 1)'
    xs = [p.x for p in parser.parse(text).points]

    assert xs == [5.0, 1.0, 3.0, 1.0]


def test_grammar_specificity_order():
    order = [g.geometry_type for g in GRAMMARS]

    assert order.index(GeometryType.POINT_Z) < order.index(GeometryType.POINT)
    assert order.index(GeometryType.LINESTRING_Z) < order.index(GeometryType.LINESTRING)
    assert order.index(GeometryType.POLYGON) < order.index(GeometryType.LINESTRING)
    assert set(order) == set(GeometryType)


@pytest.mark.parametrize("text", [
    'point(30 10)',
    'MULTIPOINT((10 40), (40 30))',
    'POINT(30 10 5)',
    'POINT Z (30 10)',
    'LINESTRING Z (30 10, 10 30)',
    'POLYGON((0 0, 1 0, 0 1, 0 0), (0.1 0.1, 0.2 0.1, 0.1 0.2, 0.1 0.1))',
    'POINT(1e5 2)',
    'POINT()',
    '',
])
def test_unsupported_format(parser, text):
    with pytest.raises(UnsupportedFormat) as exc_info:
        parser.parse(text)

    assert exc_info.value.text == text


def test_single_point_linestring_is_rejected(parser):
    with pytest.raises(UnsupportedFormat, match="at least 2 points"):
        parser.parse('LINESTRING (30 10)')


def test_open_polygon_is_rejected(parser):
    with pytest.raises(UnsupportedFormat, match="not closed"):
        parser.parse('POLYGON((30 10, 40 40, 20 40, 10 20))')


def test_short_polygon_is_rejected(parser):
    with pytest.raises(UnsupportedFormat, match="at least 4 points"):
        parser.parse('POLYGON((0 0, 1 1, 0 0))')


def test_malformed_coordinate(parser):
    with pytest.raises(MalformedCoordinate) as exc_info:
        parser.parse('POINT(1.2.3 4)')

    assert exc_info.value.token == '1.2.3'
    assert exc_info.value.position == (0, 0)


def test_malformed_coordinate_position(parser):
    with pytest.raises(MalformedCoordinate) as exc_info:
        parser.parse('LINESTRING(1 2, 3 -)')

    assert exc_info.value.token == '-'
    assert exc_info.value.position == (1, 1)
    assert 'LINESTRING(1 2, 3 -)' in str(exc_info.value)


def test_non_string_input(parser):
    with pytest.raises(UnsupportedFormat):
        parser.parse(None)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_wkt('CIRCLE(0 0, 1)')


def test_overflowing_coordinate_is_malformed(parser):
    token = '9' * 400
    with pytest.raises(MalformedCoordinate) as exc_info:
        parser.parse(f'POINT({token} 1.0)')

    assert exc_info.value.token == token
    assert exc_info.value.position == (0, 0)


def test_overflowing_z_is_malformed(parser):
    with pytest.raises(MalformedCoordinate) as exc_info:
        parser.parse('LINESTRING Z (1 2 3, 4 5 -' + '9' * 400 + ')')

    assert exc_info.value.position == (1, 2)


@pytest.mark.parametrize("text", [
    'POINT(٣ ٤)',
    'LINESTRING(1 2, ３ 4)',
])
def test_non_ascii_digits_are_unsupported(parser, text):
    with pytest.raises(UnsupportedFormat):
        parser.parse(text)
