class GeometryError(Exception):
    pass


class PointError(GeometryError):
    pass


class ImmutablePointError(PointError):
    pass


class FigureError(GeometryError):
    pass


class FigureIsNotCorrect(FigureError):
    pass


class RegularPolygonParametersError(FigureIsNotCorrect):
    pass
