from abc import ABC, abstractmethod


class IFigure(ABC):
    @abstractmethod
    def points(self) -> list['Point']:
        """Current vertices of the figure in boundary order."""

    @abstractmethod
    def area(self) -> float:
        pass

    @abstractmethod
    def perimeter(self) -> float:
        pass

    @abstractmethod
    def is_point_inside(self, point: 'Point') -> bool:
        pass
