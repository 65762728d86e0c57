from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from logging import Logger
from math import copysign
from typing import Iterable, Self

from beautiful_repr import StylizedMixin, Field


ROUNDING_PLACES_LIMIT = 10


def get_collection_with_reduced_nesting_level_by(
    nesting_level: int,
    collection: Iterable
) -> list:
    is_reduced = False

    while not is_reduced and nesting_level > 0:
        new_collection = list()
        is_reduced = True

        for item in collection:
            if isinstance(item, Iterable):
                is_reduced = False
                new_collection.extend(item)
            else:
                new_collection.append(item)

        nesting_level -= 1
        collection = new_collection

    return list(collection)


class NumberRounder(ABC):
    def __call__(self, number: int | float) -> float:
        return self._round(number)

    @abstractmethod
    def _round(self, number: int | float) -> float:
        pass


class NeutralNumberRounder(NumberRounder):
    def _round(self, number: int | float) -> float:
        return number


class TruncatingNumberRounder(NumberRounder):
    def _round(self, number: int | float) -> float:
        return float(int(number))


class AccurateNumberRounder(NumberRounder):
    """Rounds half away from zero."""

    def _round(self, number: int | float) -> float:
        integer_part = int(number)

        if abs(number - integer_part) >= 0.5:
            return float(integer_part + copysign(1, number))
        else:
            return float(integer_part)


class ProxyRounder(NumberRounder):
    def __init__(self, rounder: NumberRounder):
        self.rounder = rounder

    def _round(self, number: int | float) -> float:
        return self.rounder(number)


class ShiftNumberRounder(ProxyRounder):
    def __init__(self, rounder: NumberRounder, comma_shift: int):
        super().__init__(rounder)
        self.comma_shift = comma_shift

    def _round(self, number: int | float) -> float:
        factor = 10 ** self.comma_shift

        return super()._round(number * factor) / factor


def get_rounder_by(decimal_places: int) -> NumberRounder:
    if decimal_places < 0:
        return NeutralNumberRounder()
    elif decimal_places == 0:
        return TruncatingNumberRounder()

    return ShiftNumberRounder(
        AccurateNumberRounder(),
        min(decimal_places, ROUNDING_PLACES_LIMIT)
    )


def round_number(number: int | float, decimal_places: int = -1) -> float:
    return get_rounder_by(decimal_places)(number)


@dataclass
class Report:
    sign: bool
    message: str | None = None
    error: Exception | None = None

    def __bool__(self) -> bool:
        return self.sign

    @classmethod
    def create_error_report(cls, error: Exception) -> Self:
        return cls(
            False,
            message=str(error),
            error=error
        )


class ReportHandler(ABC):
    @abstractmethod
    def __call__(self, report: Report) -> None:
        pass

    def is_supported_report(self, report: Report) -> bool:
        return True


class LoggingReportHandler(ReportHandler):
    """Records bad reports instead of raising their errors."""

    def __init__(self, logger: Logger, default_message: str = ''):
        self.logger = logger
        self.default_message = default_message

    def __call__(self, report: Report) -> None:
        self.logger.debug(
            "%s: %s",
            type(report.error).__name__ if report.error else "Report",
            report.message if report.message else self.default_message
        )

    def is_supported_report(self, report: Report) -> bool:
        return not report.sign


class ReportAnalyzer:
    def __init__(self, report_handlers: Iterable[ReportHandler, ]):
        self.report_handlers = tuple(report_handlers)

    def __call__(self, report: Report) -> Report:
        for report_handler in self.report_handlers:
            if report_handler.is_supported_report(report):
                report_handler(report)

        return report


class StrictToStateMixin(ABC):
    _state_report_analyzer: ReportAnalyzer

    @abstractmethod
    def _is_correct(self) -> Report:
        pass

    def _check_state_errors(self) -> Report:
        return self._state_report_analyzer(self._is_correct())


class ComparisonResult(IntEnum):
    less = -1
    equals = 0
    more = 1


def compare(main: any, relatival: any) -> ComparisonResult:
    if main > relatival:
        return ComparisonResult.more
    elif main < relatival:
        return ComparisonResult.less
    else:
        return ComparisonResult.equals


def are_equal_groups(first: Iterable, second: Iterable, is_order_important: bool = False) -> bool:
    first, second = tuple(first), tuple(second)

    if len(first) != len(second):
        return False

    if is_order_important and any(
        not (first_item == second_item)
        for first_item, second_item in zip(first, second)
    ):
        return False

    return all(
        any(first_item == second_item for second_item in second)
        for first_item in first
    )


def get_sorted_numbers(numbers: Iterable[int | float], is_ascending: bool = True) -> list[int | float]:
    return sorted(numbers, reverse=not is_ascending)


class Diapason(StylizedMixin):
    _repr_fields = Field(
        value_getter=lambda diapason, _: (diapason.start, diapason.end),
        formatter=lambda value, _: ' ~ '.join(map(str, value))
    ),

    def __init__(self, first: float, second: float = 0, is_end_inclusive: bool = False):
        self.is_end_inclusive = is_end_inclusive
        self.update_by(first, second)

    def __contains__(self, number: float) -> bool:
        return self.is_having(number)

    @property
    def start(self) -> float:
        return self._start

    @property
    def end(self) -> float:
        return self._end

    def update_by(self, first: float, second: float):
        self._start, self._end = sorted((first, second))

    def is_having(self, number: float) -> bool:
        return (
            number >= self._start
            and (
                number < self._end
                or (number == self._end if self.is_end_inclusive else False)
            )
        )
