"""Transform result — immutable container for records and skipped routes."""

from collections.abc import Iterable
from dataclasses import dataclass

from elegant_routes.errors import ResolutionError
from elegant_routes.routing.types import RouteRecord


@dataclass(frozen=True, slots=True)
class RouteFailure:
    """A route dropped from the output because its component failed to resolve."""

    name: str
    error: ResolutionError

    def __str__(self) -> str:
        return f"{self.name}: {self.error}"


@dataclass(frozen=True, slots=True)
class TransformResult:
    """The outcome of transforming one route or a list of routes.

    A failed route contributes no records and one ``RouteFailure``; its
    subtree is never visited. The result is falsy when anything was
    skipped, so you can write::

        result = transformer.transform_with_report(routes)
        if not result:
            warn_about(result.skipped_names)
    """

    records: tuple[RouteRecord, ...] = ()
    failures: tuple[RouteFailure, ...] = ()

    @property
    def is_complete(self) -> bool:
        """True if no route was skipped."""
        return not self.failures

    @property
    def skipped_names(self) -> tuple[str, ...]:
        return tuple(failure.name for failure in self.failures)

    def __bool__(self) -> bool:
        return self.is_complete

    @classmethod
    def combine(cls, results: Iterable["TransformResult"]) -> "TransformResult":
        """Concatenate records and failures, preserving order."""
        records: list[RouteRecord] = []
        failures: list[RouteFailure] = []
        for result in results:
            records.extend(result.records)
            failures.extend(result.failures)
        return cls(records=tuple(records), failures=tuple(failures))
