"""Value objects for contest metadata."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Problem:
    """A task row from a contest's task list."""

    id: str
    name: str
    url: str
    time_limit: str
    memory_limit: str


@dataclass(frozen=True)
class Contest:
    """Problems of a contest in page order."""

    contest_id: str
    problems: list[Problem] = field(default_factory=list)

    def problem(self, problem_id: str) -> Problem | None:
        """Find a problem by id, ignoring case."""
        wanted = problem_id.lower()
        return next((p for p in self.problems if p.id.lower() == wanted), None)

    def problem_ids_lowercase(self) -> list[str]:
        return [p.id.lower() for p in self.problems]
