"""Side-by-side timing of the storage backends."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from todostore.persistence.registry import create_store, get_available_stores
from todostore.todo import Todo

logger = logging.getLogger(__name__)

PHASES = ("insert", "query", "update", "delete")

STORE_FILENAMES = {
    "sqlite": "compare.db",
    "zodb": "compare.fs",
}


@dataclass
class ComparisonResult:
    """Wall-clock seconds spent per phase for one backend."""

    backend: str
    count: int
    timings: dict[str, float] = field(default_factory=dict)

    @property
    def total(self) -> float:
        return sum(self.timings.values())


async def compare_backend(backend: str, path: Path | None, count: int) -> ComparisonResult:
    """
    Run the workload against one backend.

    Inserts ``count`` todos one by one, lists them, marks each done and
    deletes each. Leftovers from an earlier run are cleared first.
    """
    result = ComparisonResult(backend=backend, count=count)
    store = create_store(backend, path)

    async with store:
        await store.clear()

        start = time.perf_counter()
        ids = [await store.insert_todo(Todo(title=f"Todo {n}")) for n in range(1, count + 1)]
        result.timings["insert"] = time.perf_counter() - start

        start = time.perf_counter()
        todos = await store.get_all_todos()
        result.timings["query"] = time.perf_counter() - start
        if len(todos) != count:
            raise RuntimeError(f"{backend}: expected {count} todos, found {len(todos)}")

        start = time.perf_counter()
        for todo in todos:
            await store.update_todo(todo.copy_with(is_done=True))
        result.timings["update"] = time.perf_counter() - start

        start = time.perf_counter()
        for todo_id in ids:
            await store.delete_todo(todo_id)
        result.timings["delete"] = time.perf_counter() - start

    logger.info(
        "Compared %s: %.3fs for %d todos",
        backend,
        result.total,
        count,
        extra={"backend": backend},
    )
    return result


async def run_comparison(
    workdir: Path,
    count: int,
    backends: list[str] | None = None,
) -> list[ComparisonResult]:
    """Compare backends using fresh files inside ``workdir``."""
    workdir.mkdir(parents=True, exist_ok=True)
    results = []
    for backend in backends or get_available_stores():
        path = workdir / STORE_FILENAMES.get(backend, f"compare.{backend}")
        results.append(await compare_backend(backend, path, count))
    return results


def format_comparison(results: list[ComparisonResult]) -> str:
    """Render results as a fixed-width table in milliseconds."""
    header = f"{'backend':<10}" + "".join(f"{phase:>12}" for phase in PHASES) + f"{'total':>12}"
    lines = [header, "-" * len(header)]
    for result in results:
        cells = "".join(f"{result.timings.get(phase, 0.0) * 1000:>12.1f}" for phase in PHASES)
        lines.append(f"{result.backend:<10}{cells}{result.total * 1000:>12.1f}")
    if results:
        lines.append(f"({results[0].count} todos per backend, times in ms)")
    return "\n".join(lines)
