"""A chain of typed processing steps run in order."""

from __future__ import annotations

from typing import Any, Callable, List, Tuple


class PipelineTypeError(TypeError):
    """Raised when a step receives a value of the wrong type."""


class Pipeline:
    """Runs each added step on the output of the previous one."""

    def __init__(self) -> None:
        self._pipes: List[Tuple[Callable[[Any], Any], type]] = []

    def __len__(self) -> int:
        return len(self._pipes)

    def add(self, pipe: Callable[[Any], Any], input_type: type) -> "Pipeline":
        """Append a step that accepts values of exactly ``input_type``."""
        self._pipes.append((pipe, input_type))
        return self

    def process(self, value: Any) -> Any:
        """Run every step in order and return the final output."""
        for pipe, input_type in self._pipes:
            if type(value) is not input_type:
                raise PipelineTypeError(
                    f"type mismatch: expected {input_type.__name__} "
                    f"but got {type(value).__name__}"
                )
            value = pipe(value)
        return value


def main(argv: Any = None) -> int:
    """Run a two-step demonstration pipeline."""
    pipeline = Pipeline()
    pipeline.add(len, str)
    pipeline.add(lambda n: f"The length of the string is {n}", int)
    try:
        print(pipeline.process("Hello, World!"))
    except PipelineTypeError as error:
        print(error)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())