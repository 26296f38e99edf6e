"""
Domain entity summarising one run of the batch exporter.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ExportReport:
    output_path: str
    row_count: int
    succeeded: tuple[str, ...] = ()
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def symbol_count(self) -> int:
        return len(self.succeeded) + len(self.failed)
