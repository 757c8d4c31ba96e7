# src/meal_kit/parsers/base.py

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from time import monotonic
from typing import Generic, TypeVar

from meal_kit.observability import names
from meal_kit.observability.base import MetricsHook, NoOpMetricsHook

from .properties import parse_flat_object
from .reader import Shape, read_text, top_level
from .splitter import split_top_level_objects

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class DataFileParser(ABC, Generic[T]):
    """
    Reads one data file and turns its text into a typed result.

    Requirements:
    - Missing and empty files raise (``OSError`` family)
    - Structural problems never raise; they shrink the result
    """

    kind: str = "record"

    def __init__(self, metrics_hook: MetricsHook = NoOpMetricsHook()) -> None:
        self.metrics_hook = metrics_hook

    def parse(self, source: str | Path) -> T:
        text = read_text(source)
        start = monotonic()
        result = self.parse_text(text)
        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(
            names.PARSE_DURATION, elapsed_ms, labels={"kind": self.kind}
        )
        logger.info("Parsed %s file %s", self.kind, source)
        return result

    @abstractmethod
    def parse_text(self, text: str) -> T:
        raise NotImplementedError


class ArrayFileParser(DataFileParser[list[R]]):
    """Array of flat objects, one record per object.

    A record that fails to build is logged and skipped; its siblings still load.
    """

    def parse_text(self, text: str) -> list[R]:
        shape, body = top_level(text)
        if shape is not Shape.ARRAY:
            logger.warning("Expected a JSON array of %s objects, got %s", self.kind, shape.value)
            return []

        records: list[R] = []
        skipped = 0
        for member in split_top_level_objects(body):
            try:
                record = self.build_record(parse_flat_object(member))
            except ValueError as exc:
                logger.warning("Error parsing %s: %s", self.kind, exc)
                skipped += 1
                continue
            if record is None:
                skipped += 1
                continue
            records.append(record)

        labels = {"kind": self.kind}
        self.metrics_hook.increment(names.RECORDS_LOADED_TOTAL, len(records), labels)
        if skipped:
            self.metrics_hook.increment(names.RECORDS_SKIPPED_TOTAL, skipped, labels)
            logger.info("Loaded %d %s records, skipped %d", len(records), self.kind, skipped)
        return records

    @abstractmethod
    def build_record(self, properties: Mapping[str, str]) -> R | None:
        raise NotImplementedError
