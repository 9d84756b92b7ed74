"""ResourceStore — the DI-constructed entry point for persisted resources."""

from __future__ import annotations

import asyncio
import logging
from enum import StrEnum
from typing import overload

from pydantic import ValidationError

from ..exceptions import InvalidResourceError, MissingTypeError, UnrecognizedTypeError
from ..models import DEFAULT_SCHEMAS, Graph, Resource, Schemas
from ..serializers import graph_from_json, graph_to_json
from ..storage import FileStore, StorageBackend
from .store_config import StoreConfig

logger = logging.getLogger(__name__)


class StoreState(StrEnum):
    UNLOADED = "unloaded"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class ResourceStore:
    """Type-indexed resource graph mirrored to a single JSON document.

    The graph is read from the backend at most once. The first operation
    starts the read and every other caller awaits that same load, including
    callers that arrive while it is still in flight. A missing document means
    first run: an empty graph is written and used. The outcome of the load,
    failure included, is cached until ``reset()``.

    ``save`` and ``delete`` mutate the in-memory graph and then rewrite the
    whole document. Writes are not ordered against each other; the last one
    to complete wins.

    Error-handling contract
    ----------------------
    - ``MissingTypeError``, ``UnrecognizedTypeError`` and
      ``InvalidResourceError`` are raised for bad input.
    - ``StoreLoadError`` is raised when the stored document cannot be parsed.
    - Backend ``OSError`` propagates unchanged. Nothing is retried.
    """

    def __init__(
        self,
        backend: StorageBackend,
        *,
        schemas: Schemas | None = None,
        config: StoreConfig | None = None,
    ) -> None:
        self.backend = backend
        self.schemas: Schemas = DEFAULT_SCHEMAS if schemas is None else schemas
        self.config = config or StoreConfig()
        self._load_task: asyncio.Task[Graph] | None = None

    @property
    def state(self) -> StoreState:
        task = self._load_task
        if task is None:
            return StoreState.UNLOADED
        if not task.done():
            return StoreState.LOADING
        if task.cancelled() or task.exception() is not None:
            return StoreState.FAILED
        return StoreState.LOADED

    async def load(self) -> Graph:
        if self._load_task is None:
            self._load_task = asyncio.ensure_future(self._read_graph())
        return await asyncio.shield(self._load_task)

    def reset(self) -> None:
        """Forget the loaded graph so the next operation reads the backend again.

        A load still in flight is kept: it is already reading the current
        document, and starting another would race it on first-run creation.
        """
        if self._load_task is not None and not self._load_task.done():
            logger.debug("Reset requested while loading %s, keeping the pending load", self.backend.location)
            return
        self._load_task = None

    @overload
    async def find(self, resource_type: str) -> list[Resource]: ...
    @overload
    async def find(self, resource_type: str, resource_id: int) -> Resource | None: ...

    async def find(
        self,
        resource_type: str,
        resource_id: int | None = None,
    ) -> list[Resource] | Resource | None:
        """Return every resource of a type, or the one stored under ``resource_id``.

        A type that was never saved raises ``UnrecognizedTypeError``; an
        unknown id of a known type returns ``None``.
        """
        graph = await self.load()
        partition = graph.get(resource_type)
        if partition is None:
            raise UnrecognizedTypeError(resource_type)
        if resource_id is not None:
            return partition.get(resource_id)
        return list(partition.values())

    async def save(self, resource: Resource) -> Graph:
        """Insert or update ``resource`` and persist the graph.

        A resource without an id, or whose id is not stored yet, gets a fresh
        id for its type. The resolved id is written back to ``resource.id``.
        """
        if resource.type is None:
            raise MissingTypeError()
        self._validate(resource.type, resource)

        graph = await self.load()
        partition = graph.setdefault(resource.type, {})
        resource_id = resource.id
        if resource_id is None or resource_id not in partition:
            resource_id = _next_id(partition)
        resource.id = resource_id
        partition[resource_id] = resource

        await self._persist(graph)
        return graph

    async def delete(self, resource: Resource) -> Graph | None:
        """Remove ``resource`` and persist the graph.

        Returns ``None`` without writing when the resource was never persisted.
        """
        if resource.type is None:
            raise MissingTypeError()
        if resource.id is None:
            return None

        graph = await self.load()
        partition = graph.get(resource.type)
        if partition is None or resource.id not in partition:
            return None
        del partition[resource.id]

        await self._persist(graph)
        return graph

    async def _read_graph(self) -> Graph:
        try:
            payload = await self.backend.read_text()
        except FileNotFoundError:
            logger.info("No data file at %s, creating an empty one", self.backend.location)
            graph: Graph = {}
            await self._persist(graph)
            return graph
        graph = graph_from_json(payload, self.schemas)
        logger.debug("Loaded %d resource types from %s", len(graph), self.backend.location)
        return graph

    async def _persist(self, graph: Graph) -> None:
        await self.backend.write_text(graph_to_json(graph, indent=self.config.indent))
        logger.debug("Persisted graph to %s", self.backend.location)

    def _validate(self, resource_type: str, resource: Resource) -> None:
        schema = self.schemas.get(resource_type)
        if schema is None:
            return
        if not isinstance(resource, schema):
            raise InvalidResourceError(
                f"Resources of type {resource_type!r} must be {schema.__name__} instances, "
                f"got {type(resource).__name__}"
            )
        try:
            schema.model_validate(resource.model_dump(by_alias=True))
        except ValidationError as exc:
            raise InvalidResourceError(f"Invalid {resource_type!r} resource: {exc}") from exc


def open_store(config: StoreConfig | None = None, schemas: Schemas | None = None) -> ResourceStore:
    """Build a store on the configured data file (``<user data dir>/db.json`` by default)."""
    config = config or StoreConfig()
    return ResourceStore(FileStore(config.path), schemas=schemas, config=config)


def _next_id(partition: dict[int, Resource]) -> int:
    return max(partition, default=-1) + 1
