"""JSON serialization helpers for the resource graph."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from ..exceptions import StoreLoadError
from ..models import DEFAULT_SCHEMAS, Graph, Resource, Schemas, schema_for

logger = logging.getLogger(__name__)


def graph_to_json(graph: Graph, *, indent: int | None = None) -> str:
    payload = {
        resource_type: {
            str(resource_id): resource.model_dump(mode="json", by_alias=True)
            for resource_id, resource in partition.items()
        }
        for resource_type, partition in graph.items()
    }
    return json.dumps(payload, ensure_ascii=False, indent=indent)


def graph_from_json(payload: str, schemas: Schemas = DEFAULT_SCHEMAS) -> Graph:
    """Parse the data file content into a graph.

    Records are validated against the schema registered for their type;
    unregistered types load as plain ``Resource`` records.
    Raises ``StoreLoadError`` on invalid or unparseable input.
    """
    try:
        raw = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise StoreLoadError(f"Failed to parse data file: {exc}") from exc
    if not isinstance(raw, dict):
        raise StoreLoadError("Failed to parse data file: top level must be an object")

    graph: Graph = {}
    for resource_type, partition in raw.items():
        if not isinstance(partition, dict):
            raise StoreLoadError(f"Failed to parse data file: type {resource_type!r} is not an object")
        schema = schema_for(resource_type, schemas)
        if schema is Resource:
            logger.debug("No schema registered for type %r, loading as plain resources", resource_type)
        graph[resource_type] = {
            _parse_id(resource_type, key): _parse_record(resource_type, key, record, schema)
            for key, record in partition.items()
        }
    return graph


def _parse_id(resource_type: str, key: str) -> int:
    try:
        resource_id = int(key)
    except ValueError as exc:
        raise StoreLoadError(f"Failed to parse data file: invalid id {key!r} in {resource_type!r}") from exc
    # "01" and "1" would otherwise collapse into one entry
    if str(resource_id) != key:
        raise StoreLoadError(f"Failed to parse data file: invalid id {key!r} in {resource_type!r}")
    return resource_id


def _parse_record(
    resource_type: str,
    key: str,
    record: object,
    schema: type[Resource],
) -> Resource:
    if not isinstance(record, dict):
        raise StoreLoadError(f"Failed to parse data file: {resource_type}/{key} is not an object")
    record = {"type": resource_type, "id": int(key), **record}
    if record["type"] != resource_type or record["id"] != int(key):
        raise StoreLoadError(
            f"Failed to parse data file: {resource_type}/{key} is stored as "
            f"{record['type']}/{record['id']}"
        )
    try:
        return schema.model_validate(record)
    except ValidationError as exc:
        raise StoreLoadError(f"Failed to parse data file: {resource_type}/{key}: {exc}") from exc
