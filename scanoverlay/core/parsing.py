"""Scan parsing: validates raw element records one at a time."""

from __future__ import annotations
import logging
from typing import Any

from pydantic import ValidationError

from scanoverlay.core.pose import decode_pose
from scanoverlay.models import (
    BuildWarning, Opening, OpeningCategory, ParsedOpening, ParsedScan,
    ParsedWall, ScanMetadata, WallSegment,
)

logger = logging.getLogger(__name__)


def parse_scan(metadata: ScanMetadata) -> tuple[ParsedScan, list[BuildWarning]]:
    """
    Validate every wall, door and window record independently.

    Records that fail validation are left out of the parsed scan and
    reported as skip warnings naming the element and the offending field.
    """
    warnings: list[BuildWarning] = []

    walls: list[ParsedWall] = []
    for i, record in enumerate(metadata.walls or []):
        wall = _parse_wall(i, record, warnings)
        if wall is not None:
            walls.append(wall)

    doors = _parse_openings(metadata.doors, OpeningCategory.DOOR, warnings)
    windows = _parse_openings(metadata.windows, OpeningCategory.WINDOW, warnings)

    return ParsedScan(walls=walls, doors=doors, windows=windows), warnings


def _parse_wall(
    index: int, record: Any, warnings: list[BuildWarning],
) -> ParsedWall | None:
    element_id = f"wall-{index}"
    if not isinstance(record, dict):
        warnings.append(_skip("invalid_wall", element_id, "record", "not an object"))
        return None

    # A bad identifier only costs the wall its name, not its geometry
    identifier = record.get("identifier")
    if identifier is not None and not isinstance(identifier, str):
        message = f"{element_id}: ignoring non-string identifier {identifier!r}"
        logger.warning(message)
        warnings.append(BuildWarning(
            code="invalid_identifier", message=message, element=element_id, field="identifier",
        ))
        record = {k: v for k, v in record.items() if k != "identifier"}

    try:
        segment = WallSegment.model_validate(record)
    except ValidationError as exc:
        field = _offending_field(exc)
        warnings.append(_skip("invalid_wall", element_id, field, _describe(exc)))
        return None

    return ParsedWall(
        index=index,
        element_id=element_id,
        wall_id=segment.identifier or element_id,
        segment=segment,
        pose=decode_pose(segment.transform),
    )


def _parse_openings(
    records: list[Any] | None,
    category: OpeningCategory,
    warnings: list[BuildWarning],
) -> list[ParsedOpening]:
    parsed: list[ParsedOpening] = []
    code = f"invalid_{category.value}"

    for i, record in enumerate(records or []):
        element_id = f"{category.value}-{i}"
        if not isinstance(record, dict):
            warnings.append(_skip(code, element_id, "record", "not an object"))
            continue

        # The list an opening arrives in decides what it is
        try:
            opening = Opening.model_validate({**record, "category": category})
        except ValidationError as exc:
            field = _offending_field(exc)
            warnings.append(_skip(code, element_id, field, _describe(exc)))
            continue

        parsed.append(ParsedOpening(
            index=i,
            element_id=element_id,
            opening=opening,
            pose=decode_pose(opening.transform),
        ))

    return parsed


def _offending_field(exc: ValidationError) -> str:
    errors = exc.errors()
    if errors and errors[0].get("loc"):
        return str(errors[0]["loc"][0])
    return "record"


def _describe(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(p) for p in err.get("loc", ()))
    return f"{loc}: {err.get('msg', 'invalid')}" if loc else err.get("msg", "invalid")


def _skip(code: str, element_id: str, field: str, detail: str) -> BuildWarning:
    message = f"Skipping {element_id}: invalid {field} ({detail})"
    logger.warning(message)
    return BuildWarning(
        code=code, message=message, element=element_id, field=field, skipped=True,
    )
