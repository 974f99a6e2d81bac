"""Validation and cleaning of knowledge item input."""

from __future__ import annotations

from typing import Any

from knowledge_assistant.store.base import KnowledgeValidationError

UPDATABLE_FIELDS = ("title", "content", "tags", "source", "url")


def _clean_string(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def _clean_tags(tags: Any) -> list[str] | None:
    """Trim and dedupe string tags; ``None`` means *tags* is not a list."""
    if tags is None:
        return []
    if not isinstance(tags, list):
        return None
    cleaned: list[str] = []
    for tag in tags:
        if not isinstance(tag, str):
            continue
        tag = tag.strip()
        if tag and tag not in cleaned:
            cleaned.append(tag)
    return cleaned


def _clean_optional(data: dict[str, Any], field: str, details: list[dict[str, str]]) -> str | None:
    value = data.get(field)
    if value is not None and not isinstance(value, str):
        details.append({"field": field, "message": f"{field.capitalize()} must be a string"})
        return None
    return _clean_string(value)


def validate_create(data: Any) -> dict[str, Any]:
    """Validate and clean input for a new knowledge item.

    Parameters
    ----------
    data : Any
        Raw input, normally a dict.

    Returns
    -------
    dict[str, Any]
        Cleaned ``title``, ``content``, ``tags``, ``source`` and ``url``.

    Raises
    ------
    KnowledgeValidationError
        Listing every invalid field.
    """
    data = data if isinstance(data, dict) else {}
    details: list[dict[str, str]] = []

    title = _clean_string(data.get("title"))
    if not title:
        details.append({"field": "title", "message": "Title is required"})

    content = _clean_string(data.get("content"))
    if not content:
        details.append({"field": "content", "message": "Content is required"})

    tags = _clean_tags(data.get("tags"))
    if tags is None:
        details.append({"field": "tags", "message": "Tags must be an array of strings"})

    source = _clean_optional(data, "source", details)
    url = _clean_optional(data, "url", details)

    if details:
        raise KnowledgeValidationError(details)

    return {"title": title, "content": content, "tags": tags, "source": source, "url": url}


def validate_update(data: Any) -> dict[str, Any]:
    """Validate and clean a partial update.

    Only fields present in *data* appear in the result.

    Raises
    ------
    KnowledgeValidationError
        If no updatable field is present or a present field is invalid.
    """
    data = data if isinstance(data, dict) else {}
    present = [f for f in UPDATABLE_FIELDS if f in data]
    if not present:
        fields = ", ".join(UPDATABLE_FIELDS)
        raise KnowledgeValidationError([{"field": "body", "message": f"At least one of {fields} is required"}])

    details: list[dict[str, str]] = []
    cleaned: dict[str, Any] = {}

    for field in ("title", "content"):
        if field in data:
            value = _clean_string(data[field])
            if not value:
                details.append({"field": field, "message": f"{field.capitalize()} must be a non-empty string"})
            cleaned[field] = value

    if "tags" in data:
        tags = _clean_tags(data["tags"])
        if tags is None:
            details.append({"field": "tags", "message": "Tags must be an array of strings"})
        cleaned["tags"] = tags

    for field in ("source", "url"):
        if field in data:
            cleaned[field] = _clean_optional(data, field, details)

    if details:
        raise KnowledgeValidationError(details)
    return cleaned
