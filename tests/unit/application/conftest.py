"""Shared fixtures for the filtering tests: a patient-list schema."""
from __future__ import annotations

import pytest

from querykit.application.schema import FieldSchema


@pytest.fixture
def schema() -> FieldSchema:
    return FieldSchema.from_dict(
        {
            "search_fields": ["first_name", "last_name", "email"],
            "filterable_fields": {
                "id": {"type": "uuid"},
                "assigned_dietitian_id": {"type": "uuid"},
                "is_active": {"type": "boolean"},
                "date_of_birth": {"type": "date"},
                "age": {"type": "integer"},
                "score": {"type": "float"},
                "gender": {"type": "enum", "values": ["MALE", "FEMALE", "OTHER"]},
                "city": {"type": "string"},
            },
            "sortable_fields": ["created_at", "first_name", "last_name", "date_of_birth"],
            "default_sort": {"field": "created_at", "order": "DESC"},
            "max_limit": 100,
        }
    )
