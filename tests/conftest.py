"""Shared test fixtures."""

import pytest

from searchsort.schema import FieldSpec, IndexPattern


@pytest.fixture
def sample_index_pattern() -> IndexPattern:
    """Fixture providing a small log index pattern."""
    return IndexPattern(
        fields=[
            FieldSpec(name="@timestamp", type="date", sortable=True, searchable=True),
            FieldSpec(name="message", type="string", sortable=False, searchable=True),
            FieldSpec(name="host.name", type="string", sortable=True, aggregatable=True),
            FieldSpec(name="bytes", type="number", sortable=True),
        ],
        title="logstash-*",
        time_field_name="@timestamp",
    )


@pytest.fixture
def sample_index_pattern_document():
    """Fixture providing the JSON form of an index pattern."""
    return {
        "title": "logstash-*",
        "time_field_name": "@timestamp",
        "fields": [
            {"name": "@timestamp", "type": "date", "sortable": True, "searchable": True},
            {"name": "message", "type": "string", "searchable": True},
            {"name": "bytes", "type": "number", "sortable": True, "aggregatable": True},
        ],
    }
