"""JSON schema definition for reporter output."""
from __future__ import annotations

SCHEMA_VERSION = "1.0.0"

JSON_SCHEMA_V1 = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "verdict report",
    "type": "object",
    "required": ["schema_version", "generated_at", "summary", "suites"],
    "properties": {
        "schema_version": {"type": "string"},
        "generated_at": {"type": "string", "format": "date-time"},
        "language": {"type": "string"},
        "summary": {
            "type": "object",
            "required": ["suites", "total", "passed", "failed", "success_rate", "duration_s"],
            "properties": {
                "suites": {"type": "integer", "minimum": 0},
                "total": {"type": "integer", "minimum": 0},
                "passed": {"type": "integer", "minimum": 0},
                "failed": {"type": "integer", "minimum": 0},
                "success_rate": {"type": "number", "minimum": 0, "maximum": 1},
                "duration_s": {"type": "number"},
            },
        },
        "suites": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "passed", "failed", "total", "detail", "tests"],
                "properties": {
                    "name": {"type": "string"},
                    "passed": {"type": "integer"},
                    "failed": {"type": "integer"},
                    "total": {"type": "integer"},
                    "detail": {"type": "string", "pattern": "^[+-]*$"},
                    "tests": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "required": ["name", "kind", "passed", "message"],
                            "properties": {
                                "name": {"type": "string"},
                                "kind": {"type": "string"},
                                "passed": {"type": "boolean"},
                                "message": {"type": "string"},
                                "thrown_type": {"type": "string"},
                                "thrown_message": {"type": "string"},
                            },
                        },
                    },
                },
            },
        },
    },
}
