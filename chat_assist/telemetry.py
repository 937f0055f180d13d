"""OpenTelemetry wiring: resolution spans persisted to a local SQLite file."""

import json
import sqlite3
from pathlib import Path

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import ReadableSpan, TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor, SpanExporter, SpanExportResult

from chat_assist.config import APP_NAME, DATA_DIR

TRACER_NAME = "chat_assist"


def get_tracer() -> trace.Tracer:
    return trace.get_tracer(TRACER_NAME)


class SQLiteSpanExporter(SpanExporter):
    def __init__(self, db_path: str | Path | None = None):
        self.db_path = str(db_path or DATA_DIR / f"{APP_NAME}.db")
        self._init_db()

    def _init_db(self):
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS spans (
                    id TEXT PRIMARY KEY,
                    trace_id TEXT NOT NULL,
                    parent_id TEXT,
                    name TEXT NOT NULL,
                    start_time INTEGER NOT NULL,
                    end_time INTEGER,
                    duration_ms REAL,
                    status_code TEXT,
                    attributes TEXT
                )
            """)
            conn.execute("CREATE INDEX IF NOT EXISTS idx_spans_trace ON spans(trace_id)")
            conn.execute("CREATE INDEX IF NOT EXISTS idx_spans_start ON spans(start_time DESC)")

    def export(self, spans: list[ReadableSpan]) -> SpanExportResult:
        with sqlite3.connect(self.db_path) as conn:
            for span in spans:
                span_id = format(span.context.span_id, '016x')
                trace_id = format(span.context.trace_id, '032x')
                parent_id = format(span.parent.span_id, '016x') if span.parent else None

                duration_ms = None
                if span.end_time and span.start_time:
                    duration_ms = (span.end_time - span.start_time) / 1_000_000

                status_code = span.status.status_code.name if span.status else "UNSET"

                conn.execute(
                    "INSERT OR REPLACE INTO spans VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
                    (
                        span_id,
                        trace_id,
                        parent_id,
                        span.name,
                        span.start_time,
                        span.end_time,
                        duration_ms,
                        status_code,
                        json.dumps(dict(span.attributes) if span.attributes else {}),
                    )
                )
        return SpanExportResult.SUCCESS

    def shutdown(self):
        pass


def build_tracer_provider(exporter: SpanExporter, version: str = "0.0.0") -> TracerProvider:
    """TracerProvider exporting every finished span synchronously through *exporter*."""
    resource = Resource.create({
        "service.name": APP_NAME,
        "service.version": version,
    })
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    return provider


def setup_tracing(db_path: str | Path | None = None, version: str = "0.0.0") -> TracerProvider:
    """Install the SQLite-backed provider as the global tracer provider."""
    provider = build_tracer_provider(SQLiteSpanExporter(db_path), version=version)
    trace.set_tracer_provider(provider)
    return provider


def recent_resolutions(db_path: str | Path, limit: int = 20) -> list[dict]:
    """Most recent ``resolve`` spans as dicts (newest first): provenance, personality, duration."""
    with sqlite3.connect(str(db_path)) as conn:
        rows = conn.execute(
            "SELECT start_time, duration_ms, attributes FROM spans "
            "WHERE name = 'resolve' ORDER BY start_time DESC LIMIT ?",
            (limit,),
        ).fetchall()
    results = []
    for start_time, duration_ms, attributes in rows:
        attrs = json.loads(attributes or "{}")
        results.append({
            "start_time": start_time,
            "duration_ms": duration_ms,
            "provenance": attrs.get("chat.provenance"),
            "personality": attrs.get("chat.personality"),
        })
    return results
