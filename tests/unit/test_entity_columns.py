from sqlmodel import DateTime, SQLModel

import src.domain.entities  # noqa: F401
from src.domain.base import utcnow

TIMESTAMP_COLUMNS = ("created_at", "updated_at", "deleted_at")


def test_record_timestamps_are_plain_datetime_columns():
    tables = [t for t in SQLModel.metadata.sorted_tables if "created_at" in t.columns]

    assert tables
    for table in tables:
        for name in TIMESTAMP_COLUMNS:
            column_type = table.columns[name].type
            assert type(column_type) is DateTime, f"{table.name}.{name}"
            assert column_type.timezone is False


def test_entity_datetime_fields_are_plain_datetime_columns():
    tables = SQLModel.metadata.tables
    for table_name, column_name in (
        ("subscriptions", "start_date"),
        ("subscriptions", "next_billing_date"),
        ("api_keys", "expires_at"),
        ("api_keys", "last_used_at"),
        ("payment_transactions", "timestamp"),
        ("audit_logs", "timestamp"),
        ("activity_logs", "timestamp"),
        ("reports", "last_run_at"),
    ):
        column_type = tables[table_name].columns[column_name].type
        assert type(column_type) is DateTime, f"{table_name}.{column_name}"
        assert column_type.timezone is False


def test_utcnow_is_naive():
    assert utcnow().tzinfo is None
