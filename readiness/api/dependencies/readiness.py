from __future__ import annotations

from fastapi import Depends

from readiness.records.source import LoadRecordSource
from readiness.records.sql_source import SqlLoadRecordSource
from readiness.services.readiness_service import ReadinessComposer


def get_record_source() -> LoadRecordSource:
    return SqlLoadRecordSource()


def get_readiness_composer(source: LoadRecordSource = Depends(get_record_source)) -> ReadinessComposer:
    return ReadinessComposer(source)
