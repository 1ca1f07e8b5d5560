"""View declarations for the readiness dashboard."""

from readiness.views.schema import SCALAR, DataView, list_of

ACWR_VIEW = DataView(
    name="ACWR",
    fields={
        "acute_load": SCALAR,
        "chronic_load": SCALAR,
        "ratio": SCALAR,
        "is_danger": SCALAR,
    },
)

ACWR_HISTORY_POINT_VIEW = DataView(
    name="ACWRHistoryPoint",
    fields={
        "date": SCALAR,
        "acute_load": SCALAR,
        "chronic_load": SCALAR,
        "ratio": SCALAR,
        "is_danger": SCALAR,
    },
    key="date",
)

WELLNESS_METRIC_VIEW = DataView(
    name="WellnessMetric",
    fields={
        "id": SCALAR,
        "date": SCALAR,
        "rhr": SCALAR,
        "hrv_rmssd": SCALAR,
        "hrv_ratio": SCALAR,
        "sleep_score": SCALAR,
        "fatigue_score": SCALAR,
        "muscle_soreness_score": SCALAR,
        "stress_score": SCALAR,
        "mood_score": SCALAR,
        "diet_score": SCALAR,
    },
)

READINESS_VIEW = DataView(
    name="Readiness",
    fields={
        "acwr": ACWR_VIEW,
        "acwr_history": list_of(ACWR_HISTORY_POINT_VIEW),
        "wellness_history": list_of(WELLNESS_METRIC_VIEW),
    },
)

# Connection-valued fields of READINESS_VIEW, for unwrap_connections_in_place
READINESS_LIST_FIELDS = ("acwr_history", "wellness_history")
