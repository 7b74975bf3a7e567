"""
Registry names of the dataset bundles the report pages read.
"""

EDA_BY_CLASS = "eda_by_class"
EDA_BY_ONLINE_BOARDING = "eda_by_online_boarding"
EDA_BY_WIFI = "eda_by_wifi"

SHAP_IMPORTANCE = "shap_importance"
MODEL_METRICS = "model_metrics"

SAMPLE_OUTCOMES = "sample_outcomes"

ALL = (
    EDA_BY_CLASS,
    EDA_BY_ONLINE_BOARDING,
    EDA_BY_WIFI,
    SHAP_IMPORTANCE,
    MODEL_METRICS,
    SAMPLE_OUTCOMES,
)
