from src.models.notice import Notice
from src.models.risk_window_log import RiskWindowLog

__all__ = [
    "Notice",
    "RiskWindowLog",
]
