from .insights import INSIGHT_RULES, generate_round_insights
from .models import HoleScore, Insight
from .summary import RoundSummary, build_round_summary, format_to_par

__all__ = [
    "HoleScore",
    "INSIGHT_RULES",
    "Insight",
    "RoundSummary",
    "build_round_summary",
    "format_to_par",
    "generate_round_insights",
]
