from resume_ai.api import analyze_routes

__all__ = [
    "analyze_routes",
]
