"""
Agents for Job Recommendations.

- keyword_extractor: Job title and skills from resume feedback
- job_recommender: Status, job list and rendering for the recommendations panel
"""

from backend.agents.job_recommender import JobRecommendations, Status, render_job_recommendations
from backend.agents.keyword_extractor import Keywords, create_keyword_model, extract_keywords

__all__ = [
    "JobRecommendations",
    "Keywords",
    "Status",
    "create_keyword_model",
    "extract_keywords",
    "render_job_recommendations",
]
