"""
Tools for Job Recommendations.

- serpapi_search: Google Jobs search via SerpApi
"""

from backend.tools.serpapi_search import SerpApiJobSearch, best_job_link, build_search_query, normalize_job

__all__ = ["SerpApiJobSearch", "best_job_link", "build_search_query", "normalize_job"]
