"""
Job Recommendations Backend.

Core components:
- agents: Keyword extraction and the recommendations controller
- tools: SerpApi Google Jobs search
- api: FastAPI app serving the /api/jobs proxy
"""
