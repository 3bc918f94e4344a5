"""
Keyword Extractor.

Asks the chat model for the job title and key skills that best describe
a resume, based on the feedback produced by the resume analysis.
"""

import json
import logging
from typing import Any

from langchain_deepseek import ChatDeepSeek
from pydantic import BaseModel

from backend.config import Settings, settings as default_settings
from backend.errors import ExtractionError, ValidationError
from backend.utils.parser import extract_json_object

logger = logging.getLogger(__name__)

MAX_SKILLS = 5

KEYWORD_PROMPT = """Based on this resume analysis, extract the most relevant job title and up to {max_skills} key skills for a job search. Return a single, valid JSON object with this structure: {{ "title": "string", "skills": ["string"] }} Resume Analysis: {feedback}"""


class Keywords(BaseModel):
    """Job title and skills used to query the jobs proxy."""

    title: str
    skills: list[str]


def serialize_feedback(feedback: Any) -> str:
    """Serialize the feedback document for the prompt without inspecting it."""
    if isinstance(feedback, BaseModel):
        feedback = feedback.model_dump(mode="json")
    return json.dumps(feedback, default=str)


def build_keyword_prompt(feedback: Any) -> str:
    return KEYWORD_PROMPT.format(max_skills=MAX_SKILLS, feedback=serialize_feedback(feedback))


def validate_keywords(data: dict) -> Keywords:
    """Require a non-empty title and at least one skill."""
    title = data.get("title")
    skills = data.get("skills")

    if not title or not isinstance(title, str) or not title.strip():
        raise ValidationError("AI did not return valid title or skills.")
    if not skills or not isinstance(skills, list):
        raise ValidationError("AI did not return valid title or skills.")

    skills = [str(s).strip() for s in skills if s is not None and str(s).strip()]
    if not skills:
        raise ValidationError("AI did not return valid title or skills.")

    return Keywords(title=title.strip(), skills=skills[:MAX_SKILLS])


async def extract_keywords(ai, feedback: Any) -> Keywords:
    """
    Extract a job title and skills from resume feedback.

    Args:
        ai: Chat model exposing ``ainvoke(prompt)`` (any LangChain chat model)
        feedback: Resume analysis document, passed through as JSON text

    Returns:
        Validated keywords

    Raises:
        ExtractionError: the response carried no text
        ParseError: the text is not a JSON object
        ValidationError: title or skills missing
    """
    response = await ai.ainvoke(build_keyword_prompt(feedback))
    content = getattr(response, "content", None)
    if not isinstance(content, str) or not content.strip():
        raise ExtractionError("Could not extract keywords from AI.")

    keywords = validate_keywords(extract_json_object(content))
    logger.info(f"Extracted from AI: title={keywords.title!r} skills={keywords.skills!r}")
    return keywords


def create_keyword_model(config: Settings | None = None) -> ChatDeepSeek:
    """Create the chat model used for keyword extraction."""
    config = config or default_settings
    if not config.deepseek_api_key:
        raise ValueError("DEEPSEEK_API_KEY not set")

    return ChatDeepSeek(
        model=config.deepseek_model,
        api_key=config.deepseek_api_key,
        temperature=0.1,
    )
