from typing import List

from pydantic import BaseModel

from src.models import MatchResult


class SearchRequest(BaseModel):
    query: str = ""


class SearchResponse(BaseModel):
    query: str
    count: int
    results: List[MatchResult]
