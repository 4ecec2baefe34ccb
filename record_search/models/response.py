"""Result models for ranked search and engine statistics."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RankedResult(BaseModel):
    """Record paired with its ranking metadata before the metadata is dropped."""
    
    model_config = ConfigDict(arbitrary_types_allowed=True)
    
    item: Any = Field(..., description="The matched record")
    score: float = Field(..., description="Final averaged score")
    matched_fields: int = Field(..., description="Number of terms that matched some field")


class SearchStats(BaseModel):
    """Snapshot of engine statistics."""
    
    total_queries: int = Field(default=0, description="Ranked search calls")
    index_queries: int = Field(default=0, description="Inverted index lookups")
    queries_with_results: int = Field(default=0, description="Calls returning at least one record")
    no_result_queries: int = Field(default=0, description="Calls returning nothing")
    indexes_built: int = Field(default=0, description="Indexes created through the engine")
    total_execution_time_ms: float = Field(default=0.0, description="Cumulative time spent searching")
    average_execution_time_ms: float = Field(default=0.0, description="Mean time per call")
