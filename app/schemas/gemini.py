from pydantic import BaseModel, ConfigDict, Field
from typing import List

class Part(BaseModel):
    text: str

class Content(BaseModel):
    parts: List[Part]

class GenerationConfig(BaseModel):
    """Fixed sampling parameters for reply generation"""
    temperature: float = 0.7
    max_output_tokens: int = Field(default=200, alias="maxOutputTokens")
    top_p: float = Field(default=0.8, alias="topP")

    model_config = ConfigDict(populate_by_name=True)

class GenerateContentRequest(BaseModel):
    """Body of a generateContent call"""
    contents: List[Content]
    generation_config: GenerationConfig = Field(default_factory=GenerationConfig, alias="generationConfig")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_prompt(cls, prompt: str) -> "GenerateContentRequest":
        return cls(contents=[Content(parts=[Part(text=prompt)])])
