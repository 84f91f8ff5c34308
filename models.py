import json

from pydantic import AliasChoices, BaseModel, Field, field_validator
from typing import List, Optional

class EmailRequest(BaseModel):
    emailContent: str
    # the browser front end posts the tone as "emailTone"
    tone: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("tone", "emailTone"),
    )

# --- Gemini generateContent wire shapes ---

class Part(BaseModel):
    text: str

    @field_validator("text", mode="before")
    @classmethod
    def scalar_as_text(cls, v):
        # numbers and booleans come back as their JSON spelling
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, (int, float)):
            return json.dumps(v)
        return v

class Content(BaseModel):
    parts: List[Part] = Field(..., min_length=1)

class Candidate(BaseModel):
    content: Content

class GeminiRequest(BaseModel):
    contents: List[Content]

class GeminiResponse(BaseModel):
    candidates: List[Candidate] = Field(..., min_length=1)
