from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class EmailRequest(BaseModel):
    """Email to reply to, with an optional tone that overrides detection"""
    email_content: Optional[str] = Field(default=None, alias="emailContent")
    tone: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)
