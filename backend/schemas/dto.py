from pydantic import BaseModel, Field, field_validator
from typing import List, Literal, Optional

class Ingredient(BaseModel):
    id: str
    name: str = ""
    amount: str = ""

class ChatMessage(BaseModel):
    role: Literal["user", "assistant"]
    text: str
    is_ingredient_list: bool = False

class IngredientUpdateRequest(BaseModel):
    field: Literal["name", "amount"]
    value: str

class FollowUpRequest(BaseModel):
    text: str

    @field_validator("text")
    @classmethod
    def not_blank(cls, v):
        if not v.strip():
            raise ValueError("text must not be blank")
        return v

class StateResponse(BaseModel):
    ingredients: List[Ingredient]
    chat_history: List[ChatMessage]
    is_loading: bool
    input_text: str
    mode: Literal["idle", "submitting", "active"]
    can_generate: bool

# --- generateContent wire shapes ---

class Part(BaseModel):
    text: str = ""

class Content(BaseModel):
    role: Optional[str] = None
    parts: List[Part]

class Candidate(BaseModel):
    content: Content

class GenerateContentRequest(BaseModel):
    contents: List[Content] = Field(min_length=1)

class GenerateContentResponse(BaseModel):
    candidates: List[Candidate] = Field(min_length=1)
