from __future__ import annotations
from typing import List, Literal, Optional
from pydantic import BaseModel, Field

Mode = Literal["asterisks", "field_numbers"]

class MaskRequest(BaseModel):
    text: str
    words: Optional[List[str]] = Field(default=None, description="si falta, se usa la lista guardada del cliente")
    client_id: str = Field(default="__global__", description="identificador cliente")
    mode: Optional[Mode] = None

class MaskResponse(BaseModel):
    text: str
    mode: Mode

class DecodeRequest(BaseModel):
    text: str
    words: Optional[List[str]] = None
    client_id: str = "__global__"

class DecodeResponse(BaseModel):
    text: str

class WordsUpsert(BaseModel):
    words: List[str]

class WordsResponse(BaseModel):
    client_id: str
    words: List[str]

class ModeUpsert(BaseModel):
    mode: Mode

class ModeResponse(BaseModel):
    client_id: str
    mode: Mode
