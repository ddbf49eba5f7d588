"""
➡️ But : Définir les formats d’entrée/sortie de l’API (couche validation).

Contient les modèles Pydantic utilisés par FastAPI :

TaskCreateIn → corps de requête POST

TaskUpdateIn → corps PUT (remplacement complet)

TaskOut / TaskDeleteOut → réponses de l’API

🔹 Avantages :

Validation automatique, avant tout accès à la base.

Documente les champs dans Swagger (types, exemples...).
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, StrictBool, field_validator


def _non_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("Task title is required")
    return value


class TaskCreateIn(BaseModel):
    title: str = Field(..., min_length=1, examples=["Buy milk"])
    # null et absent sont équivalents : pas de description
    description: Optional[str] = Field(None, examples=["2%"])

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        return _non_blank(value)


class TaskUpdateIn(BaseModel):
    title: str = Field(..., min_length=1, examples=["Buy milk"])
    description: Optional[str] = Field(None, examples=["2%"])
    completed: StrictBool = Field(..., examples=[True])

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        return _non_blank(value)


class TaskOut(BaseModel):
    id: int
    title: str
    description: Optional[str]
    completed: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class TaskDeleteOut(BaseModel):
    message: str
    task: TaskOut


class ErrorOut(BaseModel):
    error: str
