"""Pydantic request/response models for API endpoints."""

from typing import Any

from pydantic import BaseModel


class CreateSession(BaseModel):
    title: str


class HookBody(BaseModel):
    text: str = ""
    stop: bool = False
    history: list[dict[str, Any]] | None = None
    memory: str | None = None


class HookResponse(BaseModel):
    text: str
    stop: bool = False


class CardBody(BaseModel):
    title: str
    entry: str
    type: str = ""


class DetectBody(BaseModel):
    text: str
