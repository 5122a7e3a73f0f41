# backend/creator_agent/models.py
from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, StringConstraints
from pydantic.alias_generators import to_camel

# Non-empty text, no coercion from numbers or booleans
Text = Annotated[str, StringConstraints(strict=True, strip_whitespace=True, min_length=1)]


class WireModel(BaseModel):
    """Immutable record exchanged over the API with camelCase field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        frozen=True,
    )


# Requests

class VideoPlanRequest(WireModel):
    topic: Text
    audience: Text
    tone: Text
    call_to_action: Text
    video_length: Text
    format: Text


class PlanBrief(WireModel):
    topic: Text
    audience: Text


class VideoPlan(WireModel):
    hook: StrictStr
    storyline: List[StrictStr]
    shots: List[StrictStr]
    broll: List[StrictStr]
    cta: StrictStr
    voice_over: List[StrictStr]


class MetadataRequest(WireModel):
    plan: PlanBrief
    mood: Text
    platform_goal: Text
    plan_details: VideoPlan


class ChatContext(WireModel):
    uploaded: Annotated[StrictInt, Field(ge=0)]
    has_plan: StrictBool
    has_metadata: StrictBool


class ChatRequest(WireModel):
    message: Text
    context: ChatContext


# Outputs

class Chapter(WireModel):
    label: str
    timestamp: str


class VideoMetadata(WireModel):
    title: str
    description: str
    keywords: List[str]
    chapters: List[Chapter]
    optimisation_tips: List[str]


# Action envelopes: a tagged union on ``action``

class PlanVideoAction(WireModel):
    action: Literal["planVideo"]
    payload: VideoPlanRequest


class GenerateMetadataAction(WireModel):
    action: Literal["generateMetadata"]
    payload: MetadataRequest


class ChatAction(WireModel):
    action: Literal["chat"]
    payload: ChatRequest


AgentRequest = Annotated[
    Union[PlanVideoAction, GenerateMetadataAction, ChatAction],
    Field(discriminator="action"),
]


class ValidationIssue(BaseModel):
    path: List[Union[str, int]]
    code: str
    message: str
