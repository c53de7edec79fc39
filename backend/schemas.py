from typing import Annotated, Any, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    Tag,
    TypeAdapter,
)

# Numbers keep their JSON type: 1 stays 1, 0.5 stays 0.5. NaN and infinities are rejected.
Number = Union[StrictInt, StrictFloat]

DEFAULT_DEPTH = "10"


class AnalysisRequest(BaseModel):
    fen: str = Field(..., min_length=1, description="FEN string of the position to analyse")
    depth: str = Field(DEFAULT_DEPTH, description="Analysis depth (1-30, default: 10)")


class AnalysisSuccess(BaseModel):
    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    success: Literal[True]
    evaluation: Number
    bestmove: StrictStr
    mate: Optional[Number]


class AnalysisFailure(BaseModel):
    model_config = ConfigDict(strict=True)

    success: Literal[False]
    error: StrictStr


def _result_tag(value: Any) -> str | None:
    """Pick the union variant from the ``success`` flag.

    Anything other than a literal boolean selects no variant, which
    makes validation fail instead of guessing.
    """
    if isinstance(value, dict):
        success = value.get("success")
    else:
        success = getattr(value, "success", None)
    if success is True:
        return "success"
    if success is False:
        return "failure"
    return None


AnalysisResult = Annotated[
    Union[
        Annotated[AnalysisSuccess, Tag("success")],
        Annotated[AnalysisFailure, Tag("failure")],
    ],
    Discriminator(_result_tag),
]

analysis_result_adapter: TypeAdapter[AnalysisResult] = TypeAdapter(AnalysisResult)


class ErrorResponse(BaseModel):
    success: Literal[False] = False
    error: str
    details: Optional[list[dict]] = None
